"""
Order line item model.

Despite the "order" naming, an OrderLineItem represents a single line item
within an order. A logical order is one or more OrderLineItems sharing the
same name. They are exported to the warehouse CSV and later resolve
tracking through that name.
"""
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from influencer_orders.core.config import settings
from influencer_orders.core.errors import OrderValidationError, ValidationIssue

if TYPE_CHECKING:
    from influencer_orders.ports.collaborators import Catalog, ProductVariant, TrackingResolver


@dataclass(frozen=True)
class LineItem:
    """Typed view of the line_item payload stored on an order."""

    product_id: int
    merchant_sku_item: str
    size: str
    quantity_requested: int
    item_name: str
    sell_price: float
    product_weight: int

    @classmethod
    def from_variant(cls, variant: Any, quantity: int = 1) -> "LineItem":
        """
        Build line item data from a product variant.

        The variant needs product_id, sku, option1 (size), price, weight and
        product_title. Numeric values are coerced to the payload types.

        Args:
            variant: Product variant
            quantity: Line item quantity
        """
        return cls(
            product_id=_coerce(variant.product_id, int),
            merchant_sku_item=variant.sku,
            size=variant.option1,
            quantity_requested=quantity,
            item_name=variant.product_title,
            sell_price=_coerce(variant.price, float),
            product_weight=_coerce(variant.weight, int),
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LineItem":
        """Build from a stored payload; extra keys are dropped, missing ones are None."""
        return cls(**{name: payload.get(name) for name in cls.__dataclass_fields__})

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce(value: Any, to_type: type) -> Any:
    """
    Convert value to to_type when nothing is lost on the way.

    Anything else (a decimal weight, "2.9" for an int, "call us" for a
    price) is returned unchanged so the shape check reports it.
    """
    if value is None or isinstance(value, bool):
        return value
    if to_type is int:
        if isinstance(value, float):
            return int(value) if value.is_integer() else value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return value
    try:
        return to_type(value)
    except (TypeError, ValueError):
        return value


class OrderLineItem(BaseModel):
    """
    A single shippable line item.

    Every field is optional at construction time so that a malformed record
    surfaces as validation issues instead of a construction error. Call
    validate_record() before persisting.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    name: Optional[str] = None
    influencer_id: Optional[Union[int, str]] = None
    billing_address: Optional[Dict[str, Any]] = None
    shipping_address: Optional[Dict[str, Any]] = None
    line_item: Optional[Any] = None
    shipping_lines: Optional[Any] = None
    stored_shipment_method: Optional[str] = Field(default=None, alias="shipment_method_requested")
    processed_at: Optional[datetime] = None
    uploaded_at: Optional[datetime] = None

    @property
    def shipment_method_requested(self) -> str:
        """Requested shipment method, "GROUND" when none was stored."""
        return self.stored_shipment_method or settings.DEFAULT_SHIPMENT_METHOD

    @property
    def uploaded(self) -> bool:
        """Has the order been marked as uploaded to the warehouse."""
        return self.uploaded_at is not None

    @property
    def pending(self) -> bool:
        return self.uploaded_at is None

    @property
    def item(self) -> LineItem:
        payload = self.line_item if isinstance(self.line_item, Mapping) else {}
        return LineItem.from_payload(payload)

    def errors(self) -> List[ValidationIssue]:
        from influencer_orders.validate.validator import validate_order

        return validate_order(self)

    def validate_record(self) -> "OrderLineItem":
        """
        Run save-time validation.

        Returns:
            self, for chaining

        Raises:
            OrderValidationError: If any issue was found
        """
        issues = self.errors()
        if issues:
            raise OrderValidationError(issues, name=self.name)
        return self

    def product_variant(self, catalog: "Catalog") -> Optional["ProductVariant"]:
        """The product variant for this line item, looked up by SKU."""
        return catalog.find_variant_by_sku(self.item.merchant_sku_item)

    def product(self, catalog: "Catalog") -> Optional[Any]:
        """The product for this line item, looked up by product_id."""
        return catalog.find_product(self.item.product_id)

    def tracking(self, resolver: "TrackingResolver") -> Optional[Dict[str, Any]]:
        """Shipment tracking for the logical order this line item belongs to."""
        return resolver.resolve(self.name)

    def search_document(
        self,
        influencer: Optional[Mapping[str, Any]] = None,
        tracking: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Data stored for searching orders: the order itself plus its
        influencer and tracking.
        """
        data = self.model_dump(mode="json", by_alias=True)
        data["influencer"] = dict(influencer) if influencer is not None else None
        data["tracking"] = dict(tracking) if tracking is not None else None
        return data
