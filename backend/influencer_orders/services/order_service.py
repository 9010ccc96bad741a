"""
Order service - creates order line items from influencer + variant requests.
"""
import random
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from influencer_orders.core.logging_config import orders_logger
from influencer_orders.export.idgen import generate_order_number
from influencer_orders.models.order import LineItem, OrderLineItem
from influencer_orders.ports.collaborators import Influencer, ProductVariant
from influencer_orders.ports.repositories import OrderRepository


class OrderService:
    """Builds, validates and stores order line items."""

    def __init__(self, order_repo: OrderRepository, rng: Optional[random.Random] = None):
        """
        Initialize order service.

        Args:
            order_repo: Repository new orders are added to
            rng: Randomness source for order numbers
        """
        self.order_repo = order_repo
        self.rng = rng

    def create_from_influencer_variant(
        self,
        influencer: Influencer,
        variant: ProductVariant,
        order_number: Optional[str] = None,
        shipping_lines: Optional[Any] = None,
        shipment_method_requested: Optional[str] = None,
        processed_at: Optional[datetime] = None,
        quantity: int = 1,
    ) -> OrderLineItem:
        """
        Create an order from a given influencer and variant.

        Args:
            influencer: Influencer to create the order for
            variant: The product variant to send the influencer
            order_number: Create with the given order number / name instead of generating
            shipping_lines: Passthrough shipping data (blank most of the time)
            shipment_method_requested: Requested method; read back as "GROUND" when None
            processed_at: Processing time (default now, UTC)
            quantity: Line item quantity

        Returns:
            The stored order

        Raises:
            OrderValidationError: If the resulting order is invalid (nothing is stored)
        """
        order = self._build(
            influencer,
            variant,
            name=order_number or generate_order_number(rng=self.rng),
            processed_at=processed_at or datetime.now(timezone.utc),
            shipping_lines=shipping_lines,
            shipment_method_requested=shipment_method_requested,
            quantity=quantity,
        ).validate_record()

        stored = self.order_repo.add(order)
        orders_logger.info(
            "Created order %s for influencer %s (sku %s)",
            stored.name, stored.influencer_id, variant.sku,
        )
        return stored

    def create_order(
        self,
        influencer: Influencer,
        variants: Iterable[ProductVariant],
        order_number: Optional[str] = None,
        shipping_lines: Optional[Any] = None,
        shipment_method_requested: Optional[str] = None,
        processed_at: Optional[datetime] = None,
    ) -> List[OrderLineItem]:
        """
        Create a logical order: one line item per variant, all sharing one name.

        Every line item is validated before any is stored.

        Returns:
            The stored line items

        Raises:
            ValueError: If no variants are given
            OrderValidationError: If any line item is invalid (nothing is stored)
        """
        variants = list(variants)
        if not variants:
            raise ValueError("An order needs at least one product variant")

        name = order_number or generate_order_number(rng=self.rng)
        processed_at = processed_at or datetime.now(timezone.utc)

        orders = [
            self._build(
                influencer,
                variant,
                name=name,
                processed_at=processed_at,
                shipping_lines=shipping_lines,
                shipment_method_requested=shipment_method_requested,
            ).validate_record()
            for variant in variants
        ]

        stored = [self.order_repo.add(order) for order in orders]
        orders_logger.info("Created order %s with %d line items", name, len(stored))
        return stored

    def _build(
        self,
        influencer: Influencer,
        variant: ProductVariant,
        name: str,
        processed_at: datetime,
        shipping_lines: Optional[Any],
        shipment_method_requested: Optional[str],
        quantity: int = 1,
    ) -> OrderLineItem:
        return OrderLineItem(
            name=name,
            processed_at=processed_at,
            billing_address=influencer.billing_address,
            shipping_address=influencer.shipping_address,
            shipping_lines=shipping_lines,
            line_item=LineItem.from_variant(variant, quantity).to_payload(),
            influencer_id=influencer.id,
            shipment_method_requested=shipment_method_requested,
        )
