"""
Collaborator interfaces.

Influencers and product variants are supplied by the surrounding
application; only the attributes listed here are read. Catalog lookups and
tracking resolution are read-only ports.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, Union


class Influencer(Protocol):
    """Party an order is created for."""

    id: Union[int, str]
    billing_address: Dict[str, Any]
    shipping_address: Dict[str, Any]


class ProductVariant(Protocol):
    """Product variant a line item is built from."""

    product_id: int
    sku: str
    option1: Optional[str]  # size
    price: Any
    weight: Any
    product_title: str


class Catalog(ABC):
    """Product catalog lookups."""

    @abstractmethod
    def find_variant_by_sku(self, sku: str) -> Optional[ProductVariant]:
        pass

    @abstractmethod
    def find_product(self, product_id: int) -> Optional[Any]:
        pass


class TrackingResolver(ABC):
    """Maps an order name to shipment tracking information."""

    @abstractmethod
    def resolve(self, order_name: str) -> Optional[Dict[str, Any]]:
        """
        Look up tracking for a logical order.

        Args:
            order_name: Shared order name ("#IN...")

        Returns:
            Tracking data, or None if the order has not shipped
        """
        pass
