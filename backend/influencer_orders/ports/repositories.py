"""
Repository interfaces for data access.

The order store (database, search index) lives outside this package.
These ports are what the services need from it; adapters provide concrete
implementations.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Dict, Any, Iterable, Optional

from influencer_orders.models.order import OrderLineItem


class ExceptionsRepo(ABC):
    """
    Repository for managing validation exceptions.

    Exceptions track orders that fail validation before export.
    """

    @abstractmethod
    def add(
        self,
        order_ptr: str,
        error_code: str,
        hint: str,
        offending: Dict[str, Any],
    ) -> int:
        """
        Add a new exception record.

        Args:
            order_ptr: Order name, or a positional pointer when the name is missing
            error_code: Error code (REQ_MISSING, LINE_ITEM_SHAPE, etc.)
            hint: Actionable hint for the user
            offending: Dict of problematic field values

        Returns:
            Exception ID
        """
        pass

    @abstractmethod
    def list(self, error_code: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List exceptions.

        Args:
            error_code: Optional error code filter

        Returns:
            List of exception dicts with all fields
        """
        pass

    @abstractmethod
    def count(self, error_code: Optional[str] = None) -> int:
        """Count exceptions, optionally for one error code."""
        pass


class OrderRepository(ABC):
    """
    Repository for order line items.

    Enforcing name uniqueness, if required, is the implementation's concern.
    """

    @abstractmethod
    def add(self, order: OrderLineItem) -> OrderLineItem:
        """
        Store a new order line item.

        Returns:
            The stored order (with id assigned)
        """
        pass

    @abstractmethod
    def get(self, order_id: int) -> Optional[OrderLineItem]:
        pass

    @abstractmethod
    def by_name(self, name: str) -> List[OrderLineItem]:
        """All line items of the logical order with this name."""
        pass

    @abstractmethod
    def pending(self) -> List[OrderLineItem]:
        """Line items that have not been marked as uploaded (uploaded_at unset)."""
        pass

    @abstractmethod
    def all(self) -> List[OrderLineItem]:
        pass

    @abstractmethod
    def mark_uploaded(self, orders: Iterable[OrderLineItem], uploaded_at: datetime) -> int:
        """
        Record that orders were uploaded to the warehouse.

        Args:
            orders: Orders included in a successful upload
            uploaded_at: Upload timestamp

        Returns:
            Number of orders updated
        """
        pass
