"""
In-memory implementations of repository interfaces.

Used by the CLI batch export and by tests. The production order store
implements the same ports.
"""
from datetime import datetime, timezone
from itertools import count as counter
from typing import List, Dict, Any, Iterable, Optional

from influencer_orders.models.order import OrderLineItem
from influencer_orders.ports.repositories import ExceptionsRepo, OrderRepository


class InMemoryExceptionsRepo(ExceptionsRepo):
    """In-memory implementation of ExceptionsRepo."""

    def __init__(self):
        self._exceptions: List[Dict[str, Any]] = []
        self._ids = counter(1)

    def add(
        self,
        order_ptr: str,
        error_code: str,
        hint: str,
        offending: Dict[str, Any],
    ) -> int:
        """Add a new exception record."""
        exception_id = next(self._ids)
        self._exceptions.append(
            {
                "id": exception_id,
                "order_ptr": order_ptr,
                "error_code": error_code,
                "hint": hint,
                "offending": offending,
                "created_at": datetime.now(timezone.utc).isoformat(),
            }
        )
        return exception_id

    def list(self, error_code: Optional[str] = None) -> List[Dict[str, Any]]:
        """List exceptions, newest first."""
        exceptions = [
            exc for exc in self._exceptions
            if error_code is None or exc["error_code"] == error_code
        ]
        return list(reversed(exceptions))

    def count(self, error_code: Optional[str] = None) -> int:
        """Count exceptions."""
        return len(self.list(error_code))


class InMemoryOrderRepository(OrderRepository):
    """In-memory implementation of OrderRepository, keyed by assigned id."""

    def __init__(self, orders: Optional[Iterable[OrderLineItem]] = None):
        self._orders: Dict[int, OrderLineItem] = {}
        self._ids = counter(1)
        for order in orders or []:
            self.add(order)

    def add(self, order: OrderLineItem) -> OrderLineItem:
        """Store an order, assigning an id if it has none."""
        if order.id is None:
            order.id = next(self._ids)
        self._orders[order.id] = order
        return order

    def get(self, order_id: int) -> Optional[OrderLineItem]:
        return self._orders.get(order_id)

    def by_name(self, name: str) -> List[OrderLineItem]:
        return [order for order in self._orders.values() if order.name == name]

    def pending(self) -> List[OrderLineItem]:
        return [order for order in self._orders.values() if order.uploaded_at is None]

    def all(self) -> List[OrderLineItem]:
        return list(self._orders.values())

    def mark_uploaded(self, orders: Iterable[OrderLineItem], uploaded_at: datetime) -> int:
        """Set uploaded_at on the stored copies of the given orders."""
        updated = 0
        for order in orders:
            stored = self._orders.get(order.id) if order.id is not None else None
            if stored is None:
                continue
            stored.uploaded_at = uploaded_at
            if order is not stored:
                order.uploaded_at = uploaded_at
            updated += 1
        return updated
