"""
Adapters - concrete implementations of ports.

Follows hexagonal architecture pattern (ports & adapters).
"""
from influencer_orders.adapters.repositories_memory import (
    InMemoryExceptionsRepo,
    InMemoryOrderRepository,
)

__all__ = ["InMemoryExceptionsRepo", "InMemoryOrderRepository"]
