"""
Ports - interface definitions for external dependencies.

Follows hexagonal architecture pattern (ports & adapters).
Ports define interfaces, adapters provide concrete implementations.
"""
from influencer_orders.ports.repositories import ExceptionsRepo, OrderRepository
from influencer_orders.ports.collaborators import (
    Influencer,
    ProductVariant,
    Catalog,
    TrackingResolver,
)

__all__ = [
    "ExceptionsRepo",
    "OrderRepository",
    "Influencer",
    "ProductVariant",
    "Catalog",
    "TrackingResolver",
]
