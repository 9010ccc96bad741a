from influencer_orders.models.order import OrderLineItem, LineItem

__all__ = ["OrderLineItem", "LineItem"]
