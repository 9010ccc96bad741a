"""
Influencer order line items and their warehouse CSV export.
"""
from influencer_orders.models.order import OrderLineItem, LineItem
from influencer_orders.export.idgen import generate_order_number
from influencer_orders.validate.line_item import validate_line_item
from influencer_orders.export.csv_emitter import OrderCSVEmitter, export_csv

__all__ = [
    "OrderLineItem",
    "LineItem",
    "generate_order_number",
    "validate_line_item",
    "OrderCSVEmitter",
    "export_csv",
]
