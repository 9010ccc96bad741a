"""
Export module for warehouse order CSV generation.
"""
from influencer_orders.export.headers import CSV_HEADERS
from influencer_orders.export.idgen import generate_order_number, name_csv
from influencer_orders.export.rows import build_row, sanitize_row
from influencer_orders.export.csv_emitter import OrderCSVEmitter, export_csv

__all__ = [
    "CSV_HEADERS",
    "generate_order_number",
    "name_csv",
    "build_row",
    "sanitize_row",
    "OrderCSVEmitter",
    "export_csv",
]
