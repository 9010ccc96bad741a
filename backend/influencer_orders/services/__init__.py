"""
Services - order creation and the export batch job.
"""
from influencer_orders.services.order_service import OrderService
from influencer_orders.services.export_service import OrderExportService, ExportResult

__all__ = ["OrderService", "OrderExportService", "ExportResult"]
