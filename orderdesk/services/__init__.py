from orderdesk.services.dashboard_service import dashboard_stats
from orderdesk.services.inventory_service import sync_inventory
from orderdesk.services.order_service import create_order, update_order_status
from orderdesk.services.product_service import create_product, provision_variants

__all__ = [
    "create_order",
    "create_product",
    "dashboard_stats",
    "provision_variants",
    "sync_inventory",
    "update_order_status",
]
