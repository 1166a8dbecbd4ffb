from orderdesk.routers.clients import router as clients_router
from orderdesk.routers.dashboard import router as dashboard_router
from orderdesk.routers.health import router as health_router
from orderdesk.routers.inventory import router as inventory_router
from orderdesk.routers.orders import router as orders_router
from orderdesk.routers.products import router as products_router
from orderdesk.routers.settings import router as settings_router

__all__ = [
    "clients_router",
    "dashboard_router",
    "health_router",
    "inventory_router",
    "orders_router",
    "products_router",
    "settings_router",
]
