from orderdesk.models.client import Client
from orderdesk.models.company_settings import CompanySettings
from orderdesk.models.inventory import InventoryItem
from orderdesk.models.order import Order, OrderItem
from orderdesk.models.product import Product
from orderdesk.models.product_asset import ProductAsset

__all__ = [
    "Client",
    "CompanySettings",
    "InventoryItem",
    "Order",
    "OrderItem",
    "Product",
    "ProductAsset",
]
