from sqlalchemy import func, select
from sqlalchemy.orm import Session

from orderdesk.core.constants import (
    ORDER_STATUS_CONFIRMED,
    ORDER_STATUS_DONE,
    ORDER_STATUS_DRAFT,
    ORDER_STATUS_PRODUCTION,
    RECENT_ORDERS_LIMIT,
)
from orderdesk.models.client import Client
from orderdesk.models.inventory import InventoryItem
from orderdesk.models.order import Order
from orderdesk.schemas.dashboard import DashboardRead, DashboardStats
from orderdesk.services.order_service import list_orders, to_order_summary


def _status_counts(db: Session) -> dict[str, int]:
    rows = db.execute(select(Order.status, func.count(Order.id)).group_by(Order.status)).all()
    return {status: count for status, count in rows}


def dashboard_stats(db: Session) -> DashboardRead:
    counts = _status_counts(db)
    total_clients = db.execute(select(func.count(Client.id))).scalar_one()
    low_stock_items = db.execute(
        select(func.count(InventoryItem.id)).where(
            InventoryItem.quantity <= InventoryItem.min_quantity
        )
    ).scalar_one()

    orders = list_orders(db)
    stats = DashboardStats(
        total_orders=sum(counts.values()),
        drafts=counts.get(ORDER_STATUS_DRAFT, 0),
        confirmed=counts.get(ORDER_STATUS_CONFIRMED, 0),
        in_production=counts.get(ORDER_STATUS_PRODUCTION, 0),
        completed=counts.get(ORDER_STATUS_DONE, 0),
        total_clients=total_clients,
        low_stock_items=low_stock_items,
    )
    return DashboardRead(
        stats=stats,
        recent_orders=[to_order_summary(order) for order in orders[:RECENT_ORDERS_LIMIT]],
    )


__all__ = ["dashboard_stats"]
