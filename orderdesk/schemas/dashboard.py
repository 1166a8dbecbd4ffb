from typing import List

from pydantic import BaseModel, Field

from orderdesk.schemas.order import OrderSummary


class DashboardStats(BaseModel):
    total_orders: int = Field(serialization_alias="totalOrders")
    drafts: int
    confirmed: int
    in_production: int = Field(serialization_alias="inProduction")
    completed: int
    total_clients: int = Field(serialization_alias="totalClients")
    low_stock_items: int = Field(serialization_alias="lowStockItems")


class DashboardRead(BaseModel):
    stats: DashboardStats
    recent_orders: List[OrderSummary] = Field(serialization_alias="recentOrders")
