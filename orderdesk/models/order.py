from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from orderdesk.core.constants import ORDER_STATUS_DRAFT
from orderdesk.database.base import Base
from orderdesk.models._ids import new_id, utc_now


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False)

    # Client name at creation time; later renames do not touch it.
    customer_name = Column(String, nullable=False)
    status = Column(String(20), nullable=False, default=ORDER_STATUS_DRAFT)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    client = relationship("Client")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.created_at",
    )

    __table_args__ = (
        Index("idx_orders_client", "client_id"),
        Index("idx_orders_status", "status"),
        Index("idx_orders_created_at", "created_at"),
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)

    color = Column(String, nullable=False)
    size = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)

    branding_method = Column(String(20), nullable=False)
    branding_position = Column(String(20), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
        Index("idx_order_items_order", "order_id"),
    )


__all__ = ["Order", "OrderItem"]
