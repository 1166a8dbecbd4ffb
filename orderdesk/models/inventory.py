from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint, event
from sqlalchemy.orm import relationship

from orderdesk.core.variant_rules import variant_key
from orderdesk.database.base import Base
from orderdesk.models._ids import new_id, utc_now


class InventoryItem(Base):
    __tablename__ = "inventory"

    id = Column(String(36), primary_key=True, default=new_id)
    # NULL product_id marks a raw material that belongs to no product.
    product_id = Column(String(36), ForeignKey("products.id"))

    name = Column(String, nullable=False)
    sku = Column(String)
    category = Column(String)

    color = Column(String)
    size = Column(String)
    variant_key = Column(String, nullable=False, default="|")

    quantity = Column(Integer, nullable=False, default=0)
    min_quantity = Column(Integer, nullable=False, default=0)

    branch = Column(String)
    gender = Column(String)
    fit = Column(String)
    fabric = Column(String)
    gsm = Column(String)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    product = relationship("Product", back_populates="inventory")

    __table_args__ = (
        UniqueConstraint("product_id", "variant_key", name="uq_inventory_product_variant"),
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
        CheckConstraint("min_quantity >= 0", name="ck_inventory_min_quantity_non_negative"),
        Index("idx_inventory_name", "name"),
        Index("idx_inventory_product", "product_id"),
    )


@event.listens_for(InventoryItem, "before_insert")
@event.listens_for(InventoryItem, "before_update")
def _fill_variant_key(_mapper, _connection, target):
    target.variant_key = variant_key(target.color, target.size)


__all__ = ["InventoryItem"]
