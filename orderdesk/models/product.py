from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Index, String, Text
from sqlalchemy.orm import relationship

from orderdesk.database.base import Base
from orderdesk.models._ids import new_id, utc_now


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    category = Column(String)
    description = Column(Text)
    base_price = Column(Float, nullable=False, default=0.0)

    branch = Column(String)
    gender = Column(String)
    fit = Column(String)
    fabric = Column(String)
    gsm = Column(String)

    image_front_url = Column(String)
    image_back_url = Column(String)
    technical_drawing_url = Column(String)
    ghost_mannequin_url = Column(String)

    # Declared lists; provisioning input and fallback for variant resolution.
    available_colors = Column(JSON, nullable=False, default=list)
    available_sizes = Column(JSON, nullable=False, default=list)

    is_archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    inventory = relationship(
        "InventoryItem",
        back_populates="product",
        order_by="InventoryItem.created_at",
    )
    assets = relationship(
        "ProductAsset",
        back_populates="product",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("idx_products_name", "name"),
        Index("idx_products_archived", "is_archived"),
    )


__all__ = ["Product"]
