from sqlalchemy import Column, ForeignKey, String, UniqueConstraint, event
from sqlalchemy.orm import relationship

from orderdesk.database.base import Base
from orderdesk.models._ids import new_id


class ProductAsset(Base):
    __tablename__ = "product_assets"

    id = Column(String(36), primary_key=True, default=new_id)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False)

    view = Column(String(10), nullable=False)
    color = Column(String)
    # color with NULL folded to "" so the unique constraint also covers colorless assets
    color_key = Column(String, nullable=False, default="")
    base_image = Column(String, nullable=False)

    product = relationship("Product", back_populates="assets")

    __table_args__ = (
        UniqueConstraint("product_id", "color_key", "view", name="uq_product_assets_variant_view"),
    )


@event.listens_for(ProductAsset, "before_insert")
@event.listens_for(ProductAsset, "before_update")
def _fill_color_key(_mapper, _connection, target):
    target.color_key = target.color or ""


__all__ = ["ProductAsset"]
