from sqlalchemy import Column, DateTime, Index, String, Text

from orderdesk.database.base import Base
from orderdesk.models._ids import new_id, utc_now


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)

    email = Column(String)
    contact_person = Column(String)
    phone = Column(String)
    address_line1 = Column(String)
    address_line2 = Column(String)
    city = Column(String)
    zip_code = Column(String)
    country = Column(String)
    vat_id = Column(String)
    website = Column(String)
    logo_url = Column(String)
    notes = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    __table_args__ = (
        Index("idx_clients_created_at", "created_at"),
    )


__all__ = ["Client"]
