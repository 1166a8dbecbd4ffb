from sqlalchemy import Column, DateTime, String

from orderdesk.database.base import Base
from orderdesk.models._ids import new_id, utc_now


class CompanySettings(Base):
    __tablename__ = "settings"

    id = Column(String(36), primary_key=True, default=new_id)
    company_name = Column(String, nullable=False)
    contact_person = Column(String)
    email = Column(String)
    phone = Column(String)
    address_line1 = Column(String)
    address_line2 = Column(String)
    city = Column(String)
    zip_code = Column(String)
    country = Column(String)
    vat_id = Column(String)
    website = Column(String)
    logo_url = Column(String)

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )


__all__ = ["CompanySettings"]
