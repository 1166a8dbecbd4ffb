from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CompanySettingsFields(BaseModel):
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    vat_id: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None


class CompanySettingsUpdate(CompanySettingsFields):
    company_name: Optional[str] = Field(None, min_length=1)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class CompanySettingsRead(CompanySettingsFields):
    id: Optional[str] = None
    company_name: str
    updated_at: Optional[datetime] = None
    is_default: bool = False

    model_config = ConfigDict(from_attributes=True)
