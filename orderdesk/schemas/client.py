from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientFields(BaseModel):
    email: Optional[str] = None
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    vat_id: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    notes: Optional[str] = None


class ClientCreate(ClientFields):
    name: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ClientUpdate(ClientFields):
    name: Optional[str] = Field(None, min_length=1)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ClientRead(ClientFields):
    id: str
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
