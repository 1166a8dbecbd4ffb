from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from orderdesk.core.constants import DEFAULT_MIN_QUANTITY


class InventoryFields(BaseModel):
    sku: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    branch: Optional[str] = None
    gender: Optional[str] = None
    fit: Optional[str] = None
    fabric: Optional[str] = None
    gsm: Optional[str] = None


class InventoryCreate(InventoryFields):
    name: str = Field(min_length=1)
    product_id: Optional[str] = None
    quantity: int = Field(0, ge=0)
    min_quantity: int = Field(DEFAULT_MIN_QUANTITY, ge=0)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class InventoryUpdate(InventoryFields):
    name: Optional[str] = Field(None, min_length=1)
    product_id: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    min_quantity: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class InventoryQuantityUpdate(BaseModel):
    quantity: int = Field(ge=0)

    model_config = ConfigDict(extra="forbid")


class ProductRef(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class InventoryRead(InventoryFields):
    id: str
    name: str
    product_id: Optional[str] = None
    quantity: int
    min_quantity: int
    created_at: datetime
    product: Optional[ProductRef] = None
    is_low_stock: bool = Field(False, serialization_alias="isLowStock")

    model_config = ConfigDict(from_attributes=True)


class SyncResult(BaseModel):
    created: int
    expanded_variants: bool = False
    message: str
