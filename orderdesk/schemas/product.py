from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductFields(BaseModel):
    category: Optional[str] = None
    description: Optional[str] = None
    branch: Optional[str] = None
    gender: Optional[str] = None
    fit: Optional[str] = None
    fabric: Optional[str] = None
    gsm: Optional[str] = None
    image_front_url: Optional[str] = None
    image_back_url: Optional[str] = None
    technical_drawing_url: Optional[str] = None
    ghost_mannequin_url: Optional[str] = None


class ProductCreate(ProductFields):
    name: str = Field(min_length=1)
    base_price: float = Field(0.0, ge=0)
    available_colors: List[str] = Field(default_factory=list)
    available_sizes: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ProductUpdate(ProductFields):
    name: Optional[str] = Field(None, min_length=1)
    base_price: Optional[float] = Field(None, ge=0)
    available_colors: Optional[List[str]] = None
    available_sizes: Optional[List[str]] = None
    is_archived: Optional[bool] = None

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ProductVariantRead(BaseModel):
    id: str
    sku: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    quantity: int
    min_quantity: int

    model_config = ConfigDict(from_attributes=True)


class ProductAssetUpsert(BaseModel):
    view: Literal["front", "back"]
    color: Optional[str] = None
    base_image: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ProductAssetRead(BaseModel):
    id: str
    product_id: str
    view: str
    color: Optional[str] = None
    base_image: str

    model_config = ConfigDict(from_attributes=True)


class ProductRead(ProductFields):
    id: str
    name: str
    base_price: float
    available_colors: List[str] = Field(default_factory=list)
    available_sizes: List[str] = Field(default_factory=list)
    is_archived: bool
    created_at: datetime

    inventory: List[ProductVariantRead] = Field(default_factory=list)
    assets: List[ProductAssetRead] = Field(default_factory=list, serialization_alias="product_assets")

    stock: int = 0
    is_low_stock: bool = Field(False, serialization_alias="isLowStock")
    inventory_count: int = Field(0, serialization_alias="inventoryCount")
    tracking: str = "untracked"
    selectable_colors: List[str] = Field(default_factory=list)
    selectable_sizes: List[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
