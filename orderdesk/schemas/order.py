from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from orderdesk.core.constants import ORDER_STATUSES


class BrandingIn(BaseModel):
    method: Literal["print", "embroidery"]
    position: Literal["front", "back"]

    model_config = ConfigDict(extra="forbid")


class OrderItemCreate(BaseModel):
    product_id: str = Field(validation_alias=AliasChoices("productId", "product_id"))
    color: Optional[str] = None
    size: Optional[str] = None
    quantity: int = Field(ge=1)
    branding: BrandingIn

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class OrderCreate(BaseModel):
    client_id: str = Field(validation_alias=AliasChoices("clientId", "client_id"))
    items: List[OrderItemCreate] = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class OrderStatusUpdate(BaseModel):
    status: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("status")
    @classmethod
    def _known_status(cls, value: str) -> str:
        if value not in ORDER_STATUSES:
            raise ValueError("Invalid status; expected one of: {}".format(", ".join(ORDER_STATUSES)))
        return value


class OrderItemRead(BaseModel):
    id: str
    product_id: str
    product_name: Optional[str] = None
    color: str
    size: str
    quantity: int
    branding_method: str
    branding_position: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderRead(BaseModel):
    id: str
    client_id: str
    customer_name: str
    status: str
    created_at: datetime
    items: List[OrderItemRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class OrderSummary(BaseModel):
    id: str
    client_id: str
    customer_name: str
    status: str
    created_at: datetime
    client_name: str = Field(serialization_alias="clientName")
    items_count: int = Field(serialization_alias="itemsCount")


class OrderStatusResult(BaseModel):
    success: bool = True
    id: str
    status: str
