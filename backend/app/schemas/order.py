from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator


class CustomerInfo(BaseModel):
    name: Optional[str] = None
    email: str
    image: Optional[str] = None


class OrderBase(BaseModel):
    customer: CustomerInfo
    plant_id: str = Field(validation_alias=AliasChoices("plant_id", "plantId"))
    price: Optional[float] = None
    quantity: int = 1
    seller: Optional[str] = None
    address: Optional[str] = None
    status: str = "pending"

    @field_validator("plant_id", mode="before")
    @classmethod
    def coerce_plant_id(cls, value):
        """Plant ids are text; accept numbers and stray whitespace from clients."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
        return value


class OrderCreate(OrderBase):
    id: Optional[str] = None


class CheckoutCreate(OrderCreate):
    # Stock is only taken for real purchases
    quantity: int = Field(1, ge=1)


class Order(OrderBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CustomerOrder(Order):
    """An order joined with the plant it references."""
    name: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
