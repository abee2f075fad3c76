from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


class SellerInfo(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None


class PlantBase(BaseModel):
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    price: float = 0
    quantity: int = 0
    seller: Optional[SellerInfo] = None


class PlantCreate(PlantBase):
    id: Optional[str] = None


class Plant(PlantBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class QuantityUpdate(BaseModel):
    quantity_to_update: int = Field(
        validation_alias=AliasChoices("quantityToUpdate", "quantity_to_update")
    )
    # "increase" restocks; anything else is treated as a purchase
    status: Optional[str] = None
