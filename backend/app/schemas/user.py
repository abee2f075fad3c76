from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    name: Optional[str] = None
    image: Optional[str] = None


class UserProfile(UserBase):
    # Storefront clients echo the email in the body as well; the path wins
    model_config = ConfigDict(extra='ignore')

    email: Optional[str] = None


class User(UserBase):
    id: str
    email: str
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SessionClaim(BaseModel):
    email: str
