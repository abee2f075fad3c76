from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_async_session
from app.schemas.user import User as UserSchema, UserProfile
from app.services.users import upsert_user

router = APIRouter()


@router.post("/{email}", response_model=UserSchema)
async def save_user(
    email: str,
    profile: UserProfile,
    session: AsyncSession = Depends(get_async_session)
):
    """Register a customer, or return the existing record for this email."""
    return await upsert_user(session, email, profile)

