import uuid
import logging
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.schemas.user import UserProfile

logger = logging.getLogger(__name__)


async def get_user_by_email(session: AsyncSession, email: str):
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def upsert_user(session: AsyncSession, email: str, profile: UserProfile) -> User:
    """Return the user stored under `email`, creating it on first sight.

    An existing record is returned untouched even when `profile` differs.
    """
    existing = await get_user_by_email(session, email)
    if existing is not None:
        return existing

    user = User(
        id=str(uuid.uuid4()),
        email=email,
        name=profile.name,
        image=profile.image,
        role="customer",
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError:
        # Another request registered the same email first
        await session.rollback()
        return await get_user_by_email(session, email)

    await session.refresh(user)
    logger.info(f"Registered new customer: {email}")
    return user

