import logging
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.plant import Plant
from app.schemas.common import UpdateResult

logger = logging.getLogger(__name__)


async def adjust_quantity(session: AsyncSession, plant_id: str, delta: int) -> UpdateResult:
    """Apply `quantity += delta` to a plant in a single UPDATE statement.

    The row-level increment keeps concurrent adjustments from losing updates.
    No lower bound is enforced, so stock can go negative.
    """
    result = await session.execute(
        update(Plant)
        .where(Plant.id == plant_id)
        .values(quantity=Plant.quantity + delta)
    )
    await session.commit()

    if result.rowcount == 0:
        logger.warning(f"Quantity adjustment matched no plant: {plant_id}")
    else:
        logger.info(f"Adjusted quantity of plant {plant_id} by {delta}")

    return UpdateResult(matched_count=result.rowcount, modified_count=result.rowcount)


def delta_for(quantity: int, status: str = None) -> int:
    """Map a quantity update request to a signed delta."""
    if status == "increase":
        return quantity
    return -quantity
