import uuid
import logging
from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.plant import Plant
from app.schemas.plant import PlantCreate

logger = logging.getLogger(__name__)


async def list_plants(session: AsyncSession, limit: Optional[int] = None) -> List[Plant]:
    """Up to `limit` plants in whatever order the database returns them."""
    limit = settings.PLANT_LIST_LIMIT if limit is None else min(limit, settings.PLANT_LIST_LIMIT)
    result = await session.execute(select(Plant).limit(limit))
    return list(result.scalars().all())


async def get_plant(session: AsyncSession, plant_id: str) -> Plant:
    plant = await session.get(Plant, plant_id)
    if plant is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant


async def insert_plant(session: AsyncSession, plant_data: PlantCreate) -> Plant:
    data = plant_data.model_dump(exclude={"id"})
    plant = Plant(id=plant_data.id or str(uuid.uuid4()), **data)
    session.add(plant)
    await session.commit()
    logger.info(f"Plant added to catalog: {plant.id} ({plant.name})")
    return plant
