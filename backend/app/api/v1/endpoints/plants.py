from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_async_session
from app.schemas.common import InsertResult, UpdateResult
from app.schemas.plant import Plant as PlantSchema, PlantCreate, QuantityUpdate
from app.services.auth import get_current_user
from app.services.catalog import list_plants, get_plant, insert_plant
from app.services.inventory import adjust_quantity, delta_for

router = APIRouter()


@router.get("/plants", response_model=List[PlantSchema])
async def read_plants(session: AsyncSession = Depends(get_async_session)):
    """List plants, capped at the configured page size."""
    return await list_plants(session)


@router.get("/plant/{plant_id}", response_model=PlantSchema)
async def read_plant(plant_id: str, session: AsyncSession = Depends(get_async_session)):
    return await get_plant(session, plant_id)


@router.post("/plants", response_model=InsertResult)
async def create_plant(
    plant_data: PlantCreate,
    current_user: dict = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session)
):
    plant = await insert_plant(session, plant_data)
    return InsertResult(inserted_id=plant.id)


@router.patch("/plant/quantity/{plant_id}", response_model=UpdateResult)
async def update_plant_quantity(
    plant_id: str,
    body: QuantityUpdate,
    current_user: dict = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session)
):
    """Decrease stock after a purchase, or increase it with status "increase"."""
    delta = delta_for(body.quantity_to_update, body.status)
    return await adjust_quantity(session, plant_id, delta)
