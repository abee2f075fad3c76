import logging
from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order
from app.models.plant import Plant
from app.schemas.order import CustomerOrder

logger = logging.getLogger(__name__)


async def list_customer_orders(session: AsyncSession, email: str) -> List[CustomerOrder]:
    """
    A customer's orders, each enriched with the plant's name, image and category.

    Inner join: orders whose plant_id no longer resolves are left out.
    """
    result = await session.execute(
        select(Order, Plant.name, Plant.image, Plant.category)
        .join(Plant, Plant.id == Order.plant_id)
        .where(Order.customer_email == email)
    )

    orders = []
    for order, name, image, category in result.all():
        row = CustomerOrder.model_validate(order)
        orders.append(row.model_copy(update={"name": name, "image": image, "category": category}))

    logger.info(f"Loaded {len(orders)} order(s) for {email}")
    return orders
