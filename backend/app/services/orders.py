"""
Order ledger: order creation, cancellation and transactional checkout.
"""
import uuid
import logging
from fastapi import HTTPException, status
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order, OrderStatus
from app.models.plant import Plant
from app.schemas.common import DeleteResult
from app.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


class OrderLedger:
    """Creates and deletes orders for a single database session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _build_order(self, order_info: OrderCreate) -> Order:
        data = order_info.model_dump(exclude={"id"})
        return Order(
            id=order_info.id or str(uuid.uuid4()),
            customer_email=order_info.customer.email,
            **data
        )

    async def create(self, order_info: OrderCreate) -> Order:
        """Store the order as given. The plant reference is not checked."""
        order = self._build_order(order_info)
        self.session.add(order)
        await self.session.commit()
        logger.info(f"Order {order.id} created for {order.customer_email}")
        return order

    async def get(self, order_id: str) -> Order:
        order = await self.session.get(Order, order_id)
        if order is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found"
            )
        return order

    async def delete(self, order_id: str) -> DeleteResult:
        """Delete an order unless it has already been delivered."""
        order = await self.get(order_id)
        if order.status == OrderStatus.delivered.value:
            logger.warning(f"Refusing to delete delivered order {order_id}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="This order is already delivered"
            )

        result = await self.session.execute(delete(Order).where(Order.id == order_id))
        await self.session.commit()
        logger.info(f"Order {order_id} deleted")
        return DeleteResult(deleted_count=result.rowcount)

    async def checkout(self, order_info: OrderCreate) -> Order:
        """
        Reserve stock and record the order in one transaction.

        The stock decrement only applies while enough quantity remains, so
        concurrent checkouts cannot oversell. Nothing is written on failure.

        Raises:
            HTTPException: 422 for a non-positive quantity, 404 if the plant does
            not exist, 409 if stock is short
        """
        if order_info.quantity < 1:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Quantity must be positive"
            )

        order = self._build_order(order_info)
        try:
            result = await self.session.execute(
                update(Plant)
                .where(Plant.id == order.plant_id, Plant.quantity >= order.quantity)
                .values(quantity=Plant.quantity - order.quantity)
            )
            if result.rowcount == 0:
                exists = await self.session.scalar(
                    select(Plant.id).where(Plant.id == order.plant_id)
                )
                if exists is None:
                    raise HTTPException(
                        status_code=status.HTTP_404_NOT_FOUND,
                        detail="Plant not found"
                    )
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="Not enough stock"
                )

            self.session.add(order)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            f"Checkout complete: order {order.id}, plant {order.plant_id} -{order.quantity}"
        )
        return order
