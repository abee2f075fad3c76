from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_async_session
from app.schemas.common import InsertResult, DeleteResult
from app.schemas.order import OrderCreate, CheckoutCreate, CustomerOrder
from app.services.auth import get_current_user
from app.services.history import list_customer_orders
from app.services.orders import OrderLedger

router = APIRouter()


def get_order_ledger(session: AsyncSession = Depends(get_async_session)) -> OrderLedger:
    return OrderLedger(session)


@router.get("/customer-orders/{email}", response_model=List[CustomerOrder])
async def read_customer_orders(
    email: str,
    current_user: dict = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session)
):
    """Orders placed by a customer, with plant name, image and category."""
    return await list_customer_orders(session, email)


@router.post("/order", response_model=InsertResult)
async def create_order(
    order_info: OrderCreate,
    current_user: dict = Depends(get_current_user),
    ledger: OrderLedger = Depends(get_order_ledger)
):
    order = await ledger.create(order_info)
    return InsertResult(inserted_id=order.id)


@router.post("/checkout", response_model=InsertResult)
async def checkout(
    order_info: CheckoutCreate,
    current_user: dict = Depends(get_current_user),
    ledger: OrderLedger = Depends(get_order_ledger)
):
    """Place an order and take the stock for it in a single transaction."""
    order = await ledger.checkout(order_info)
    return InsertResult(inserted_id=order.id)


@router.delete("/order/{order_id}", response_model=DeleteResult)
async def delete_order(
    order_id: str,
    current_user: dict = Depends(get_current_user),
    ledger: OrderLedger = Depends(get_order_ledger)
):
    """Cancel an order. Delivered orders cannot be deleted."""
    return await ledger.delete(order_id)
