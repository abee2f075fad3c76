from fastapi import APIRouter

from .endpoints import users, auth, plants, orders

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(plants.router, tags=["plants"])
api_router.include_router(orders.router, tags=["orders"])
