from .common import InsertResult, UpdateResult, DeleteResult, SuccessResponse
from .user import User, UserProfile, SessionClaim
from .plant import Plant, PlantBase, PlantCreate, SellerInfo, QuantityUpdate
from .order import Order, OrderBase, OrderCreate, CheckoutCreate, CustomerInfo, CustomerOrder

__all__ = [
    "InsertResult", "UpdateResult", "DeleteResult", "SuccessResponse",
    "User", "UserProfile", "SessionClaim",
    "Plant", "PlantBase", "PlantCreate", "SellerInfo", "QuantityUpdate",
    "Order", "OrderBase", "OrderCreate", "CheckoutCreate", "CustomerInfo", "CustomerOrder"
]
