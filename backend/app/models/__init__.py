# Models package
from .user import User
from .plant import Plant
from .order import Order, OrderStatus
