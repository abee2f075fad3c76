from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Integer, Float, JSON
from app.core.database import Base
import enum


class OrderStatus(str, enum.Enum):
    pending = "pending"
    processing = "processing"
    delivered = "delivered"


class Order(Base):
    __tablename__ = "orders"

    id = Column(String, primary_key=True, index=True)
    customer = Column(JSON, nullable=False)  # {name, email, image}
    customer_email = Column(String, index=True, nullable=False)
    # Loose reference to plants.id, no foreign key
    plant_id = Column(String, index=True, nullable=False)
    price = Column(Float, nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    seller = Column(String, nullable=True)
    address = Column(Text, nullable=True)
    # Free-form so statuses written by other tools are kept as-is
    status = Column(String, nullable=False, default=OrderStatus.pending.value)
    created_at = Column(DateTime, default=datetime.utcnow)
