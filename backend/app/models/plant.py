from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Integer, Float, JSON
from app.core.database import Base


class Plant(Base):
    __tablename__ = "plants"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    description = Column(Text)
    image = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0)
    # Only ever changed through single-statement increments
    quantity = Column(Integer, nullable=False, default=0)
    seller = Column(JSON, nullable=True)  # {name, email, image}
    created_at = Column(DateTime, default=datetime.utcnow)
