from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.enums import ItemStatus, enum_column_values

class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(40), nullable=False)
    price = Column(Integer, nullable=False)
    description = Column(String(100), nullable=True)
    status = Column(
        Enum(ItemStatus, values_callable=enum_column_values, native_enum=False, length=20),
        nullable=False,
        default=ItemStatus.ON_SALE,
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", back_populates="items")

    def __repr__(self):
        return f"<Item {self.id}: {self.name} ({self.status})>"
