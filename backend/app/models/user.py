from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.enums import UserStatus, enum_column_values

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(40), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)  # ログインID
    password = Column(String(255), nullable=False)  # bcryptハッシュ
    status = Column(
        Enum(UserStatus, values_callable=enum_column_values, native_enum=False, length=20),
        nullable=False,
        default=UserStatus.FREE,
    )
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    items = relationship("Item", back_populates="user")
    stores = relationship("Store", back_populates="user")

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"
