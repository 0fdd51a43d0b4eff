from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.enums import StoreStatus, enum_column_values

class Store(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(20), unique=True, index=True, nullable=True)  # 店舗コード
    name = Column(String(40), nullable=False)
    kana_name = Column(String(40), nullable=True)
    status = Column(
        Enum(StoreStatus, values_callable=enum_column_values, native_enum=False, length=20),
        nullable=False,
        index=True,
    )
    email = Column(String(255), nullable=False)
    phone_number = Column(String(13), nullable=False)
    zip_code = Column(String(8), nullable=True)
    address = Column(String(100), nullable=True)
    business_hours = Column(String(100), nullable=True)  # 例: "10:00-20:00"
    holidays = Column(JSON, nullable=True)  # 定休日（Weekdayの値の配列）
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    prefecture_id = Column(Integer, ForeignKey("prefectures.id"), nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", back_populates="stores")
    prefecture = relationship("Prefecture", back_populates="stores")

    def __repr__(self):
        return f"<Store {self.code}: {self.name}>"
