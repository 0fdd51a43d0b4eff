from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.enums import RegionStatus, enum_column_values

class Region(Base):
    """エリア（関東・近畿など）"""
    __tablename__ = "regions"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(2), unique=True, index=True, nullable=False)
    name = Column(String(40), nullable=False)
    kana_name = Column(String(40), nullable=False)
    kana_en = Column(String(40), nullable=False)
    status = Column(
        Enum(RegionStatus, values_callable=enum_column_values, native_enum=False, length=20),
        nullable=False,
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    prefectures = relationship("Prefecture", back_populates="region")

    def __repr__(self):
        return f"<Region {self.code}: {self.name}>"
