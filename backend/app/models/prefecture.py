from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.enums import PrefectureStatus, enum_column_values

class Prefecture(Base):
    """都道府県"""
    __tablename__ = "prefectures"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(2), unique=True, index=True, nullable=False)  # JIS都道府県コード
    name = Column(String(40), nullable=False)
    kana_name = Column(String(40), nullable=False)
    kana_en = Column(String(40), nullable=False)
    status = Column(
        Enum(PrefectureStatus, values_callable=enum_column_values, native_enum=False, length=20),
        nullable=False,
    )
    region_id = Column(Integer, ForeignKey("regions.id"), nullable=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    region = relationship("Region", back_populates="prefectures")
    stores = relationship("Store", back_populates="prefecture")

    def __repr__(self):
        return f"<Prefecture {self.code}: {self.name}>"
