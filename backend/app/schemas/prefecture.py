from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, computed_field
from app.models.enums import PrefectureStatus
from app.schemas.region import RegionSummary
from app.utils.labels import prefecture_status_label


class PrefectureCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=2)
    name: str = Field(..., min_length=1, max_length=40)
    kana_name: str = Field(..., min_length=1, max_length=40)
    kana_en: str = Field(..., min_length=1, max_length=40)
    status: PrefectureStatus
    region_code: Optional[str] = Field(default=None, max_length=2)


class PrefectureSummary(BaseModel):
    code: str
    name: str
    kana_name: str

    class Config:
        from_attributes = True


class PrefectureRead(BaseModel):
    id: int
    code: str
    name: str
    kana_name: str
    kana_en: str
    status: PrefectureStatus
    region: Optional[RegionSummary] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @computed_field
    @property
    def status_label(self) -> str:
        return prefecture_status_label(self.status)


class PrefectureWithStoreCount(PrefectureRead):
    store_count: int = 0
