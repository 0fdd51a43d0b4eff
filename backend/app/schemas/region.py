from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, computed_field
from app.models.enums import RegionStatus
from app.utils.labels import region_status_label


class RegionCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=2)
    name: str = Field(..., min_length=1, max_length=40)
    kana_name: str = Field(..., min_length=1, max_length=40)
    kana_en: str = Field(..., min_length=1, max_length=40)
    status: RegionStatus


class RegionSummary(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True


class RegionRead(BaseModel):
    id: int
    code: str
    name: str
    kana_name: str
    kana_en: str
    status: RegionStatus
    created_at: datetime
    updated_at: datetime
    prefecture_count: Optional[int] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def status_label(self) -> str:
        return region_status_label(self.status)
