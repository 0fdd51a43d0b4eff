from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, computed_field, field_validator
from app.models.enums import SortBy, SortOrder, StoreStatus, Weekday
from app.schemas.prefecture import PrefectureSummary
from app.utils.labels import store_status_label, weekday_labels


class StoreCreate(BaseModel):
    code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=40)
    kana_name: Optional[str] = Field(default=None, max_length=40)
    status: StoreStatus
    email: EmailStr
    phone_number: str = Field(..., min_length=1, max_length=13)
    zip_code: Optional[str] = Field(default=None, max_length=8)  # 郵便番号
    address: Optional[str] = Field(default=None, max_length=100)
    prefecture_code: Optional[str] = Field(default=None, max_length=2)
    business_hours: Optional[str] = Field(default=None, min_length=1, max_length=100)
    holidays: Optional[List[Weekday]] = None

    @field_validator("holidays")
    @classmethod
    def validate_holidays(cls, v):
        if v is not None and len(set(v)) != len(v):
            raise ValueError("holidays must not contain duplicates")
        return v


class StoreFilter(BaseModel):
    """店舗一覧の絞り込み・並び順・ページ指定（未指定の項目は条件にしない）"""
    name: Optional[str] = None
    status: Optional[StoreStatus] = None
    prefecture_code: Optional[str] = None
    region_code: Optional[str] = None
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None
    page: Optional[int] = None
    size: Optional[int] = None


class StoreRead(BaseModel):
    id: int
    code: Optional[str] = None
    name: str
    kana_name: Optional[str] = None
    status: StoreStatus
    email: str
    phone_number: str
    zip_code: Optional[str] = None
    address: Optional[str] = None
    business_hours: Optional[str] = None
    holidays: Optional[List[Weekday]] = None
    prefecture: Optional[PrefectureSummary] = None
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("holidays", mode="before")
    @classmethod
    def empty_holidays_as_unset(cls, v):
        # DB上の空配列は「未設定」として扱う
        return v or None

    @computed_field
    @property
    def status_label(self) -> str:
        return store_status_label(self.status)

    @computed_field
    @property
    def holidays_label(self) -> Optional[List[str]]:
        return weekday_labels(self.holidays)


class PaginatedStores(BaseModel):
    items: List[StoreRead]
    total_count: int
    page: int
    size: int
