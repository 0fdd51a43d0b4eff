from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from app.models.enums import ItemStatus


class ItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=40)
    price: int = Field(..., ge=1)
    description: Optional[str] = Field(default=None, max_length=100)


class ItemRead(BaseModel):
    id: int
    name: str
    price: int
    description: Optional[str] = None
    status: ItemStatus
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
