from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator
from app.models.enums import UserStatus


def _validate_password_strength(password: str) -> str:
    """パスワード強度を検証する共通バリデーター"""
    if not any(c.isdigit() for c in password):
        raise ValueError("パスワードには数字を1文字以上含めてください")
    if not any(c.isalpha() for c in password):
        raise ValueError("パスワードには英字を1文字以上含めてください")
    return password


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=40)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)  # bcryptは72バイトまで
    status: UserStatus = UserStatus.FREE

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return _validate_password_strength(v)


class UserCredentials(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    status: UserStatus
    created_at: datetime

    class Config:
        from_attributes = True


class CurrentUser(BaseModel):
    """JWTのペイロードから復元した認証済みユーザー"""
    id: int
    name: str
    status: UserStatus

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    token: str
