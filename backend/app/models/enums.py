from enum import Enum


class UserStatus(str, Enum):
    FREE = "FREE"
    PREMIUM = "PREMIUM"


class ItemStatus(str, Enum):
    ON_SALE = "ON_SALE"
    SOLD_OUT = "SOLD_OUT"


class StoreStatus(str, Enum):
    PUBLISHED = "published"  # 掲載中
    EDITING = "editing"  # 編集中
    SUSPENDED = "suspended"  # 停止中


class PrefectureStatus(str, Enum):
    PUBLISHED = "published"
    SUSPENDED = "suspended"


class RegionStatus(str, Enum):
    PUBLISHED = "published"
    SUSPENDED = "suspended"


class Weekday(str, Enum):
    SUNDAY = "SUNDAY"
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"


class SortBy(str, Enum):
    """店舗一覧で指定可能なソート項目（これ以外のカラムでは並べ替えない）"""
    ID = "id"
    CODE = "code"
    NAME = "name"
    KANA_NAME = "kana_name"
    STATUS = "status"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def enum_column_values(enum_cls):
    """SQLAlchemy Enum 型に name ではなく value を保存させる"""
    return [member.value for member in enum_cls]
