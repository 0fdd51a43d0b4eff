from .user import UserCreate, UserCredentials, UserRead, CurrentUser, TokenResponse
from .item import ItemCreate, ItemRead
from .region import RegionCreate, RegionRead, RegionSummary
from .prefecture import PrefectureCreate, PrefectureRead, PrefectureSummary, PrefectureWithStoreCount
from .store import StoreCreate, StoreFilter, StoreRead, PaginatedStores

__all__ = [
    "UserCreate", "UserCredentials", "UserRead", "CurrentUser", "TokenResponse",
    "ItemCreate", "ItemRead",
    "RegionCreate", "RegionRead", "RegionSummary",
    "PrefectureCreate", "PrefectureRead", "PrefectureSummary", "PrefectureWithStoreCount",
    "StoreCreate", "StoreFilter", "StoreRead", "PaginatedStores",
]
