from .user import User
from .item import Item
from .region import Region
from .prefecture import Prefecture
from .store import Store

__all__ = [
    "User",
    "Item",
    "Region",
    "Prefecture",
    "Store",
]
