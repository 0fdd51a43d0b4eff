from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from app.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE

T = TypeVar("T")


def clamp_page(page: Optional[int]) -> int:
    """ページ番号を 1〜MAX_PAGE に丸める（範囲外はエラーにしない）"""
    if page is None:
        page = DEFAULT_PAGE
    return min(MAX_PAGE, max(1, page))


def clamp_size(size: Optional[int]) -> int:
    """1ページあたりの件数を 1〜MAX_PAGE_SIZE に丸める。0や負数は1になる。"""
    if size is None:
        size = DEFAULT_PAGE_SIZE
    return min(MAX_PAGE_SIZE, max(1, size))


def page_offset(page: int, size: int) -> int:
    return (page - 1) * size


@dataclass
class PaginatedResult(Generic[T]):
    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE
