from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.enums import SortBy, SortOrder, StoreStatus
from app.schemas.store import PaginatedStores, StoreCreate, StoreFilter, StoreRead
from app.schemas.user import CurrentUser
from app.services.store_service import StoreService
from app.utils.jwt_auth import get_current_user

router = APIRouter(prefix="/api/stores", tags=["stores"])


@router.get("", response_model=PaginatedStores, response_model_exclude_none=True)
async def find_all(
    name: Optional[str] = Query(None, max_length=40, description="店舗名（部分一致）"),
    status: Optional[StoreStatus] = Query(None),
    prefecture_code: Optional[str] = Query(None, max_length=2),
    region_code: Optional[str] = Query(None, max_length=2),
    sort_by: Optional[SortBy] = Query(None),
    sort_order: Optional[SortOrder] = Query(None),
    page: Optional[int] = Query(None, description="範囲外の値は 1〜10000 に丸める"),
    size: Optional[int] = Query(None, description="範囲外の値は 1〜100 に丸める"),
    db: Session = Depends(get_db),
):
    """店舗一覧（絞り込み・ソート・ページング）"""
    filters = StoreFilter(
        name=name,
        status=status,
        prefecture_code=prefecture_code,
        region_code=region_code,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        size=size,
    )
    paginated = StoreService.find_all(db, filters)
    return PaginatedStores(
        items=[StoreRead.model_validate(store) for store in paginated.items],
        total_count=paginated.total_count,
        page=paginated.page,
        size=paginated.size,
    )


@router.get("/code/{code}", response_model=StoreRead, response_model_exclude_none=True)
async def find_by_code(code: str, db: Session = Depends(get_db)):
    """店舗コードで1件取得"""
    return StoreService.find_by_code_or_fail(db, code)


@router.post("", response_model=StoreRead, response_model_exclude_none=True, status_code=201)
async def create(data: StoreCreate, current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """店舗を登録"""
    return StoreService.create(db, data, current_user.id)
