from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.enums import StoreStatus
from app.schemas.prefecture import PrefectureCreate, PrefectureRead, PrefectureWithStoreCount
from app.schemas.user import CurrentUser
from app.services.prefecture_service import PrefectureService
from app.utils.jwt_auth import get_current_user

router = APIRouter(prefix="/api/prefectures", tags=["prefectures"])

ALL_STORES = "all"


@router.get("", response_model=List[PrefectureRead], response_model_exclude_none=True)
async def find_all(db: Session = Depends(get_db)):
    """都道府県一覧（コード昇順）"""
    return PrefectureService.find_all(db)


@router.get("/with-store-count", response_model=List[PrefectureWithStoreCount], response_model_exclude_none=True)
async def find_all_with_store_count(
    store_status: str = Query(
        StoreStatus.PUBLISHED.value,
        pattern="^(published|editing|suspended|all)$",
        description="数える店舗のステータス（all なら全店舗）",
    ),
    db: Session = Depends(get_db),
):
    """都道府県一覧（店舗数つき）"""
    scope = None if store_status == ALL_STORES else StoreStatus(store_status)
    rows = PrefectureService.find_all_with_store_count(db, store_status=scope)
    return [
        PrefectureWithStoreCount.model_validate(prefecture).model_copy(update={"store_count": count})
        for prefecture, count in rows
    ]


@router.get("/code/{code}", response_model=PrefectureRead, response_model_exclude_none=True)
async def find_by_code(code: str, db: Session = Depends(get_db)):
    """都道府県コードで1件取得"""
    return PrefectureService.find_by_code_or_fail(db, code)


@router.post("", response_model=PrefectureRead, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create(data: PrefectureCreate, current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """都道府県情報を登録"""
    return PrefectureService.create(db, data, current_user.id)
