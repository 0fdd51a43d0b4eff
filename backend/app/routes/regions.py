from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.enums import PrefectureStatus
from app.schemas.region import RegionCreate, RegionRead
from app.schemas.user import CurrentUser
from app.services.region_service import RegionService
from app.utils.jwt_auth import get_current_user

router = APIRouter(prefix="/api/regions", tags=["regions"])


@router.get("", response_model=List[RegionRead])
async def find_all(
    prefecture_status: Optional[PrefectureStatus] = Query(None, description="数える都道府県のステータス（未指定なら全件）"),
    db: Session = Depends(get_db),
):
    """エリア一覧（都道府県数つき）"""
    rows = RegionService.find_all_with_prefecture_count(db, prefecture_status=prefecture_status)
    return [
        RegionRead.model_validate(region).model_copy(update={"prefecture_count": count})
        for region, count in rows
    ]


@router.get("/code/{code}", response_model=RegionRead, response_model_exclude_none=True)
async def find_by_code(code: str, db: Session = Depends(get_db)):
    """エリアコードで1件取得"""
    return RegionService.find_by_code_or_fail(db, code)


@router.post("", response_model=RegionRead, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create(data: RegionCreate, current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """エリア情報を登録"""
    return RegionService.create(db, data, current_user.id)
