from typing import List, Optional, Tuple
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app.exceptions import NotFoundError
from app.models.enums import PrefectureStatus
from app.models.prefecture import Prefecture
from app.models.region import Region
from app.schemas.region import RegionCreate
from app.services.persistence import save
from app.utils.logger import setup_logger

logger = setup_logger("app.services.region")


class RegionService:
    """エリア情報サービス"""

    @staticmethod
    def find_all_with_prefecture_count(
        db: Session, prefecture_status: Optional[PrefectureStatus] = None
    ) -> List[Tuple[Region, int]]:
        """
        エリアごとの都道府県数を返す（コード昇順）。
        prefecture_status を指定した場合はそのステータスの都道府県だけを数える。
        """
        conditions = [Prefecture.region_id == Region.id]
        if prefecture_status is not None:
            conditions.append(Prefecture.status == prefecture_status)
        prefecture_count = (
            select(func.count(Prefecture.id))
            .where(*conditions)
            .correlate(Region)
            .scalar_subquery()
        )
        rows = (
            db.query(Region, prefecture_count.label("prefecture_count"))
            .order_by(Region.code)
            .all()
        )
        return [(region, count) for region, count in rows]

    @staticmethod
    def find_by_code_or_fail(db: Session, code: str) -> Region:
        region = db.query(Region).filter(Region.code == code).first()
        if region is None:
            logger.warning(f"エリア情報が存在しません: code={code}")
            raise NotFoundError(f"codeに該当するエリア情報が存在しません。 code: {code}")
        return region

    @staticmethod
    def create(db: Session, data: RegionCreate, user_id: int) -> Region:
        """エリア情報を登録する（code重複は ConflictError）"""
        region = Region(**data.model_dump(), user_id=user_id)
        created = save(db, region, logger)
        logger.info(f"エリア情報を登録しました: code={created.code}")
        return created
