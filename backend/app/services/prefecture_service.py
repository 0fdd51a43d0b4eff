from typing import List, Optional, Tuple
from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload
from app.exceptions import NotFoundError
from app.models.enums import StoreStatus
from app.models.prefecture import Prefecture
from app.models.region import Region
from app.models.store import Store
from app.schemas.prefecture import PrefectureCreate
from app.services.persistence import save
from app.utils.logger import setup_logger

logger = setup_logger("app.services.prefecture")


class PrefectureService:
    """都道府県情報サービス"""

    @staticmethod
    def find_all(db: Session) -> List[Prefecture]:
        """都道府県一覧（コード昇順）"""
        return (
            db.query(Prefecture)
            .options(joinedload(Prefecture.region))
            .order_by(Prefecture.code)
            .all()
        )

    @staticmethod
    def find_all_with_store_count(
        db: Session, store_status: Optional[StoreStatus] = StoreStatus.PUBLISHED
    ) -> List[Tuple[Prefecture, int]]:
        """
        都道府県ごとの店舗数を返す（コード昇順）。

        store_status で数える店舗のステータスを指定する。既定は掲載中(published)の店舗のみ、
        None を渡すとステータスに関係なく全店舗を数える。
        """
        conditions = [Store.prefecture_id == Prefecture.id]
        if store_status is not None:
            conditions.append(Store.status == store_status)
        store_count = (
            select(func.count(Store.id))
            .where(*conditions)
            .correlate(Prefecture)
            .scalar_subquery()
        )
        rows = (
            db.query(Prefecture, store_count.label("store_count"))
            .options(joinedload(Prefecture.region))
            .order_by(Prefecture.code)
            .all()
        )
        return [(prefecture, count) for prefecture, count in rows]

    @staticmethod
    def find_by_code_or_fail(db: Session, code: str) -> Prefecture:
        """都道府県コードで1件取得する。存在しなければ NotFoundError。"""
        prefecture = (
            db.query(Prefecture)
            .options(joinedload(Prefecture.region))
            .filter(Prefecture.code == code)
            .first()
        )
        if prefecture is None:
            logger.warning(f"都道府県情報が存在しません: code={code}")
            raise NotFoundError(f"codeに該当する都道府県情報が存在しません。 code: {code}")
        return prefecture

    @staticmethod
    def create(db: Session, data: PrefectureCreate, user_id: int) -> Prefecture:
        """都道府県情報を登録する（code重複は ConflictError、存在しないエリアは NotFoundError）"""
        region_id = None
        if data.region_code is not None:
            region = db.query(Region).filter(Region.code == data.region_code).first()
            if region is None:
                raise NotFoundError(
                    f"region_codeに該当するエリア情報が存在しません。 region_code: {data.region_code}"
                )
            region_id = region.id

        prefecture = Prefecture(
            **data.model_dump(exclude={"region_code"}),
            region_id=region_id,
            user_id=user_id,
        )
        created = save(db, prefecture, logger)
        logger.info(f"都道府県情報を登録しました: code={created.code}")
        return created
