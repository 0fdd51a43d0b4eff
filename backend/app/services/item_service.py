from typing import List
from sqlalchemy.orm import Session
from app.exceptions import NotFoundError
from app.models.enums import ItemStatus
from app.models.item import Item
from app.schemas.item import ItemCreate
from app.services.persistence import save
from app.utils.logger import setup_logger

logger = setup_logger("app.services.item")


class ItemService:
    """出品商品サービス"""

    @staticmethod
    def find_all(db: Session) -> List[Item]:
        return db.query(Item).order_by(Item.id).all()

    @staticmethod
    def find_by_id(db: Session, item_id: int) -> Item:
        item = db.query(Item).filter(Item.id == item_id).first()
        if item is None:
            logger.warning(f"商品が存在しません: id={item_id}")
            raise NotFoundError(f"商品が存在しません。 id: {item_id}")
        return item

    @staticmethod
    def create(db: Session, data: ItemCreate, user_id: int) -> Item:
        """商品を出品中(ON_SALE)で登録する"""
        item = Item(
            name=data.name,
            price=data.price,
            description=data.description,
            status=ItemStatus.ON_SALE,
            user_id=user_id,
        )
        created = save(db, item, logger)
        logger.info(f"商品を登録しました: id={created.id} user_id={user_id}")
        return created

    @staticmethod
    def mark_sold_out(db: Session, item_id: int, user_id: int) -> Item:
        """商品を売り切れ(SOLD_OUT)にし、操作したユーザーを user_id に記録する"""
        item = ItemService.find_by_id(db, item_id)
        item.status = ItemStatus.SOLD_OUT
        item.user_id = user_id
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def delete(db: Session, item_id: int, user_id: int) -> None:
        """自分が出品した商品のみ削除できる"""
        item = db.query(Item).filter(Item.id == item_id, Item.user_id == user_id).first()
        if item is None:
            raise NotFoundError(f"削除対象の商品が存在しません。 id: {item_id}")
        db.delete(item)
        db.commit()
        logger.info(f"商品を削除しました: id={item_id} user_id={user_id}")
