import logging
from sqlalchemy.orm import Session
from app.exceptions import conflict_from


def save(db: Session, instance, logger: logging.Logger):
    """
    1件をINSERTしてコミットし、DBの採番・デフォルト値を反映して返す。

    一意制約違反は ConflictError に変換する。それ以外の例外はロールバックだけ行い、
    元の例外をそのまま送出する。
    """
    db.add(instance)
    try:
        db.commit()
    except Exception as e:
        db.rollback()
        conflict = conflict_from(e)
        if conflict is None:
            logger.exception(f"{type(instance).__name__} の登録に失敗しました")
            raise
        logger.warning(f"{type(instance).__name__} の一意制約違反: {conflict.fields}")
        raise conflict from e
    db.refresh(instance)
    return instance
