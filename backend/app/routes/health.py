from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.config import VERSION
from app.database import get_db
from app.utils.logger import setup_logger

router = APIRouter(prefix="/api", tags=["health"])

logger = setup_logger("app.routes.health")


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """ヘルスチェック（DBに接続できなければ 503）"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("ヘルスチェック: DBに接続できません")
        return JSONResponse(
            status_code=503,
            content={"status": "error", "version": VERSION, "database": "unavailable"},
        )
    return {"status": "ok", "version": VERSION, "database": "ok"}
