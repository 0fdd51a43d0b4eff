from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.config import DATABASE_URL, SQL_ECHO

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False}, echo=SQL_ECHO)
else:
    engine = create_engine(DATABASE_URL, echo=SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(bind: Engine = engine, drop: bool = False) -> None:
    """全モデルを登録した上でテーブルを作成する（drop=True なら作り直す）"""
    import app.models  # noqa: F401  テーブル定義の登録

    if drop:
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)


def get_db():
    """リクエスト単位のセッションを払い出す依存関係"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
