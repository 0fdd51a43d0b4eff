"""Pytest configuration and fixtures."""

import os

# app.config は import 時に環境変数を読むため、app より先に設定する
os.environ["DEBUG"] = "true"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-pytest-only-0123456789"
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "100000"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db, init_db
from app.main import app
from app.models import Prefecture, Region, Store, User
from app.models.enums import PrefectureStatus, RegionStatus, StoreStatus, UserStatus
from app.services.auth_service import hash_password
from app.utils.jwt_auth import create_access_token
from app.utils.rate_limiter import api_limiter, login_limiter

TEST_PASSWORD = "password123"


@pytest.fixture
def engine():
    """Create a temporary in-memory database shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose get_db dependency points at the in-memory database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_rate_limiters():
    login_limiter.reset()
    api_limiter.reset()
    yield
    login_limiter.reset()
    api_limiter.reset()


@pytest.fixture
def user(db):
    user = User(
        name="出品 太郎",
        email="taro@test.co.jp",
        password=hash_password(TEST_PASSWORD),
        status=UserStatus.FREE,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def regions(db, user):
    kanto = Region(code="03", name="関東", kana_name="カントウ", kana_en="kanto",
                   status=RegionStatus.PUBLISHED, user_id=user.id)
    kinki = Region(code="06", name="近畿", kana_name="キンキ", kana_en="kinki",
                   status=RegionStatus.PUBLISHED, user_id=user.id)
    db.add_all([kanto, kinki])
    db.commit()
    return {"kanto": kanto, "kinki": kinki}


@pytest.fixture
def prefectures(db, user, regions):
    tokyo = Prefecture(code="13", name="東京都", kana_name="トウキョウト", kana_en="tokyo-to",
                       status=PrefectureStatus.PUBLISHED, region_id=regions["kanto"].id, user_id=user.id)
    kanagawa = Prefecture(code="14", name="神奈川県", kana_name="カナガワケン", kana_en="kanagawa-ken",
                          status=PrefectureStatus.SUSPENDED, region_id=regions["kanto"].id, user_id=user.id)
    osaka = Prefecture(code="27", name="大阪府", kana_name="オオサカフ", kana_en="osaka-fu",
                       status=PrefectureStatus.PUBLISHED, region_id=regions["kinki"].id, user_id=user.id)
    db.add_all([tokyo, kanagawa, osaka])
    db.commit()
    return {"tokyo": tokyo, "kanagawa": kanagawa, "osaka": osaka}


@pytest.fixture
def stores(db, user, prefectures):
    """3店舗: 東京の掲載中2店舗と大阪の編集中1店舗"""
    akabane = Store(
        code="S001", name="山田電気 赤羽店", kana_name="ヤマダデンキ アカバネテン",
        status=StoreStatus.PUBLISHED, email="yamada-akabane@test.co.jp", phone_number="03-1122-9901",
        zip_code="115-0045", address="東京都北区赤羽３丁目", business_hours="10:00-20:00",
        holidays=["WEDNESDAY", "SUNDAY"], user_id=user.id, prefecture_id=prefectures["tokyo"].id,
    )
    edogawa = Store(
        code="S002", name="山田電気 江戸川店", kana_name="ヤマダデンキ エドガワテン",
        status=StoreStatus.PUBLISHED, email="yamada-edogawa@test.co.jp", phone_number="03-1122-9902",
        user_id=user.id, prefecture_id=prefectures["tokyo"].id,
    )
    namba = Store(
        code="S003", name="なんば雑貨店", kana_name="ナンバザッカテン",
        status=StoreStatus.EDITING, email="namba@test.co.jp", phone_number="06-1234-5678",
        user_id=user.id, prefecture_id=prefectures["osaka"].id,
    )
    db.add_all([akabane, edogawa, namba])
    db.commit()
    return [akabane, edogawa, namba]
