from typing import Optional
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from app.models.user import User
from app.schemas.user import UserCreate, UserCredentials
from app.services.persistence import save
from app.utils.logger import setup_logger

logger = setup_logger("app.services.auth")

# パスワードハッシング設定
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class AuthService:
    """ユーザー登録・認証サービス"""

    @staticmethod
    def create_user(db: Session, data: UserCreate) -> User:
        """ユーザーを登録する（email重複は ConflictError）"""
        user = User(
            name=data.name,
            email=data.email,
            password=hash_password(data.password),
            status=data.status,
        )
        created = save(db, user, logger)
        logger.info(f"ユーザーを登録しました: id={created.id}")
        return created

    @staticmethod
    def authenticate(db: Session, credentials: UserCredentials) -> Optional[User]:
        """emailとパスワードが一致すればユーザーを返す。一致しなければ None。"""
        user = db.query(User).filter(User.email == credentials.email).first()
        if user is None or not verify_password(credentials.password, user.password):
            return None
        return user
