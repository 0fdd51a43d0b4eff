from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import CurrentUser, TokenResponse, UserCreate, UserCredentials, UserRead
from app.services.auth_service import AuthService
from app.utils.jwt_auth import create_access_token, get_current_user
from app.utils.logger import setup_logger
from app.utils.rate_limiter import login_limiter

router = APIRouter(prefix="/api/auth", tags=["auth"])

logger = setup_logger("app.routes.auth")


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def signup(data: UserCreate, db: Session = Depends(get_db)):
    """ユーザー登録"""
    return AuthService.create_user(db, data)


@router.post("/signin", response_model=TokenResponse)
async def signin(request: Request, data: UserCredentials, db: Session = Depends(get_db)):
    """サインイン（認証に成功したらJWTを返す）"""
    ip_address = request.client.host if request.client else "unknown"

    # ブルートフォース対策：IP単位でレート制限
    if not login_limiter.is_allowed(ip_address):
        remaining = login_limiter.get_remaining_time(ip_address)
        logger.warning(f"サインイン試行回数超過: ip={ip_address}")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"サインイン試行回数が多すぎます。{remaining}秒後に再度お試しください"
        )

    user = AuthService.authenticate(db, data)
    if user is None:
        logger.info(f"サインイン失敗: ip={ip_address}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="メールアドレスまたはパスワードが正しくありません",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info(f"サインイン成功: user_id={user.id}")
    return TokenResponse(token=create_access_token(user))


@router.get("/me", response_model=CurrentUser)
async def me(current_user: CurrentUser = Depends(get_current_user)):
    """ログイン中のユーザー情報"""
    return current_user
