from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from app.config import DEBUG, CORS_ORIGINS, VERSION
from app.database import init_db
from app.exceptions import ConflictError, NotFoundError
from app.routes import auth, health, items, prefectures, regions, stores
from app.utils.logger import setup_logger
from app.utils.rate_limiter import api_limiter

logger = setup_logger("app.main")

# テーブル作成
init_db()

# HTTPセキュリティヘッダーミドルウェア
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if not DEBUG:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


# API全体レート制限ミドルウェア（IP単位）
class APIRateLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if request.url.path.startswith("/api/"):
            ip_address = request.client.host if request.client else "unknown"
            if not api_limiter.is_allowed(ip_address):
                remaining = api_limiter.get_remaining_time(ip_address)
                logger.warning(f"APIレート制限超過: ip={ip_address}")
                return JSONResponse(
                    status_code=429,
                    content={"detail": f"リクエスト数が多すぎます。{remaining}秒後に再試行してください"}
                )
        return await call_next(request)

# DEBUGモード時のみドキュメントエンドポイントを公開
app = FastAPI(
    title="Flea Market API",
    description="フリマ・店舗情報管理API",
    version=VERSION,
    docs_url="/docs" if DEBUG else None,
    redoc_url="/redoc" if DEBUG else None,
    openapi_url="/openapi.json" if DEBUG else None,
)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(APIRateLimitMiddleware)

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS if CORS_ORIGINS else ["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


# ドメイン例外 → HTTPステータス
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=409, content={"detail": exc.message, "fields": exc.fields})


# ルート登録
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(items.router)
app.include_router(regions.router)
app.include_router(prefectures.router)
app.include_router(stores.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=4000, reload=DEBUG)
