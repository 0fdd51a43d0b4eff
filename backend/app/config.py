import os
import sys
from dotenv import load_dotenv

load_dotenv()

# アプリケーションバージョン
VERSION = "0.4.0"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./market.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
# 本番環境では必ず環境変数 DEBUG=false を設定すること
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
# 本番環境では環境変数 CORS_ORIGINS にフロントエンドのオリジンを指定すること
_cors_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = _cors_env.split(",") if _cors_env else []

# JWT認証設定
_DEFAULT_SECRET_KEY = "change-this-secret-key-in-production-32chars"
SECRET_KEY = os.getenv("SECRET_KEY", _DEFAULT_SECRET_KEY)

# 本番環境でデフォルトキーのまま起動しようとした場合は起動を拒否
if not DEBUG and SECRET_KEY == _DEFAULT_SECRET_KEY:
    print(
        "[SECURITY ERROR] 本番環境 (DEBUG=false) でデフォルトの SECRET_KEY が使用されています。"
        "環境変数 SECRET_KEY に安全なランダム文字列を設定してください。",
        file=sys.stderr,
    )
    sys.exit(1)

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# レート制限
API_RATE_LIMIT_PER_MINUTE = int(os.getenv("API_RATE_LIMIT_PER_MINUTE", "100"))
LOGIN_MAX_ATTEMPTS = int(os.getenv("LOGIN_MAX_ATTEMPTS", "5"))
LOGIN_WINDOW_SECONDS = int(os.getenv("LOGIN_WINDOW_SECONDS", "300"))

# ページング
DEFAULT_PAGE = 1
MAX_PAGE = 10000
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# ログ設定（LOG_DIR 未指定の場合はコンソールのみ）
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR") or None
