from datetime import datetime, timedelta, timezone
import threading
from app.config import API_RATE_LIMIT_PER_MINUTE, LOGIN_MAX_ATTEMPTS, LOGIN_WINDOW_SECONDS

class RateLimiter:
    """スライディングウィンドウ方式のレート制限（識別子はIPアドレスなど）"""
    def __init__(self, max_attempts: int, window_seconds: int):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self.attempts = {}
        self.lock = threading.Lock()

    def _prune(self, identifier: str, now: datetime) -> list:
        cutoff_time = now - timedelta(seconds=self.window_seconds)
        recent = [t for t in self.attempts.get(identifier, []) if t > cutoff_time]
        if recent:
            self.attempts[identifier] = recent
        else:
            self.attempts.pop(identifier, None)
        return recent

    def is_allowed(self, identifier: str) -> bool:
        """上限内なら試行を記録して True、上限に達していれば False"""
        now = datetime.now(timezone.utc)
        with self.lock:
            recent = self._prune(identifier, now)
            if len(recent) >= self.max_attempts:
                return False
            recent.append(now)
            self.attempts[identifier] = recent
            return True

    def get_remaining_time(self, identifier: str) -> int:
        """ブロックが解除されるまでの秒数"""
        with self.lock:
            recent = self._prune(identifier, datetime.now(timezone.utc))
            if len(recent) < self.max_attempts:
                return 0
            unblock_at = recent[0] + timedelta(seconds=self.window_seconds)
        remaining = (unblock_at - datetime.now(timezone.utc)).total_seconds()
        return max(0, int(remaining))

    def reset(self, identifier: str = None) -> None:
        """記録を消去する（identifier 未指定なら全件）"""
        with self.lock:
            if identifier is None:
                self.attempts.clear()
            else:
                self.attempts.pop(identifier, None)

# サインインのブルートフォース対策と、API全体の流量制限
login_limiter = RateLimiter(max_attempts=LOGIN_MAX_ATTEMPTS, window_seconds=LOGIN_WINDOW_SECONDS)
api_limiter = RateLimiter(max_attempts=API_RATE_LIMIT_PER_MINUTE, window_seconds=60)
