"""
ドメイン例外と、ストレージ層の一意制約エラーの判定

一意制約違反の判定はドライバの例外クラスに依存させず、例外が持つ属性
（SQLSTATE・エラー名・メッセージ・{code, meta} 形式）だけを見て行う。
"""

import re
from typing import List, Optional, Sequence

UNKNOWN_FIELD = "不明なフィールド"

_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<columns>.+)$")
_POSTGRES_KEY = re.compile(r"Key \((?P<columns>[^)]+)\)=")
_MYSQL_KEY = re.compile(r"for key '(?P<key>[^']+)'")


class MarketError(Exception):
    """アプリケーション例外の基底クラス"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MarketError):
    """指定されたID・コードのデータが存在しない（404）"""


class ConflictError(MarketError):
    """一意制約に違反した（409）"""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields) or [UNKNOWN_FIELD]
        super().__init__(f"指定された {', '.join(self.fields)} は既に存在します。")


def _split_columns(columns: str) -> List[str]:
    # "stores.code, stores.name" → ["code", "name"]
    return [c.strip().split(".")[-1] for c in columns.split(",") if c.strip()]


def _fields_from_tagged(error) -> Optional[List[str]]:
    code = getattr(error, "code", None)
    meta = getattr(error, "meta", None)
    if code != "P2002" or meta is None:
        return None
    target = meta.get("target") if isinstance(meta, dict) else getattr(meta, "target", None)
    if isinstance(target, str):
        return _split_columns(target)
    return list(target or [])


def _fields_from_sqlite(error) -> Optional[List[str]]:
    error_name = getattr(error, "sqlite_errorname", None)
    match = _SQLITE_UNIQUE.search(str(error))
    if error_name not in (None, "SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY") or not match:
        return None
    return _split_columns(match.group("columns"))


def _fields_from_postgres(error) -> Optional[List[str]]:
    sqlstate = getattr(error, "pgcode", None) or getattr(error, "sqlstate", None)
    if sqlstate != "23505":
        return None
    diag = getattr(error, "diag", None)
    detail = getattr(diag, "message_detail", None) or str(error)
    match = _POSTGRES_KEY.search(detail)
    if match:
        return _split_columns(match.group("columns"))
    constraint = getattr(diag, "constraint_name", None)
    return [constraint] if constraint else []


def _fields_from_mysql(error) -> Optional[List[str]]:
    args = getattr(error, "args", ())
    if not args or args[0] != 1062:
        return None
    match = _MYSQL_KEY.search(str(error))
    return _split_columns(match.group("key")) if match else []


def unique_violation_fields(exc: BaseException) -> Optional[List[str]]:
    """
    例外が一意制約違反であれば違反したフィールド名のリストを返す。
    一意制約違反でなければ None を返す（フィールド名が特定できない場合は空リスト）。

    SQLAlchemy の例外は .orig にドライバの例外を持つので、両方を調べる。
    """
    candidates = [exc]
    orig = getattr(exc, "orig", None)
    if orig is not None:
        candidates.append(orig)

    for error in candidates:
        for inspect in (_fields_from_tagged, _fields_from_sqlite, _fields_from_postgres, _fields_from_mysql):
            fields = inspect(error)
            if fields is not None:
                return fields
    return None


def conflict_from(exc: BaseException) -> Optional[ConflictError]:
    """一意制約違反なら ConflictError を組み立てて返す。それ以外は None。"""
    fields = unique_violation_fields(exc)
    if fields is None:
        return None
    return ConflictError(fields)
