import sqlite3
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import UNKNOWN_FIELD, ConflictError, conflict_from, unique_violation_fields
from app.services.persistence import save
from app.utils.logger import setup_logger


def test_tagged_shape_is_recognised_without_class_identity():
    error = SimpleNamespace(code="P2002", meta={"target": ["code"]})
    assert unique_violation_fields(error) == ["code"]


def test_tagged_shape_with_other_code_is_not_a_conflict():
    error = SimpleNamespace(code="P2000", meta={"target": ["code"]})
    assert unique_violation_fields(error) is None


def test_sqlite_unique_violation_wrapped_by_sqlalchemy():
    orig = sqlite3.IntegrityError("UNIQUE constraint failed: prefectures.code")
    error = IntegrityError("INSERT INTO prefectures ...", {}, orig)
    assert unique_violation_fields(error) == ["code"]


def test_sqlite_composite_unique_violation():
    orig = sqlite3.IntegrityError("UNIQUE constraint failed: stores.code, stores.name")
    assert unique_violation_fields(orig) == ["code", "name"]


def test_sqlite_not_null_violation_is_not_a_conflict():
    orig = sqlite3.IntegrityError("NOT NULL constraint failed: stores.name")
    error = IntegrityError("INSERT INTO stores ...", {}, orig)
    assert unique_violation_fields(error) is None


def test_postgres_unique_violation():
    orig = SimpleNamespace(
        pgcode="23505",
        diag=SimpleNamespace(message_detail="Key (code)=(13) already exists.", constraint_name="prefectures_code_key"),
    )
    error = SimpleNamespace(orig=orig)
    assert unique_violation_fields(error) == ["code"]


def test_mysql_unique_violation():
    orig = Exception(1062, "Duplicate entry '13' for key 'prefectures.code'")
    assert unique_violation_fields(orig) == ["code"]


def test_conflict_error_message_names_the_fields():
    conflict = conflict_from(SimpleNamespace(code="P2002", meta={"target": ["email"]}))
    assert isinstance(conflict, ConflictError)
    assert conflict.fields == ["email"]
    assert conflict.message == "指定された email は既に存在します。"


def test_conflict_error_without_fields_uses_placeholder():
    assert ConflictError([]).fields == [UNKNOWN_FIELD]


def test_conflict_from_unrelated_error_is_none():
    assert conflict_from(RuntimeError("boom")) is None


def test_save_reraises_unrelated_storage_errors_unchanged():
    db = MagicMock()
    failure = OperationalError("INSERT ...", {}, sqlite3.OperationalError("database is locked"))
    db.commit.side_effect = failure

    with pytest.raises(OperationalError) as excinfo:
        save(db, object(), setup_logger("tests.persistence"))

    assert excinfo.value is failure
    db.rollback.assert_called_once()
    db.refresh.assert_not_called()


def test_save_translates_unique_violation():
    db = MagicMock()
    db.commit.side_effect = IntegrityError(
        "INSERT ...", {}, sqlite3.IntegrityError("UNIQUE constraint failed: regions.code")
    )

    with pytest.raises(ConflictError) as excinfo:
        save(db, object(), setup_logger("tests.persistence"))

    assert excinfo.value.fields == ["code"]
    db.rollback.assert_called_once()
