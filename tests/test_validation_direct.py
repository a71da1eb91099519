"""
Direct validation tests, no app or database involved.
"""
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.app.utils.error_handlers import NotFoundError, StoreUnavailableError, ValidationError
from backend.app.utils.validation import MAX_TODO_ID, parse_todo_id, validate_string_field


@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), ("007", 7), (3, 3), ("2147483647", MAX_TODO_ID)])
def test_parse_todo_id_valid(raw, expected):
    assert parse_todo_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "", "1.5", "-1", "0", " 1", "1e3", "+2", "1\n",
    "2147483648", "9223372036854775808", "99999999999999999999",
    0, -5, MAX_TODO_ID + 1, True, None,
])
def test_parse_todo_id_rejects(raw):
    with pytest.raises(ValidationError) as exc_info:
        parse_todo_id(raw)
    assert exc_info.value.status_code == 400
    assert exc_info.value.kind == "validation_failure"


def test_validate_string_field():
    assert validate_string_field("buy milk", "title") == "buy milk"
    assert validate_string_field("", "title", min_length=0) == ""
    assert validate_string_field(None, "title", required=False) is None
    long_title = "x" * 10_000
    assert validate_string_field(long_title, "title", min_length=0, max_length=None) == long_title


def test_validate_string_field_rejects():
    with pytest.raises(ValidationError):
        validate_string_field(None, "title")
    with pytest.raises(ValidationError):
        validate_string_field(12, "title")
    with pytest.raises(ValidationError):
        validate_string_field("", "title")
    with pytest.raises(ValidationError):
        validate_string_field("x" * 256, "title")


def test_error_kinds_map_to_status_codes():
    assert (NotFoundError().status_code, NotFoundError.kind) == (400, "not_found")
    assert (ValidationError("bad").status_code, ValidationError.kind) == (400, "validation_failure")
    assert (StoreUnavailableError().status_code, StoreUnavailableError.kind) == (503, "store_unavailable")


def test_database_errors_translate_to_tagged_errors():
    from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

    from backend.app.utils.error_handlers import AppError, handle_database_error

    down = handle_database_error(OperationalError("SELECT 1", {}, Exception("down")), "listing")
    assert isinstance(down, StoreUnavailableError)

    bad = handle_database_error(IntegrityError("INSERT", {}, Exception("NOT NULL")), "creating")
    assert isinstance(bad, ValidationError)
    assert "NOT NULL" not in bad.message

    other = handle_database_error(SQLAlchemyError("boom"), "deleting")
    assert type(other) is AppError
    assert other.status_code == 500
