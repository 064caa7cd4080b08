import pytest

from todo_service.core.errors import TodoValidationError
from todo_service.services.validation import (
    is_numeric_string,
    validate_create_body,
    validate_update_body,
)


@pytest.mark.parametrize("value", ["123", " 42 ", "-1.5", ".5", "5.", "1e3", "+7", "Infinity", "-Infinity", "0x1F", "0b101", "0o17", "\ufeff12\u3000"])
def test_is_numeric_string_accepts_js_numbers(value: str) -> None:
    assert is_numeric_string(value)


@pytest.mark.parametrize("value", ["buy milk", "1_000", "nan", "inf", "12abc", "1e", ".", "+0x10", "1 2", "\u0661\u0662\u0663", "\uff11\uff12\uff13", "\x1c12"])
def test_is_numeric_string_rejects_text(value: str) -> None:
    assert not is_numeric_string(value)


def _create_error(body) -> str:
    with pytest.raises(TodoValidationError) as exc_info:
        validate_create_body(body)
    return str(exc_info.value)


def _update_error(body) -> str:
    with pytest.raises(TodoValidationError) as exc_info:
        validate_update_body(body)
    return str(exc_info.value)


def test_create_accepts_title_and_optional_status() -> None:
    assert validate_create_body({"title": "buy milk"}) == {"title": "buy milk"}
    assert validate_create_body({"title": "buy milk", "status": "done"}) == {"title": "buy milk", "status": "done"}


def test_create_unknown_key_checked_before_title() -> None:
    assert _create_error({"title": "ok", "priority": 1}) == "Invalid request body"
    assert _create_error({"id": "x"}) == "Invalid request body"


def test_create_title_rules_in_order() -> None:
    assert _create_error({}) == "Title is required"
    assert _create_error({"status": "done"}) == "Title is required"
    assert _create_error({"title": ""}) == "Title must be valid string type"
    assert _create_error({"title": "   "}) == "Title must be valid string type"
    assert _create_error({"title": 5}) == "Title must be valid string type"
    assert _create_error({"title": None}) == "Title must be valid string type"
    assert _create_error({"title": "123"}) == "Title must be valid string type"
    assert _create_error({"title": "x" * 101}) == "Title can't exceed 100 characters"


def test_create_title_at_limit_is_accepted() -> None:
    assert validate_create_body({"title": "x" * 100})["title"] == "x" * 100


def test_create_status_rules() -> None:
    assert _create_error({"title": "ok", "status": ""}) == "Status must be a valid string type"
    assert _create_error({"title": "ok", "status": False}) == "Status must be a valid string type"
    assert _create_error({"title": "ok", "status": "s" * 51}) == "Status can't exceed 50 characters"
    assert validate_create_body({"title": "ok", "status": "s" * 50})["status"] == "s" * 50


def test_create_title_error_wins_over_status_error() -> None:
    assert _create_error({"title": "", "status": ""}) == "Title must be valid string type"


@pytest.mark.parametrize("body", [[], ["title"], "title", 3, None])
def test_non_object_bodies_are_invalid(body) -> None:
    assert _create_error(body) == "Invalid request body"
    assert _update_error(body) == "Invalid request body"


def test_update_rejects_empty_body() -> None:
    assert _update_error({}) == "Invalid request body"


def test_update_partial_bodies() -> None:
    assert validate_update_body({"status": "done"}) == {"status": "done"}
    assert validate_update_body({"title": "renamed"}) == {"title": "renamed"}
    assert _update_error({"status": "done", "createdAt": "x"}) == "Invalid request body"
    assert _update_error({"title": "42"}) == "Title must be valid string type"
    assert _update_error({"status": " "}) == "Status must be a valid string type"


def test_non_ascii_digit_titles_are_text() -> None:
    assert validate_create_body({"title": "\u0661\u0662\u0663"})["title"] == "\u0661\u0662\u0663"
    assert validate_create_body({"title": "\uff11\uff12\uff13"})["title"] == "\uff11\uff12\uff13"


def test_blank_check_uses_js_whitespace() -> None:
    assert _create_error({"title": "\ufeff\u00a0"}) == "Title must be valid string type"
    assert _create_error({"title": "ok", "status": "\u2028"}) == "Status must be a valid string type"
    # control separators are not whitespace to trim()
    assert validate_create_body({"title": "\x1f"})["title"] == "\x1f"


def test_lengths_count_utf16_code_units() -> None:
    emoji = "\U0001F600"
    assert validate_create_body({"title": emoji * 50})["title"] == emoji * 50
    assert _create_error({"title": emoji * 50 + "a"}) == "Title can't exceed 100 characters"
    assert _create_error({"title": emoji * 60}) == "Title can't exceed 100 characters"
    assert validate_create_body({"title": "ok", "status": emoji * 25})["status"] == emoji * 25
    assert _create_error({"title": "ok", "status": emoji * 25 + "s"}) == "Status can't exceed 50 characters"
