import pytest

from models.users import Role
from services.errors import ValidationError
from utils.display import get_initials, role_label
from utils.forms import (
    check_range, form_value, parse_decimal, parse_optional_int, parse_positive_int, require_text,
)


def test_require_text_trims():
    assert require_text("  6º Ano A ", "name") == "6º Ano A"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_text_rejects_empty(value):
    with pytest.raises(ValidationError) as exc_info:
        require_text(value, "name")
    assert exc_info.value.field == "name"


@pytest.mark.parametrize("raw", ["7,5", "7.5", " 7.5 ", 7.5])
def test_parse_decimal_accepts_comma_and_dot(raw):
    assert parse_decimal(raw, "value") == 7.5


@pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "7,5,1", "7_5", "1_0", "1e999", "٧"])
def test_parse_decimal_rejects_non_numbers(raw):
    with pytest.raises(ValidationError) as exc_info:
        parse_decimal(raw, "value")
    assert exc_info.value.field == "value"


def test_parse_positive_int():
    assert parse_positive_int(" 2025 ", "year") == 2025
    assert parse_positive_int(2024, "year") == 2024


@pytest.mark.parametrize("raw", ["", "0", "-3", "20.5", "abc", "2_025", "٢٠٢٥", True])
def test_parse_positive_int_rejects(raw):
    with pytest.raises(ValidationError):
        parse_positive_int(raw, "year")


def test_parse_optional_int_defaults_when_missing():
    assert parse_optional_int(None, "term", 1) == 1
    assert parse_optional_int("", "term", 1) == 1
    assert parse_optional_int("3", "term", 1) == 3
    with pytest.raises(ValidationError):
        parse_optional_int("two", "term", 1)
    with pytest.raises(ValidationError):
        parse_optional_int("1_0", "term", 1)


def test_check_range_warns_or_raises():
    assert check_range(3, "term", 1, 4, strict=True) is None
    assert "outside" in check_range(9, "term", 1, 4, strict=False)
    with pytest.raises(ValidationError):
        check_range(9, "term", 1, 4, strict=True)


def test_form_value_prefers_first_non_empty_key():
    form = {"subjectId": "  ", "subject": " math-id "}
    assert form_value(form, "subjectId", "subject") == "math-id"
    assert form_value({}, "subjectId") == ""


@pytest.mark.parametrize(
    "name, email, expected",
    [
        ("Professora Ana", None, "PA"),
        ("Admin", None, "AD"),
        ("João da Silva", None, "JS"),
        (None, "pai@schoolflow.dev", "PA"),
        ("   ", "ze@schoolflow.dev", "ZE"),
        (None, None, "?"),
    ],
)
def test_get_initials(name, email, expected):
    assert get_initials(name, email) == expected


def test_role_label():
    assert role_label(Role.ADMIN) == "Administrador"
    assert role_label(Role.TEACHER) == "Professor(a)"
    assert role_label(Role.PARENT) == "Responsável"


@pytest.mark.parametrize("raw, expected", [("10", 10.0), ("-0,5", -0.5), (".5", 0.5), ("7.", 7.0), ("1e1", 10.0)])
def test_parse_decimal_accepts_plain_number_forms(raw, expected):
    assert parse_decimal(raw, "value") == expected
