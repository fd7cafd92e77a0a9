"""
utils/forms.py

- 폼 입력(문자열 key/value)을 정리(trim)하고 타입 변환한 뒤 검증하는 도우미
- 실패 시 어떤 필드가 문제인지 담은 ValidationError 를 던짐
"""

import math
import re
from typing import Any, Mapping, Optional

from services.errors import ValidationError

# 숫자 형식: 부호 + ASCII 숫자만 (밑줄 구분자, 유니코드 숫자, nan/inf 는 거부)
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def clean(value: Any) -> str:
    """None → "", 그 외는 문자열로 바꾸고 앞뒤 공백 제거"""
    if value is None:
        return ""
    return str(value).strip()


def form_value(form: Mapping[str, Any], *keys: str) -> str:
    """여러 후보 키 중 처음으로 값이 있는 것을 반환 (예: "subject" / "subjectId")"""
    for key in keys:
        value = clean(form.get(key))
        if value:
            return value
    return ""


def require_text(value: Any, field: str) -> str:
    text = clean(value)
    if not text:
        raise ValidationError(field, "is required")
    return text


def parse_positive_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(field, "must be a positive integer")
    if isinstance(value, int):
        number = value
    else:
        text = require_text(value, field)
        if not _INT_PATTERN.fullmatch(text):
            raise ValidationError(field, f"must be a positive integer, got {text!r}")
        number = int(text)
    if number <= 0:
        raise ValidationError(field, "must be a positive integer")
    return number


def parse_decimal(value: Any, field: str) -> float:
    """
    소수점으로 쉼표/점 모두 허용 ("7,5" == "7.5")
    - 빈 값, 숫자가 아닌 값, NaN/무한대는 거부
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        text = require_text(value, field).replace(",", ".", 1)
        if not _DECIMAL_PATTERN.fullmatch(text):
            raise ValidationError(field, f"is not a number: {clean(value)!r}")
        number = float(text)
    if not math.isfinite(number):
        raise ValidationError(field, "must be a finite number")
    return number


def parse_optional_int(value: Any, field: str, default: int) -> int:
    """값이 없으면 default, 있으면 정수로 변환 (범위 검사는 호출하는 쪽에서)"""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = clean(value)
    if not text:
        return default
    if not _INT_PATTERN.fullmatch(text):
        raise ValidationError(field, f"must be an integer, got {text!r}")
    return int(text)


def check_range(number: float, field: str, low: float, high: float, strict: bool) -> Optional[str]:
    """범위를 벗어나면 strict 일 때 예외, 아니면 경고 메시지 반환"""
    if low <= number <= high:
        return None
    message = f"{field}={number} is outside the expected range {low}-{high}"
    if strict:
        raise ValidationError(field, f"must be between {low} and {high}")
    return message
