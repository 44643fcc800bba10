from __future__ import annotations

from ..core.exceptions import InvalidStudentDataError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidStudentDataError(field_name)
    return value.strip()


def require_positive_int(value: int, field_name: str) -> int:
    # bool is an int subclass; True must not pass as id 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidStudentDataError(field_name)
    return value
