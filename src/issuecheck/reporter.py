from __future__ import annotations

from typing import Any, NoReturn

from issuecheck.constants import (
    ABSENT_VALUE_TEXT,
    ERROR_CODE_FIELD_MISMATCH,
    ERROR_CODE_PATH_NOT_RELATIVE,
)
from issuecheck.errors import IssueMismatchError
from issuecheck.presence import IssueField


def render_value(value: Any) -> str:
    if value is None:
        return ABSENT_VALUE_TEXT
    return str(value)


def report_mismatch(field: IssueField, expected: Any, actual: Any) -> NoReturn:
    expected_text = render_value(expected)
    actual_text = render_value(actual)
    raise IssueMismatchError(
        code=ERROR_CODE_FIELD_MISMATCH,
        field=field.label,
        message=f"Expected issue.{field.label} to be '{expected_text}' but was '{actual_text}'.",
        expected=expected_text,
        actual=actual_text,
    )


def report_not_relative(field: IssueField, actual: Any) -> NoReturn:
    raise IssueMismatchError(
        code=ERROR_CODE_PATH_NOT_RELATIVE,
        field=field.label,
        message=f"Expected issue.{field.label} to be a relative path",
        actual=render_value(actual),
    )


__all__ = [
    "render_value",
    "report_mismatch",
    "report_not_relative",
]
