from __future__ import annotations

from typing import Any

from issuecheck.constants import ERROR_CODE_FIELD_MISMATCH, ERROR_CODE_PATH_NOT_RELATIVE


class InvalidArgumentError(ValueError):
    """A caller passed an argument the API cannot accept (usually ``None``)."""

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        super().__init__(message or f"Argument '{param_name}' must not be None.")


class IssueDocumentError(ValueError):
    pass


class IssueMismatchError(AssertionError):
    """First field of an issue that disagrees with the expected value.

    ``expected`` and ``actual`` hold the values already rendered as text, so the
    error can be reported without access to the compared objects.
    """

    def __init__(
        self,
        *,
        code: str,
        field: str,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.field = field
        self.message = message
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "field": self.field,
            "message": self.message,
        }
        if self.expected is not None:
            payload["expected"] = self.expected
        if self.actual is not None:
            payload["actual"] = self.actual
        return payload


VALID_ERROR_CODES = {
    ERROR_CODE_FIELD_MISMATCH,
    ERROR_CODE_PATH_NOT_RELATIVE,
}


__all__ = [
    "VALID_ERROR_CODES",
    "InvalidArgumentError",
    "IssueDocumentError",
    "IssueMismatchError",
]
