from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from issuecheck.errors import IssueDocumentError
from issuecheck.paths import FilePath
from issuecheck.presence import ISSUE_FIELDS, ISSUE_FIELD_NAMES

REQUIRED_ISSUE_KEYS = ("provider_type", "provider_name", "identifier", "message_text")


@dataclass(slots=True, frozen=True, kw_only=True)
class Issue:
    """One finding reported by a static-analysis or build-log provider.

    Attribute order mirrors ``issuecheck.presence.ISSUE_FIELDS``.
    """

    provider_type: str
    provider_name: str
    run: str | None = None
    identifier: str
    project_file_relative_path: FilePath | None = None
    project_name: str | None = None
    affected_file_relative_path: FilePath | None = None
    line: int | None = None
    end_line: int | None = None
    column: int | None = None
    end_column: int | None = None
    file_link: str | None = None
    message_text: str
    message_html: str | None = None
    message_markdown: str | None = None
    priority: int | None = None
    priority_name: str | None = None
    rule: str | None = None
    rule_url: str | None = None

    def __post_init__(self) -> None:
        # Paths given as text or os.PathLike are stored in canonical form.
        for item in ISSUE_FIELDS:
            if item.kind != "path":
                continue
            value = getattr(self, item.name)
            if value is not None and not isinstance(value, FilePath):
                object.__setattr__(self, item.name, FilePath(value))

    def expected_values(self) -> dict[str, Any]:
        """Field values as keyword arguments for ``check_issue_fields``.

        Paths are handed over as text, the way a test author would write them.
        """
        values: dict[str, Any] = {}
        for item in ISSUE_FIELDS:
            value = getattr(self, item.name)
            if item.kind == "path" and value is not None:
                value = str(value)
            values[item.name] = value
        return values

    def to_dict(self) -> dict[str, Any]:
        return self.expected_values()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Issue:
        unknown = sorted(set(data) - set(ISSUE_FIELD_NAMES))
        if unknown:
            raise IssueDocumentError(f"Unknown issue field(s): {', '.join(unknown)}")

        missing = [key for key in REQUIRED_ISSUE_KEYS if key not in data]
        if missing:
            raise IssueDocumentError(f"Issue requires field(s): {', '.join(missing)}")

        kwargs: dict[str, Any] = {}
        for item in ISSUE_FIELDS:
            if item.name not in data:
                continue
            value = data[item.name]
            if value is None:
                kwargs[item.name] = None
                continue
            if item.kind == "optional_int":
                if isinstance(value, bool) or not isinstance(value, int):
                    raise IssueDocumentError(f"Issue field `{item.name}` must be an integer, got: {value!r}")
                kwargs[item.name] = value
            elif item.kind == "path":
                if not isinstance(value, str):
                    raise IssueDocumentError(f"Issue field `{item.name}` must be a path string, got: {value!r}")
                kwargs[item.name] = FilePath(value)
            else:
                if not isinstance(value, str):
                    raise IssueDocumentError(f"Issue field `{item.name}` must be a string, got: {value!r}")
                kwargs[item.name] = value
        return cls(**kwargs)


__all__ = [
    "REQUIRED_ISSUE_KEYS",
    "Issue",
]
