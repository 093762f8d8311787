"""Issue schema as seen by the checker: field order, labels and absence rules.

``ISSUE_FIELDS`` lists the issue fields in their declared order. That order is
the comparison order, so it decides which field is reported when several
fields disagree, and it must match the attribute order of
:class:`issuecheck.issue.Issue`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FieldKind = Literal[
    "text",
    "optional_text",
    "path",
    "optional_int",
    "uri",
]


@dataclass(slots=True, frozen=True)
class IssueField:
    name: str
    label: str
    kind: FieldKind


ISSUE_FIELDS: tuple[IssueField, ...] = (
    IssueField("provider_type", "ProviderType", "text"),
    IssueField("provider_name", "ProviderName", "text"),
    IssueField("run", "Run", "text"),
    IssueField("identifier", "Identifier", "text"),
    IssueField("project_file_relative_path", "ProjectFileRelativePath", "path"),
    IssueField("project_name", "ProjectName", "optional_text"),
    IssueField("affected_file_relative_path", "AffectedFileRelativePath", "path"),
    IssueField("line", "Line", "optional_int"),
    IssueField("end_line", "EndLine", "optional_int"),
    IssueField("column", "Column", "optional_int"),
    IssueField("end_column", "EndColumn", "optional_int"),
    IssueField("file_link", "FileLink", "uri"),
    IssueField("message_text", "MessageText", "text"),
    IssueField("message_html", "MessageHtml", "text"),
    IssueField("message_markdown", "MessageMarkdown", "text"),
    IssueField("priority", "Priority", "optional_int"),
    IssueField("priority_name", "PriorityName", "optional_text"),
    IssueField("rule", "Rule", "optional_text"),
    IssueField("rule_url", "RuleUrl", "uri"),
)

ISSUE_FIELD_NAMES: tuple[str, ...] = tuple(item.name for item in ISSUE_FIELDS)

ABSENCE_BY_KIND: dict[FieldKind, str] = {
    "text": "None is an ordinary value and compares literally",
    "optional_text": "None; an empty string is a different value",
    "path": "None text on the expected side, no FilePath on the actual side",
    "optional_int": "None, never a sentinel number",
    "uri": "None; str() is applied to present values only",
}

_FIELDS_BY_NAME = {item.name: item for item in ISSUE_FIELDS}


def field_by_name(name: str) -> IssueField:
    return _FIELDS_BY_NAME[name]


__all__ = [
    "ABSENCE_BY_KIND",
    "ISSUE_FIELDS",
    "ISSUE_FIELD_NAMES",
    "FieldKind",
    "IssueField",
    "field_by_name",
]
