"""Field-by-field assertion that an issue matches what a test expects.

``check_issue_fields`` is the single comparison. It walks ``ISSUE_FIELDS`` in
declared order and raises :class:`IssueMismatchError` for the first field that
disagrees; later fields are not looked at. ``check_issue`` only unpacks an
expected :class:`Issue` (or :class:`IssueBuilder`) and forwards.

Per field kind:

* text fields compare with ``==``; ``None`` only equals ``None`` and an empty
  string is not treated as absent,
* path fields: an issue without a path expects ``None``; an issue with a path
  expects text whose canonical form is identical, and the path must be
  relative,
* optional integers compare by value, ``None`` meaning absent,
* URIs compare by their ``str()`` text, so ``HTTPS://x`` and ``https://x/``
  are different values.
"""

from __future__ import annotations

import logging
from typing import Any

from issuecheck.builder import IssueBuilder
from issuecheck.errors import InvalidArgumentError
from issuecheck.issue import Issue
from issuecheck.paths import FilePath
from issuecheck.presence import ISSUE_FIELDS, IssueField
from issuecheck.reporter import report_mismatch, report_not_relative

logger = logging.getLogger(__name__)


def _uri_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _same_int(expected: int | None, actual: int | None) -> bool:
    if expected is None or actual is None:
        return expected is None and actual is None
    # True == 1 in Python; a boolean is never a line number or priority.
    if isinstance(expected, bool) != isinstance(actual, bool):
        return False
    return expected == actual


def _check_path(field: IssueField, expected: str | None, actual: FilePath | None) -> None:
    if actual is None:
        if expected is not None:
            report_mismatch(field, expected, None)
        return

    if expected is None or FilePath(expected).full_path != actual.full_path:
        report_mismatch(field, expected, actual)

    if not actual.is_relative:
        report_not_relative(field, actual)


def _check_field(field: IssueField, expected: Any, actual: Any) -> None:
    if field.kind == "path":
        _check_path(field, expected, actual)
    elif field.kind == "optional_int":
        if not _same_int(expected, actual):
            report_mismatch(field, expected, actual)
    elif field.kind == "uri":
        if _uri_text(expected) != _uri_text(actual):
            report_mismatch(field, _uri_text(expected), _uri_text(actual))
    elif expected != actual:
        report_mismatch(field, expected, actual)


def check_issue_fields(
    issue: Issue,
    *,
    provider_type: str | None,
    provider_name: str | None,
    run: str | None,
    identifier: str | None,
    project_file_relative_path: str | None,
    project_name: str | None,
    affected_file_relative_path: str | None,
    line: int | None,
    end_line: int | None,
    column: int | None,
    end_column: int | None,
    file_link: Any | None,
    message_text: str | None,
    message_html: str | None,
    message_markdown: str | None,
    priority: int | None,
    priority_name: str | None,
    rule: str | None,
    rule_url: Any | None,
) -> None:
    """Assert that ``issue`` carries exactly the given values.

    Path arguments are raw text and are normalized before comparison. ``None``
    means "not expected" for every optional field.

    Raises:
        InvalidArgumentError: ``issue`` is ``None``.
        IssueMismatchError: for the first field that disagrees.
    """
    if issue is None:
        raise InvalidArgumentError("issue")

    expected_values = {
        "provider_type": provider_type,
        "provider_name": provider_name,
        "run": run,
        "identifier": identifier,
        "project_file_relative_path": project_file_relative_path,
        "project_name": project_name,
        "affected_file_relative_path": affected_file_relative_path,
        "line": line,
        "end_line": end_line,
        "column": column,
        "end_column": end_column,
        "file_link": file_link,
        "message_text": message_text,
        "message_html": message_html,
        "message_markdown": message_markdown,
        "priority": priority,
        "priority_name": priority_name,
        "rule": rule,
        "rule_url": rule_url,
    }

    for field in ISSUE_FIELDS:
        _check_field(field, expected_values[field.name], getattr(issue, field.name))

    logger.debug("Issue %s from %s matches expected values", issue.identifier, issue.provider_type)


def check_issue(issue: Issue, expected: Issue | IssueBuilder) -> None:
    """Assert that ``issue`` matches ``expected`` field by field."""
    if issue is None:
        raise InvalidArgumentError("issue")
    if expected is None:
        raise InvalidArgumentError("expected")

    if isinstance(expected, IssueBuilder):
        expected = expected.create()

    check_issue_fields(issue, **expected.expected_values())


__all__ = [
    "check_issue",
    "check_issue_fields",
]
