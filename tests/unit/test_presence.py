from __future__ import annotations

import dataclasses

import pytest

from issuecheck.issue import Issue
from issuecheck.presence import ABSENCE_BY_KIND, ISSUE_FIELD_NAMES, ISSUE_FIELDS, field_by_name


def test_field_table_follows_issue_declaration_order() -> None:
    assert ISSUE_FIELD_NAMES == tuple(item.name for item in dataclasses.fields(Issue))
    assert len(ISSUE_FIELDS) == 19


def test_comparison_order_is_stable() -> None:
    assert [item.label for item in ISSUE_FIELDS] == [
        "ProviderType",
        "ProviderName",
        "Run",
        "Identifier",
        "ProjectFileRelativePath",
        "ProjectName",
        "AffectedFileRelativePath",
        "Line",
        "EndLine",
        "Column",
        "EndColumn",
        "FileLink",
        "MessageText",
        "MessageHtml",
        "MessageMarkdown",
        "Priority",
        "PriorityName",
        "Rule",
        "RuleUrl",
    ]


def test_every_kind_has_an_absence_rule() -> None:
    assert {item.kind for item in ISSUE_FIELDS} == set(ABSENCE_BY_KIND)


def test_field_by_name() -> None:
    assert field_by_name("rule_url").kind == "uri"
    assert field_by_name("affected_file_relative_path").label == "AffectedFileRelativePath"
    with pytest.raises(KeyError):
        field_by_name("severity")
