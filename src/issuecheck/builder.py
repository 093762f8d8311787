from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from issuecheck.errors import InvalidArgumentError
from issuecheck.issue import Issue
from issuecheck.paths import FilePath

if TYPE_CHECKING:
    from issuecheck.file_linking import FileLinkSettings


def _require(value: Any, param_name: str) -> None:
    if value is None:
        raise InvalidArgumentError(param_name)


class IssueBuilder:
    """Fluent construction of an :class:`Issue`.

    Every ``with_*`` / ``in_*`` call returns the builder itself; ``create``
    produces the immutable record.
    """

    def __init__(self, identifier: str, message_text: str, provider_type: str, provider_name: str) -> None:
        _require(identifier, "identifier")
        _require(message_text, "message_text")
        _require(provider_type, "provider_type")
        _require(provider_name, "provider_name")
        self._values: dict[str, Any] = {
            "identifier": identifier,
            "message_text": message_text,
            "provider_type": provider_type,
            "provider_name": provider_name,
        }
        self._file_link_settings: FileLinkSettings | None = None

    @classmethod
    def new_issue(cls, identifier: str, message_text: str, provider_type: str, provider_name: str) -> IssueBuilder:
        return cls(identifier, message_text, provider_type, provider_name)

    def for_run(self, run: str) -> IssueBuilder:
        self._values["run"] = run
        return self

    def in_project(self, project_file_path: str | None, project_name: str | None) -> IssueBuilder:
        self.in_project_file(project_file_path)
        return self.in_project_of_name(project_name)

    def in_project_file(self, project_file_path: str | None) -> IssueBuilder:
        self._values["project_file_relative_path"] = (
            FilePath(project_file_path) if project_file_path is not None else None
        )
        return self

    def in_project_of_name(self, project_name: str | None) -> IssueBuilder:
        self._values["project_name"] = project_name
        return self

    def in_file(
        self,
        file_path: str | None,
        line: int | None = None,
        end_line: int | None = None,
        column: int | None = None,
        end_column: int | None = None,
    ) -> IssueBuilder:
        self._values["affected_file_relative_path"] = FilePath(file_path) if file_path is not None else None
        self._values["line"] = line
        self._values["end_line"] = end_line
        self._values["column"] = column
        self._values["end_column"] = end_column
        return self

    def with_file_link(self, file_link: str | None) -> IssueBuilder:
        self._values["file_link"] = file_link
        self._file_link_settings = None
        return self

    def with_file_link_settings(self, settings: FileLinkSettings) -> IssueBuilder:
        _require(settings, "settings")
        self._file_link_settings = settings
        return self

    def with_message_in_html_format(self, message_html: str | None) -> IssueBuilder:
        self._values["message_html"] = message_html
        return self

    def with_message_in_markdown_format(self, message_markdown: str | None) -> IssueBuilder:
        self._values["message_markdown"] = message_markdown
        return self

    def with_priority(self, priority: int | None, priority_name: str | None = None) -> IssueBuilder:
        self._values["priority"] = priority
        self._values["priority_name"] = priority_name
        return self

    def of_rule(self, rule: str | None, rule_url: str | None = None) -> IssueBuilder:
        self._values["rule"] = rule
        self._values["rule_url"] = rule_url
        return self

    def create(self) -> Issue:
        issue = Issue(**self._values)
        if self._file_link_settings is not None:
            issue = dataclasses.replace(issue, file_link=self._file_link_settings.get_file_link(issue))
        return issue


__all__ = ["IssueBuilder"]
