"""Settings that turn an issue's affected file into a link to a hosted repository.

A link builder is a callable ``(issue, values) -> str | None``; ``values``
carries the settings collected by the fluent builders (repository URL, ref,
optional root path). Links are only built for issues that have an affected
file.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import quote

from issuecheck.errors import InvalidArgumentError
from issuecheck.issue import Issue
from issuecheck.paths import FilePath

FileLinkBuilder = Callable[[Issue, dict[str, str]], str | None]

_INVALID_PATH_CHARS_RE = re.compile(r'[\x00-\x1f<>"|?*]')


@dataclass(slots=True, frozen=True)
class FileLinkSettings:
    builder: FileLinkBuilder
    values: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.builder is None:
            raise InvalidArgumentError("builder")

    def get_file_link(self, issue: Issue) -> str | None:
        if issue is None:
            raise InvalidArgumentError("issue")
        if issue.affected_file_relative_path is None:
            return None
        return self.builder(issue, dict(self.values))


class FileLinkOptionalSettingsBuilder:
    def __init__(self, builder: FileLinkBuilder, values: dict[str, str] | None = None) -> None:
        if builder is None:
            raise InvalidArgumentError("builder")
        self._builder = builder
        self._values = dict(values or {})

    def with_root_path(self, root_path: str | None) -> FileLinkOptionalSettingsBuilder:
        """Prefix every linked file with ``root_path``; ``None`` keeps the repository root."""
        if root_path is None:
            return self
        if not root_path.strip():
            raise InvalidArgumentError("root_path", "Argument 'root_path' must not be empty or whitespace.")
        if _INVALID_PATH_CHARS_RE.search(root_path):
            raise InvalidArgumentError("root_path", f"Argument 'root_path' contains invalid characters: {root_path!r}")

        self._values["root_path"] = FilePath(root_path).full_path.strip("/")
        return self

    def settings(self) -> FileLinkSettings:
        return FileLinkSettings(builder=self._builder, values=dict(self._values))


def _require_text(value: str | None, param_name: str) -> str:
    if value is None:
        raise InvalidArgumentError(param_name)
    if not value.strip():
        raise InvalidArgumentError(param_name, f"Argument '{param_name}' must not be empty or whitespace.")
    return value.strip()


def _linked_path(issue: Issue, values: dict[str, str]) -> str:
    segments: list[str] = []
    root_path = values.get("root_path")
    if root_path:
        segments.append(root_path)
    if issue.affected_file_relative_path is not None:
        segments.extend(issue.affected_file_relative_path.segments)
    return quote("/".join(segments), safe="/")


def github_file_link(issue: Issue, values: dict[str, str]) -> str | None:
    link = f"{values['repository_url'].rstrip('/')}/blob/{values['ref']}/{_linked_path(issue, values)}"
    if issue.line is not None:
        link += f"#L{issue.line}"
        if issue.end_line is not None:
            link += f"-L{issue.end_line}"
    return link


def azure_devops_file_link(issue: Issue, values: dict[str, str]) -> str | None:
    version_prefix = "GC" if values.get("ref_kind") == "commit" else "GB"
    link = (
        f"{values['repository_url'].rstrip('/')}"
        f"?path=/{_linked_path(issue, values)}&version={version_prefix}{values['ref']}"
    )
    if issue.line is not None:
        end_line = issue.end_line if issue.end_line is not None else issue.line
        start_column = issue.column if issue.column is not None else 1
        end_column = issue.end_column if issue.end_column is not None else start_column
        link += (
            f"&line={issue.line}&lineEnd={end_line}"
            f"&lineStartColumn={start_column}&lineEndColumn={end_column}"
            "&lineStyle=plain&_a=contents"
        )
    return link


class _RepositoryFileLinkSettingsBuilder:
    _link_builder: FileLinkBuilder

    def __init__(self, repository_url: str) -> None:
        self._repository_url = _require_text(repository_url, "repository_url")

    def _optional_settings(self, ref: str, ref_kind: str) -> FileLinkOptionalSettingsBuilder:
        return FileLinkOptionalSettingsBuilder(
            self._link_builder,
            {"repository_url": self._repository_url, "ref": ref, "ref_kind": ref_kind},
        )

    def branch(self, branch: str) -> FileLinkOptionalSettingsBuilder:
        return self._optional_settings(_require_text(branch, "branch"), "branch")

    def commit(self, commit_id: str) -> FileLinkOptionalSettingsBuilder:
        return self._optional_settings(_require_text(commit_id, "commit_id"), "commit")


class GitHubFileLinkSettingsBuilder(_RepositoryFileLinkSettingsBuilder):
    _link_builder = staticmethod(github_file_link)


class AzureDevOpsFileLinkSettingsBuilder(_RepositoryFileLinkSettingsBuilder):
    _link_builder = staticmethod(azure_devops_file_link)


__all__ = [
    "AzureDevOpsFileLinkSettingsBuilder",
    "FileLinkBuilder",
    "FileLinkOptionalSettingsBuilder",
    "FileLinkSettings",
    "GitHubFileLinkSettingsBuilder",
    "azure_devops_file_link",
    "github_file_link",
]
