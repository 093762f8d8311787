from __future__ import annotations

import pytest

from issuecheck.builder import IssueBuilder
from issuecheck.errors import InvalidArgumentError
from issuecheck.file_linking import (
    AzureDevOpsFileLinkSettingsBuilder,
    FileLinkOptionalSettingsBuilder,
    FileLinkSettings,
    GitHubFileLinkSettingsBuilder,
)
from issuecheck.issue import Issue


def _issue(file_path: str | None = "src/Foo.cs", **location: int) -> Issue:
    return IssueBuilder("Id", "Message", "ProviderType", "ProviderName").in_file(file_path, **location).create()


class TestFileLinkOptionalSettingsBuilderCtor:
    def test_rejects_none_builder(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            FileLinkOptionalSettingsBuilder(None)  # type: ignore[arg-type]
        assert exc_info.value.param_name == "builder"


class TestWithRootPath:
    def test_accepts_none_root_path(self) -> None:
        result = (
            AzureDevOpsFileLinkSettingsBuilder("https://github.com")
            .branch("master")
            .with_root_path(None)
        )
        assert result is not None

    @pytest.mark.parametrize("root_path", ["", " "])
    def test_rejects_empty_or_whitespace_root_path(self, root_path: str) -> None:
        builder = AzureDevOpsFileLinkSettingsBuilder("https://github.com").branch("master")
        with pytest.raises(InvalidArgumentError, match="empty or whitespace") as exc_info:
            builder.with_root_path(root_path)
        assert exc_info.value.param_name == "root_path"

    @pytest.mark.parametrize("root_path", ["foo\tbar", "foo|bar", "foo?"])
    def test_rejects_invalid_root_path(self, root_path: str) -> None:
        builder = AzureDevOpsFileLinkSettingsBuilder("https://github.com").branch("master")
        with pytest.raises(InvalidArgumentError, match="invalid characters") as exc_info:
            builder.with_root_path(root_path)
        assert exc_info.value.param_name == "root_path"

    def test_root_path_prefixes_linked_file(self) -> None:
        settings = (
            GitHubFileLinkSettingsBuilder("https://github.com/org/repo/")
            .branch("develop")
            .with_root_path("\\mono\\service\\")
            .settings()
        )
        assert settings.get_file_link(_issue()) == "https://github.com/org/repo/blob/develop/mono/service/src/Foo.cs"


class TestGitHubLinks:
    def test_line_range_anchor(self) -> None:
        settings = GitHubFileLinkSettingsBuilder("https://github.com/org/repo").commit("abc123").settings()
        assert (
            settings.get_file_link(_issue(line=10, end_line=12))
            == "https://github.com/org/repo/blob/abc123/src/Foo.cs#L10-L12"
        )

    def test_path_is_quoted(self) -> None:
        settings = GitHubFileLinkSettingsBuilder("https://github.com/org/repo").branch("main").settings()
        assert settings.get_file_link(_issue("src/My File.cs")) == "https://github.com/org/repo/blob/main/src/My%20File.cs"

    def test_no_link_without_affected_file(self) -> None:
        settings = GitHubFileLinkSettingsBuilder("https://github.com/org/repo").branch("main").settings()
        assert settings.get_file_link(_issue(None)) is None

    @pytest.mark.parametrize("repository_url", [None, "", "  "])
    def test_rejects_missing_repository_url(self, repository_url: str | None) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            GitHubFileLinkSettingsBuilder(repository_url)  # type: ignore[arg-type]
        assert exc_info.value.param_name == "repository_url"

    def test_rejects_empty_branch(self) -> None:
        with pytest.raises(InvalidArgumentError, match="'branch'"):
            GitHubFileLinkSettingsBuilder("https://github.com/org/repo").branch("")


class TestAzureDevOpsLinks:
    def test_branch_link_without_line(self) -> None:
        settings = AzureDevOpsFileLinkSettingsBuilder("https://dev.azure.com/org/_git/repo").branch("main").settings()
        assert settings.get_file_link(_issue()) == "https://dev.azure.com/org/_git/repo?path=/src/Foo.cs&version=GBmain"

    def test_commit_link_with_location(self) -> None:
        settings = (
            AzureDevOpsFileLinkSettingsBuilder("https://dev.azure.com/org/_git/repo")
            .commit("abc123")
            .with_root_path("mono")
            .settings()
        )
        assert settings.get_file_link(_issue(line=5, column=3)) == (
            "https://dev.azure.com/org/_git/repo?path=/mono/src/Foo.cs&version=GCabc123"
            "&line=5&lineEnd=5&lineStartColumn=3&lineEndColumn=3&lineStyle=plain&_a=contents"
        )


class TestFileLinkSettings:
    def test_rejects_none_builder(self) -> None:
        with pytest.raises(InvalidArgumentError, match="'builder'"):
            FileLinkSettings(None)  # type: ignore[arg-type]

    def test_custom_builder_receives_values(self) -> None:
        seen: list[dict[str, str]] = []

        def _builder(issue: Issue, values: dict[str, str]) -> str:
            seen.append(values)
            return f"https://example.com/{issue.affected_file_relative_path}?repo={values['repo']}"

        settings = FileLinkSettings(_builder, {"repo": "demo"})
        assert settings.get_file_link(_issue()) == "https://example.com/src/Foo.cs?repo=demo"
        assert seen == [{"repo": "demo"}]

    def test_rejects_none_issue(self) -> None:
        settings = GitHubFileLinkSettingsBuilder("https://github.com/org/repo").branch("main").settings()
        with pytest.raises(InvalidArgumentError, match="'issue'"):
            settings.get_file_link(None)  # type: ignore[arg-type]
