"""Field-by-field assertions for issues reported by static-analysis providers."""
from __future__ import annotations

from issuecheck.builder import IssueBuilder
from issuecheck.checker import check_issue, check_issue_fields
from issuecheck.errors import InvalidArgumentError, IssueDocumentError, IssueMismatchError
from issuecheck.file_linking import (
    AzureDevOpsFileLinkSettingsBuilder,
    FileLinkOptionalSettingsBuilder,
    FileLinkSettings,
    GitHubFileLinkSettingsBuilder,
)
from issuecheck.fixtures import dump_issue, load_issue
from issuecheck.issue import Issue
from issuecheck.paths import FilePath, is_relative, normalize_path

__version__ = "0.1.0"

__all__ = [
    "AzureDevOpsFileLinkSettingsBuilder",
    "FileLinkOptionalSettingsBuilder",
    "FileLinkSettings",
    "FilePath",
    "GitHubFileLinkSettingsBuilder",
    "InvalidArgumentError",
    "Issue",
    "IssueBuilder",
    "IssueDocumentError",
    "IssueMismatchError",
    "__version__",
    "check_issue",
    "check_issue_fields",
    "dump_issue",
    "is_relative",
    "load_issue",
    "normalize_path",
]
