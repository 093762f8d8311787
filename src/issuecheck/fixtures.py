from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from issuecheck.constants import JSON_SUFFIXES, YAML_SUFFIXES
from issuecheck.errors import IssueDocumentError
from issuecheck.issue import Issue

logger = logging.getLogger(__name__)


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise IssueDocumentError(f"Invalid YAML in issue document {path}: {exc}") from exc
    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise IssueDocumentError(f"Invalid JSON in issue document {path}: {exc}") from exc
    raise IssueDocumentError(f"Unsupported issue document format '{suffix}': {path}")


def load_issue(path: Path | str) -> Issue:
    """Read one issue from a ``.yaml``/``.yml`` or ``.json`` document."""
    document_path = Path(path)
    loaded = _read_document(document_path)
    if loaded is None:
        raise IssueDocumentError(f"Issue document is empty: {document_path}")
    if not isinstance(loaded, dict):
        raise IssueDocumentError(f"Issue document must be a mapping: {document_path}")

    try:
        issue = Issue.from_dict(loaded)
    except IssueDocumentError as exc:
        raise IssueDocumentError(f"{document_path}: {exc}") from exc

    logger.debug("Loaded issue %s from %s", issue.identifier, document_path)
    return issue


def dump_issue(path: Path | str, issue: Issue) -> Path:
    document_path = Path(path)
    payload = issue.to_dict()
    suffix = document_path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        text = yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    elif suffix in JSON_SUFFIXES:
        text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    else:
        raise IssueDocumentError(f"Unsupported issue document format '{suffix}': {document_path}")

    document_path.parent.mkdir(parents=True, exist_ok=True)
    document_path.write_text(text, encoding="utf-8")
    return document_path


__all__ = [
    "dump_issue",
    "load_issue",
]
