"""Canonical text form of file paths reported by issue providers.

Providers running on different platforms spell the same relative path in
different ways (``src\\Foo.cs``, ``./src//Foo.cs``, ``src/Foo.cs/``). The
normalizer folds those spellings into one canonical string so that issues can
be compared textually:

* backslashes become forward slashes and surrounding whitespace is dropped,
* runs of separators collapse to one; a leading root (``/`` or a UNC ``//``) is kept,
* ``.`` segments are removed, ``..`` segments are kept as written,
* a trailing separator is removed unless the path is only a root,
* a bare drive (``C:``) becomes ``C:/``.

Nothing here touches the filesystem.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from issuecheck.errors import InvalidArgumentError

_SCHEME_PREFIX_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+://")
_DRIVE_PREFIX_RE = re.compile(r"^[A-Za-z]:")
_BARE_DRIVE_RE = re.compile(r"^[A-Za-z]:$")


def normalize_path(raw: str | os.PathLike[str]) -> str:
    text = os.fspath(raw).replace("\\", "/").strip()

    # A drive letter is never a scheme: only prefixes of two or more
    # characters before "://" are split off here.
    scheme = ""
    scheme_match = _SCHEME_PREFIX_RE.match(text)
    if scheme_match is not None:
        scheme = scheme_match.group(0)
        text = text[len(scheme) :]

    if not scheme and text.startswith("//"):
        root = "//"
    elif text.startswith("/"):
        root = "/"
    else:
        root = ""
    body = root + "/".join(segment for segment in text.split("/") if segment and segment != ".")
    if _BARE_DRIVE_RE.match(body):
        body += "/"
    return scheme + body


def _is_rooted(canonical: str) -> bool:
    return (
        canonical.startswith("/")
        or _DRIVE_PREFIX_RE.match(canonical) is not None
        or _SCHEME_PREFIX_RE.match(canonical) is not None
    )


@dataclass(slots=True, frozen=True, init=False)
class FilePath:
    """Immutable path value; equality and hashing use the canonical text."""

    full_path: str

    def __init__(self, raw: str | os.PathLike[str] | FilePath) -> None:
        if raw is None:
            raise InvalidArgumentError("path")
        if isinstance(raw, FilePath):
            canonical = raw.full_path
        else:
            canonical = normalize_path(raw)
        object.__setattr__(self, "full_path", canonical)

    @property
    def is_relative(self) -> bool:
        return not _is_rooted(self.full_path)

    @property
    def segments(self) -> list[str]:
        return [segment for segment in self.full_path.split("/") if segment]

    def __str__(self) -> str:
        return self.full_path


def is_relative(path: str | FilePath) -> bool:
    if isinstance(path, FilePath):
        return path.is_relative
    return not _is_rooted(normalize_path(path))


__all__ = [
    "FilePath",
    "is_relative",
    "normalize_path",
]
