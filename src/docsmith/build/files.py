"""In-memory representation of the files flowing through a build."""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any

from docsmith.markdown.frontmatter import parse_frontmatter

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
FRONTMATTER_DELIMITER = "---"

FileMap = dict[str, "SiteFile"]


@dataclass
class SiteFile:
    """One file of the site, keyed by its POSIX path relative to the source."""

    contents: bytes
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.contents.decode("utf-8")


@dataclass
class BuildResult:
    """What a successful build produced."""

    destination: Path
    files: FileMap
    metadata: dict[str, Any]

    def resolved_metadata(self, path: str) -> dict[str, Any]:
        """Site metadata overlaid with the metadata of page ``path``.

        This is the context a layout receives (``path`` included), minus
        ``contents``.
        """
        return {**self.metadata, **self.files[path].metadata}


def _match_segments(parts: tuple[str, ...], pattern: tuple[str, ...]) -> bool:
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        # zero or more folders
        return any(_match_segments(parts[i:], rest) for i in range(len(parts) + 1))
    return bool(parts) and fnmatch.fnmatchcase(parts[0], head) and _match_segments(parts[1:], rest)


def matches_glob(relative: str, pattern: str) -> bool:
    """Match a POSIX path against a glob where ``*`` stays inside one folder and ``**`` spans folders."""
    return _match_segments(PurePosixPath(relative).parts, PurePosixPath(pattern).parts)


def is_ignored(relative: str, patterns: list[str]) -> bool:
    """Return True if ``relative`` or one of its parent folders matches a pattern."""
    if not patterns:
        return False
    parts = PurePosixPath(relative).parts
    candidates = ["/".join(parts[: i + 1]) for i in range(len(parts))]
    return any(matches_glob(candidate, pattern) for candidate in candidates for pattern in patterns)


def _split_frontmatter(relative: str, raw: bytes, *, markdown: bool) -> SiteFile:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        if markdown:
            msg = f"{relative}: {e}"
            raise ValueError(msg) from e
        return SiteFile(raw)

    if not markdown and not text.startswith(FRONTMATTER_DELIMITER):
        return SiteFile(raw)

    try:
        metadata, body = parse_frontmatter(text)
    except ValueError as e:
        msg = f"{relative}: {e}"
        raise ValueError(msg) from e

    if not markdown and not metadata:
        return SiteFile(raw)
    return SiteFile(body.encode("utf-8"), metadata)


def read_source_tree(source: Path, ignore: list[str] | None = None) -> FileMap:
    """Load every file under ``source`` in a stable order.

    Front matter is split into ``metadata`` for markdown files and for any
    other UTF-8 file that opens with a ``---`` block. Binary files and
    text without front matter are kept byte for byte.

    Raises:
        ValueError: If a file has invalid front matter, or a markdown file is not UTF-8
        OSError: If a file cannot be read

    """
    files: FileMap = {}
    patterns = list(ignore or [])
    for path in sorted(source.rglob("*")):
        if not path.is_file():
            continue
        relative = path.relative_to(source).as_posix()
        if is_ignored(relative, patterns):
            logger.debug("Ignoring %s", relative)
            continue

        files[relative] = _split_frontmatter(relative, path.read_bytes(), markdown=path.suffix == MARKDOWN_SUFFIX)
    return files


def write_files(files: FileMap, destination: Path) -> None:
    """Materialize ``files`` under ``destination``."""
    for relative in sorted(files):
        target = destination / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(files[relative].contents)


__all__ = ["BuildResult", "FileMap", "SiteFile", "is_ignored", "matches_glob", "read_source_tree", "write_files"]
