"""Helpers for parsing YAML front matter from Markdown content."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML front matter using python-frontmatter.

    Args:
        content: Markdown content that may include front matter.

    Returns:
        Tuple of (metadata dict, body string). A document with no front
        matter yields an empty dict and the content unchanged.

    Raises:
        ValueError: If the front matter is not valid YAML or not a mapping.

    """
    try:
        parsed = frontmatter.loads(content)
    except yaml.YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise ValueError(msg) from exc

    raw_metadata = parsed.metadata or {}
    if not isinstance(raw_metadata, dict):
        msg = f"Front matter must be a mapping, got {type(raw_metadata).__name__}"
        raise ValueError(msg)

    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)
    return dict(raw_metadata), body


def parse_frontmatter_file(path: Path, *, encoding: str = "utf-8") -> tuple[dict[str, Any], str]:
    """Read a Markdown file and parse its front matter."""
    content = path.read_text(encoding=encoding)
    return parse_frontmatter(content)


def dump_frontmatter(metadata: dict[str, Any], body: str) -> str:
    """Serialize metadata and body back into a front matter document."""
    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post, sort_keys=False) + "\n"
