"""Markdown to HTML rendering."""

from markdown_it import MarkdownIt

_md = MarkdownIt("commonmark", {"html": True}).enable("table")


def render_html(content: str) -> str:
    """Render markdown content to an HTML fragment."""
    return _md.render(content)
