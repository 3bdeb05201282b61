"""Markdown helpers: front matter parsing and HTML rendering."""

from docsmith.markdown.frontmatter import parse_frontmatter, parse_frontmatter_file
from docsmith.markdown.rendering import render_html

__all__ = ["parse_frontmatter", "parse_frontmatter_file", "render_html"]
