from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from docsmith.config import BuildParams, build_params, load_site_config

TEMPLATE = "docsmith-template-basic"

DEFAULT_LAYOUT = """<!DOCTYPE html>
<html>
<head>
<title>{{ title or toolName }}</title>
<link rel="stylesheet" href="{{ rootPath }}css/site.css">
</head>
<body>
<nav>{% for node in navs.main.children %}<a href="{{ rootPath }}{{ node.link or node.path }}">{{ node.title }}</a>{% endfor %}</nav>
<header>{{ toolName }}{% if toolClaim %} - {{ toolClaim }}{% endif %}{% if isIn("web", targets) %} [web]{% endif %}</header>
<main>{{ contents }}</main>
</body>
</html>
"""

INDEX_MD = """---
toolName: Widget
claim: Widgets for everyone
packageName: widget
---
# Welcome

Widget makes widgets.
"""

INSTALL_MD = """---
title: Installing
---
Run `pip install widget`.
"""


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")


def make_template(
    base: Path,
    name: str = TEMPLATE,
    *,
    layouts: dict[str, str] | None = None,
    assets: dict[str, str | bytes] | None = None,
    init: dict[str, str] | None = None,
) -> Path:
    template_dir = base / name
    write_tree(template_dir / "layouts", {"default.html": DEFAULT_LAYOUT} if layouts is None else layouts)
    write_tree(template_dir / "assets", {"css/site.css": "body { margin: 0; }\n"} if assets is None else assets)
    if init is not None:
        write_tree(template_dir / "init", init)
    return template_dir


def write_manifest(project: Path, dependencies: Sequence[str]) -> Path:
    deps = ",\n".join(f'    "{dep}"' for dep in dependencies)
    manifest = project / "pyproject.toml"
    manifest.parent.mkdir(parents=True, exist_ok=True)
    manifest.write_text(
        f'[project]\nname = "widget"\nversion = "1.0"\ndependencies = [\n{deps}\n]\n',
        encoding="utf-8",
    )
    return manifest


class ScriptedPrompter:
    """Prompter answering from prepared lists and recording every question."""

    def __init__(
        self,
        *,
        selections: Sequence[str] = (),
        confirms: Sequence[bool] = (),
        texts: Sequence[str] = (),
    ) -> None:
        self.selections = list(selections)
        self.confirms = list(confirms)
        self.texts = list(texts)
        self.asked: list[str] = []
        self.offered: list[list[str]] = []

    def select(self, message: str, choices: Sequence[str]) -> str:
        self.asked.append(message)
        self.offered.append(list(choices))
        return self.selections.pop(0)

    def confirm(self, message: str, *, default: bool = False) -> bool:
        self.asked.append(message)
        return self.confirms.pop(0) if self.confirms else default

    def text(self, message: str, *, default: str | None = None) -> str:
        self.asked.append(message)
        if self.texts:
            return self.texts.pop(0)
        return default or ""


@pytest.fixture
def scripted_prompter():
    return ScriptedPrompter


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project with one template in ``site-templates/`` and a small docs tree."""
    root = tmp_path / "project"
    make_template(root / "site-templates")
    write_manifest(root, [f"{TEMPLATE}>=1.0", "requests>=2"])
    (root / "docsmith.yml").write_text("template:\n  search_paths: [site-templates]\n", encoding="utf-8")
    write_tree(root / "docs", {"index.md": INDEX_MD, "guide/install.md": INSTALL_MD})
    return root


@pytest.fixture
def params(project: Path) -> BuildParams:
    return build_params(project, load_site_config(project))
