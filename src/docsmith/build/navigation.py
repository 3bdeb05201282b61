"""Navigation tree mirroring the folder structure of the built pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docsmith.build.files import FileMap

INDEX_PAGE = "index.html"


def humanize(name: str) -> str:
    """Turn a file or folder name into a title."""
    return PurePosixPath(name).stem.replace("-", " ").replace("_", " ").title()


@dataclass
class NavNode:
    """A folder (``dir``) or page (``file``) of the navigation tree."""

    name: str
    path: str
    type: str
    title: str
    link: str | None = None
    order: float | None = None
    children: list[NavNode] = field(default_factory=list)

    def child_dir(self, name: str) -> NavNode:
        for child in self.children:
            if child.type == "dir" and child.name == name:
                return child
        path = f"{self.path}/{name}" if self.path else name
        node = NavNode(name=name, path=path, type="dir", title=humanize(name))
        self.children.append(node)
        return node

    def sort(self) -> None:
        self.children.sort(key=lambda n: (n.order is None, n.order or 0, n.name))
        for child in self.children:
            child.sort()


def _order(metadata: dict[str, Any]) -> float | None:
    value = metadata.get("navOrder")
    return float(value) if value is not None else None


def build_tree(files: FileMap, root_title: str = "Home") -> tuple[NavNode, dict[str, list[NavNode]]]:
    """Build the tree of every ``.html`` page not hidden with ``nav: false``.

    Folders become ``dir`` nodes; a folder's ``index.html`` becomes the
    folder's ``link`` instead of a child of its own.

    Returns:
        The root node and, per page path, the nodes from the root down to it

    """
    root = NavNode(name="", path="", type="dir", title=root_title)
    trails: dict[str, list[NavNode]] = {}

    for relative in sorted(files):
        if not relative.endswith(".html"):
            continue
        metadata = files[relative].metadata
        if metadata.get("nav") is False:
            continue

        parts = relative.split("/")
        trail = [root]
        node = root
        for part in parts[:-1]:
            node = node.child_dir(part)
            trail.append(node)

        if parts[-1] == INDEX_PAGE:
            node.link = relative
            if metadata.get("title") and node is not root:
                node.title = str(metadata["title"])
            if node is not root:
                node.order = _order(metadata)
        else:
            page = NavNode(
                name=parts[-1],
                path=relative,
                type="file",
                title=str(metadata.get("title") or humanize(parts[-1])),
                link=relative,
                order=_order(metadata),
            )
            node.children.append(page)
            trail.append(page)
        trails[relative] = trail

    root.sort()
    return root, trails


__all__ = ["NavNode", "build_tree", "humanize"]
