"""Build transforms turning a markdown tree into site files."""

from docsmith.build.files import BuildResult, SiteFile, read_source_tree, write_files
from docsmith.build.navigation import NavNode, build_tree
from docsmith.build.transforms import TRANSFORMS

__all__ = ["TRANSFORMS", "BuildResult", "NavNode", "SiteFile", "build_tree", "read_source_tree", "write_files"]
