"""The build parameters record threaded through every stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docsmith.config.settings import (
    DEFAULT_DESTINATION,
    DEFAULT_LAYOUT,
    DEFAULT_MANIFEST,
    DEFAULT_PAGES_BRANCH,
    DEFAULT_PAGES_HOSTS,
    DEFAULT_SOURCE,
    DEFAULT_TEMPLATE_PREFIX,
    SiteConfig,
)

if TYPE_CHECKING:
    from jinja2 import Environment


@dataclass
class BuildParams:
    """Mutable options of one invocation.

    Created once from config and CLI flags; the stages fill in what they
    discover (selected template, metadata, templating environment).
    """

    project_root: Path
    source: Path
    destination: Path
    manifest: Path
    ignore: list[str] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    template_prefix: str = DEFAULT_TEMPLATE_PREFIX
    template_paths: list[Path] = field(default_factory=list)
    template_name: str | None = None
    layouts: str = "layouts"
    assets: str = "assets"
    init: str = "init"
    layout_paths: list[Path] = field(default_factory=list)
    default_layout: str | None = DEFAULT_LAYOUT
    missing_index: str = "fail"

    publish: bool | None = None
    publish_remote: str = "origin"
    publish_branch: str = DEFAULT_PAGES_BRANCH
    publish_hosts: list[str] = field(default_factory=lambda: list(DEFAULT_PAGES_HOSTS))
    publish_message: str = "Update documentation site"
    nojekyll: bool = True

    # Filled in by the stages
    selected_template: str | None = None
    template_source: Path | None = None
    index_data: dict[str, Any] | None = None
    extra_metadata: dict[str, Any] = field(default_factory=dict)
    environment: Environment | None = None

    @property
    def layouts_dir(self) -> Path:
        if self.template_source is None:
            msg = "No template selected yet"
            raise RuntimeError(msg)
        return self.template_source / self.layouts

    @property
    def assets_dir(self) -> Path:
        if self.template_source is None:
            msg = "No template selected yet"
            raise RuntimeError(msg)
        return self.template_source / self.assets

    @property
    def init_dir(self) -> Path:
        if self.template_source is None:
            msg = "No template selected yet"
            raise RuntimeError(msg)
        return self.template_source / self.init

    @property
    def index_path(self) -> Path:
        return self.source / "index.md"


def _under(root: Path, value: str | Path) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def build_params(
    project_root: Path,
    config: SiteConfig | None = None,
    *,
    source: str | Path | None = None,
    destination: str | Path | None = None,
    template: str | None = None,
    missing_index: str | None = None,
    publish: bool | None = None,
) -> BuildParams:
    """Merge the config file with command line overrides.

    Relative paths are resolved against ``project_root``.
    """
    config = config or SiteConfig()
    root = project_root.expanduser().resolve()

    return BuildParams(
        project_root=root,
        source=_under(root, source or config.source or DEFAULT_SOURCE),
        destination=_under(root, destination or config.destination or DEFAULT_DESTINATION),
        manifest=_under(root, config.manifest or DEFAULT_MANIFEST),
        ignore=list(config.ignore),
        targets=list(config.targets),
        metadata=dict(config.metadata),
        template_prefix=config.template.prefix,
        template_paths=[_under(root, p) for p in config.template.search_paths],
        template_name=template or config.template.name,
        layouts=config.template.layouts,
        assets=config.template.assets,
        init=config.template.init,
        layout_paths=[_under(root, p) for p in config.layout_paths],
        default_layout=config.default_layout,
        missing_index=missing_index or config.missing_index,
        publish=publish if publish is not None else config.publish.enabled,
        publish_remote=config.publish.remote,
        publish_branch=config.publish.branch,
        publish_hosts=list(config.publish.hosts),
        publish_message=config.publish.message,
        nojekyll=config.publish.nojekyll,
    )


__all__ = ["BuildParams", "build_params"]
