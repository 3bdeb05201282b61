"""Pydantic models for ``docsmith.yml``.

Every key is optional; an absent file yields the defaults below. CLI
options are applied on top by :func:`docsmith.config.params.build_params`.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOURCE = "docs"
DEFAULT_DESTINATION = "site"
DEFAULT_MANIFEST = "pyproject.toml"
DEFAULT_TEMPLATE_PREFIX = "docsmith-template-"
DEFAULT_LAYOUT = "default.html"
DEFAULT_PAGES_BRANCH = "gh-pages"
DEFAULT_PAGES_HOSTS = ("github.com",)

MissingIndexMode = Literal["fail", "scaffold"]


class TemplateSettings(BaseModel):
    """Where site templates come from and how they are laid out."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(
        default=None,
        description="Template to use when several are installed (skips the selection prompt)",
    )
    prefix: str = Field(default=DEFAULT_TEMPLATE_PREFIX, description="Naming convention for template packages")
    search_paths: list[str] = Field(
        default_factory=list,
        description="Folders holding template directories, searched before installed packages",
    )
    layouts: str = Field(default="layouts", description="Layout subdirectory inside a template")
    assets: str = Field(default="assets", description="Static asset subdirectory inside a template")
    init: str = Field(default="init", description="Scaffold subdirectory inside a template")

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Reject an empty prefix, which would match every dependency."""
        if not v.strip():
            msg = "Template prefix must not be empty"
            raise ValueError(msg)
        return v


class PublishSettings(BaseModel):
    """Hosted pages publishing."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool | None = Field(default=None, description="True/False skip the prompt, null asks")
    remote: str = "origin"
    branch: str = DEFAULT_PAGES_BRANCH
    hosts: list[str] = Field(default_factory=lambda: list(DEFAULT_PAGES_HOSTS))
    message: str = "Update documentation site"
    nojekyll: bool = True


class SiteConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    source: str = DEFAULT_SOURCE
    destination: str = DEFAULT_DESTINATION
    manifest: str = DEFAULT_MANIFEST
    ignore: list[str] = Field(default_factory=list)
    targets: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict, description="Overrides for site metadata")
    layout_paths: list[str] = Field(
        default_factory=list,
        description="Project folders searched for layouts before the template's own",
    )
    default_layout: str | None = DEFAULT_LAYOUT
    missing_index: MissingIndexMode = "fail"
    template: TemplateSettings = Field(default_factory=TemplateSettings)
    publish: PublishSettings = Field(default_factory=PublishSettings)
