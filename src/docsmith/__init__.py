"""docsmith - build a static documentation site from a folder of markdown."""

from docsmith.pipeline import SiteBuilder, build_site

__version__ = "0.3.0"

__all__ = ["SiteBuilder", "__version__", "build_site"]
