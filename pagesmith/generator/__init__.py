"""Utilities for rendering components, pages, and site assets."""

from .assets import build_robots_txt, build_sitemap_xml
from .page_compiler import NavLink, PageCompiler
from .renderer import ComponentRenderer, build_environment

__all__ = [
    "ComponentRenderer",
    "NavLink",
    "PageCompiler",
    "build_environment",
    "build_robots_txt",
    "build_sitemap_xml",
]
