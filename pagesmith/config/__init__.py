"""Load and model website project snapshots for pagesmith builds.

This subpackage turns the JSON-shaped project description produced by an
external generator into strongly typed, immutable dataclasses
(:class:`WebsiteProject`, :class:`WebsitePage`, :class:`WebsiteComponent`,
etc.) that the compiler consumes. The primary entry points are
:func:`load_project`, which reads a ``.json`` or ``.yaml`` file, and
:func:`build_project`, which accepts an already decoded mapping. Both enforce
only the aggregate shape and raise :class:`ProjectStructureError` naming the
missing element.

Examples
--------
>>> from pathlib import Path
>>> from pagesmith.config import load_project
>>> project = load_project(Path("site.json"))  # doctest: +SKIP
>>> project.find_page("home").path  # doctest: +SKIP
'index.html'
"""

from .loader import build_project, load_compiler_settings, load_project
from .models import (
    PALETTE_KEYS,
    SEO,
    ColorPalette,
    CompilerSettings,
    ComponentItem,
    ComponentProps,
    ComponentType,
    GeneratedFile,
    ProjectStructureError,
    WebsiteComponent,
    WebsitePage,
    WebsiteProject,
)

__all__ = [
    "PALETTE_KEYS",
    "SEO",
    "ColorPalette",
    "CompilerSettings",
    "ComponentItem",
    "ComponentProps",
    "ComponentType",
    "GeneratedFile",
    "ProjectStructureError",
    "WebsiteComponent",
    "WebsitePage",
    "WebsiteProject",
    "build_project",
    "load_compiler_settings",
    "load_project",
]
