"""Load website project snapshots and compiler settings into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .helpers import (
    _build_palette,
    _build_props,
    _build_seo,
    _optional_str,
    _require_list,
    _require_mapping,
    _text,
)
from .models import (
    CompilerSettings,
    ProjectStructureError,
    WebsiteComponent,
    WebsitePage,
    WebsiteProject,
)

JSON_SUFFIXES = frozenset({".json"})


def load_project(path: Path) -> WebsiteProject:
    """Load a website project description from a JSON or YAML file.

    Parameters
    ----------
    path : Path
        Filesystem path to the project file. ``.json`` files are decoded with
        msgspec; every other suffix is read as YAML 1.2, which also accepts
        plain JSON.

    Returns
    -------
    WebsiteProject
        Immutable snapshot ready to hand to the compiler.

    Raises
    ------
    FileNotFoundError
        If the project file does not exist at ``path``.
    ProjectStructureError
        If the content cannot be decoded, the top level is not a mapping, or a
        required structural element (palette, seo, pages, components) is
        missing.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pagesmith.config import load_project
    >>> project = load_project(Path("site.json"))  # doctest: +SKIP
    >>> [page.path for page in project.pages]  # doctest: +SKIP
    ['index.html', 'about.html']
    """
    if not path.exists():
        msg = f"Project file '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = _read_document(path)
    if not isinstance(loaded, dict):
        msg = "Top-level project structure must be a mapping."
        raise ProjectStructureError(msg)
    return build_project(loaded)


def build_project(payload: typ.Mapping[str, typ.Any]) -> WebsiteProject:
    """Build a WebsiteProject from an already decoded mapping.

    Only the aggregate shape is enforced. Malformed entries inside the page,
    component and item lists are skipped and missing optional scalars default
    to empty strings so the compiler can degrade visibly instead.
    """
    palette = _build_palette(_require_mapping(payload, "palette"))
    seo = _build_seo(_require_mapping(payload, "seo"))
    pages_raw = _require_list(payload, "pages")
    components_raw = _require_list(payload, "components")

    pages: list[WebsitePage] = []
    for entry in pages_raw:
        match entry:
            case dict():
                pages.append(_build_page(entry))
            case _:
                continue

    components: list[WebsiteComponent] = []
    for entry in components_raw:
        match entry:
            case dict():
                components.append(
                    WebsiteComponent(
                        id=_text(entry.get("id")),
                        type=_text(entry.get("type")),
                        props=_build_props(entry.get("props")),
                    )
                )
            case _:
                continue

    return WebsiteProject(
        domain=_text(payload.get("domain")),
        topic=_text(payload.get("topic")),
        palette=palette,
        seo=seo,
        pages=tuple(pages),
        components=tuple(components),
    )


def load_compiler_settings(path: Path | None) -> CompilerSettings:
    """Load optional build settings from a YAML file.

    A missing ``path`` (``None``) yields defaults. Recognised keys are
    ``output_dir``, ``base_url`` and ``language``; anything else is ignored.
    Null values fall back to the defaults. Undecodable YAML or a non-mapping
    top level raises :class:`ProjectStructureError`.
    """
    if path is None:
        return CompilerSettings()
    if not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)
    raw = _load_yaml(path)
    if not isinstance(raw, dict):
        msg = f"Settings file '{path}' must contain a mapping."
        raise ProjectStructureError(msg)

    defaults = CompilerSettings()
    base_url = _optional_str(raw.get("base_url"))
    return CompilerSettings(
        output_dir=Path(raw.get("output_dir") or defaults.output_dir),
        base_url=base_url.rstrip("/") if base_url else None,
        language=_optional_str(raw.get("language")) or defaults.language,
    )


def _build_page(payload: typ.Mapping[str, typ.Any]) -> WebsitePage:
    """Build a WebsitePage, coercing component references to strings."""
    raw_ids = payload.get("componentIds")
    component_ids = (
        tuple(_text(item) for item in raw_ids) if isinstance(raw_ids, list) else ()
    )
    return WebsitePage(
        id=_text(payload.get("id")),
        name=_text(payload.get("name")),
        path=_text(payload.get("path")),
        component_ids=component_ids,
    )


def _read_document(path: Path) -> object:
    """Decode ``path`` as JSON or YAML depending on its suffix."""
    if path.suffix.lower() in JSON_SUFFIXES:
        try:
            return msgspec_json.decode(path.read_bytes())
        except msgspec.DecodeError as exc:
            msg = f"Project file '{path}' is not valid JSON: {exc}"
            raise ProjectStructureError(msg) from exc

    return _load_yaml(path)


def _load_yaml(path: Path) -> object:
    """Read ``path`` as YAML 1.2, reporting undecodable content as a structure error."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            return loader.load(handle) or {}
    except (YAMLError, UnicodeDecodeError) as exc:
        msg = f"File '{path}' is not valid YAML: {exc}"
        raise ProjectStructureError(msg) from exc


__all__ = ["build_project", "load_compiler_settings", "load_project"]
