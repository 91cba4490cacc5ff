"""Utility helpers shared by the project and settings loaders."""

from __future__ import annotations

import typing as typ

from .models import (
    PALETTE_KEYS,
    SEO,
    ColorPalette,
    ComponentItem,
    ComponentProps,
    ProjectStructureError,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _text(value: object | None) -> str:
    """Return ``value`` as a string, mapping ``None`` to an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _normalize_keywords(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize keyword definitions into a tuple of non-empty strings."""
    if isinstance(value, str):
        return tuple(segment.strip() for segment in value.split(",") if segment.strip())
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return tuple(normalized)
    return ()


def _require_mapping(
    payload: typ.Mapping[str, typ.Any], key: str
) -> typ.Mapping[str, typ.Any]:
    """Return ``payload[key]`` when it is a mapping, otherwise raise."""
    value = payload.get(key)
    if not isinstance(value, dict):
        msg = f"Project is missing its '{key}' mapping."
        raise ProjectStructureError(msg)
    return value


def _require_list(payload: typ.Mapping[str, typ.Any], key: str) -> list[typ.Any]:
    """Return ``payload[key]`` when it is a list, otherwise raise."""
    value = payload.get(key)
    if not isinstance(value, list):
        msg = f"Project is missing its '{key}' list."
        raise ProjectStructureError(msg)
    return value


def _build_palette(payload: typ.Mapping[str, typ.Any]) -> ColorPalette:
    """Build a ColorPalette, requiring every one of the six tokens."""
    missing = [key for key in PALETTE_KEYS if payload.get(key) is None]
    if missing:
        msg = f"Palette is missing colour(s): {', '.join(missing)}."
        raise ProjectStructureError(msg)
    return ColorPalette(
        background=_text(payload["background"]),
        foreground=_text(payload["foreground"]),
        card=_text(payload["card"]),
        card_foreground=_text(payload["card-foreground"]),
        primary=_text(payload["primary"]),
        primary_foreground=_text(payload["primary-foreground"]),
    )


def _build_seo(payload: typ.Mapping[str, typ.Any]) -> SEO:
    """Build SEO metadata from the ``seo`` mapping."""
    return SEO(
        meta_title=_text(payload.get("metaTitle")),
        meta_description=_text(payload.get("metaDescription")),
        keywords=_normalize_keywords(payload.get("keywords")),
    )


def _build_items(value: object) -> tuple[ComponentItem, ...]:
    """Build list-component items, skipping entries that are not mappings."""
    if not isinstance(value, list):
        return ()
    items: list[ComponentItem] = []
    for index, entry in enumerate(value):
        match entry:
            case dict():
                items.append(
                    ComponentItem(
                        id=_text(entry.get("id")) or f"item-{index + 1}",
                        title=_text(entry.get("title")),
                        description=_text(entry.get("description")),
                        icon=_optional_str(entry.get("icon")),
                        quote=_optional_str(entry.get("quote")),
                        author=_optional_str(entry.get("author")),
                        role=_optional_str(entry.get("role")),
                    )
                )
            case _:
                continue
    return tuple(items)


def _build_props(payload: object) -> ComponentProps:
    """Build a ComponentProps bag; absent or malformed props become empty."""
    if not isinstance(payload, dict):
        return ComponentProps()

    def _field(key: str) -> str | None:
        value = payload.get(key)
        return None if value is None else _text(value)

    return ComponentProps(
        title=_field("title"),
        subtitle=_field("subtitle"),
        description=_field("description"),
        content=_field("content"),
        cta_text=_field("ctaText"),
        cta_link=_field("ctaLink"),
        items=_build_items(payload.get("items")),
        formspree_endpoint=_field("formspreeEndpoint"),
    )


__all__ = [
    "_build_items",
    "_build_palette",
    "_build_props",
    "_build_seo",
    "_normalize_keywords",
    "_optional_str",
    "_require_list",
    "_require_mapping",
    "_text",
]
