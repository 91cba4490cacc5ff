"""Render website components into HTML fragments.

Each member of :class:`~pagesmith.config.ComponentType` maps to exactly one
Jinja template under ``pagesmith/templates/components``. Templates only refer
to theme colours through CSS custom properties (``var(--primary)`` and
friends); the palette itself is injected once per page by the page compiler.
Prose fields are passed through the ``prose`` filter, which wraps
:func:`pagesmith.formatter.format_content`.
"""

from __future__ import annotations

import logging
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from pagesmith.config import ComponentType
from pagesmith.formatter import escape_html, format_content

if typ.TYPE_CHECKING:
    from pagesmith.config import WebsiteComponent

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

CSS_UNSAFE = re.compile(r"[<>{};\\'\"]")

COMPONENT_TEMPLATES: dict[ComponentType, str] = {
    ComponentType.LOGO: "components/logo.jinja",
    ComponentType.HERO: "components/hero.jinja",
    ComponentType.FEATURE_GRID: "components/feature_grid.jinja",
    ComponentType.CONTENT: "components/content.jinja",
    ComponentType.CAREER_LIST: "components/career_list.jinja",
    ComponentType.CONTACT_FORM: "components/contact_form.jinja",
    ComponentType.TESTIMONIALS: "components/testimonials.jinja",
    ComponentType.CTA: "components/cta.jinja",
    ComponentType.DETAILED_SERVICE_LIST: "components/detailed_service_list.jinja",
}


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment shared by component and page templates."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["prose"] = format_content
    env.filters["css_value"] = css_value
    return env


def css_value(value: object) -> Markup:
    """Return ``value`` as a bare CSS token for a custom property.

    HTML entities are not decoded inside ``<style>``, so the value is not
    HTML-escaped. Characters that could end the declaration, the rule or the
    style element are removed instead.
    """
    return Markup(CSS_UNSAFE.sub("", str(value)).strip())  # noqa: S704 - unsafe characters removed


def comment_marker(text: str) -> Markup:
    """Return an inert HTML comment whose body cannot terminate early."""
    body = escape_html(text).replace("--", "&#45;&#45;")
    return Markup(f"<!-- {body} -->")  # noqa: S704 - body escaped above


class ComponentRenderer:
    """Dispatch components to their variant template."""

    def __init__(self, env: Environment | None = None) -> None:
        """Initialize the renderer with an optional preconfigured environment.

        Parameters
        ----------
        env : Environment, optional
            Jinja environment to load templates from. Defaults to one built by
            :func:`build_environment` over the packaged templates.
        """
        self.env = env or build_environment()
        self._templates = {
            variant: self.env.get_template(name)
            for variant, name in COMPONENT_TEMPLATES.items()
        }

    def render(self, component: WebsiteComponent) -> Markup:
        """Render ``component`` into a markup fragment.

        Unknown ``type`` values produce an inert comment marker rather than an
        exception so a single malformed component never aborts the page.
        """
        variant = component.variant
        if variant is None:
            logger.warning(
                "Unknown component type %r for component %r", component.type, component.id
            )
            return comment_marker(f"Unknown component type: {component.type}")
        html = self._templates[variant].render(
            component=component, props=component.props
        )
        return Markup(html.strip())  # noqa: S704 - autoescaped template output


__all__ = [
    "COMPONENT_TEMPLATES",
    "DEFAULT_TEMPLATES_DIR",
    "ComponentRenderer",
    "build_environment",
    "comment_marker",
    "css_value",
]
