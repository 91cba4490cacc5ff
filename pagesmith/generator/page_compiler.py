"""Compile one page of a website project into a standalone HTML document.

:class:`PageCompiler` resolves a page by id, renders each referenced component
in order through :class:`~pagesmith.generator.renderer.ComponentRenderer`, and
wraps the fragments in the shared ``site_page.jinja`` shell. The shell injects
the palette as CSS custom properties, links every page of the project from the
header navigation, and embeds the client behaviour script verbatim.

Missing pages and dangling component references degrade to visible markers
instead of raising, so a malformed snapshot still produces a full site.

Example
-------
>>> from pathlib import Path
>>> from pagesmith.config import load_project
>>> from pagesmith.generator import PageCompiler
>>> project = load_project(Path("site.json"))  # doctest: +SKIP
>>> html = PageCompiler(project).compile_page("home")  # doctest: +SKIP
>>> html.startswith("<!DOCTYPE html>")  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import typing as typ

from markupsafe import Markup

from pagesmith._constants import FONT_STYLESHEET, TAILWIND_CDN
from pagesmith.config import ComponentProps, ComponentType, WebsiteComponent
from pagesmith.generator.renderer import (
    ComponentRenderer,
    build_environment,
    comment_marker,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from pagesmith.config import WebsitePage, WebsiteProject

logger = logging.getLogger(__name__)

Clock = typ.Callable[[], dt.datetime]


def utc_now() -> dt.datetime:
    """Return the current UTC time; the default compile clock."""
    return dt.datetime.now(dt.UTC)


@dc.dataclass(slots=True, frozen=True)
class NavLink:
    """Header navigation entry pointing at one page of the project."""

    label: str
    href: str
    current: bool = False


class PageCompiler:
    """Render full page documents for a single project snapshot."""

    def __init__(
        self,
        project: WebsiteProject,
        *,
        clock: Clock = utc_now,
        language: str = "en",
        env: Environment | None = None,
    ) -> None:
        """Initialize the compiler with the snapshot and template context.

        Parameters
        ----------
        project : WebsiteProject
            Snapshot to read from; never mutated.
        clock : Callable[[], datetime], optional
            Source of the footer copyright year. Defaults to the UTC system
            clock.
        language : str, optional
            Value for the document ``lang`` attribute.
        env : Environment, optional
            Jinja environment; defaults to the packaged templates.
        """
        self.project = project
        self.clock = clock
        self.language = language
        self.env = env or build_environment()
        self.renderer = ComponentRenderer(self.env)
        self.template = self.env.get_template("site_page.jinja")
        self.error_template = self.env.get_template("page_not_found.jinja")

    def compile_page(self, page_id: str) -> str:
        """Return the HTML document for ``page_id``.

        Returns
        -------
        str
            Complete document ending in a newline. When no page matches
            ``page_id`` a minimal error document is returned instead.
        """
        page = self.project.find_page(page_id)
        if page is None:
            logger.warning("Page %r not found; emitting error document", page_id)
            html = self.error_template.render(page_id=page_id, language=self.language)
            return _ensure_trailing_newline(html)
        return self.render_page(page)

    def render_page(self, page: WebsitePage, *, now: dt.datetime | None = None) -> str:
        """Render ``page`` inside the shared header, footer and script shell.

        ``now`` pins the footer year; the clock is read when it is omitted.
        """
        context = {
            "page": page,
            "seo": self.project.seo,
            "palette": self.project.palette,
            "domain": self.project.domain,
            "language": self.language,
            "logo": self.render_logo(),
            "nav_links": self.build_nav_links(current=page),
            "fragments": self.render_fragments(page),
            "year": (now or self.clock()).year,
            "tailwind_cdn": TAILWIND_CDN,
            "font_stylesheet": FONT_STYLESHEET,
        }
        return _ensure_trailing_newline(self.template.render(**context))

    def render_fragments(self, page: WebsitePage) -> list[Markup]:
        """Render the page's components in ``component_ids`` order.

        Every id yields exactly one fragment; ids that do not resolve become a
        comment marker in the same slot.
        """
        fragments: list[Markup] = []
        for component_id in page.component_ids:
            component = self.project.find_component(component_id)
            if component is None:
                logger.warning(
                    "Page %r references missing component %r", page.id, component_id
                )
                fragments.append(
                    comment_marker(f"Component with id {component_id} not found")
                )
                continue
            fragments.append(self.renderer.render(component))
        return fragments

    def build_nav_links(self, current: WebsitePage | None = None) -> list[NavLink]:
        """Return one link per project page, in page-list order."""
        return [
            NavLink(
                label=page.name,
                href=page.path,
                current=current is not None and page.id == current.id,
            )
            for page in self.project.pages
        ]

    def render_logo(self) -> Markup:
        """Render the header brand link using the project domain as its title."""
        logo = WebsiteComponent(
            id="logo",
            type=ComponentType.LOGO,
            props=ComponentProps(title=self.project.domain),
        )
        return self.renderer.render(logo)

    def compile_all(
        self, *, now: dt.datetime | None = None
    ) -> cabc.Iterator[tuple[WebsitePage, str]]:
        """Yield ``(page, html)`` for every page in project order.

        The clock is read at most once so every page shares one footer year.
        """
        stamp = now or self.clock()
        for page in self.project.pages:
            yield page, self.render_page(page, now=stamp)


def _ensure_trailing_newline(html: str) -> str:
    return html if html.endswith("\n") else html + "\n"


__all__ = ["Clock", "NavLink", "PageCompiler", "utc_now"]
