"""Derive ``robots.txt`` and ``sitemap.xml`` from a project snapshot."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from pagesmith._constants import ROBOTS_FILENAME, SITEMAP_FILENAME, priority_for
from pagesmith.config import GeneratedFile
from pagesmith.generator.renderer import build_environment

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from pagesmith.config import WebsiteProject


@dc.dataclass(slots=True, frozen=True)
class SitemapEntry:
    """One ``<url>`` element of the sitemap."""

    loc: str
    priority: str


def build_robots_txt(base_url: str | None = None) -> GeneratedFile:
    """Return a robots file allowing every crawler and naming the sitemap.

    Parameters
    ----------
    base_url : str, optional
        Absolute site root. When omitted the sitemap is referenced by its
        root-relative path.
    """
    sitemap_ref = (
        f"{base_url.rstrip('/')}/{SITEMAP_FILENAME}" if base_url else f"/{SITEMAP_FILENAME}"
    )
    content = f"User-agent: *\nAllow: /\n\nSitemap: {sitemap_ref}\n"
    return GeneratedFile(name=ROBOTS_FILENAME, content=content)


def site_root(project: WebsiteProject, base_url: str | None = None) -> str:
    """Return the absolute site root used for sitemap locations."""
    if base_url:
        return base_url.rstrip("/")
    return f"https://{project.domain}"


def sitemap_entries(
    project: WebsiteProject, base_url: str | None = None
) -> list[SitemapEntry]:
    """Return one sitemap entry per page, in page order."""
    root = site_root(project, base_url)
    return [
        SitemapEntry(
            loc=f"{root}/{page.path.lstrip('/')}", priority=priority_for(page.path)
        )
        for page in project.pages
    ]


def build_sitemap_xml(
    project: WebsiteProject,
    *,
    today: dt.date,
    base_url: str | None = None,
    env: Environment | None = None,
) -> GeneratedFile:
    """Render the sitemap for ``project`` with ``today`` as every ``lastmod``.

    Locations are XML-escaped by the template; priorities are ``1.00`` for
    ``index.html`` and ``0.80`` for every other page.
    """
    template = (env or build_environment()).get_template("sitemap.xml.jinja")
    content = template.render(
        entries=sitemap_entries(project, base_url), lastmod=today.isoformat()
    )
    if not content.endswith("\n"):
        content += "\n"
    return GeneratedFile(name=SITEMAP_FILENAME, content=content)


__all__ = [
    "SitemapEntry",
    "build_robots_txt",
    "build_sitemap_xml",
    "site_root",
    "sitemap_entries",
]
