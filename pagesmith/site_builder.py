"""Website compile pipeline.

This module turns one :class:`~pagesmith.config.WebsiteProject` snapshot into
the complete list of deployable files: one HTML document per page in project
order, followed by ``robots.txt`` and ``sitemap.xml``. The main entry point is
:class:`SiteBuilder`, which wires the page compiler and asset generators
together and can optionally persist the result to disk.

Typical usage mirrors the ``pagesmith build`` command:

>>> from pathlib import Path
>>> from pagesmith.config import load_project
>>> builder = SiteBuilder(load_project(Path("site.json")))  # doctest: +SKIP
>>> [item.name for item in builder.assemble()]  # doctest: +SKIP
['index.html', 'about.html', 'robots.txt', 'sitemap.xml']

Compiling is pure apart from reading the clock for the footer year and the
sitemap ``lastmod`` date, so concurrent builds of different snapshots share no
state.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from .config import CompilerSettings, GeneratedFile, ProjectStructureError
from .generator.assets import build_robots_txt, build_sitemap_xml
from .generator.page_compiler import Clock, PageCompiler, utc_now
from .generator.renderer import build_environment

if typ.TYPE_CHECKING:
    from .config import WebsiteProject

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Compile every page and asset of a project snapshot."""

    def __init__(
        self,
        project: WebsiteProject,
        *,
        settings: CompilerSettings | None = None,
        clock: Clock = utc_now,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        project : WebsiteProject
            Snapshot to compile; borrowed for the duration of each call.
        settings : CompilerSettings, optional
            Output directory, sitemap base URL and document language.
        clock : Callable[[], datetime], optional
            Time source for the footer year and sitemap ``lastmod``.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the packaged
            templates.
        """
        self.project = project
        self.settings = settings or CompilerSettings()
        self.clock = clock
        self.env = build_environment(templates_dir)
        self.page_compiler = PageCompiler(
            project, clock=clock, language=self.settings.language, env=self.env
        )

    def assemble(self) -> list[GeneratedFile]:
        """Return the ordered file list: pages, then robots, then sitemap.

        The clock is read once, so the footer year and sitemap ``lastmod``
        always describe the same instant.
        """
        now = self.clock()
        files = [
            GeneratedFile(name=page.path, content=html)
            for page, html in self.page_compiler.compile_all(now=now)
        ]
        files.append(build_robots_txt(self.settings.base_url))
        files.append(
            build_sitemap_xml(
                self.project,
                today=now.date(),
                base_url=self.settings.base_url,
                env=self.env,
            )
        )
        logger.debug("Assembled %d files for %s", len(files), self.project.domain)
        return files

    def write(self, output_dir: Path | None = None) -> list[Path]:
        """Assemble the site and write each file beneath ``output_dir``.

        Returns
        -------
        list[Path]
            Written paths in assembly order.

        Raises
        ------
        ProjectStructureError
            If a page path would resolve outside ``output_dir``.
        """
        root = output_dir or self.settings.output_dir
        files = self.assemble()
        targets = [_resolve_target(root, item.name) for item in files]
        written: list[Path] = []
        for item, target in zip(files, targets, strict=True):
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(item.content, encoding="utf-8")
            written.append(target)
        return written


def compile_site(
    project: WebsiteProject,
    *,
    settings: CompilerSettings | None = None,
    clock: Clock = utc_now,
) -> list[GeneratedFile]:
    """Return the generated files for ``project``; shorthand for ``SiteBuilder``."""
    return SiteBuilder(project, settings=settings, clock=clock).assemble()


def _resolve_target(root: Path, name: str) -> Path:
    """Return ``root / name``, refusing names that escape ``root``."""
    target = (root / name).resolve()
    base = root.resolve()
    if not name or not target.is_relative_to(base) or target == base:
        msg = f"Generated file name '{name}' escapes the output directory."
        raise ProjectStructureError(msg)
    return target


__all__ = ["SiteBuilder", "compile_site"]
