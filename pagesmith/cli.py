"""Cyclopts CLI entrypoint for compiling website projects into static files.

The ``pagesmith`` console script defined here reads a project description
(``.json`` or ``.yaml``), compiles every page plus ``robots.txt`` and
``sitemap.xml`` into an output folder, prints a single page to stdout, or
reports structural problems in the project before a build. Options can also
be supplied through ``PAGESMITH_*`` environment variables.

Examples
--------
Compile a project into ``public/``:

>>> from pagesmith.cli import main
>>> main()  # doctest: +SKIP

Compile into a custom directory with an absolute sitemap root:

>>> from pagesmith.cli import app
>>> app(
...     ["build", "--project", "site.json", "--output-dir", "dist",
...      "--base-url", "https://example.com"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .config import load_compiler_settings, load_project
from .generator import PageCompiler
from .site_builder import SiteBuilder
from .validation import ERROR, find_project_issues

DEFAULT_PROJECT = Path("site.json")

app = App(name="pagesmith", config=cyclopts.config.Env("PAGESMITH_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command(help="Compile every page, robots.txt and sitemap.xml to disk.")
def build(
    *,
    project: typ.Annotated[
        Path, Parameter(help="Path to the project JSON/YAML file")
    ] = DEFAULT_PROJECT,
    settings: typ.Annotated[
        Path | None, Parameter(help="Optional YAML file with build settings")
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    base_url: typ.Annotated[
        str | None, Parameter(help="Absolute site root used in sitemap.xml")
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log degraded components and pages")
    ] = False,
) -> None:
    """Compile ``project`` and write the generated files.

    Parameters
    ----------
    project : Path, optional
        Project description file; defaults to ``site.json``.
    settings : Path or None, optional
        YAML settings file providing ``output_dir``, ``base_url`` and
        ``language`` defaults.
    output_dir : Path or None, optional
        Overrides the settings output directory.
    base_url : str or None, optional
        Overrides the settings base URL; the project domain is used when
        neither is set.
    verbose : bool, optional
        Enable debug logging on stderr.

    Returns
    -------
    None
        Writes files and prints one ``wrote <path>`` line per file.
    """
    _configure_logging(verbose=verbose)
    site_project = load_project(project)
    build_settings = load_compiler_settings(settings)
    if output_dir is not None:
        build_settings = dc.replace(build_settings, output_dir=output_dir)
    if base_url:
        build_settings = dc.replace(build_settings, base_url=base_url.rstrip("/"))

    written = SiteBuilder(site_project, settings=build_settings).write()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the compiled HTML for a single page.")
def page(
    page_id: str,
    *,
    project: typ.Annotated[
        Path, Parameter(help="Path to the project JSON/YAML file")
    ] = DEFAULT_PROJECT,
) -> None:
    """Compile one page by id and write the document to stdout."""
    _configure_logging(verbose=False)
    compiler = PageCompiler(load_project(project))
    sys.stdout.write(compiler.compile_page(page_id))


@app.command(help="Report dangling references and other project problems.")
def check(
    *,
    project: typ.Annotated[
        Path, Parameter(help="Path to the project JSON/YAML file")
    ] = DEFAULT_PROJECT,
    json: typ.Annotated[  # noqa: A002 - mirrors the CLI flag
        bool, Parameter(help="Emit issues as a JSON array")
    ] = False,
) -> None:
    """Print project diagnostics and exit non-zero when any error is found.

    Raises
    ------
    SystemExit
        With status ``1`` when at least one ``error`` severity issue exists.
    """
    issues = find_project_issues(load_project(project))
    if json:
        print(msgspec_json.encode(issues).decode("utf-8"))
    elif not issues:
        print("no issues found")
    else:
        for issue in issues:
            print(f"{issue.severity}: {issue.code}: {issue.message}")
    if any(issue.severity == ERROR for issue in issues):
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pagesmith`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
