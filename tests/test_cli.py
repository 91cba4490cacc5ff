"""Tests for the ``pagesmith`` command functions."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup

from pagesmith import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def test_build_writes_site_and_reports_paths(
    project_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    out_dir = tmp_path / "public"
    cli.build(project=project_file, output_dir=out_dir)
    names = sorted(path.name for path in out_dir.iterdir())
    assert names == ["about.html", "contact.html", "index.html", "robots.txt", "sitemap.xml"]
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(line.startswith("wrote ") for line in lines)
    assert lines[-1].endswith("sitemap.xml")


def test_build_merges_settings_file_and_overrides(
    project_file: Path, tmp_path: Path, mocker: MockerFixture
) -> None:
    """Command-line options take precedence over the settings file."""
    settings_path = tmp_path / "pagesmith.yaml"
    settings_path.write_text(
        "output_dir: from-settings\nbase_url: https://settings.example\nlanguage: fr\n",
        encoding="utf-8",
    )
    builder = mocker.patch.object(cli, "SiteBuilder")
    builder.return_value.write.return_value = []

    cli.build(
        project=project_file,
        settings=settings_path,
        base_url="https://override.example/",
    )

    settings = builder.call_args.kwargs["settings"]
    assert str(settings.output_dir) == "from-settings"
    assert settings.base_url == "https://override.example"
    assert settings.language == "fr"


def test_page_prints_single_document(
    project_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.page("about", project=project_file)
    soup = BeautifulSoup(capsys.readouterr().out, "html.parser")
    assert soup.select_one(".site-nav a.is-current")["href"] == "about.html"


def test_page_with_unknown_id_prints_error_document(
    project_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.page("ghost", project=project_file)
    assert "Error: Page with ID &#39;ghost&#39; not found." in capsys.readouterr().out


def test_check_exits_non_zero_on_errors(
    project_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.check(project=project_file)
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "error: dangling-component:" in out
    assert "error: unknown-component-type:" in out


def test_check_json_output_decodes(
    project_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit):
        cli.check(project=project_file, json=True)
    issues = msgspec_json.decode(capsys.readouterr().out)
    assert [issue["code"] for issue in issues] == [
        "dangling-component",
        "unknown-component-type",
    ]
    assert issues[0]["subject"] == "missing-1"


def test_check_reports_clean_project(
    tmp_path: Path,
    project_payload: dict[str, typ.Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    project_payload["pages"] = [
        {"id": "home", "name": "Home", "path": "index.html", "componentIds": ["hero-1"]}
    ]
    project_payload["components"] = project_payload["components"][:1]
    path = tmp_path / "clean.json"
    path.write_bytes(msgspec_json.encode(project_payload))
    cli.check(project=path)
    assert capsys.readouterr().out.strip() == "no issues found"
