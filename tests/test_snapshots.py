"""Tests for whole-snapshot refinement and rollback."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest

from pagesmith import SnapshotHistory, SnapshotHistoryError

if typ.TYPE_CHECKING:
    from pagesmith.config import WebsiteProject


def _retitle(project: WebsiteProject, instruction: str) -> WebsiteProject:
    return dc.replace(project, seo=dc.replace(project.seo, meta_title=instruction))


def test_refine_replaces_whole_snapshot(project: WebsiteProject) -> None:
    history = SnapshotHistory(project)
    updated = history.refine(_retitle, "New title")
    assert updated is history.current
    assert updated.seo.meta_title == "New title"
    assert project.seo.meta_title == "Orbit & Co <Launch>"
    assert len(history) == 2


def test_rollback_restores_previous_snapshot(project: WebsiteProject) -> None:
    history = SnapshotHistory(project)
    history.refine(_retitle, "One")
    history.refine(_retitle, "Two")
    assert history.rollback().seo.meta_title == "One"
    assert history.rollback() is project
    assert len(history) == 1


def test_rollback_without_history_raises(project: WebsiteProject) -> None:
    history = SnapshotHistory(project)
    with pytest.raises(SnapshotHistoryError, match="No earlier snapshot"):
        history.rollback()
    assert history.current is project


def test_failed_refinement_leaves_history_unchanged(project: WebsiteProject) -> None:
    """A refiner error propagates and the current snapshot is kept."""

    def _broken(_project: WebsiteProject, _instruction: str) -> WebsiteProject:
        msg = "model unavailable"
        raise RuntimeError(msg)

    history = SnapshotHistory(project)
    with pytest.raises(RuntimeError, match="model unavailable"):
        history.refine(_broken, "anything")
    assert history.current is project
    assert len(history) == 1


def test_replace_accepts_external_snapshot(project: WebsiteProject) -> None:
    history = SnapshotHistory(project)
    other = dc.replace(project, domain="other.example")
    assert history.replace(other) is other
    assert history.current.domain == "other.example"


def test_limit_drops_oldest_snapshots(project: WebsiteProject) -> None:
    """A capped history keeps only the newest ``limit`` snapshots."""
    history = SnapshotHistory(project, limit=3)
    for title in ("One", "Two", "Three", "Four"):
        history.refine(_retitle, title)
    assert len(history) == 3
    assert history.current.seo.meta_title == "Four"
    assert history.rollback().seo.meta_title == "Three"
    assert history.rollback().seo.meta_title == "Two"
    with pytest.raises(SnapshotHistoryError):
        history.rollback()


@pytest.mark.parametrize("limit", [0, -2])
def test_limit_must_keep_current_snapshot(project: WebsiteProject, limit: int) -> None:
    with pytest.raises(ValueError, match="at least 1"):
        SnapshotHistory(project, limit=limit)
