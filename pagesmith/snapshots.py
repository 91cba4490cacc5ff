"""Track whole-snapshot replacements of a website project.

Refinement never patches a project in place: an external refiner receives the
current snapshot plus a natural-language instruction and returns a complete new
:class:`~pagesmith.config.WebsiteProject`. :class:`SnapshotHistory` records
each accepted snapshot so the caller can roll back to the previous one. Pass
``limit`` to cap how many snapshots are retained.

Example
-------
>>> history = SnapshotHistory(project)  # doctest: +SKIP
>>> history.refine(refiner, "Make the hero punchier")  # doctest: +SKIP
>>> history.rollback() is project  # doctest: +SKIP
True
"""

from __future__ import annotations

import logging
import typing as typ

if typ.TYPE_CHECKING:
    from .config import WebsiteProject

logger = logging.getLogger(__name__)


class SnapshotHistoryError(RuntimeError):
    """Raised when a rollback is requested with no earlier snapshot."""


class ProjectRefiner(typ.Protocol):
    """Collaborator that rewrites a whole project from an instruction."""

    def __call__(self, project: WebsiteProject, instruction: str) -> WebsiteProject:
        """Return a complete replacement for ``project``."""
        ...


class SnapshotHistory:
    """Ordered record of accepted project snapshots, newest last."""

    def __init__(self, initial: WebsiteProject, *, limit: int | None = None) -> None:
        """Start the history at ``initial``.

        Parameters
        ----------
        initial : WebsiteProject
            First accepted snapshot.
        limit : int, optional
            Maximum number of snapshots retained, current included. The oldest
            snapshots are dropped once it is exceeded. ``None`` keeps all.
        """
        if limit is not None and limit < 1:
            msg = f"Snapshot limit must be at least 1, got {limit}."
            raise ValueError(msg)
        self.limit = limit
        self._snapshots: list[WebsiteProject] = [initial]

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def current(self) -> WebsiteProject:
        """Return the newest accepted snapshot."""
        return self._snapshots[-1]

    def replace(self, project: WebsiteProject) -> WebsiteProject:
        """Accept ``project`` as the new current snapshot and return it."""
        self._snapshots.append(project)
        if self.limit is not None and len(self._snapshots) > self.limit:
            dropped = len(self._snapshots) - self.limit
            del self._snapshots[:dropped]
            logger.debug("Dropped %d oldest snapshot(s)", dropped)
        return project

    def refine(self, refiner: ProjectRefiner, instruction: str) -> WebsiteProject:
        """Ask ``refiner`` for a new snapshot and accept it.

        Exceptions raised by the refiner propagate and leave the history
        unchanged.
        """
        updated = refiner(self.current, instruction)
        logger.info("Accepted refined snapshot for %s", updated.domain)
        return self.replace(updated)

    def rollback(self) -> WebsiteProject:
        """Discard the current snapshot and return the previous one.

        Raises
        ------
        SnapshotHistoryError
            If only the initial snapshot remains.
        """
        if len(self._snapshots) < 2:  # noqa: PLR2004 - initial plus one
            msg = "No earlier snapshot to roll back to."
            raise SnapshotHistoryError(msg)
        self._snapshots.pop()
        return self.current


__all__ = ["ProjectRefiner", "SnapshotHistory", "SnapshotHistoryError"]
