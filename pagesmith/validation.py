"""Non-fatal diagnostics for website project snapshots.

The compiler tolerates dangling references, unknown component types and
duplicate identifiers by degrading visibly. :func:`find_project_issues` reports
those same conditions up front so a caller can surface them before a build,
without changing what the compiler emits.

Example
-------
>>> from pagesmith.validation import find_project_issues
>>> issues = find_project_issues(project)  # doctest: +SKIP
>>> [issue.code for issue in issues]  # doctest: +SKIP
['dangling-component']
"""

from __future__ import annotations

import collections
import dataclasses as dc
import re
import typing as typ

from ._constants import INDEX_PAGE_PATH
from .config import ComponentType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import WebsiteProject

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
FUNCTIONAL_COLOR = re.compile(r"^[a-zA-Z-]+\([^()]*\)$")
NAMED_COLOR = re.compile(r"^[a-zA-Z]+$")

ERROR = "error"
WARNING = "warning"


@dc.dataclass(slots=True, frozen=True)
class ProjectIssue:
    """A single diagnostic about a project snapshot.

    Attributes
    ----------
    severity : str
        ``"error"`` for conditions that produce visibly degraded output,
        ``"warning"`` for conditions that only look suspicious.
    code : str
        Stable kebab-case identifier, e.g. ``"dangling-component"``.
    message : str
        Human-readable description.
    subject : str
        Id, path or palette key the issue refers to.
    """

    severity: str
    code: str
    message: str
    subject: str


def find_project_issues(project: WebsiteProject) -> list[ProjectIssue]:
    """Return every diagnostic for ``project`` in a stable order."""
    issues: list[ProjectIssue] = []
    issues.extend(
        _duplicates(
            (item.id for item in project.components),
            code="duplicate-component-id",
            label="Component id",
        )
    )
    issues.extend(
        _duplicates(
            (page.id for page in project.pages),
            code="duplicate-page-id",
            label="Page id",
        )
    )
    issues.extend(
        _duplicates(
            (page.path for page in project.pages),
            code="duplicate-page-path",
            label="Page path",
        )
    )
    issues.extend(_dangling_references(project))
    issues.extend(_component_problems(project))
    if project.pages and all(page.path != INDEX_PAGE_PATH for page in project.pages):
        issues.append(
            ProjectIssue(
                severity=WARNING,
                code="missing-index-page",
                message=f"No page is served from '{INDEX_PAGE_PATH}'; the logo link will 404.",
                subject=INDEX_PAGE_PATH,
            )
        )
    issues.extend(_palette_problems(project))
    return issues


def is_plausible_color(value: str) -> bool:
    """Return True when ``value`` looks like a CSS colour token."""
    text = value.strip()
    return bool(
        HEX_COLOR.match(text) or FUNCTIONAL_COLOR.match(text) or NAMED_COLOR.match(text)
    )


def _duplicates(
    values: cabc.Iterable[str], *, code: str, label: str
) -> list[ProjectIssue]:
    counts = collections.Counter(values)
    return [
        ProjectIssue(
            severity=ERROR,
            code=code,
            message=f"{label} '{value}' is declared {count} times.",
            subject=value,
        )
        for value, count in counts.items()
        if count > 1
    ]


def _dangling_references(project: WebsiteProject) -> list[ProjectIssue]:
    known = {item.id for item in project.components}
    issues: list[ProjectIssue] = []
    for page in project.pages:
        for component_id in page.component_ids:
            if component_id in known:
                continue
            issues.append(
                ProjectIssue(
                    severity=ERROR,
                    code="dangling-component",
                    message=(
                        f"Page '{page.id}' references missing component "
                        f"'{component_id}'."
                    ),
                    subject=component_id,
                )
            )
    return issues


def _component_problems(project: WebsiteProject) -> list[ProjectIssue]:
    issues: list[ProjectIssue] = []
    for item in project.components:
        if item.variant is None:
            issues.append(
                ProjectIssue(
                    severity=ERROR,
                    code="unknown-component-type",
                    message=f"Component '{item.id}' has unknown type '{item.type}'.",
                    subject=item.id,
                )
            )
        elif item.variant is ComponentType.CONTACT_FORM and not item.props.formspree_endpoint:
            issues.append(
                ProjectIssue(
                    severity=WARNING,
                    code="missing-form-endpoint",
                    message=f"Contact form '{item.id}' has no formspreeEndpoint.",
                    subject=item.id,
                )
            )
    return issues


def _palette_problems(project: WebsiteProject) -> list[ProjectIssue]:
    return [
        ProjectIssue(
            severity=WARNING,
            code="suspicious-color",
            message=f"Palette '{name}' value {value!r} does not look like a CSS colour.",
            subject=name,
        )
        for name, value in project.palette.as_css_variables()
        if not is_plausible_color(value)
    ]


__all__ = ["ERROR", "WARNING", "ProjectIssue", "find_project_issues", "is_plausible_color"]
