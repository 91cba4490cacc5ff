"""Shared fixtures for the pagesmith test suite.

The ``project_payload`` fixture mirrors the JSON an external generator would
return: three pages (``index.html``, ``about.html``, ``contact.html``), one
component of every known variant, a component with the unknown type ``Foo``,
and a page that references a component id that does not exist. Tests build a
fresh payload per use so mutations never leak between them.
"""

from __future__ import annotations

import datetime as dt
import json
import typing as typ

import pytest

from pagesmith.config import WebsiteProject, build_project

if typ.TYPE_CHECKING:
    from pathlib import Path

FIXED_NOW = dt.datetime(2024, 3, 15, 12, 30, tzinfo=dt.UTC)

PALETTE: dict[str, str] = {
    "background": "#0f172a",
    "foreground": "#e2e8f0",
    "card": "#1e293b",
    "card-foreground": "#cbd5e1",
    "primary": "#3b82f6",
    "primary-foreground": "#ffffff",
}


def make_payload() -> dict[str, typ.Any]:
    """Return a representative project payload as decoded JSON."""
    return {
        "domain": "example.com",
        "topic": "Orbital logistics",
        "palette": dict(PALETTE),
        "seo": {
            "metaTitle": "Orbit & Co <Launch>",
            "metaDescription": "Cargo to orbit, on time.",
            "keywords": ["space", "logistics", "launch"],
        },
        "pages": [
            {
                "id": "home",
                "name": "Home",
                "path": "index.html",
                "componentIds": [
                    "hero-1",
                    "features-1",
                    "missing-1",
                    "testimonials-1",
                    "cta-1",
                ],
            },
            {
                "id": "about",
                "name": "About Us",
                "path": "about.html",
                "componentIds": ["content-1", "careers-1", "services-1"],
            },
            {
                "id": "contact",
                "name": "Contact",
                "path": "contact.html",
                "componentIds": ["mystery-1", "contact-1"],
            },
        ],
        "components": [
            {
                "id": "hero-1",
                "type": "Hero",
                "props": {
                    "title": "Launch <faster> today",
                    "description": "We move cargo.\n\n## Why us\n\nBecause orbit waits for no one.",
                    "ctaText": "Get started",
                    "ctaLink": "contact.html",
                },
            },
            {
                "id": "features-1",
                "type": "FeatureGrid",
                "props": {
                    "title": "Capabilities",
                    "description": "Everything you need.",
                    "items": [
                        {"id": "f1", "title": "Tracking", "description": "Live telemetry."},
                        {"id": "f2", "title": "Insurance", "description": "Fully covered."},
                        {"id": "f3", "title": "Support", "description": "Around the clock."},
                    ],
                },
            },
            {
                "id": "testimonials-1",
                "type": "Testimonials",
                "props": {
                    "title": "Clients",
                    "items": [
                        {
                            "id": "t1",
                            "quote": 'They said "ship it" & it shipped',
                            "author": "Ada",
                            "role": "CTO",
                        },
                        {"id": "t2", "quote": "Flawless.", "author": "Grace", "role": "CEO"},
                    ],
                },
            },
            {
                "id": "cta-1",
                "type": "CTA",
                "props": {
                    "title": "Ready?",
                    "description": "Book a slot.",
                    "ctaText": "Talk to us",
                },
            },
            {
                "id": "content-1",
                "type": "Content",
                "props": {"title": "Our story", "content": "# Beginnings\n\nIt started in a garage."},
            },
            {
                "id": "careers-1",
                "type": "CareerList",
                "props": {
                    "title": "Careers",
                    "description": "Join the crew.",
                    "items": [
                        {"id": "c1", "title": "Flight engineer", "description": "Keep it flying."},
                        {"id": "c2", "title": "Dispatcher", "description": "Keep it moving."},
                    ],
                },
            },
            {
                "id": "services-1",
                "type": "DetailedServiceList",
                "props": {
                    "title": "Services",
                    "description": "What we do.",
                    "items": [
                        {"id": "s1", "title": "Launch", "description": "Up."},
                        {"id": "s2", "title": "Transfer", "description": "Across."},
                        {"id": "s3", "title": "Return", "description": "Down."},
                    ],
                },
            },
            {
                "id": "contact-1",
                "type": "ContactForm",
                "props": {
                    "title": "Write to us",
                    "description": "We answer within a day.",
                    "formspreeEndpoint": "https://formspree.io/f/abc123",
                },
            },
            {"id": "mystery-1", "type": "Foo", "props": {"title": "???"}},
        ],
    }


@pytest.fixture
def project_payload() -> dict[str, typ.Any]:
    """Return a fresh, mutable copy of the representative payload."""
    return make_payload()


@pytest.fixture
def project(project_payload: dict[str, typ.Any]) -> WebsiteProject:
    """Build the representative payload into a project snapshot."""
    return build_project(project_payload)


@pytest.fixture
def fixed_clock() -> typ.Callable[[], dt.datetime]:
    """Return a clock frozen at ``FIXED_NOW``."""
    return lambda: FIXED_NOW


@pytest.fixture
def project_file(tmp_path: Path, project_payload: dict[str, typ.Any]) -> Path:
    """Write the representative payload to ``site.json`` and return its path."""
    path = tmp_path / "site.json"
    path.write_text(json.dumps(project_payload), encoding="utf-8")
    return path
