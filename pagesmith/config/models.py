"""Typed dataclasses describing a website project snapshot."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path


class ProjectStructureError(ValueError):
    """Raised when a project is missing a required structural element."""


class ComponentType(enum.StrEnum):
    """Closed set of component variants understood by the renderer."""

    LOGO = "Logo"
    HERO = "Hero"
    FEATURE_GRID = "FeatureGrid"
    CONTENT = "Content"
    CAREER_LIST = "CareerList"
    CONTACT_FORM = "ContactForm"
    TESTIMONIALS = "Testimonials"
    CTA = "CTA"
    DETAILED_SERVICE_LIST = "DetailedServiceList"


PALETTE_KEYS: tuple[str, ...] = (
    "background",
    "foreground",
    "card",
    "card-foreground",
    "primary",
    "primary-foreground",
)


@dc.dataclass(slots=True, frozen=True)
class ColorPalette:
    """Six opaque colour tokens applied uniformly to every page."""

    background: str
    foreground: str
    card: str
    card_foreground: str
    primary: str
    primary_foreground: str

    def as_css_variables(self) -> list[tuple[str, str]]:
        """Return ``(custom property name, value)`` pairs in palette order."""
        return [
            ("background", self.background),
            ("foreground", self.foreground),
            ("card", self.card),
            ("card-foreground", self.card_foreground),
            ("primary", self.primary),
            ("primary-foreground", self.primary_foreground),
        ]


@dc.dataclass(slots=True, frozen=True)
class SEO:
    """Search metadata emitted into every page head."""

    meta_title: str = ""
    meta_description: str = ""
    keywords: tuple[str, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class ComponentItem:
    """Entry within a list-valued component such as a feature grid."""

    id: str
    title: str = ""
    description: str = ""
    icon: str | None = None
    quote: str | None = None
    author: str | None = None
    role: str | None = None


@dc.dataclass(slots=True, frozen=True)
class ComponentProps:
    """Variant-shaped bag of optional component fields.

    Attributes
    ----------
    title : str or None
        Heading or visible label for the component.
    subtitle : str or None
        Secondary heading; carried through but not rendered by any variant.
    description : str or None
        Prose rendered through :func:`pagesmith.formatter.format_content`.
    content : str or None
        Long-form prose for ``Content`` components.
    cta_text : str or None
        Call-to-action label.
    cta_link : str or None
        Call-to-action target; renderers fall back to ``#``.
    items : tuple[ComponentItem, ...]
        Ordered entries for grid and list variants. Defaults to empty.
    formspree_endpoint : str or None
        Contact form POST target, emitted verbatim.
    """

    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    content: str | None = None
    cta_text: str | None = None
    cta_link: str | None = None
    items: tuple[ComponentItem, ...] = ()
    formspree_endpoint: str | None = None


@dc.dataclass(slots=True, frozen=True)
class WebsiteComponent:
    """One content block of a fixed variant type.

    ``type`` keeps the raw tag supplied by the producer so unrecognised
    variants survive ingestion and degrade at render time instead.
    """

    id: str
    type: str
    props: ComponentProps = dc.field(default_factory=ComponentProps)

    @property
    def variant(self) -> ComponentType | None:
        """Return the matching :class:`ComponentType` or ``None`` when unknown."""
        try:
            return ComponentType(self.type)
        except ValueError:
            return None


@dc.dataclass(slots=True, frozen=True)
class WebsitePage:
    """Routing metadata and ordered component references for one page."""

    id: str
    name: str
    path: str
    component_ids: tuple[str, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class WebsiteProject:
    """Immutable snapshot of an entire website project."""

    domain: str
    topic: str
    palette: ColorPalette
    seo: SEO
    pages: tuple[WebsitePage, ...]
    components: tuple[WebsiteComponent, ...]

    def find_page(self, page_id: str) -> WebsitePage | None:
        """Return the first page whose id matches ``page_id``."""
        return next((page for page in self.pages if page.id == page_id), None)

    def find_component(self, component_id: str) -> WebsiteComponent | None:
        """Return the first component whose id matches ``component_id``."""
        return next(
            (item for item in self.components if item.id == component_id), None
        )


@dc.dataclass(slots=True, frozen=True)
class GeneratedFile:
    """A named file body produced by a compile pass."""

    name: str
    content: str


@dc.dataclass(slots=True)
class CompilerSettings:
    """Build options that sit outside the project snapshot."""

    output_dir: Path = Path("public")
    base_url: str | None = None
    language: str = "en"


__all__ = [
    "PALETTE_KEYS",
    "SEO",
    "ColorPalette",
    "CompilerSettings",
    "ComponentItem",
    "ComponentProps",
    "ComponentType",
    "GeneratedFile",
    "ProjectStructureError",
    "WebsiteComponent",
    "WebsitePage",
    "WebsiteProject",
]
