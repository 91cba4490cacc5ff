r"""Turn loosely structured prose into escaped HTML blocks.

Generated copy arrives as plain text where blank lines separate paragraphs and
leading ``#``, ``##`` or ``###`` markers introduce headings. This module is the
single place that prose passes through on its way into a page, so every block
it emits is HTML-escaped before being wrapped in markup.

Example
-------
>>> from pagesmith.formatter import format_content
>>> str(format_content("## Intro\n\nHello <world>"))
'<h3 class="text-2xl font-bold mb-4 mt-8 animate-on-scroll">Intro</h3><p class="mb-6 animate-on-scroll">Hello &lt;world&gt;</p>'
"""

from __future__ import annotations

import dataclasses as dc
import html
import re

from markupsafe import Markup

BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


@dc.dataclass(slots=True, frozen=True)
class BlockStyle:
    """Heading marker and the tag/classes it maps to."""

    marker: str
    tag: str
    classes: str


# Most specific marker first.
HEADING_STYLES: tuple[BlockStyle, ...] = (
    BlockStyle("###", "h4", "text-xl font-semibold mb-4 mt-6 animate-on-scroll"),
    BlockStyle("##", "h3", "text-2xl font-bold mb-4 mt-8 animate-on-scroll"),
    BlockStyle("#", "h2", "text-3xl font-bold mb-6 mt-10 animate-on-scroll"),
)
PARAGRAPH_CLASSES = "mb-6 animate-on-scroll"


def escape_html(text: str | None) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` in ``text``."""
    return html.escape(text or "", quote=True)


def split_blocks(text: str | None) -> list[str]:
    """Split prose on blank lines and return the trimmed blocks in order."""
    if not text:
        return []
    return [block.strip() for block in BLOCK_SEPARATOR.split(text)]


def format_block(block: str) -> str:
    """Render a single trimmed block, or ``""`` when it is empty."""
    for style in HEADING_STYLES:
        if block.startswith(style.marker):
            heading = block.replace(style.marker, "").strip()
            return f'<{style.tag} class="{style.classes}">{escape_html(heading)}</{style.tag}>'
    if block:
        return f'<p class="{PARAGRAPH_CLASSES}">{escape_html(block)}</p>'
    return ""


def format_content(text: str | None = None) -> Markup:
    """Convert prose into a safe markup fragment of headings and paragraphs.

    Parameters
    ----------
    text : str or None, optional
        Prose where blank lines separate blocks. ``None`` and ``""`` produce an
        empty fragment.

    Returns
    -------
    Markup
        Concatenated ``h2``/``h3``/``h4``/``p`` blocks in input order. All
        literal text is escaped, so the result can be embedded directly in a
        Jinja template without double escaping.
    """
    return Markup("".join(format_block(block) for block in split_blocks(text)))  # noqa: S704 - blocks are escaped above


__all__ = [
    "HEADING_STYLES",
    "escape_html",
    "format_block",
    "format_content",
    "split_blocks",
]
