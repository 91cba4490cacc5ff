"""Common literal values used across pagesmith.

These constants keep filenames, CDN locations and sitemap priorities
centralized so templates, generators, and tests import the same values without
drifting. Intended for internal use within the pagesmith package.

Examples
--------
>>> from pagesmith import _constants
>>> _constants.SITEMAP_FILENAME
'sitemap.xml'
>>> _constants.priority_for("index.html")
'1.00'
"""

ROBOTS_FILENAME = "robots.txt"
SITEMAP_FILENAME = "sitemap.xml"
INDEX_PAGE_PATH = "index.html"

INDEX_PRIORITY = "1.00"
DEFAULT_PRIORITY = "0.80"

TAILWIND_CDN = "https://cdn.tailwindcss.com"
FONT_STYLESHEET = (
    "https://fonts.googleapis.com/css2?"
    "family=Inter:wght@400;500;600;700;800;900&display=swap"
)


def priority_for(path: str) -> str:
    """Return the sitemap priority for a page file path."""
    return INDEX_PRIORITY if path == INDEX_PAGE_PATH else DEFAULT_PRIORITY
