"""Category display rules for the listing page.

Categories are free strings compared case-sensitively; nothing here
normalizes them, it only derives display titles and URLs.
"""

from urllib.parse import urlencode

ALL_CATEGORIES_TITLE = "All Categories"


def category_title(category: str | None) -> str:
    """Display title: first letter upper-cased, the rest unchanged.

    "how-to" -> "How-to", None -> "All Categories"
    """
    if not category:
        return ALL_CATEGORIES_TITLE
    return category[:1].upper() + category[1:]


def category_listing_url(base_url: str, category: str | None) -> str:
    """Listing URL filtered to `category`, or the bare listing URL."""
    base = base_url.rstrip("/")
    if not category:
        return f"{base}/"
    return f"{base}/?{urlencode({'category': category})}"
