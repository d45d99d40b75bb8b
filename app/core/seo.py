"""SEO metadata and schema.org structured data for blog pages.

Builders are deterministic: the current time is passed in as `now` by the
route handler instead of being read here.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence

from app.core.categories import category_listing_url, category_title
from app.core.content import plain_description, post_word_count
from app.core.settings import Settings
from app.providers.content_types import Post

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"
LANGUAGE = "en-US"

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630
LOGO_WIDTH = 600
LOGO_HEIGHT = 60

POST_DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%Y-%m-%d")

LOCALE = "en_US"
TWITTER_HANDLE = "@GeniusLabs"
LISTING_OG_IMAGE = "https://picsum.photos/1200/630?random=og"
LISTING_TWITTER_IMAGE = "https://picsum.photos/1200/630?random=twitter"

# Escaped so a document can never close its <script> element
_JSON_LD_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "'": "\\u0027"}

MISSING_POST_DESCRIPTION = "The requested blog post could not be found."

# Organization details rendered on every page
ORGANIZATION_SAME_AS = (
    "https://www.facebook.com/people/Genius-Labs/61551390680852/",
    "https://www.instagram.com/genius_labs.live/",
)
ORGANIZATION_CONTACT = {
    "@type": "ContactPoint",
    "telephone": "+91 9468074074",
    "contactType": "customer service",
    "email": "info@geniuslabs.live",
    "availableLanguage": "English",
}
ORGANIZATION_ADDRESS = {
    "@type": "PostalAddress",
    "streetAddress": "SkymarkOne, Ground Floor",
    "addressLocality": "Sector 98, Noida",
    "addressRegion": "Uttar Pradesh",
    "postalCode": "201303",
    "addressCountry": "IN",
}


@dataclass(frozen=True)
class PageMetadata:
    """Title and description for any page."""

    title: str
    description: str


@dataclass(frozen=True)
class PostMetadata:
    """Everything a post page emits in its <head>."""

    title: str
    description: str
    keywords: str
    canonical_url: str
    open_graph_image: dict[str, Any]
    open_graph: dict[str, Any]
    twitter: dict[str, Any]
    article_structured_data: dict[str, Any]

    @property
    def structured_data(self) -> list[dict[str, Any]]:
        return [self.article_structured_data]


@dataclass(frozen=True)
class ListingMetadata:
    """Metadata for the listing page, optionally filtered by category."""

    headline: str
    description: str
    category_title: str
    blog: dict[str, Any]
    breadcrumb: dict[str, Any]
    canonical_url: str
    open_graph: dict[str, Any]
    twitter: dict[str, Any]
    category: str | None = None
    keywords: str = ""

    @property
    def page_title(self) -> str:
        return f"{self.category_title} Blogs"

    @property
    def blog_posting_list(self) -> list[dict[str, Any]]:
        return self.blog["blogPost"]

    @property
    def structured_data(self) -> list[dict[str, Any]]:
        return [self.blog, self.breadcrumb]


def parse_post_date(raw: str) -> datetime | None:
    """Parse a display date like "April 5, 2023" as midnight UTC."""
    text = (raw or "").strip()
    for fmt in POST_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    logger.warning(f"Unparseable post date: {raw!r}")
    return None


def iso_instant(value: datetime | None) -> str | None:
    """ISO-8601 UTC instant with millisecond precision, e.g. 2023-04-05T00:00:00.000Z."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def post_url(settings: Settings, slug: str) -> str:
    return f"{settings.site_url}/blog/{slug}"


def author_url(settings: Settings, author: str) -> str:
    """Author archive URL: name lowercased, whitespace runs become hyphens."""
    slug = re.sub(r"\s+", "-", author.lower())
    return f"{settings.site_url}/author/{slug}"


def post_keywords(settings: Settings, post: Post) -> str:
    return f"{post.category}, {settings.site_name.lower()}, education, learning"


def _publisher(settings: Settings) -> dict[str, Any]:
    return {
        "@type": "Organization",
        "name": settings.site_name,
        "logo": {
            "@type": "ImageObject",
            "url": settings.logo_url,
            "width": LOGO_WIDTH,
            "height": LOGO_HEIGHT,
        },
    }


def build_post_metadata(post: Post, settings: Settings, now: datetime) -> PostMetadata:
    """Head metadata and BlogPosting structured data for a post page."""
    description = plain_description(post.excerpt)
    canonical = post_url(settings, post.slug)
    keywords = post_keywords(settings, post)
    published = iso_instant(parse_post_date(post.date))

    og_image = {
        "url": post.cover_image,
        "width": OG_IMAGE_WIDTH,
        "height": OG_IMAGE_HEIGHT,
        "alt": post.title,
    }
    open_graph = {
        "title": post.title,
        "description": description,
        "type": "article",
        "publishedTime": published,
        "authors": [post.author],
        "tags": [post.category, "education", "learning"],
        "images": [og_image],
    }
    twitter = {
        "card": "summary_large_image",
        "title": post.title,
        "description": description,
        "images": [post.cover_image],
    }
    article = {
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": post.title,
        "description": description,
        "image": post.cover_image,
        "datePublished": published,
        "dateModified": iso_instant(now),
        "author": {
            "@type": "Person",
            "name": post.author,
            "url": author_url(settings, post.author),
        },
        "publisher": _publisher(settings),
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": canonical,
        },
        "keywords": keywords,
        "articleSection": post.category,
        "wordCount": post_word_count(post),
        "inLanguage": LANGUAGE,
    }
    return PostMetadata(
        title=post.title,
        description=description,
        keywords=keywords,
        canonical_url=canonical,
        open_graph_image=og_image,
        open_graph=open_graph,
        twitter=twitter,
        article_structured_data=article,
    )


def build_missing_post_metadata(settings: Settings) -> PageMetadata:
    return PageMetadata(
        title=f"Post Not Found - {settings.blog_name}",
        description=MISSING_POST_DESCRIPTION,
    )


def listing_headline(settings: Settings) -> str:
    return f"{settings.blog_name} - Educational Resources for Young Innovators"


def listing_description(settings: Settings) -> str:
    return (
        "Discover educational resources, workshops, and learning opportunities for children. "
        f"{settings.site_name} helps young minds explore STEM, arts, and creative thinking."
    )


def build_listing_metadata(
    category: str | None,
    posts: Sequence[Post],
    settings: Settings,
    now: datetime,
) -> ListingMetadata:
    """Blog and BreadcrumbList structured data for the listing page.

    Breadcrumbs are Home and Blog, plus the title-cased category when a
    filter is active.
    """
    category = category or None
    title = category_title(category)
    headline = listing_headline(settings)
    description = listing_description(settings)

    blog_posts = []
    for post in posts:
        published = iso_instant(parse_post_date(post.date))
        blog_posts.append(
            {
                "@type": "BlogPosting",
                "headline": post.title,
                "description": plain_description(post.excerpt),
                "datePublished": published,
                "dateModified": published,
                "author": {
                    "@type": "Person",
                    "name": post.author,
                },
                "url": post_url(settings, post.slug),
                "image": post.cover_image,
                "keywords": post_keywords(settings, post),
                "articleSection": post.category,
            }
        )

    blog = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Blog",
        "headline": headline,
        "description": description,
        "url": settings.site_url,
        "publisher": _publisher(settings),
        "inLanguage": LANGUAGE,
        "copyrightYear": now.year,
        "copyrightHolder": {
            "@type": "Organization",
            "name": settings.site_name,
        },
        "blogPost": blog_posts,
    }

    crumbs = [
        {
            "@type": "ListItem",
            "position": 1,
            "name": "Home",
            "item": settings.organization_url,
        },
        {
            "@type": "ListItem",
            "position": 2,
            "name": "Blog",
            "item": settings.site_url,
        },
    ]
    if category:
        crumbs.append(
            {
                "@type": "ListItem",
                "position": 3,
                "name": title,
                "item": category_listing_url(settings.site_url, category),
            }
        )
    breadcrumb = {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": crumbs,
    }

    canonical = category_listing_url(settings.site_url, category)
    open_graph = {
        "title": headline,
        "description": description,
        "url": canonical,
        "siteName": settings.blog_name,
        "images": [
            {
                "url": LISTING_OG_IMAGE,
                "width": OG_IMAGE_WIDTH,
                "height": OG_IMAGE_HEIGHT,
                "alt": headline,
            }
        ],
        "locale": LOCALE,
        "type": "website",
    }
    twitter = {
        "card": "summary_large_image",
        "title": headline,
        "description": "Discover educational resources, workshops, and learning opportunities for children",
        "images": [LISTING_TWITTER_IMAGE],
        "creator": TWITTER_HANDLE,
        "site": TWITTER_HANDLE,
    }

    return ListingMetadata(
        headline=headline,
        description=description,
        category_title=title,
        blog=blog,
        breadcrumb=breadcrumb,
        canonical_url=canonical,
        open_graph=open_graph,
        twitter=twitter,
        category=category,
        keywords=(
            f"{settings.site_name.lower()}, educational resources, STEM for kids, "
            "children's workshops, educational camps, learning projects, creative thinking"
        ),
    )


def build_organization_data(settings: Settings) -> dict[str, Any]:
    """Organization document emitted on every page."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": settings.site_name,
        "url": settings.organization_url,
        "logo": settings.logo_url,
        "sameAs": list(ORGANIZATION_SAME_AS),
        "contactPoint": dict(ORGANIZATION_CONTACT),
        "address": dict(ORGANIZATION_ADDRESS),
        "description": (
            f"{settings.site_name} provides innovative educational programs and resources for "
            "children to explore STEM, arts, and creative thinking in a fun and engaging "
            "environment."
        ),
    }


def to_json_ld(document: dict[str, Any]) -> str:
    """Serialise a structured-data document for a <script type="application/ld+json"> body.

    Keys are sorted so the output is stable between renders, and characters
    that are significant to the HTML parser are written as unicode escapes.
    """
    text = json.dumps(document, sort_keys=True, ensure_ascii=False)
    for char, escaped in _JSON_LD_ESCAPES.items():
        text = text.replace(char, escaped)
    return text
