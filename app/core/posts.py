"""Read-only post repository.

Holds the post collection loaded at startup and answers the lookups the
pages need. The collection is never mutated after construction.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from app.providers.content_types import Post

logger = logging.getLogger(__name__)

DEFAULT_RELATED_LIMIT = 4
DEFAULT_SAMPLE_SIZE = 3


class PostRepository:
    """Immutable, insertion-ordered collection of posts keyed by slug."""

    def __init__(self, posts: Iterable[Post]) -> None:
        self._posts: tuple[Post, ...] = tuple(posts)
        self._by_slug: dict[str, Post] = {}
        for post in self._posts:
            if post.slug in self._by_slug:
                raise ValueError(f"Duplicate post slug: {post.slug!r}")
            self._by_slug[post.slug] = post

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def all(self) -> list[Post]:
        """All posts in insertion order."""
        return list(self._posts)

    def find_by_slug(self, slug: str) -> Post | None:
        """Get post by exact slug, or None if there is no such post."""
        return self._by_slug.get(slug)

    def filter_by_category(self, category: str | None) -> list[Post]:
        """Posts whose category equals `category` exactly, in insertion order.

        No category (None or empty) returns every post. An unknown category
        returns an empty list.
        """
        if not category:
            return list(self._posts)
        return [post for post in self._posts if post.category == category]

    def related_posts(
        self,
        exclude_slug: str,
        category: str,
        limit: int = DEFAULT_RELATED_LIMIT,
    ) -> list[Post]:
        """Other posts in the same category, at most `limit`, in insertion order."""
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        related = [
            post
            for post in self._posts
            if post.slug != exclude_slug and post.category == category
        ]
        return related[:limit]

    def sample_posts(self, limit: int = DEFAULT_SAMPLE_SIZE) -> list[Post]:
        """First `limit` posts, used as suggestions when a lookup misses."""
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        return list(self._posts[:limit])

    def categories(self) -> list[str]:
        """Distinct categories in the order they first appear."""
        seen: dict[str, None] = {}
        for post in self._posts:
            seen.setdefault(post.category, None)
        return list(seen)


def load_repository() -> PostRepository:
    """Build the repository from the static post collection."""
    from app.providers.static_posts import load_posts

    repository = PostRepository(load_posts())
    logger.info(f"Loaded {len(repository)} posts in {len(repository.categories())} categories")
    return repository
