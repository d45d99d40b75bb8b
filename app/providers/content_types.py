"""Blog post content types.

Records are frozen so the post collection can be shared across requests
without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class SectionImage:
    """An image shown below a section's body text."""

    src: str
    alt: str
    caption: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> SectionImage:
        return cls(
            src=raw.get("src", ""),
            alt=raw.get("alt", ""),
            caption=raw.get("caption"),
        )


@dataclass(frozen=True)
class PostSection:
    """A titled section of a post body."""

    title: str
    content: str
    image: SectionImage | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> PostSection:
        image = raw.get("image")
        return cls(
            title=raw.get("title", ""),
            content=raw.get("content", ""),
            image=SectionImage.from_dict(image) if image else None,
        )


@dataclass(frozen=True)
class Quote:
    text: str
    author: str


@dataclass(frozen=True)
class PostContent:
    """Structured body of a post. Every part is optional."""

    introduction: str | None = None
    sections: tuple[PostSection, ...] = ()
    quote: Quote | None = None
    conclusion: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> PostContent:
        quote = raw.get("quote")
        return cls(
            introduction=raw.get("introduction"),
            sections=tuple(PostSection.from_dict(s) for s in raw.get("sections") or ()),
            quote=Quote(text=quote["text"], author=quote["author"]) if quote else None,
            conclusion=raw.get("conclusion"),
        )


@dataclass(frozen=True)
class Post:
    """A single blog article, keyed by its slug."""

    slug: str
    title: str
    excerpt: str
    cover_image: str
    author: str
    date: str  # display string, e.g. "April 5, 2023"
    read_time: str
    category: str
    background_color: str = ""
    author_bio: str | None = None
    content: PostContent | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Post:
        """Build a post from a mapping using the authoring (camelCase) keys."""
        content = raw.get("content")
        return cls(
            slug=raw["slug"],
            title=raw["title"],
            excerpt=raw.get("excerpt", ""),
            cover_image=raw.get("coverImage", ""),
            author=raw.get("author", ""),
            date=raw.get("date", ""),
            read_time=raw.get("readTime", ""),
            category=raw.get("category", ""),
            background_color=raw.get("backgroundColor", ""),
            author_bio=raw.get("authorBio"),
            content=PostContent.from_dict(content) if content is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization."""
        data: dict[str, Any] = {
            "slug": self.slug,
            "title": self.title,
            "excerpt": self.excerpt,
            "coverImage": self.cover_image,
            "author": self.author,
            "authorBio": self.author_bio,
            "date": self.date,
            "readTime": self.read_time,
            "category": self.category,
            "backgroundColor": self.background_color,
            "content": None,
        }
        if self.content is not None:
            data["content"] = {
                "introduction": self.content.introduction,
                "sections": [
                    {
                        "title": s.title,
                        "content": s.content,
                        "image": (
                            {"src": s.image.src, "alt": s.image.alt, "caption": s.image.caption}
                            if s.image
                            else None
                        ),
                    }
                    for s in self.content.sections
                ],
                "quote": (
                    {"text": self.content.quote.text, "author": self.content.quote.author}
                    if self.content.quote
                    else None
                ),
                "conclusion": self.content.conclusion,
            }
        return data
