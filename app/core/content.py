"""Table of contents and body blocks for a post page."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.providers.content_types import Post, PostContent, SectionImage

INTRODUCTION_TITLE = "Introduction"
INTRODUCTION_ANCHOR = "introduction"
CONCLUSION_TITLE = "Looking Ahead"
CONCLUSION_ANCHOR = "looking-ahead"

# Used when a section title slugifies to nothing
EMPTY_ANCHOR = "section"

DESCRIPTION_MAX_LENGTH = 160

_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^>]*>?")


def slugify(text: str) -> str:
    """Lowercase and collapse each whitespace run into one hyphen."""
    return _WHITESPACE_RE.sub("-", (text or "").lower())


def strip_tags(text: str | None) -> str:
    """Remove markup tags, plus any stray angle bracket left behind."""
    cleaned = _TAG_RE.sub("", text or "")
    return cleaned.replace(">", "")


def plain_description(text: str | None, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Tag-stripped text cut to `max_length` characters (hard cut)."""
    return strip_tags(text)[:max_length]


def word_count(text: str | None) -> int:
    return len(text.split()) if text else 0


def placeholder_image_url(slug: str, index: int | None = None) -> str:
    """Stand-in image for posts or sections authored without one."""
    key = slug if index is None else f"{slug}-{index}"
    return f"https://picsum.photos/800/400?random={key}"


@dataclass(frozen=True)
class TocEntry:
    """One in-page navigation link."""

    title: str
    anchor_id: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "anchorId": self.anchor_id}


class BlockKind(str, Enum):
    """Types of blocks in a rendered post body, in page order."""

    INTRODUCTION = "introduction"
    SECTION = "section"
    QUOTE = "quote"
    CONCLUSION = "conclusion"


@dataclass(frozen=True)
class ContentBlock:
    """A block of the post body handed to the templates.

    Text is passed through untouched; escaping happens at render time.
    """

    kind: BlockKind
    text: str
    title: str | None = None
    anchor_id: str | None = None
    image: SectionImage | None = None
    attribution: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "title": self.title,
            "anchorId": self.anchor_id,
            "image": (
                {"src": self.image.src, "alt": self.image.alt, "caption": self.image.caption}
                if self.image
                else None
            ),
            "attribution": self.attribution,
        }


def section_anchors(content: PostContent) -> list[str]:
    """Anchor ids for each section, in order.

    Repeated anchors get a numeric suffix: the second "faq" becomes "faq-2",
    the third "faq-3". Anchors reserved for the introduction and conclusion
    count as already taken.
    """
    taken = {INTRODUCTION_ANCHOR, CONCLUSION_ANCHOR}
    counts: dict[str, int] = {}
    anchors = []
    for section in content.sections:
        base = slugify(section.title)
        if not base.strip("-"):
            base = EMPTY_ANCHOR
        n = counts.get(base, 1)
        anchor = base
        while anchor in taken:
            n += 1
            anchor = f"{base}-{n}"
        counts[base] = n
        taken.add(anchor)
        anchors.append(anchor)
    return anchors


def build_table_of_contents(post: Post) -> list[TocEntry]:
    """Navigation entries for a post page.

    A post with a content object always starts with the Introduction entry,
    whether or not it has introduction text, and ends with Looking Ahead only
    when it has a conclusion. A post without content has no entries.
    """
    content = post.content
    if content is None:
        return []

    toc = [TocEntry(INTRODUCTION_TITLE, INTRODUCTION_ANCHOR)]
    for section, anchor in zip(content.sections, section_anchors(content)):
        toc.append(TocEntry(section.title, anchor))
    if content.conclusion:
        toc.append(TocEntry(CONCLUSION_TITLE, CONCLUSION_ANCHOR))
    return toc


def render_body(post: Post) -> list[ContentBlock]:
    """Ordered body blocks; absent parts are skipped."""
    content = post.content
    if content is None:
        return []

    blocks: list[ContentBlock] = []
    if content.introduction:
        blocks.append(
            ContentBlock(
                kind=BlockKind.INTRODUCTION,
                text=content.introduction,
                anchor_id=INTRODUCTION_ANCHOR,
            )
        )

    anchors = section_anchors(content)
    for index, section in enumerate(content.sections):
        image = section.image
        if image is not None and not image.src:
            image = SectionImage(
                src=placeholder_image_url(post.slug, index),
                alt=image.alt,
                caption=image.caption,
            )
        blocks.append(
            ContentBlock(
                kind=BlockKind.SECTION,
                text=section.content,
                title=section.title,
                anchor_id=anchors[index],
                image=image,
            )
        )

    if content.quote is not None:
        blocks.append(
            ContentBlock(
                kind=BlockKind.QUOTE,
                text=content.quote.text,
                attribution=content.quote.author,
            )
        )

    if content.conclusion:
        blocks.append(
            ContentBlock(
                kind=BlockKind.CONCLUSION,
                text=content.conclusion,
                title=CONCLUSION_TITLE,
                anchor_id=CONCLUSION_ANCHOR,
            )
        )
    return blocks


def post_word_count(post: Post) -> int:
    """Words in introduction, all sections and conclusion."""
    content = post.content
    if content is None:
        return 0
    return (
        word_count(content.introduction)
        + sum(word_count(section.content) for section in content.sections)
        + word_count(content.conclusion)
    )
