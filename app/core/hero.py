"""Hero carousel state and its periodic rotation.

The rotation runs as an asyncio task started with the application and
cancelled on shutdown. Index changes are guarded by a lock because sync
route handlers read the carousel from the thread pool.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from dataclasses import dataclass
from typing import Any, Sequence

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 5.0  # seconds between slides


@dataclass(frozen=True)
class HeroSlide:
    id: int
    image_url: str
    alt: str
    title: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "imageUrl": self.image_url,
            "alt": self.alt,
            "title": self.title,
        }


DEFAULT_SLIDES: tuple[HeroSlide, ...] = (
    HeroSlide(
        id=1,
        image_url="https://picsum.photos/1200/600?random=1",
        alt="Featured blog post about culinary workshops and food experiences",
        title="Culinary Workshops",
    ),
    HeroSlide(
        id=2,
        image_url="https://picsum.photos/1200/600?random=2",
        alt="Educational camps for children featuring hands-on learning activities",
        title="Educational Camps",
    ),
    HeroSlide(
        id=3,
        image_url="https://picsum.photos/1200/600?random=1",
        alt="Projects created by genius kids showcasing innovation and creativity",
        title="Genius Kids Projects",
    ),
)


class HeroCarousel:
    """Cyclic slide index advanced on a fixed interval."""

    def __init__(
        self,
        slides: Sequence[HeroSlide] = DEFAULT_SLIDES,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.slides: tuple[HeroSlide, ...] = tuple(slides)
        self.interval = interval
        self._index = 0
        self._lock = threading.Lock()
        self._task: asyncio.Task | None = None

    @property
    def current_index(self) -> int:
        with self._lock:
            return self._index

    @property
    def current_slide(self) -> HeroSlide | None:
        with self._lock:
            return self.slides[self._index] if self.slides else None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def advance(self) -> int:
        """Move to the next slide, wrapping around. Returns the new index."""
        with self._lock:
            if self.slides:
                self._index = (self._index + 1) % len(self.slides)
            return self._index

    def go_to(self, index: int) -> HeroSlide:
        """Jump to a slide, as the indicator buttons do."""
        with self._lock:
            if not 0 <= index < len(self.slides):
                raise ValueError(f"Slide index out of range: {index}")
            self._index = index
            return self.slides[index]

    async def _rotate(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.advance()

    def start(self) -> asyncio.Task:
        """Schedule the rotation on the running loop. Idempotent."""
        if self.running:
            return self._task  # type: ignore[return-value]
        self._task = asyncio.get_running_loop().create_task(self._rotate())
        logger.info(f"Hero carousel rotating {len(self.slides)} slides every {self.interval}s")
        return self._task

    async def stop(self) -> None:
        """Cancel the rotation and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Hero carousel stopped")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "currentIndex": self.current_index,
            "interval": self.interval,
            "running": self.running,
            "slides": [slide.to_dict() for slide in self.slides],
        }
