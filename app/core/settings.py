from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    app_env: str = "dev"
    log_level: str = "INFO"
    site_url: str = "https://blog.geniuslabs.edu"
    site_name: str = "Genius Labs"
    organization_url: str = "https://geniuslabs.live/"
    hero_interval_seconds: float = 5.0
    related_posts_limit: int = 4
    not_found_sample_size: int = 3
    hero_autostart: bool = True

    def __post_init__(self) -> None:
        if self.hero_interval_seconds <= 0:
            raise ValueError(f"HERO_INTERVAL_SECONDS must be positive, got {self.hero_interval_seconds}")
        if self.related_posts_limit < 0:
            raise ValueError(f"RELATED_POSTS_LIMIT must not be negative, got {self.related_posts_limit}")
        if self.not_found_sample_size < 0:
            raise ValueError(f"NOT_FOUND_SAMPLE_SIZE must not be negative, got {self.not_found_sample_size}")

    @property
    def blog_name(self) -> str:
        return f"{self.site_name} Blog"

    @property
    def logo_url(self) -> str:
        return f"{self.site_url}/logo.png"

    @staticmethod
    def from_env() -> "Settings":
        def _b(name: str, default: str) -> bool:
            return os.getenv(name, default).strip() in ("1", "true", "True", "yes", "YES")

        def _i(name: str, default: str) -> int:
            return int(os.getenv(name, default).strip())

        return Settings(
            app_env=os.getenv("APP_ENV", "dev").strip(),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            site_url=os.getenv("SITE_URL", "https://blog.geniuslabs.edu").strip().rstrip("/"),
            site_name=os.getenv("SITE_NAME", "Genius Labs").strip(),
            organization_url=os.getenv("ORGANIZATION_URL", "https://geniuslabs.live/").strip(),
            hero_interval_seconds=float(os.getenv("HERO_INTERVAL_SECONDS", "5").strip()),
            related_posts_limit=_i("RELATED_POSTS_LIMIT", "4"),
            not_found_sample_size=_i("NOT_FOUND_SAMPLE_SIZE", "3"),
            hero_autostart=_b("HERO_AUTOSTART", "1"),
        )
