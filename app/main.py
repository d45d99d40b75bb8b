from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from app.core.categories import category_listing_url, category_title
from app.core.content import build_table_of_contents, placeholder_image_url, render_body
from app.core.hero import HeroCarousel
from app.core.posts import PostRepository, load_repository
from app.core.seo import (
    build_listing_metadata,
    build_missing_post_metadata,
    build_organization_data,
    build_post_metadata,
    to_json_ld,
)
from app.core.settings import Settings

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

logger = logging.getLogger(__name__)

jinja = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)
jinja.filters["category_title"] = category_title
jinja.filters["json_ld"] = lambda document: Markup(to_json_ld(document))
jinja.globals["placeholder_image_url"] = placeholder_image_url


def render(template_name: str, status_code: int = 200, **ctx) -> HTMLResponse:
    template = jinja.get_template(template_name)
    return HTMLResponse(template.render(**ctx), status_code=status_code)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s | %(message)s",
    )


def create_app(
    settings: Settings | None = None,
    repository: PostRepository | None = None,
    carousel: HeroCarousel | None = None,
) -> FastAPI:
    """Build the blog application.

    The repository and carousel are created here unless supplied, and are
    reachable from handlers through `request.app.state`.
    """
    settings = settings or Settings.from_env()
    _configure_logging(settings)

    app = FastAPI(title=settings.blog_name)
    app.state.settings = settings
    app.state.repository = repository if repository is not None else load_repository()
    app.state.carousel = carousel or HeroCarousel(interval=settings.hero_interval_seconds)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.on_event("startup")
    async def _startup() -> None:
        repo: PostRepository = app.state.repository
        logger.info(
            f"{settings.blog_name} starting ({settings.app_env}): "
            f"{len(repo)} posts, categories={repo.categories()}"
        )
        if settings.hero_autostart:
            app.state.carousel.start()

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        await app.state.carousel.stop()

    def _page_context(request: Request) -> dict:
        repo: PostRepository = request.app.state.repository
        return {
            "request": request,
            "settings": settings,
            "organization": build_organization_data(settings),
            "categories": repo.categories(),
        }

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request, category: str | None = None, slide: int | None = None):
        """Listing page, optionally filtered by ?category=.

        ?slide=N selects a hero slide, as the carousel indicators do.
        Out-of-range values are logged and ignored.
        """
        repo: PostRepository = request.app.state.repository
        carousel: HeroCarousel = request.app.state.carousel
        if slide is not None:
            try:
                carousel.go_to(slide)
            except ValueError as e:
                logger.warning(f"Ignoring hero slide selection: {e}")
        category = category or None
        posts = repo.filter_by_category(category)
        meta = build_listing_metadata(category, posts, settings, now=_now())
        return render(
            "home.html",
            **_page_context(request),
            meta=meta,
            posts=posts,
            active_category=category,
            carousel=carousel,
        )

    @app.get("/blog/{slug}", response_class=HTMLResponse)
    def post_detail(request: Request, slug: str):
        """Single post page. Unknown slugs get the fallback page."""
        repo: PostRepository = request.app.state.repository
        post = repo.find_by_slug(slug)
        if post is None:
            logger.warning(f"Post not found: {slug}")
            return render(
                "post_not_found.html",
                **_page_context(request),
                meta=build_missing_post_metadata(settings),
                suggestions=repo.sample_posts(settings.not_found_sample_size),
            )

        return render(
            "post_detail.html",
            **_page_context(request),
            meta=build_post_metadata(post, settings, now=_now()),
            post=post,
            toc=build_table_of_contents(post),
            blocks=render_body(post),
            related=repo.related_posts(post.slug, post.category, settings.related_posts_limit),
        )

    # ==================== JSON API ====================

    @app.get("/api/posts")
    def api_posts(request: Request, category: str | None = None):
        """List posts, optionally filtered by exact category."""
        repo: PostRepository = request.app.state.repository
        posts = repo.filter_by_category(category or None)
        return {
            "category": category or None,
            "count": len(posts),
            "posts": [post.to_dict() for post in posts],
        }

    @app.get("/api/posts/{slug}")
    def api_post(request: Request, slug: str):
        """A post with its table of contents, body blocks and related posts."""
        repo: PostRepository = request.app.state.repository
        post = repo.find_by_slug(slug)
        if post is None:
            return JSONResponse({"error": "Post not found"}, status_code=404)

        meta = build_post_metadata(post, settings, now=_now())
        related = repo.related_posts(post.slug, post.category, settings.related_posts_limit)
        return {
            "post": post.to_dict(),
            "tableOfContents": [entry.to_dict() for entry in build_table_of_contents(post)],
            "blocks": [block.to_dict() for block in render_body(post)],
            "related": [p.slug for p in related],
            "metadata": {
                "title": meta.title,
                "description": meta.description,
                "canonicalUrl": meta.canonical_url,
                "openGraphImage": meta.open_graph_image,
                "articleStructuredData": meta.article_structured_data,
            },
        }

    @app.get("/api/posts/{slug}/toc")
    def api_post_toc(request: Request, slug: str):
        repo: PostRepository = request.app.state.repository
        post = repo.find_by_slug(slug)
        if post is None:
            return JSONResponse({"error": "Post not found"}, status_code=404)
        return {"slug": slug, "tableOfContents": [e.to_dict() for e in build_table_of_contents(post)]}

    @app.get("/api/categories")
    def api_categories(request: Request):
        repo: PostRepository = request.app.state.repository
        return {
            "categories": [
                {
                    "category": c,
                    "title": category_title(c),
                    "url": category_listing_url(settings.site_url, c),
                    "count": len(repo.filter_by_category(c)),
                }
                for c in repo.categories()
            ]
        }

    @app.get("/api/hero")
    def api_hero(request: Request):
        """Current carousel state."""
        return request.app.state.carousel.to_dict()

    @app.post("/api/hero/{index}")
    def api_hero_select(request: Request, index: int):
        """Jump to a slide. The rotation continues from there."""
        carousel: HeroCarousel = request.app.state.carousel
        try:
            carousel.go_to(index)
        except ValueError as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        return carousel.to_dict()

    @app.get("/health")
    def health(request: Request):
        return {"status": "ok", "posts": len(request.app.state.repository)}

    return app


app = create_app()
