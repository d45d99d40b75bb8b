"""Tests for the web routes in main.py"""

import pytest
from fastapi.testclient import TestClient

from app.core.hero import HeroCarousel
from app.core.posts import PostRepository, load_repository
from app.core.settings import Settings
from app.main import create_app
from app.providers.content_types import Post


@pytest.fixture
def settings():
    return Settings(hero_autostart=False)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings=settings, repository=load_repository()))


class TestListingPage:
    def test_all_posts(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "All Categories Blogs" in response.text
        for slug in ("south-indian-cuisine-workshop", "environmental-innovation-challenge"):
            assert f'href="/blog/{slug}"' in response.text

    def test_category_filter(self, client):
        response = client.get("/", params={"category": "workshops"})
        assert response.status_code == 200
        assert "Workshops Blogs" in response.text
        assert 'href="/blog/photography-workshop-beginners"' in response.text
        assert 'href="/blog/summer-science-camp"' not in response.text

    def test_unknown_category_shows_empty_state(self, client):
        response = client.get("/", params={"category": "nonexistent"})
        assert response.status_code == 200
        assert "No posts found in this category" in response.text

    def test_structured_data_embedded(self, client):
        text = client.get("/", params={"category": "camps"}).text
        assert '"BreadcrumbList"' in text
        assert '"Blog"' in text
        assert '"Organization"' in text
        assert "?category=camps" in text

    def test_hero_slides_rendered(self, client):
        text = client.get("/").text
        assert "Educational Camps" in text
        assert 'class="hero-slide active"' in text

    def test_social_tags(self, client):
        text = client.get("/").text
        assert '<meta property="og:type" content="website">' in text
        assert '<meta property="og:image:width" content="1200">' in text
        assert '<meta name="twitter:site" content="@GeniusLabs">' in text

    def test_slide_selection(self, client):
        text = client.get("/", params={"slide": 2}).text
        assert client.app.state.carousel.current_index == 2
        assert 'class="hero-slide active" role="img" aria-label="Projects created by genius kids' in text
        assert 'class="hero-indicator active"' in text
        assert 'href="/?slide=0"' in text

    def test_slide_links_keep_category(self, client):
        text = client.get("/", params={"category": "camps"}).text
        assert 'href="/?category=camps&amp;slide=1"' in text

    def test_out_of_range_slide_ignored(self, client):
        response = client.get("/", params={"slide": 7})
        assert response.status_code == 200
        assert client.app.state.carousel.current_index == 0


class TestPostPage:
    def test_post_with_content(self, client):
        response = client.get("/blog/mysore-raman-idli-story")
        assert response.status_code == 200
        text = response.text
        assert "Table of Contents" in text
        assert 'href="#a-serendipitous-beginning"' in text
        assert 'id="looking-ahead"' in text
        assert "About Shivya Saha" in text
        assert "Related Blogs" in text
        assert 'href="/blog/wilderness-survival-camp"' in text
        assert '<link rel="canonical" href="https://blog.geniuslabs.edu/blog/mysore-raman-idli-story">' in text
        assert '"BlogPosting"' in text

    def test_post_without_content(self, client):
        response = client.get("/blog/summer-science-camp")
        assert response.status_code == 200
        assert "Table of Contents" not in response.text
        assert 'class="author-bio"' not in response.text

    def test_unknown_slug_renders_fallback(self, client):
        response = client.get("/blog/does-not-exist")
        assert response.status_code == 200
        text = response.text
        assert "We are unable to find the post that you are looking for." in text
        assert "Post Not Found - Genius Labs Blog" in text
        assert "Blogs you may like" in text
        assert text.count('<article class="post-card') == 3

    def test_fallback_with_small_repository(self, settings):
        repo = PostRepository(
            [
                Post(
                    slug="only",
                    title="Only Post",
                    excerpt="x",
                    cover_image="",
                    author="A",
                    date="April 5, 2023",
                    read_time="1 min",
                    category="c",
                )
            ]
        )
        client = TestClient(create_app(settings=settings, repository=repo))
        text = client.get("/blog/missing").text
        assert text.count('<article class="post-card') == 1
        assert "https://picsum.photos/800/400?random=only" in text

    def test_excerpt_markup_is_escaped(self, settings):
        repo = PostRepository(
            [
                Post(
                    slug="markup",
                    title="Markup",
                    excerpt="<script>alert(1)</script>Hello",
                    cover_image="",
                    author="A",
                    date="April 5, 2023",
                    read_time="1 min",
                    category="c",
                )
            ]
        )
        client = TestClient(create_app(settings=settings, repository=repo))
        text = client.get("/blog/markup").text
        assert "<script>alert(1)</script>" not in text
        assert 'content="alert(1)Hello"' in text

    def test_structured_data_cannot_close_script(self, settings):
        repo = PostRepository(
            [
                Post(
                    slug="script-title",
                    title="</script><b>Tom & Jerry</b>",
                    excerpt="x",
                    cover_image="",
                    author="A",
                    date="April 5, 2023",
                    read_time="1 min",
                    category="c",
                )
            ]
        )
        client = TestClient(create_app(settings=settings, repository=repo))
        text = client.get("/blog/script-title").text
        assert '"headline": "\\u003c/script\\u003e\\u003cb\\u003eTom \\u0026 Jerry' in text
        assert text.count("</script>") == text.count('<script type="application/ld+json">')

    def test_zero_related_limit(self):
        settings = Settings(hero_autostart=False, related_posts_limit=0, not_found_sample_size=0)
        client = TestClient(create_app(settings=settings, repository=load_repository()))
        assert client.get("/blog/mysore-raman-idli-story").status_code == 200
        missing = client.get("/blog/nope")
        assert missing.status_code == 200
        assert missing.text.count('<article class="post-card') == 0


class TestApi:
    def test_list_posts(self, client):
        data = client.get("/api/posts", params={"category": "workshops"}).json()
        assert data["count"] == 2
        assert [p["slug"] for p in data["posts"]] == [
            "south-indian-cuisine-workshop",
            "photography-workshop-beginners",
        ]

    def test_list_unknown_category(self, client):
        data = client.get("/api/posts", params={"category": "nonexistent"}).json()
        assert data["count"] == 0
        assert data["posts"] == []

    def test_post_detail(self, client):
        data = client.get("/api/posts/mysore-raman-idli-story").json()
        assert data["post"]["slug"] == "mysore-raman-idli-story"
        assert data["related"] == ["summer-science-camp", "wilderness-survival-camp"]
        assert data["tableOfContents"][0] == {"title": "Introduction", "anchorId": "introduction"}
        assert data["blocks"][0]["kind"] == "introduction"
        assert data["metadata"]["canonicalUrl"].endswith("/blog/mysore-raman-idli-story")

    def test_post_not_found(self, client):
        response = client.get("/api/posts/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    def test_toc(self, client):
        data = client.get("/api/posts/mysore-raman-idli-story/toc").json()
        assert [e["anchorId"] for e in data["tableOfContents"]] == [
            "introduction",
            "a-serendipitous-beginning",
            "from-hobby-to-profession",
            "building-a-loyal-following",
            "looking-ahead",
        ]

    def test_toc_not_found(self, client):
        assert client.get("/api/posts/nope/toc").status_code == 404

    def test_categories(self, client):
        data = client.get("/api/categories").json()
        assert data["categories"][0] == {
            "category": "workshops",
            "title": "Workshops",
            "url": "https://blog.geniuslabs.edu/?category=workshops",
            "count": 2,
        }

    def test_hero(self, client):
        data = client.get("/api/hero").json()
        assert data["currentIndex"] == 0
        assert data["running"] is False
        assert len(data["slides"]) == 3

    def test_hero_select(self, client):
        response = client.post("/api/hero/1")
        assert response.status_code == 200
        assert response.json()["currentIndex"] == 1
        assert client.get("/api/hero").json()["currentIndex"] == 1

    @pytest.mark.parametrize("index", [3, -1])
    def test_hero_select_out_of_range(self, client, index):
        response = client.post(f"/api/hero/{index}")
        assert response.status_code == 400
        assert "out of range" in response.json()["error"]
        assert client.get("/api/hero").json()["currentIndex"] == 0

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "posts": 14}


class TestLifecycle:
    def test_carousel_runs_while_app_is_up(self):
        carousel = HeroCarousel(interval=60)
        app = create_app(settings=Settings(), repository=load_repository(), carousel=carousel)
        with TestClient(app) as client:
            assert client.get("/api/hero").json()["running"] is True
        assert carousel.running is False
