from datetime import datetime

import pytest

from ringconnect.modules.home_feed.schemas.feed import SharedPost
from ringconnect.modules.home_feed.services.presenter import select_media, youtube_video_id
from ringconnect.modules.posts.schemas.post import Post

NOW = datetime(2025, 3, 1, 12, 0, 0)


def post(**fields):
    fields.setdefault("id", "p1")
    fields.setdefault("author_id", "u1")
    fields.setdefault("created_at", NOW)
    return Post(**fields)


@pytest.mark.parametrize("url, expected", [
    ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42", "dQw4w9WgXcQ"),
    ("https://m.youtube.com/watch?v=abc123", "abc123"),
    ("https://www.youtube.com/feed", None),
    ("https://vimeo.com/12345", None),
    ("not a url", None),
])
def test_youtube_video_id(url, expected):
    assert youtube_video_id(url) == expected


def test_round_always_quotes_original():
    shared = SharedPost(id="orig", content="Original", created_at=NOW)
    media = select_media(post(shared_from_post_id="orig", image_url="https://cdn/x.jpg"), shared)

    assert media.kind == "shared_quote"
    assert media.shared.id == "orig"


def test_round_quotes_original_over_its_own_unified_image():
    shared = SharedPost(id="orig", content="Original", created_at=NOW)
    media = select_media(
        post(shared_from_post_id="orig", media_type="image", media_url="https://cdn/round.jpg"),
        shared,
    )

    assert media.kind == "shared_quote"
    assert media.shared.id == "orig"


def test_round_with_missing_original():
    media = select_media(post(shared_from_post_id="gone"), None)

    assert media.kind == "shared_quote"
    assert media.shared is None


def test_unified_image_and_video():
    assert select_media(post(media_type="image", media_url="https://cdn/a.jpg")).model_dump() == {
        "kind": "image", "url": "https://cdn/a.jpg",
    }
    assert select_media(post(media_type="video", media_url="https://cdn/a.mp4")).kind == "video"


def test_unified_type_falls_back_to_legacy_url():
    media = select_media(post(media_type="image", image_url="https://cdn/legacy.jpg"))

    assert media.kind == "image"
    assert media.url == "https://cdn/legacy.jpg"


def test_link_with_preview_becomes_card():
    media = select_media(post(
        media_type="link",
        link_url="https://news.example.org/luta",
        link_preview={"title": "Luta", "site": "news.example.org", "unknown": 1},
    ))

    assert media.kind == "link_card"
    assert media.url == "https://news.example.org/luta"
    assert media.preview.title == "Luta"
    assert media.preview.description == ""


def test_malformed_preview_falls_through_to_bare_link():
    media = select_media(post(
        media_type="link",
        link_url="https://news.example.org/luta",
        link_preview={"title": ["not", "a", "string"]},
    ))

    assert media.kind == "link_card"
    assert media.preview is None


def test_legacy_youtube_video_is_embedded():
    media = select_media(post(video_url="https://youtu.be/dQw4w9WgXcQ"))

    assert media.kind == "embedded_video"
    assert media.provider == "youtube"
    assert media.embed_url == "https://www.youtube.com/embed/dQw4w9WgXcQ"


def test_legacy_fields_in_order():
    assert select_media(post(image_url="https://cdn/a.jpg", video_url="https://cdn/a.mp4")).kind == "image"
    assert select_media(post(video_url="https://cdn/a.mp4")).kind == "video"
    assert select_media(post(link_url="https://example.org")).kind == "link_card"


def test_text_only_post_has_no_media():
    assert select_media(post(content="Só texto")).kind == "none"
