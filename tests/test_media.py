import pytest

from ringconnect.core.config import settings
from ringconnect.core.exceptions import InvalidOperationError, MediaValidationError
from ringconnect.modules.media.service import MediaService, get_media_service

MEDIA = "/api/v1/media"


def test_validate_upload_kinds_and_limits():
    assert MediaService.validate_upload("image/png", 1024) == "image"
    assert MediaService.validate_upload("VIDEO/MP4", settings.MAX_IMAGE_UPLOAD_SIZE + 1) == "video"

    with pytest.raises(MediaValidationError) as too_big:
        MediaService.validate_upload("image/jpeg", settings.MAX_IMAGE_UPLOAD_SIZE + 1)
    assert too_big.value.too_large is True

    with pytest.raises(MediaValidationError) as too_long:
        MediaService.validate_upload("video/mp4", settings.MAX_VIDEO_UPLOAD_SIZE + 1)
    assert too_long.value.too_large is True

    for content_type in ("application/pdf", "", None):
        with pytest.raises(MediaValidationError) as unsupported:
            MediaService.validate_upload(content_type, 10)
        assert unsupported.value.too_large is False


def test_store_rejects_unknown_bucket():
    with pytest.raises(InvalidOperationError):
        get_media_service().store(b"x", "a.png", "image/png", "secrets")


def test_upload_then_serve(client, auth_headers):
    response = client.post(
        f"{MEDIA}/upload",
        params={"bucket": "videos"},
        files={"file": ("golpe.mp4", b"fake video bytes", "video/mp4")},
        headers=auth_headers,
    )

    assert response.status_code == 201
    stored = response.json()
    assert stored["media_type"] == "video"
    assert stored["path"].startswith("videos/") and stored["path"].endswith(".mp4")
    assert stored["size"] == len(b"fake video bytes")

    served = client.get(f"{MEDIA}/{stored['path']}")
    assert served.status_code == 200
    assert served.content == b"fake video bytes"
    assert served.headers["content-type"].startswith("video/mp4")


def test_upload_requires_session(client):
    response = client.post(f"{MEDIA}/upload", files={"file": ("a.png", b"png", "image/png")})

    assert response.status_code == 401


def test_missing_media_is_not_found(client):
    assert client.get(f"{MEDIA}/post-media/does-not-exist.jpg").status_code == 404


def test_avatar_must_be_an_image(client, auth_headers):
    response = client.post(
        "/api/v1/users/me/avatar",
        files={"file": ("clip.mp4", b"video", "video/mp4")},
        headers=auth_headers,
    )
    assert response.status_code == 415

    response = client.post(
        "/api/v1/users/me/avatar",
        files={"file": ("me.png", b"png bytes", "image/png")},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert "/avatars/" in response.json()["avatar_url"]
