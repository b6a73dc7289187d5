from ringconnect.core.config import settings

VIDEOS = "/api/v1/videos"
MEDIA = "/api/v1/media"


def upload(client, headers, title="Sparring de sexta", content=b"fake video bytes",
           content_type="video/mp4", filename="treino.mp4", **form):
    data = {"title": title}
    data.update(form)
    return client.post(
        VIDEOS,
        data=data,
        files={"file": (filename, content, content_type)},
        headers=headers,
    )


def media_path(video):
    return video["video_url"].split(f"{settings.API_V1_STR}/media/", 1)[1]


def test_upload_lists_in_gallery_as_pending(client, user, auth_headers):
    response = upload(client, auth_headers, description="  Round 2  ")

    assert response.status_code == 201
    video = response.json()
    assert video["status"] == "pending"
    assert video["description"] == "Round 2"
    assert video["owner"]["username"] == "ana.silva"
    assert media_path(video).startswith("videos/")

    served = client.get(f"{MEDIA}/{media_path(video)}")
    assert served.status_code == 200
    assert served.content == b"fake video bytes"

    gallery = client.get(VIDEOS).json()
    assert [v["id"] for v in gallery] == [video["id"]]
    assert client.get(f"{VIDEOS}/{video['id']}").json()["title"] == "Sparring de sexta"


def test_gallery_newest_first_and_filtered_by_user(client, user, other_user, auth_headers, other_auth_headers):
    first = upload(client, auth_headers, title="Primeiro").json()
    second = upload(client, other_auth_headers, title="Segundo").json()

    assert [v["id"] for v in client.get(VIDEOS).json()] == [second["id"], first["id"]]
    assert [v["id"] for v in client.get(VIDEOS, params={"user_id": user.id}).json()] == [first["id"]]


def test_only_videos_are_accepted(client, auth_headers):
    assert upload(client, auth_headers, content=b"png", content_type="image/png", filename="foto.png").status_code == 415
    assert upload(client, auth_headers, content=b"%PDF", content_type="application/pdf", filename="a.pdf").status_code == 415
    assert client.get(VIDEOS).json() == []


def test_video_size_limit(client, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "MAX_VIDEO_UPLOAD_SIZE", 8)

    assert upload(client, auth_headers, content=b"123456789").status_code == 413


def test_title_is_required(client, auth_headers):
    assert upload(client, auth_headers, title="   ").status_code == 400


def test_requires_session(client):
    response = client.post(VIDEOS, data={"title": "x"}, files={"file": ("a.mp4", b"v", "video/mp4")})

    assert response.status_code == 401


def test_only_owner_deletes_and_file_is_removed(client, auth_headers, other_auth_headers):
    video = upload(client, auth_headers).json()
    url = f"{VIDEOS}/{video['id']}"

    assert client.delete(url, headers=other_auth_headers).status_code == 403
    assert client.delete(url, headers=auth_headers).status_code == 204
    assert client.get(url).status_code == 404
    assert client.get(f"{MEDIA}/{media_path(video)}").status_code == 404
