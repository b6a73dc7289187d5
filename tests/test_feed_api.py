from ringconnect.modules.profiles.services.user import create_user

FEED = "/api/v1/feed"


def test_feed_is_newest_first_with_pagination(client, make_post):
    for n in range(3):
        make_post(content=f"post {n}")

    page = client.get(FEED, params={"limit": 2}).json()

    assert page["total"] == 3
    assert page["has_more"] is True
    assert [i["post"]["content"] for i in page["items"]] == ["post 2", "post 1"]

    rest = client.get(FEED, params={"limit": 2, "skip": 2}).json()
    assert rest["has_more"] is False
    assert [i["post"]["content"] for i in rest["items"]] == ["post 0"]


def test_following_scope_needs_session(client):
    assert client.get(FEED, params={"scope": "following"}).status_code == 401


def test_following_scope_shows_followed_and_own_posts(
    client, db_session, make_post, user, other_user, auth_headers
):
    stranger = create_user(db_session, "rafa@ringconnect.app", "rafa", "password123")
    make_post(author=user, content="meu")
    make_post(author=other_user, content="do treinador")
    make_post(author=stranger, content="desconhecido")

    client.post(f"/api/v1/follows/{other_user.id}", headers=auth_headers)

    page = client.get(FEED, params={"scope": "following"}, headers=auth_headers).json()
    assert sorted(i["post"]["content"] for i in page["items"]) == ["do treinador", "meu"]


def test_feed_items_carry_viewer_reaction(client, make_post, auth_headers, other_auth_headers):
    post = make_post()
    client.put(f"/api/v1/posts/{post.id}/reactions", json={"reaction_type": "cleanhit"}, headers=other_auth_headers)

    as_reactor = client.get(FEED, headers=other_auth_headers).json()["items"][0]
    as_author = client.get(FEED, headers=auth_headers).json()["items"][0]

    assert as_reactor["reactions"]["viewer_kind"] == "cleanhit"
    assert as_author["reactions"]["viewer_kind"] is None
    assert as_author["reactions"]["top_kind"] == "cleanhit"


def test_invalid_token_is_rejected_even_on_public_feed(client):
    response = client.get(FEED, headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401
