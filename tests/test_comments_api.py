from ringconnect.modules.notifications.models.notification import Notification


def comments_url(post_id):
    return f"/api/v1/posts/{post_id}/comments"


def test_comment_tree_with_replies(client, make_post, auth_headers, other_auth_headers):
    post = make_post()
    url = comments_url(post.id)

    root = client.post(url, json={"content": "Que luta!"}, headers=other_auth_headers)
    assert root.status_code == 201
    root_id = root.json()["id"]
    reply = client.post(url, json={"content": "Valeu!", "parent_id": root_id}, headers=auth_headers).json()
    client.post(url, json={"content": "Demais", "parent_id": reply["id"]}, headers=other_auth_headers)

    tree = client.get(url).json()
    assert len(tree) == 1
    assert tree[0]["id"] == root_id
    assert tree[0]["replies_count"] == 1
    assert tree[0]["author"]["username"] == "bruno_coach"
    assert tree[0]["replies"][0]["replies"][0]["content"] == "Demais"

    flat = client.get(url, params={"flatten": True}).json()
    assert [r["content"] for r in flat[0]["replies"]] == ["Valeu!", "Demais"]


def test_parent_on_another_post_is_rejected(client, make_post, auth_headers):
    first = make_post()
    second = make_post(content="Outro round")
    parent = client.post(comments_url(first.id), json={"content": "Oi"}, headers=auth_headers).json()

    response = client.post(
        comments_url(second.id),
        json={"content": "Resposta", "parent_id": parent["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_missing_parent_is_not_found(client, make_post, auth_headers):
    post = make_post()

    response = client.post(comments_url(post.id), json={"content": "Oi", "parent_id": "nope"}, headers=auth_headers)

    assert response.status_code == 404


def test_blank_comment_is_rejected(client, make_post, auth_headers):
    post = make_post()

    assert client.post(comments_url(post.id), json={"content": "   "}, headers=auth_headers).status_code == 422


def test_comment_and_reply_notifications(client, db_session, make_post, user, other_user, auth_headers, other_auth_headers):
    post = make_post()
    root = client.post(comments_url(post.id), json={"content": "Boa"}, headers=other_auth_headers).json()
    client.post(comments_url(post.id), json={"content": "Obrigado", "parent_id": root["id"]}, headers=auth_headers)

    to_author = db_session.query(Notification).filter(Notification.user_id == user.id).all()
    to_commenter = db_session.query(Notification).filter(Notification.user_id == other_user.id).all()
    assert [n.type for n in to_author] == ["post_comment"]
    assert [n.type for n in to_commenter] == ["comment_reply"]


def test_reply_to_post_author_comment_notifies_once(client, db_session, make_post, user, other_user, auth_headers, other_auth_headers):
    post = make_post()
    own = client.post(comments_url(post.id), json={"content": "Quem vem treinar?"}, headers=auth_headers).json()
    client.post(comments_url(post.id), json={"content": "Eu!", "parent_id": own["id"]}, headers=other_auth_headers)

    to_author = db_session.query(Notification).filter(Notification.user_id == user.id).all()
    assert [n.type for n in to_author] == ["comment_reply"]
    assert to_author[0].actor_id == other_user.id


def test_edit_marks_comment_edited_and_checks_owner(client, make_post, auth_headers, other_auth_headers):
    post = make_post()
    created = client.post(comments_url(post.id), json={"content": "Primeira"}, headers=auth_headers).json()
    assert created["is_edited"] is False

    url = f"{comments_url(post.id)}/{created['id']}"
    assert client.put(url, json={"content": "Hack"}, headers=other_auth_headers).status_code == 403

    edited = client.put(url, json={"content": "Editada"}, headers=auth_headers).json()
    assert edited["content"] == "Editada"
    assert edited["is_edited"] is True


def test_delete_removes_replies(client, make_post, auth_headers, other_auth_headers):
    post = make_post()
    url = comments_url(post.id)
    root = client.post(url, json={"content": "Raiz"}, headers=auth_headers).json()
    client.post(url, json={"content": "Filho", "parent_id": root["id"]}, headers=other_auth_headers)

    response = client.delete(f"{url}/{root['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert client.get(url).json() == []


def test_like_toggle(client, make_post, auth_headers, other_auth_headers):
    post = make_post()
    created = client.post(comments_url(post.id), json={"content": "Curte aí"}, headers=auth_headers).json()
    like_url = f"{comments_url(post.id)}/{created['id']}/like"

    assert client.post(like_url, headers=other_auth_headers).json() == {"liked": True, "like_count": 1}
    tree = client.get(comments_url(post.id), headers=other_auth_headers).json()
    assert tree[0]["like_count"] == 1
    assert tree[0]["viewer_has_liked"] is True
    assert client.post(like_url, headers=other_auth_headers).json() == {"liked": False, "like_count": 0}
