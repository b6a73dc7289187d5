from ringconnect.modules.notifications.models.notification import Notification
from ringconnect.modules.posts.reactions.models.reaction import Reaction


def reactions_url(post_id):
    return f"/api/v1/posts/{post_id}/reactions"


def test_reaction_toggle_never_duplicates_rows(client, db_session, make_post, other_user, other_auth_headers):
    post = make_post()
    url = reactions_url(post.id)

    response = client.put(url, json={"reaction_type": "gowild"}, headers=other_auth_headers)
    assert response.status_code == 200
    assert response.json()["viewer_kind"] == "gowild"
    assert response.json()["summary"] == {"count": 1, "top_kind": "gowild", "viewer_kind": "gowild"}

    response = client.put(url, json={"reaction_type": "cleanhit"}, headers=other_auth_headers)
    assert response.json()["viewer_kind"] == "cleanhit"
    assert db_session.query(Reaction).filter(Reaction.post_id == post.id).count() == 1

    response = client.put(url, json={"reaction_type": "cleanhit"}, headers=other_auth_headers)
    assert response.json()["viewer_kind"] is None
    assert response.json()["summary"]["count"] == 0
    assert db_session.query(Reaction).filter(Reaction.post_id == post.id).count() == 0


def test_reaction_notifies_author_but_not_self(client, db_session, make_post, user, auth_headers, other_auth_headers):
    post = make_post()

    client.put(reactions_url(post.id), json={"reaction_type": "gowild"}, headers=auth_headers)
    assert db_session.query(Notification).count() == 0

    client.put(reactions_url(post.id), json={"reaction_type": "championmove"}, headers=other_auth_headers)
    notification = db_session.query(Notification).filter(Notification.user_id == user.id).one()
    assert notification.type == "post_reaction"
    assert notification.content == "reagiu ao seu round com 🏆 Champion’s Move"
    assert notification.related_post_id == post.id


def test_reaction_list_and_summary_for_viewer(client, make_post, auth_headers, other_auth_headers):
    post = make_post()
    client.put(reactions_url(post.id), json={"reaction_type": "ontarget"}, headers=auth_headers)
    client.put(reactions_url(post.id), json={"reaction_type": "tooheavy"}, headers=other_auth_headers)

    response = client.get(reactions_url(post.id), headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert len(body["items"]) == 2
    assert body["summary"]["viewer_kind"] == "ontarget"
    assert body["summary"]["top_kind"] == "ontarget"

    anonymous = client.get(f"{reactions_url(post.id)}/summary").json()
    assert anonymous["count"] == 2
    assert anonymous["viewer_kind"] is None


def test_unknown_kind_is_rejected(client, make_post, auth_headers):
    post = make_post()

    response = client.put(reactions_url(post.id), json={"reaction_type": "like"}, headers=auth_headers)

    assert response.status_code == 422


def test_reacting_requires_session_and_post(client, make_post, auth_headers):
    post = make_post()

    assert client.put(reactions_url(post.id), json={"reaction_type": "gowild"}).status_code == 401
    assert client.put(reactions_url("missing"), json={"reaction_type": "gowild"}, headers=auth_headers).status_code == 404
