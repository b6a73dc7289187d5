from ringconnect.modules.notifications.models.notification import Notification

FOLLOWS = "/api/v1/follows"


def test_follow_flow(client, db_session, user, other_user, auth_headers):
    response = client.post(f"{FOLLOWS}/{other_user.id}", headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["follower_id"] == user.id

    assert client.get(f"{FOLLOWS}/{other_user.id}/status", headers=auth_headers).json() == {"is_following": True}
    assert client.get(f"{FOLLOWS}/{other_user.id}/status").json() == {"is_following": False}
    assert client.get(f"{FOLLOWS}/{other_user.id}/stats").json() == {"followers": 1, "following": 0}

    followers = client.get(f"{FOLLOWS}/{other_user.id}/followers").json()
    assert followers["total"] == 1
    assert followers["items"][0]["id"] == user.id

    notification = db_session.query(Notification).filter(Notification.user_id == other_user.id).one()
    assert notification.type == "user_follow"
    assert notification.content == "entrou para sua torcida!"


def test_self_follow_is_rejected(client, user, auth_headers):
    assert client.post(f"{FOLLOWS}/{user.id}", headers=auth_headers).status_code == 400


def test_duplicate_follow_conflicts(client, other_user, auth_headers):
    client.post(f"{FOLLOWS}/{other_user.id}", headers=auth_headers)

    assert client.post(f"{FOLLOWS}/{other_user.id}", headers=auth_headers).status_code == 409


def test_follow_missing_user(client, auth_headers):
    assert client.post(f"{FOLLOWS}/missing", headers=auth_headers).status_code == 404


def test_unfollow(client, other_user, auth_headers):
    assert client.delete(f"{FOLLOWS}/{other_user.id}", headers=auth_headers).status_code == 404

    client.post(f"{FOLLOWS}/{other_user.id}", headers=auth_headers)
    assert client.delete(f"{FOLLOWS}/{other_user.id}", headers=auth_headers).status_code == 200
    assert client.get(f"{FOLLOWS}/{other_user.id}/stats").json()["followers"] == 0
