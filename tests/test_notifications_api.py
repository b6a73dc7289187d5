NOTIFICATIONS = "/api/v1/notifications"


def test_list_read_and_delete(client, user, other_user, auth_headers, other_auth_headers):
    client.post(f"/api/v1/follows/{user.id}", headers=other_auth_headers)
    client.post("/api/v1/messages", json={"receiver_id": user.id, "message": "oi"}, headers=other_auth_headers)

    items = client.get(NOTIFICATIONS, headers=auth_headers).json()
    assert {n["type"] for n in items} == {"user_follow", "chat_message"}
    assert all(n["actor"]["id"] == other_user.id for n in items)
    assert client.get(f"{NOTIFICATIONS}/unread-count", headers=auth_headers).json()["count"] == 2

    first = items[0]["id"]
    assert client.put(f"{NOTIFICATIONS}/{first}", json={"read": True}, headers=other_auth_headers).status_code == 403
    assert client.put(f"{NOTIFICATIONS}/{first}", json={"read": True}, headers=auth_headers).json()["read"] is True
    assert client.get(f"{NOTIFICATIONS}/unread-count", headers=auth_headers).json()["count"] == 1

    assert client.put(f"{NOTIFICATIONS}/mark-all-read", headers=auth_headers).json()["count"] == 1
    assert client.get(f"{NOTIFICATIONS}/unread-count", headers=auth_headers).json()["count"] == 0

    assert client.delete(f"{NOTIFICATIONS}/{first}", headers=auth_headers).status_code == 200
    assert client.delete(NOTIFICATIONS, headers=auth_headers).json()["count"] == 1
    assert client.get(NOTIFICATIONS, headers=auth_headers).json() == []


def test_missing_notification(client, auth_headers):
    assert client.put(f"{NOTIFICATIONS}/missing", json={"read": True}, headers=auth_headers).status_code == 404
