import pytest

from ringconnect.core.exceptions import InvalidOperationError, PermissionDeniedError
from ringconnect.core.security import create_access_token
from ringconnect.modules.notifications.models.notification import Notification
from ringconnect.modules.profiles.services.user import create_user
from ringconnect.modules.sparring.services.sparring_request import next_sparring_status

SPARRING = "/api/v1/sparring-requests"


@pytest.mark.parametrize("requested, as_requested", [
    ("accepted", True),
    ("declined", True),
    ("cancelled", False),
])
def test_allowed_answers(requested, as_requested):
    assert next_sparring_status("pending", requested, as_requested) == requested


@pytest.mark.parametrize("requested, as_requested", [
    ("accepted", False),
    ("declined", False),
    ("cancelled", True),
])
def test_answers_reserved_to_one_side(requested, as_requested):
    with pytest.raises(PermissionDeniedError):
        next_sparring_status("pending", requested, as_requested)


@pytest.mark.parametrize("current", ["accepted", "declined", "cancelled"])
def test_answered_requests_are_final(current):
    with pytest.raises(InvalidOperationError):
        next_sparring_status(current, "cancelled", False)


def request_sparring(client, headers, requested_id, message=None):
    payload = {"requested_id": requested_id}
    if message is not None:
        payload["message"] = message
    return client.post(SPARRING, json=payload, headers=headers)


def test_request_notifies_invited_user(client, db_session, user, other_user, auth_headers):
    response = request_sparring(client, auth_headers, other_user.id, "Sábado na academia?")

    assert response.status_code == 201
    request = response.json()
    assert request["status"] == "pending"
    assert request["requester"]["username"] == "ana.silva"
    assert request["requested"]["username"] == "bruno_coach"

    notifications = db_session.query(Notification).filter(Notification.user_id == other_user.id).all()
    assert [(n.type, n.related_sparring_id, n.actor_id) for n in notifications] == [
        ("sparring_request", request["id"], user.id),
    ]


def test_invalid_requests(client, user, other_user, auth_headers):
    assert request_sparring(client, auth_headers, user.id).status_code == 400
    assert request_sparring(client, auth_headers, "missing").status_code == 404

    assert request_sparring(client, auth_headers, other_user.id).status_code == 201
    assert request_sparring(client, auth_headers, other_user.id).status_code == 409


def test_listing_by_direction_and_status(client, user, other_user, auth_headers, other_auth_headers):
    sent = request_sparring(client, auth_headers, other_user.id).json()
    received = request_sparring(client, other_auth_headers, user.id).json()

    listed = client.get(SPARRING, headers=auth_headers).json()
    assert {r["id"] for r in listed} == {sent["id"], received["id"]}
    assert [r["id"] for r in client.get(SPARRING, params={"direction": "outgoing"}, headers=auth_headers).json()] == [sent["id"]]
    assert [r["id"] for r in client.get(SPARRING, params={"direction": "incoming"}, headers=auth_headers).json()] == [received["id"]]

    client.put(f"{SPARRING}/{received['id']}/status", json={"status": "accepted"}, headers=auth_headers)
    accepted = client.get(SPARRING, params={"status": "accepted"}, headers=auth_headers).json()
    assert [r["id"] for r in accepted] == [received["id"]]


def test_accept_notifies_requester(client, db_session, user, other_user, auth_headers, other_auth_headers):
    request = request_sparring(client, auth_headers, other_user.id).json()
    url = f"{SPARRING}/{request['id']}/status"

    assert client.put(url, json={"status": "accepted"}, headers=auth_headers).status_code == 403
    response = client.put(url, json={"status": "accepted"}, headers=other_auth_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "accepted"

    to_requester = db_session.query(Notification).filter(Notification.user_id == user.id).all()
    assert [(n.type, n.content) for n in to_requester] == [("sparring_update", "aceitou seu pedido de sparring")]

    assert client.put(url, json={"status": "cancelled"}, headers=auth_headers).status_code == 400


def test_requester_cancels(client, auth_headers, other_auth_headers, other_user):
    request = request_sparring(client, auth_headers, other_user.id).json()
    url = f"{SPARRING}/{request['id']}/status"

    assert client.put(url, json={"status": "cancelled"}, headers=other_auth_headers).status_code == 403
    assert client.put(url, json={"status": "cancelled"}, headers=auth_headers).json()["status"] == "cancelled"
    assert client.put(url, json={"status": "pending"}, headers=auth_headers).status_code == 422

    # a cancelled request no longer blocks a new one
    assert request_sparring(client, auth_headers, other_user.id).status_code == 201


def test_outsiders_cannot_answer(client, db_session, auth_headers, other_user):
    outsider = create_user(db_session, "davi@ringconnect.app", "davi", "supersecret123", "Davi")
    request = request_sparring(client, auth_headers, other_user.id).json()

    response = client.put(
        f"{SPARRING}/{request['id']}/status",
        json={"status": "declined"},
        headers={"Authorization": f"Bearer {create_access_token(outsider.id)}"},
    )
    assert response.status_code == 403
    assert client.put(f"{SPARRING}/missing/status", json={"status": "declined"}, headers=auth_headers).status_code == 404


def test_requires_session(client):
    assert client.get(SPARRING).status_code == 401
