import pytest

from ringconnect.core.exceptions import InvalidOperationError, PermissionDeniedError
from ringconnect.modules.mentorship.services.mentorship import next_booking_status
from ringconnect.modules.notifications.models.notification import Notification

MENTORSHIP = "/api/v1/mentorship"


@pytest.mark.parametrize("current, requested, as_coach", [
    ("pending", "confirmed", True),
    ("pending", "completed", True),
    ("pending", "cancelled", True),
    ("pending", "cancelled", False),
    ("confirmed", "completed", True),
    ("confirmed", "cancelled", False),
])
def test_allowed_transitions(current, requested, as_coach):
    assert next_booking_status(current, requested, as_coach) == requested


@pytest.mark.parametrize("current, requested", [
    ("cancelled", "confirmed"),
    ("cancelled", "cancelled"),
    ("completed", "cancelled"),
    ("confirmed", "confirmed"),
])
def test_final_and_repeated_states_are_invalid(current, requested):
    with pytest.raises(InvalidOperationError):
        next_booking_status(current, requested, True)


def test_athlete_can_only_cancel():
    with pytest.raises(PermissionDeniedError):
        next_booking_status("pending", "confirmed", False)
    with pytest.raises(PermissionDeniedError):
        next_booking_status("confirmed", "completed", False)


@pytest.fixture()
def session_offer(client, other_auth_headers):
    """A session offered by the coach (other_user)"""
    response = client.post(
        f"{MENTORSHIP}/sessions",
        json={
            "title": "Clínica de clinch",
            "description": "Uma hora de clinch e joelhadas",
            "duration_minutes": 60,
            "price": 120.0,
            "session_type": "in_person",
        },
        headers=other_auth_headers,
    )
    assert response.status_code == 201
    return response.json()


def test_session_validation(client, auth_headers):
    payload = {"title": "X", "description": "Y", "duration_minutes": 0, "price": 10}
    assert client.post(f"{MENTORSHIP}/sessions", json=payload, headers=auth_headers).status_code == 422

    payload.update(duration_minutes=30, price=-5)
    assert client.post(f"{MENTORSHIP}/sessions", json=payload, headers=auth_headers).status_code == 422


def test_list_and_deactivate_sessions(client, other_user, session_offer, auth_headers, other_auth_headers):
    listed = client.get(f"{MENTORSHIP}/sessions", params={"coach_id": other_user.id}).json()
    assert [s["id"] for s in listed] == [session_offer["id"]]
    assert listed[0]["coach"]["username"] == "bruno_coach"

    url = f"{MENTORSHIP}/sessions/{session_offer['id']}"
    assert client.put(url, json={"price": 1}, headers=auth_headers).status_code == 403
    assert client.put(url, json={"price": 99.9}, headers=other_auth_headers).json()["price"] == 99.9

    assert client.delete(url, headers=other_auth_headers).json()["is_active"] is False
    assert client.get(f"{MENTORSHIP}/sessions").json() == []


def test_booking_lifecycle(client, db_session, user, other_user, session_offer, auth_headers, other_auth_headers):
    response = client.post(
        f"{MENTORSHIP}/sessions/{session_offer['id']}/book",
        json={"scheduled_date": "2025-04-10T18:00:00Z", "notes": "Primeira vez"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    booking = response.json()
    assert booking["status"] == "pending"
    assert booking["athlete_id"] == user.id
    assert booking["coach_id"] == other_user.id

    request = db_session.query(Notification).filter(Notification.user_id == other_user.id).one()
    assert request.type == "booking_request"
    assert request.related_booking_id == booking["id"]

    for headers in (auth_headers, other_auth_headers):
        assert [b["id"] for b in client.get(f"{MENTORSHIP}/bookings", headers=headers).json()] == [booking["id"]]

    status_url = f"{MENTORSHIP}/bookings/{booking['id']}/status"
    assert client.put(status_url, json={"status": "confirmed"}, headers=auth_headers).status_code == 403

    confirmed = client.put(status_url, json={"status": "confirmed"}, headers=other_auth_headers)
    assert confirmed.json()["status"] == "confirmed"
    update = db_session.query(Notification).filter(Notification.user_id == user.id).one()
    assert update.type == "booking_update"

    assert client.put(status_url, json={"status": "cancelled"}, headers=auth_headers).json()["status"] == "cancelled"
    assert client.put(status_url, json={"status": "completed"}, headers=other_auth_headers).status_code == 400
    assert client.put(status_url, json={"status": "pending"}, headers=other_auth_headers).status_code == 422


def test_cannot_book_own_or_inactive_session(client, session_offer, auth_headers, other_auth_headers):
    book_url = f"{MENTORSHIP}/sessions/{session_offer['id']}/book"

    assert client.post(book_url, json={}, headers=other_auth_headers).status_code == 400

    client.delete(f"{MENTORSHIP}/sessions/{session_offer['id']}", headers=other_auth_headers)
    assert client.post(book_url, json={}, headers=auth_headers).status_code == 400

    assert client.post(f"{MENTORSHIP}/sessions/missing/book", json={}, headers=auth_headers).status_code == 404


def test_strangers_cannot_touch_bookings(client, db_session, session_offer, auth_headers):
    from ringconnect.core.security import create_access_token
    from ringconnect.modules.profiles.services.user import create_user

    booking = client.post(f"{MENTORSHIP}/sessions/{session_offer['id']}/book", json={}, headers=auth_headers).json()
    stranger = create_user(db_session, "rafa@ringconnect.app", "rafa", "password123")
    headers = {"Authorization": f"Bearer {create_access_token(stranger.id)}"}

    response = client.put(f"{MENTORSHIP}/bookings/{booking['id']}/status", json={"status": "cancelled"}, headers=headers)

    assert response.status_code == 403
