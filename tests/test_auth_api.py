from ringconnect.core.security import decode_access_token

AUTH = "/api/v1/auth"


def register(client, **overrides):
    payload = {
        "email": "Lutadora@RingConnect.app",
        "username": "lutadora",
        "password": "password123",
        "full_name": "Lutadora Teste",
    }
    payload.update(overrides)
    return client.post(f"{AUTH}/register", json=payload)


def login(client, username, password="password123"):
    return client.post(f"{AUTH}/login", data={"username": username, "password": password})


def test_register_and_login_by_username_or_email(client):
    response = register(client)
    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "lutadora@ringconnect.app"
    assert user["user_type"] == "athlete"
    assert "hashed_password" not in user

    by_username = login(client, "lutadora")
    assert by_username.status_code == 200
    token = by_username.json()["access_token"]
    claims = decode_access_token(token)
    assert claims["sub"] == user["id"]
    assert claims["jti"]

    assert login(client, "lutadora@ringconnect.app").status_code == 200
    assert login(client, "lutadora", "wrong-password").status_code == 401


def test_duplicate_registration_conflicts(client):
    register(client)

    assert register(client, username="outra").status_code == 409
    assert register(client, email="outra@ringconnect.app").status_code == 409


def test_register_validation(client):
    assert register(client, username="no spaces").status_code == 422
    assert register(client, password="short").status_code == 422
    assert register(client, email="not-an-email").status_code == 422


def test_session_and_logout_revokes_token(client, user, auth_headers):
    session = client.get(f"{AUTH}/session", headers=auth_headers)
    assert session.status_code == 200
    assert session.json()["user_id"] == user.id
    assert session.json()["user"]["username"] == user.username

    logout = client.post(f"{AUTH}/logout", headers=auth_headers)
    assert logout.json() == {"message": "Logged out", "revoked": True}

    assert client.get(f"{AUTH}/session", headers=auth_headers).status_code == 401
    assert client.get("/api/v1/users/me", headers=auth_headers).status_code == 401


def test_session_requires_token(client):
    assert client.get(f"{AUTH}/session").status_code == 401
