GYMS = "/api/v1/gyms"


def create_gym(client, headers, **fields):
    payload = {"name": "Academia Leão", "address": "Rua A, 100", "monthly_fee": 150.0}
    payload.update(fields)
    return client.post(GYMS, json=payload, headers=headers)


def test_create_and_read_gym(client, user, auth_headers, other_auth_headers):
    response = create_gym(client, auth_headers)
    assert response.status_code == 201
    gym = response.json()
    assert gym["owner_id"] == user.id

    detail = client.get(f"{GYMS}/{gym['id']}", headers=other_auth_headers).json()
    assert detail["owner"]["id"] == user.id
    assert detail["follower_count"] == 0
    assert detail["is_following"] is False

    assert [g["id"] for g in client.get(GYMS, params={"q": "leão"}).json()] == [gym["id"]]
    assert client.get(GYMS, params={"q": "tigre"}).json() == []


def test_gym_validation(client, auth_headers):
    assert create_gym(client, auth_headers, latitude=120).status_code == 422
    assert create_gym(client, auth_headers, monthly_fee=-1).status_code == 422


def test_follow_gym_once(client, auth_headers, other_auth_headers):
    gym = create_gym(client, auth_headers).json()
    url = f"{GYMS}/{gym['id']}/follow"

    followed = client.post(url, headers=other_auth_headers)
    assert followed.status_code == 200
    assert followed.json()["follower_count"] == 1
    assert followed.json()["is_following"] is True

    assert client.post(url, headers=other_auth_headers).status_code == 409

    unfollowed = client.delete(url, headers=other_auth_headers).json()
    assert unfollowed["follower_count"] == 0
    assert client.delete(url, headers=other_auth_headers).status_code == 404


def test_only_owner_updates_or_deletes(client, auth_headers, other_auth_headers):
    gym = create_gym(client, auth_headers).json()
    url = f"{GYMS}/{gym['id']}"

    assert client.put(url, json={"name": "Invasor"}, headers=other_auth_headers).status_code == 403
    assert client.put(url, json={"name": "Leão Team"}, headers=auth_headers).json()["name"] == "Leão Team"

    assert client.delete(url, headers=other_auth_headers).status_code == 403
    assert client.delete(url, headers=auth_headers).status_code == 204
    assert client.get(url).status_code == 404


def test_logo_upload(client, auth_headers):
    gym = create_gym(client, auth_headers).json()

    response = client.post(
        f"{GYMS}/{gym['id']}/logo",
        files={"file": ("logo.png", b"png bytes", "image/png")},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert "/gym-logos/" in response.json()["logo_url"]
