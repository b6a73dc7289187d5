LOGS = "/api/v1/training-logs"


def log(client, headers, **fields):
    payload = {"training_date": "2025-03-01", "duration_hours": 1.5}
    payload.update(fields)
    return client.post(LOGS, json=payload, headers=headers)


def test_logs_and_stats(client, user, auth_headers):
    assert log(client, auth_headers, did_sparring=True).status_code == 201
    log(client, auth_headers, training_date="2025-03-03", duration_hours=2, did_sparring_light=True)
    log(client, auth_headers, training_date="2025-03-02", duration_hours=0.75, notes="técnica")

    logs = client.get(f"{LOGS}/user/{user.id}").json()
    assert [entry["training_date"] for entry in logs] == ["2025-03-03", "2025-03-02", "2025-03-01"]

    stats = client.get(f"{LOGS}/user/{user.id}/stats").json()
    assert stats == {
        "sessions": 3,
        "total_hours": 4.25,
        "sparring_sessions": 1,
        "light_sparring_sessions": 1,
    }


def test_empty_stats(client, user):
    assert client.get(f"{LOGS}/user/{user.id}/stats").json() == {
        "sessions": 0,
        "total_hours": 0.0,
        "sparring_sessions": 0,
        "light_sparring_sessions": 0,
    }


def test_duration_bounds(client, auth_headers):
    assert log(client, auth_headers, duration_hours=0).status_code == 422
    assert log(client, auth_headers, duration_hours=25).status_code == 422
    assert log(client, auth_headers, duration_hours=24).status_code == 201


def test_unknown_gym(client, auth_headers):
    assert log(client, auth_headers, gym_id="missing").status_code == 404


def test_only_owner_deletes(client, auth_headers, other_auth_headers):
    created = log(client, auth_headers).json()

    assert client.delete(f"{LOGS}/{created['id']}", headers=other_auth_headers).status_code == 403
    assert client.delete(f"{LOGS}/{created['id']}", headers=auth_headers).status_code == 204
    assert client.delete(f"{LOGS}/{created['id']}", headers=auth_headers).status_code == 404
