USERS = "/api/v1/users"


def test_read_and_update_me(client, user, auth_headers):
    me = client.get(f"{USERS}/me", headers=auth_headers).json()
    assert me["id"] == user.id
    assert me["email"] == "ana@ringconnect.app"

    updated = client.put(
        f"{USERS}/me",
        json={"bio": "Muay thai desde 2015", "category": "muay thai", "weight": 61.5, "amateur_fights": 12},
        headers=auth_headers,
    ).json()
    assert updated["bio"] == "Muay thai desde 2015"
    assert updated["weight"] == 61.5
    assert updated["full_name"] == "Ana Silva"


def test_public_profile_hides_email(client, user, other_user):
    profile = client.get(f"{USERS}/{user.id}").json()

    assert profile["username"] == "ana.silva"
    assert "email" not in profile
    assert client.get(f"{USERS}/by-username/bruno_coach").json()["id"] == other_user.id
    assert client.get(f"{USERS}/missing").status_code == 404


def test_search_excludes_viewer(client, user, other_user, auth_headers):
    assert [u["id"] for u in client.get(f"{USERS}/search", params={"q": "coach"}).json()] == [other_user.id]

    everyone = client.get(f"{USERS}/search", params={"q": "co"}).json()
    as_ana = client.get(f"{USERS}/search", params={"q": "co"}, headers=auth_headers).json()
    assert {u["id"] for u in everyone} == {other_user.id}
    assert user.id not in {u["id"] for u in as_ana}

    assert client.get(f"{USERS}/search", params={"q": "a"}).status_code == 422
