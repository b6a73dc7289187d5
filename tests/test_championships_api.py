from datetime import date

CHAMPIONSHIPS = "/api/v1/championships"


def add(client, headers, **fields):
    payload = {"championship_name": "Copa Paulista de Muay Thai", "year": 2023}
    payload.update(fields)
    return client.post(CHAMPIONSHIPS, json=payload, headers=headers)


def test_add_and_list_newest_year_first(client, user, auth_headers):
    assert add(client, auth_headers, year=2021, position=3).status_code == 201
    champion = add(client, auth_headers, championship_name="Brasileiro de Boxe", year=2024, is_champion=True,
                   opponent_name="Rafa Souza")
    assert champion.status_code == 201
    add(client, auth_headers, championship_name="Estadual", year=2022, position=5)

    entries = client.get(f"{CHAMPIONSHIPS}/user/{user.id}").json()
    assert [e["year"] for e in entries] == [2024, 2022, 2021]
    assert entries[0]["is_champion"] is True
    assert entries[0]["opponent_name"] == "Rafa Souza"


def test_champion_is_recorded_in_first_place(client, auth_headers):
    created = add(client, auth_headers, is_champion=True, position=4).json()

    assert created["position"] == 1


def test_record_counts_titles_and_podiums(client, user, auth_headers):
    add(client, auth_headers, is_champion=True)
    add(client, auth_headers, position=2)
    add(client, auth_headers, position=7)
    add(client, auth_headers)

    assert client.get(f"{CHAMPIONSHIPS}/user/{user.id}/record").json() == {
        "championships": 4,
        "titles": 1,
        "podiums": 2,
    }


def test_validation(client, auth_headers):
    assert add(client, auth_headers, championship_name="   ").status_code == 422
    assert add(client, auth_headers, year=1899).status_code == 422
    assert add(client, auth_headers, year=date.today().year + 1).status_code == 422
    assert add(client, auth_headers, position=0).status_code == 422
    assert add(client, auth_headers, year=date.today().year).status_code == 201


def test_requires_session(client):
    assert client.post(CHAMPIONSHIPS, json={"championship_name": "Copa", "year": 2020}).status_code == 401


def test_only_owner_deletes(client, user, auth_headers, other_auth_headers):
    created = add(client, auth_headers).json()
    url = f"{CHAMPIONSHIPS}/{created['id']}"

    assert client.delete(url, headers=other_auth_headers).status_code == 403
    assert client.delete(url, headers=auth_headers).status_code == 204
    assert client.delete(url, headers=auth_headers).status_code == 404
    assert client.get(f"{CHAMPIONSHIPS}/user/{user.id}").json() == []
