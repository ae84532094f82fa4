"""ICL and IPC value routes."""


def publish(client, headers, index, year, month, value):
    return client.post(
        f"/api/{index}-values",
        headers=headers,
        json={"period_year": year, "period_month": month, "value": value},
    )


def test_publish_and_list_newest_first(client, headers):
    publish(client, headers, "icl", 2025, 1, 100)
    publish(client, headers, "icl", 2025, 2, 101.5)

    values = client.get("/api/icl-values", headers=headers).json()["values"]

    assert [(v["period_year"], v["period_month"]) for v in values] == [(2025, 2), (2025, 1)]
    assert values[0]["index_type"] == "ICL"
    assert values[0]["value"] == 101.5


def test_duplicate_period_conflicts(client, headers):
    publish(client, headers, "icl", 2025, 3, 100)

    response = publish(client, headers, "icl", 2025, 3, 105)

    assert response.status_code == 409
    assert response.json() == {"error": "ICL value already exists for 2025-03"}


def test_indices_are_independent(client, headers):
    publish(client, headers, "icl", 2025, 3, 100)

    assert publish(client, headers, "ipc", 2025, 3, 100).status_code == 201
    assert len(client.get("/api/ipc-values", headers=headers).json()["values"]) == 1


def test_year_filter(client, headers):
    publish(client, headers, "ipc", 2024, 12, 90)
    publish(client, headers, "ipc", 2025, 1, 95)

    values = client.get("/api/ipc-values?year=2024", headers=headers).json()["values"]

    assert [v["period_month"] for v in values] == [12]


def test_update_and_delete(client, headers):
    created = publish(client, headers, "icl", 2025, 5, 100).json()

    updated = client.put(f"/api/icl-values/{created['id']}", headers=headers, json={"value": 120})
    assert updated.json()["value"] == 120.0

    assert client.delete(f"/api/icl-values/{created['id']}", headers=headers).status_code == 200
    assert client.get("/api/icl-values", headers=headers).json()["values"] == []


def test_moving_onto_taken_period_conflicts(client, headers):
    publish(client, headers, "icl", 2025, 5, 100)
    june = publish(client, headers, "icl", 2025, 6, 101).json()

    response = client.put(f"/api/icl-values/{june['id']}", headers=headers, json={"period_month": 5})

    assert response.status_code == 409


def test_icl_id_is_not_found_under_ipc(client, headers):
    created = publish(client, headers, "icl", 2025, 7, 100).json()

    response = client.delete(f"/api/ipc-values/{created['id']}", headers=headers)

    assert response.status_code == 404
    assert response.json() == {"error": "IPC value not found"}


def test_month_out_of_range(client, headers):
    response = publish(client, headers, "icl", 2025, 13, 100)

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid value for period_month")
