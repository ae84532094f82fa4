"""Property and unit routes.

Invariants:
    - Another admin's property or unit is indistinguishable from a missing one (404)
    - Deleting a property removes its units but keeps residents, detached
"""

from models import Resident

from conftest import seed_property


PROPERTY = {"name": "Edificio Sur", "street_address": "Mitre 450", "city": "Córdoba"}


def test_create_and_list_properties(client, headers):
    created = client.post("/api/properties", headers=headers, json=PROPERTY)
    assert created.status_code == 201
    assert created.json()["units_count"] == 0

    listed = client.get("/api/properties", headers=headers)
    assert listed.status_code == 200
    assert [p["name"] for p in listed.json()["properties"]] == ["Edificio Sur"]


def test_create_property_missing_fields(client, headers):
    response = client.post("/api/properties", headers=headers, json={"name": "Solo nombre"})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields: street_address, city"


def test_update_property_changes_only_given_fields(client, headers, prop):
    response = client.put(f"/api/properties/{prop.id}", headers=headers, json={"city": "Mendoza"})

    assert response.status_code == 200
    body = response.json()
    assert body["city"] == "Mendoza"
    assert body["name"] == "Edificio Norte"
    assert body["units_count"] == 2


def test_other_admin_cannot_see_property(client, prop, other_headers):
    assert client.get(f"/api/properties/{prop.id}", headers=other_headers).status_code == 404
    assert client.put(f"/api/properties/{prop.id}", headers=other_headers, json={"city": "X"}).status_code == 404
    assert client.delete(f"/api/properties/{prop.id}", headers=other_headers).status_code == 404
    assert client.get("/api/properties", headers=other_headers).json() == {"properties": []}


def test_nested_unit_routes(client, headers, prop):
    created = client.post(
        f"/api/properties/{prop.id}/units",
        headers=headers,
        json={"unit_number": "3A", "expense_percentage": 0},
    )
    assert created.status_code == 201
    unit = created.json()
    assert unit["property_id"] == prop.id
    assert unit["status"] == "vacant"
    assert unit["property_name"] == "Edificio Norte"

    listed = client.get(f"/api/properties/{prop.id}/units", headers=headers)
    assert [u["unit_number"] for u in listed.json()["units"]] == ["1A", "2A", "3A"]

    updated = client.put(
        f"/api/properties/{prop.id}/units/{unit['id']}",
        headers=headers,
        json={"expense_percentage": 12.5},
    )
    assert updated.json()["expense_percentage"] == 12.5

    assert client.delete(f"/api/properties/{prop.id}/units/{unit['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/units/{unit['id']}", headers=headers).status_code == 404


def test_unit_percentage_out_of_range(client, headers, prop):
    response = client.post(
        f"/api/properties/{prop.id}/units",
        headers=headers,
        json={"unit_number": "9Z", "expense_percentage": 120},
    )

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid value for expense_percentage")


def test_flat_unit_list_filters(client, headers, db, admin, prop):
    seed_property(db, admin, percentages=(100,), name="Otro")

    all_units = client.get("/api/units", headers=headers).json()["units"]
    assert len(all_units) == 3

    filtered = client.get(f"/api/units?property_id={prop.id}", headers=headers).json()["units"]
    assert {u["unit_number"] for u in filtered} == {"1A", "2A"}

    assert client.get("/api/units?status=occupied", headers=headers).json()["units"] == []


def test_unit_of_other_admin_is_not_found(client, prop, other_headers):
    unit_id = prop.units[0].id

    assert client.get(f"/api/units/{unit_id}", headers=other_headers).status_code == 404
    assert client.get(f"/api/properties/{prop.id}/units", headers=other_headers).status_code == 404


def test_create_unit_in_other_admins_property(client, prop, other_headers):
    response = client.post(
        "/api/units",
        headers=other_headers,
        json={"property_id": prop.id, "unit_number": "X1"},
    )

    assert response.status_code == 404


def test_delete_property_detaches_residents(client, headers, db, admin, prop):
    resident = Resident(admin_id=admin.id, property_id=prop.id, unit_id=prop.units[0].id, name="Ana", role="owner")
    db.add(resident)
    db.commit()

    response = client.delete(f"/api/properties/{prop.id}", headers=headers)
    assert response.status_code == 200
    assert client.get(f"/api/properties/{prop.id}", headers=headers).status_code == 404

    db.expire_all()
    survivor = db.get(Resident, resident.id)
    assert survivor is not None
    assert survivor.property_id is None
    assert survivor.unit_id is None
