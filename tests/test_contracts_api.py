"""Contract routes and rent recalculation over the API.

Invariants:
    - end_date before start_date is rejected (400)
    - A tenant from another property is reported as not found
    - Recalculation returns the ordered schedule and keeps paid amounts
"""

from decimal import Decimal

from models import Rent, Resident

from conftest import seed_property, unit_ids


def add_tenant(db, admin, prop, name="Inquilino"):
    tenant = Resident(admin_id=admin.id, property_id=prop.id, name=name, role="tenant")
    db.add(tenant)
    db.commit()
    return tenant


def publish(client, headers, index, year, month, value):
    response = client.post(
        f"/api/{index}-values",
        headers=headers,
        json={"period_year": year, "period_month": month, "value": value},
    )
    assert response.status_code == 201


def create_contract(client, headers, unit_id, tenant_id, **fields):
    body = {
        "unit_id": unit_id,
        "tenant_id": tenant_id,
        "start_date": "2025-01-01",
        "end_date": "2025-06-30",
        "initial_rent_amount": 1000,
    }
    body.update(fields)
    return client.post("/api/contracts", headers=headers, json=body)


def test_create_contract_with_defaults(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)

    response = create_contract(client, headers, unit_ids(db, prop)[0], tenant.id)

    assert response.status_code == 201
    body = response.json()
    assert body["currency"] == "ARS"
    assert body["rent_increase_frequency"] == "quarterly"
    assert body["rent_increase_index"] == "ICL"
    assert body["status"] == "active"
    assert body["unit_number"] == "1A"
    assert body["tenant_name"] == "Inquilino"


def test_end_before_start_is_rejected(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)

    response = create_contract(
        client, headers, unit_ids(db, prop)[0], tenant.id, start_date="2025-06-01", end_date="2025-05-31"
    )

    assert response.status_code == 400


def test_update_with_inverted_dates_is_rejected(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)
    contract = create_contract(client, headers, unit_ids(db, prop)[0], tenant.id).json()

    response = client.put(f"/api/contracts/{contract['id']}", headers=headers, json={"end_date": "2024-12-31"})

    assert response.status_code == 400
    assert response.json()["error"] == "end_date must be on or after start_date"


def test_tenant_from_other_property_is_not_found(client, headers, db, admin, prop):
    other = seed_property(db, admin, percentages=(100,), name="Anexo")
    outsider = add_tenant(db, admin, other)

    response = create_contract(client, headers, unit_ids(db, prop)[0], outsider.id)

    assert response.status_code == 404
    assert response.json() == {"error": "Tenant not found"}


def test_detached_tenant_is_not_found(client, headers, db, admin, prop):
    detached = Resident(admin_id=admin.id, property_id=None, name="Suelto", role="tenant")
    db.add(detached)
    db.commit()

    response = create_contract(client, headers, unit_ids(db, prop)[0], detached.id)

    assert response.status_code == 404
    assert response.json() == {"error": "Tenant not found"}


def test_unit_of_other_admin_is_not_found(client, prop, other_headers, db, other_admin):
    stranger = Resident(admin_id=other_admin.id, name="Ajeno", role="tenant")
    db.add(stranger)
    db.commit()

    response = create_contract(client, other_headers, unit_ids(db, prop)[0], stranger.id)

    assert response.status_code == 404


def test_recalculate_quarterly_icl(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)
    contract = create_contract(client, headers, unit_ids(db, prop)[0], tenant.id).json()
    publish(client, headers, "icl", 2025, 1, 100)
    publish(client, headers, "icl", 2025, 4, 110)

    response = client.post(f"/api/contracts/{contract['id']}/recalculate", headers=headers)

    assert response.status_code == 200
    rents = response.json()["rents"]
    assert [r["period_month"] for r in rents] == [1, 2, 3, 4, 5, 6]
    assert [r["amount"] for r in rents] == [1000.0] * 3 + [1100.0] * 3
    assert [r["is_adjusted"] for r in rents] == [False, False, False, True, False, False]


def test_recalculate_average_index(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)
    contract = create_contract(
        client, headers, unit_ids(db, prop)[0], tenant.id, rent_increase_index="AVERAGE"
    ).json()
    publish(client, headers, "icl", 2025, 1, 100)
    publish(client, headers, "icl", 2025, 4, 110)
    publish(client, headers, "ipc", 2025, 1, 200)
    publish(client, headers, "ipc", 2025, 4, 240)

    rents = client.post(f"/api/contracts/{contract['id']}/recalculate", headers=headers).json()["rents"]

    assert rents[3]["amount"] == 1150.0


def test_recalculate_keeps_paid_amount(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)
    contract = create_contract(client, headers, unit_ids(db, prop)[0], tenant.id).json()
    client.post(f"/api/contracts/{contract['id']}/recalculate", headers=headers)

    db.query(Rent).filter_by(contract_id=contract["id"], period_month=2).update({"amount_paid": Decimal("400")})
    db.commit()

    client.post(f"/api/contracts/{contract['id']}/recalculate", headers=headers)
    rents = client.get(f"/api/rents?contract_id={contract['id']}", headers=headers).json()["rents"]

    assert len(rents) == 6
    february = rents[1]
    assert february["amount_paid"] == 400.0
    assert february["balance"] == 600.0


def test_future_contract_has_no_periods(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)
    contract = create_contract(
        client, headers, unit_ids(db, prop)[0], tenant.id, start_date="2099-01-01", end_date="2099-12-31"
    ).json()

    response = client.post(f"/api/contracts/{contract['id']}/recalculate", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"rents": [], "message": "No periods to calculate"}


def test_list_contracts_by_property(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)
    first_unit, second_unit = unit_ids(db, prop)
    create_contract(client, headers, first_unit, tenant.id)
    create_contract(client, headers, second_unit, tenant.id, status="expired")

    everything = client.get(f"/api/contracts?property_id={prop.id}", headers=headers).json()
    assert everything["pagination"]["total"] == 2

    expired = client.get(f"/api/contracts?property_id={prop.id}&status=expired", headers=headers).json()
    assert [c["unit_id"] for c in expired["contracts"]] == [second_unit]


def test_delete_contract_removes_rents(client, headers, db, admin, prop):
    tenant = add_tenant(db, admin, prop)
    contract = create_contract(client, headers, unit_ids(db, prop)[0], tenant.id).json()
    client.post(f"/api/contracts/{contract['id']}/recalculate", headers=headers)

    assert client.delete(f"/api/contracts/{contract['id']}", headers=headers).status_code == 200

    db.expire_all()
    assert db.query(Rent).count() == 0
    assert client.get(f"/api/rents?contract_id={contract['id']}", headers=headers).status_code == 404
