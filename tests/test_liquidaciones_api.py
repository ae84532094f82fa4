"""Liquidación routes: allocation, per-unit statement and receipt delivery.

Invariants:
    - Calculating twice for a period is 409 until allocations are deleted
    - rent_due is only reported for tenant residents
    - One failed receipt does not stop the others
    - Missing email configuration is one error, reported before any delivery
"""

from datetime import date
from decimal import Decimal

import pytest

from models import Contract, Expense, Rent, Resident
from services import receipt_service
from services.summary_service import sync_expense
from utils import email as email_utils
from utils.email import EmailDeliveryError

from conftest import unit_ids


PERIOD = {"year": 2026, "month": 3}


@pytest.fixture
def billed(db, admin, prop):
    """Property with 10000 of March expenses, an owner in 1A and a tenant in 2A."""
    first_unit, second_unit = unit_ids(db, prop)
    expense = Expense(property_id=prop.id, expense_type="Limpieza", amount=Decimal("10000.00"), date=date(2026, 3, 5))
    db.add(expense)
    sync_expense(db, expense)

    owner = Resident(admin_id=admin.id, property_id=prop.id, unit_id=first_unit,
                     name="Olga", email="olga@example.com", role="owner")
    tenant = Resident(admin_id=admin.id, property_id=prop.id, unit_id=second_unit,
                      name="Tomás", email="tomas@example.com", role="tenant")
    db.add_all([owner, tenant])
    db.flush()

    contract = Contract(unit_id=second_unit, tenant_id=tenant.id, start_date=date(2026, 1, 1),
                        end_date=date(2027, 12, 31), initial_rent_amount=Decimal("250000.00"))
    db.add(contract)
    db.flush()
    db.add(Rent(contract_id=contract.id, period_year=2026, period_month=3,
                amount=Decimal("250000.00"), amount_paid=Decimal("0"), balance=Decimal("250000.00")))
    db.commit()
    return prop


@pytest.fixture
def brevo_key(monkeypatch):
    monkeypatch.setattr(email_utils, "BREVO_KEY", "test-brevo-key")


def calculate(client, headers, prop):
    return client.post("/api/liquidaciones/calculate", headers=headers, json={"property_id": prop.id, **PERIOD})


def statement(client, headers, prop):
    url = f"/api/liquidaciones?property_id={prop.id}&year=2026&month=3"
    return client.get(url, headers=headers).json()


def test_calculate_splits_by_percentage(client, headers, billed):
    response = calculate(client, headers, billed)

    assert response.status_code == 201
    body = response.json()
    assert body["allocations_created"] == 2
    assert body["total_expenses"] == 10000.0
    assert body["total_allocated"] == 10000.0


def test_second_calculation_conflicts_until_deleted(client, headers, billed):
    calculate(client, headers, billed)

    assert calculate(client, headers, billed).status_code == 409

    deleted = client.delete(
        f"/api/liquidaciones/allocations?property_id={billed.id}&year=2026&month=3", headers=headers
    )
    assert deleted.status_code == 200
    assert deleted.json()["allocations_deleted"] == 2

    assert calculate(client, headers, billed).status_code == 201


def test_calculate_without_expenses_is_not_found(client, headers, prop):
    response = calculate(client, headers, prop)

    assert response.status_code == 404
    assert response.json()["error"].startswith("No monthly expense summary found")


def test_statement_rows(client, headers, billed):
    calculate(client, headers, billed)

    body = statement(client, headers, billed)

    assert body["meta"] == {"total_units": 2, "period": {"year": 2026, "month": 3}}
    owner_row, tenant_row = body["data"]
    assert owner_row["unit_number"] == "1A"
    assert owner_row["expense_due"] == 6000.0
    assert owner_row["rent_due"] is None
    assert tenant_row["expense_due"] == 4000.0
    assert tenant_row["rent_due"] == 250000.0
    assert tenant_row["role"] == "tenant"


def test_statement_before_calculation_has_no_expense_due(client, headers, billed):
    rows = statement(client, headers, billed)["data"]

    assert [r["expense_due"] for r in rows] == [None, None]
    assert [r["allocation_id"] for r in rows] == [None, None]


def test_statement_requires_period(client, headers, prop):
    response = client.get(f"/api/liquidaciones?property_id={prop.id}", headers=headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields: year, month"


def test_send_receipts(client, headers, billed, brevo_key, monkeypatch):
    sent = []

    def fake_send(to_email, subject, html_content, to_name=None):
        sent.append((to_email, subject, html_content))

    monkeypatch.setattr(receipt_service, "send_receipt_email", fake_send)
    calculate(client, headers, billed)

    response = client.post("/api/liquidaciones/send-receipts", headers=headers, json={"property_id": billed.id, **PERIOD})

    assert response.status_code == 200
    assert response.json() == {"success": True, "sent": 2, "failed": []}
    assert [s[1] for s in sent] == ["Recibos marzo 2026 - Unidad 1A", "Recibos marzo 2026 - Unidad 2A"]
    assert "Recibo de alquiler" not in sent[0][2]
    assert "$ 250.000,00" in sent[1][2]


def test_failed_receipt_is_reported(client, headers, billed, brevo_key, monkeypatch):
    def flaky_send(to_email, subject, html_content, to_name=None):
        if to_email == "olga@example.com":
            raise EmailDeliveryError("Brevo rejected the message")

    monkeypatch.setattr(receipt_service, "send_receipt_email", flaky_send)
    calculate(client, headers, billed)

    body = client.post(
        "/api/liquidaciones/send-receipts", headers=headers, json={"property_id": billed.id, **PERIOD}
    ).json()

    assert body["success"] is False
    assert body["sent"] == 1
    assert body["failed"] == [
        {"email": "olga@example.com", "unit_number": "1A", "error": "Brevo rejected the message"}
    ]


def test_unconfigured_email_fails_once_before_sending(client, headers, billed, monkeypatch):
    attempts = []
    monkeypatch.setattr(email_utils, "BREVO_KEY", None)
    monkeypatch.setattr(receipt_service, "send_receipt_email", lambda *a, **kw: attempts.append(a))
    calculate(client, headers, billed)

    response = client.post(
        "/api/liquidaciones/send-receipts", headers=headers, json={"property_id": billed.id, **PERIOD}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "BREVO_API_KEY not configured"}
    assert attempts == []


def test_other_admin_cannot_calculate(client, billed, other_headers):
    assert calculate(client, other_headers, billed).status_code == 404


def test_format_amount_uses_argentine_separators():
    assert receipt_service.format_amount(Decimal("1234567.5")) == "1.234.567,50"
    assert receipt_service.format_amount(0) == "0,00"
