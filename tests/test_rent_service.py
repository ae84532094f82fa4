"""Rent schedule and index adjustment.

Invariants:
    - Month 0 is the initial rent; adjustments only on frequency boundaries
    - amount = round(initial * target / base, 2) and carries forward
    - Missing index values carry the previous amount forward, unadjusted
    - Recalculation keeps amount_paid and recomputes the balance
"""

from datetime import date
from decimal import Decimal

from models import Contract, IndexValue, Rent, Resident
from services.rent_service import (
    add_months,
    build_rent_schedule,
    is_adjustment_month,
    recalculate_contract_rents,
)


ICL = {
    (2025, 1): Decimal("100"),
    (2025, 4): Decimal("110"),
    (2025, 7): Decimal("121"),
}


def amounts(schedule):
    return [row["amount"] for row in schedule]


def test_add_months_wraps_year():
    assert add_months((2025, 11), 3) == (2026, 2)
    assert add_months((2025, 1), 0) == (2025, 1)


def test_adjustment_months_by_frequency():
    assert [o for o in range(13) if is_adjustment_month(o, "quarterly")] == [0, 3, 6, 9, 12]
    assert [o for o in range(13) if is_adjustment_month(o, "semi-annually")] == [0, 6, 12]
    assert [o for o in range(13) if is_adjustment_month(o, "annually")] == [0, 12]
    assert is_adjustment_month(5, "monthly")


def test_quarterly_icl_schedule():
    schedule = build_rent_schedule(
        Decimal("1000"), date(2025, 1, 1), date(2025, 8, 31), "quarterly", "ICL", {"ICL": ICL}
    )

    assert amounts(schedule) == [Decimal("1000")] * 3 + [Decimal("1100.00")] * 3 + [Decimal("1210.00")] * 2
    april = schedule[3]
    assert april["is_adjusted"] is True
    assert april["adjustment_factor"] == Decimal("1.100000")
    assert april["base_index_value"] == Decimal("100")
    assert april["adjustment_index_value"] == Decimal("110")
    assert (april["adjustment_period_year"], april["adjustment_period_month"]) == (2025, 4)
    assert schedule[4]["is_adjusted"] is False


def test_missing_index_value_carries_previous_amount():
    series = {"ICL": {(2025, 1): Decimal("100"), (2025, 4): Decimal("110")}}
    schedule = build_rent_schedule(
        Decimal("1000"), date(2025, 1, 15), date(2025, 7, 31), "quarterly", "ICL", series
    )

    july = schedule[6]
    assert july["amount"] == Decimal("1100.00")
    assert july["is_adjusted"] is False


def test_missing_base_value_never_adjusts():
    schedule = build_rent_schedule(
        Decimal("1000"), date(2024, 12, 1), date(2025, 6, 30), "monthly", "ICL", {"ICL": ICL}
    )

    assert set(amounts(schedule)) == {Decimal("1000")}


def test_average_uses_mean_of_both_factors():
    series = {
        "ICL": {(2025, 1): Decimal("100"), (2025, 4): Decimal("110")},
        "IPC": {(2025, 1): Decimal("200"), (2025, 4): Decimal("240")},
    }
    schedule = build_rent_schedule(
        Decimal("1000"), date(2025, 1, 1), date(2025, 4, 30), "quarterly", "AVERAGE", series
    )

    assert schedule[3]["amount"] == Decimal("1150.00")
    assert schedule[3]["base_index_value"] is None


def test_cutoff_before_start_yields_nothing():
    assert build_rent_schedule(
        Decimal("1000"), date(2025, 5, 1), date(2025, 4, 30), "monthly", "ICL", {}
    ) == []


def test_recalculate_preserves_paid_amounts(db, admin, prop):
    tenant = Resident(admin_id=admin.id, property_id=prop.id, name="Inquilina", role="tenant")
    db.add(tenant)
    db.flush()
    contract = Contract(
        unit_id=prop.units[0].id,
        tenant_id=tenant.id,
        start_date=date(2025, 1, 1),
        end_date=date(2025, 6, 30),
        initial_rent_amount=Decimal("1000.00"),
        rent_increase_frequency="quarterly",
        rent_increase_index="ICL",
    )
    db.add(contract)
    for (year, month), value in ICL.items():
        db.add(IndexValue(index_type="ICL", period_year=year, period_month=month, value=value))
    db.commit()

    rents = recalculate_contract_rents(db, contract, today=date(2026, 1, 1))
    db.commit()
    assert len(rents) == 6
    assert [r.period_month for r in rents] == [1, 2, 3, 4, 5, 6]

    april = next(r for r in rents if r.period_month == 4)
    april.amount_paid = Decimal("500.00")
    db.commit()

    rents = recalculate_contract_rents(db, contract, today=date(2026, 1, 1))
    db.commit()

    assert db.query(Rent).filter_by(contract_id=contract.id).count() == 6
    april = next(r for r in rents if r.period_month == 4)
    assert april.amount == Decimal("1100.00")
    assert april.amount_paid == Decimal("500.00")
    assert april.balance == Decimal("600.00")


def test_recalculate_stops_at_current_month(db, admin, prop):
    tenant = Resident(admin_id=admin.id, property_id=prop.id, name="Inquilino", role="tenant")
    db.add(tenant)
    db.flush()
    contract = Contract(
        unit_id=prop.units[1].id,
        tenant_id=tenant.id,
        start_date=date(2025, 11, 1),
        end_date=date(2027, 10, 31),
        initial_rent_amount=Decimal("2000.00"),
    )
    db.add(contract)
    db.commit()

    rents = recalculate_contract_rents(db, contract, today=date(2026, 2, 10))

    assert [(r.period_year, r.period_month) for r in rents] == [(2025, 11), (2025, 12), (2026, 1), (2026, 2)]
