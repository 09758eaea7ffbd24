# tests/test_fuel_service.py
"""Unit tests for fuel expenses: vehicle attribution, joined listing and the monthly report."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date, datetime
from maktabi.config import settings
from maktabi.exceptions import RecordNotFound, ValidationFailed
from maktabi.models.vehicle import Vehicle
from maktabi.models.vehicle_permit import VehiclePermit
from maktabi.schemas.fuel_expense import CreateFuelExpenseRequest, UpdateFuelExpenseRequest
from maktabi.services import fuel_service


@pytest.fixture
def permit(db, vehicle):
    row = VehiclePermit(permit_number="1/2024", employee_name="سالم", vehicle_id=vehicle.id, purpose="تفتيش",
                        destination=settings.PERMIT_DESTINATION, start_date=datetime(2024, 1, 1), odometer_out=900)
    db.add(row)
    db.commit()
    return row


def expense_body(permit_id, odometer, liters, cost, day):
    return CreateFuelExpenseRequest(permit_id=permit_id, date=day, liters=liters, cost=cost,
                                    odometer_reading=odometer, station_name="المها")


class TestFuelExpenses:
    def test_vehicle_copied_from_permit(self, db, permit, vehicle):
        expense = fuel_service.create_fuel_expense(db, expense_body(permit.id, 1000, 20, 6.0, date(2024, 1, 5)))
        assert expense.vehicle_id == vehicle.id

    def test_unknown_permit_rejected(self, db):
        with pytest.raises(RecordNotFound):
            fuel_service.create_fuel_expense(db, expense_body("nope", 1000, 20, 6.0, date(2024, 1, 5)))

    def test_vehicle_not_rewritten_when_permit_changes(self, db, permit, vehicle):
        expense = fuel_service.create_fuel_expense(db, expense_body(permit.id, 1000, 20, 6.0, date(2024, 1, 5)))
        other_vehicle = Vehicle(type="Nissan Patrol", plate_number="77 XY")
        db.add(other_vehicle)
        db.commit()
        other = VehiclePermit(permit_number="2/2024", employee_name="علي", vehicle_id=other_vehicle.id,
                              purpose="نقل", start_date=datetime(2024, 1, 6), odometer_out=0)
        db.add(other)
        db.commit()

        expense = fuel_service.update_fuel_expense(db, expense.id, UpdateFuelExpenseRequest(permit_id=other.id))
        assert expense.permit_id == other.id
        assert expense.vehicle_id == vehicle.id

    def test_listing_filters_month_and_joins_names(self, db, permit, vehicle):
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1000, 20, 6.0, date(2024, 1, 5)))
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1200, 15, 4.5, date(2024, 1, 20)))
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1500, 18, 5.4, date(2024, 2, 2)))

        rows = fuel_service.list_fuel_expenses(db, year_month="2024-01")
        assert [r["date"] for r in rows] == [date(2024, 1, 20), date(2024, 1, 5)]
        assert rows[0]["permit_number"] == "1/2024"
        assert rows[0]["vehicle_name"] == vehicle.display_name

    def test_listing_placeholder_for_deleted_permit(self, db, permit):
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1000, 20, 6.0, date(2024, 1, 5)))
        db.delete(permit)
        db.commit()
        rows = fuel_service.list_fuel_expenses(db)
        assert rows[0]["permit_number"] == settings.MISSING_PLACEHOLDER

    def test_invalid_month_rejected(self, db):
        with pytest.raises(ValidationFailed):
            fuel_service.list_fuel_expenses(db, year_month="2024/01")


class TestMonthlyFleetReport:
    def test_report_from_stored_expenses(self, db, permit):
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1000, 20, 6.0, date(2024, 1, 5)))
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1200, 15, 4.5, date(2024, 1, 20)))

        report = fuel_service.monthly_fleet_report(db, "2024-01")
        assert report.totals.distance == 200
        assert report.items[0].consumption == pytest.approx(200 / 15)

    def test_deleting_permit_keeps_report(self, db, permit):
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1000, 20, 6.0, date(2024, 1, 5)))
        fuel_service.create_fuel_expense(db, expense_body(permit.id, 1200, 15, 4.5, date(2024, 1, 20)))
        before = fuel_service.monthly_fleet_report(db, "2024-01")
        db.delete(permit)
        db.commit()
        assert fuel_service.monthly_fleet_report(db, "2024-01") == before
