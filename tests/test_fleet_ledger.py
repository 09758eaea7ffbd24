# tests/test_fleet_ledger.py
"""Unit tests for the fleet ledger: permit distance, odometer chaining and the monthly report."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date, datetime, timezone
from types import SimpleNamespace
from maktabi.exceptions import ValidationFailed
from maktabi.services.fleet_ledger import (
    permit_distance, permit_status, has_inconsistent_reading, resolve_opening_odometer,
    compute_distance_segments, build_monthly_report, validate_year_month, fuel_efficiency, month_key,
)


def make_permit(vehicle_id="V1", odometer_out=100, odometer_in=None, end_date=None):
    return SimpleNamespace(vehicle_id=vehicle_id, odometer_out=odometer_out,
                           odometer_in=odometer_in, end_date=end_date)


def make_expense(id, odometer, liters, cost, day, vehicle_id="V1"):
    return SimpleNamespace(id=id, vehicle_id=vehicle_id, odometer_reading=odometer,
                           liters=liters, cost=cost, date=day)


def make_vehicle(id="V1", type="Hilux", plate="1234 AB"):
    return SimpleNamespace(id=id, type=type, plate_number=plate)


class TestPermitDistance:
    def test_closed_permit_distance(self):
        assert permit_distance(make_permit(odometer_out=100, odometer_in=180)) == 80

    def test_open_permit_has_no_distance(self):
        permit = make_permit(odometer_in=None)
        assert permit_distance(permit) is None
        assert permit_status(permit) == "open"

    def test_reversed_reading_is_undefined_not_negative(self):
        permit = make_permit(odometer_out=500, odometer_in=480)
        assert permit_distance(permit) is None
        assert has_inconsistent_reading(permit) is True
        assert permit_status(permit) == "closed"

    def test_equal_reading_is_undefined(self):
        assert permit_distance(make_permit(odometer_out=500, odometer_in=500)) is None


class TestOpeningOdometer:
    def test_latest_closed_permit_wins(self):
        permits = [
            make_permit(odometer_out=0, odometer_in=100, end_date=datetime(2024, 1, 1)),
            make_permit(odometer_out=100, odometer_in=150, end_date=datetime(2024, 1, 3)),
            make_permit(odometer_out=150, odometer_in=None),
        ]
        assert resolve_opening_odometer("V1", permits) == 150

    def test_no_closed_permit_defaults_to_zero(self):
        assert resolve_opening_odometer("V1", []) == 0
        assert resolve_opening_odometer("V1", [make_permit(odometer_in=None)]) == 0

    def test_other_vehicles_ignored(self):
        permits = [make_permit(vehicle_id="V2", odometer_in=999, end_date=datetime(2024, 5, 1))]
        assert resolve_opening_odometer("V1", permits) == 0

    def test_closed_without_end_date_does_not_count(self):
        permits = [make_permit(odometer_in=700, end_date=None)]
        assert resolve_opening_odometer("V1", permits) == 0

    def test_aware_and_naive_end_dates_compare(self):
        permits = [
            make_permit(odometer_in=100, end_date=datetime(2024, 1, 1, 10, 0)),
            make_permit(odometer_in=120, end_date=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)),
        ]
        assert resolve_opening_odometer("V1", permits) == 120


class TestDistanceSegments:
    def test_segments_ordered_by_odometer_not_date(self):
        expenses = [
            make_expense("b", 1200, 15, 4.5, date(2024, 1, 10)),
            make_expense("a", 1000, 20, 6.0, date(2024, 1, 15)),
        ]
        segments = compute_distance_segments("V1", expenses)
        assert len(segments) == 1
        assert segments[0].previous_expense_id == "a"
        assert segments[0].expense_id == "b"
        assert segments[0].distance == 200
        assert segments[0].liters == 15

    def test_regression_gives_zero_anomaly_segment(self):
        expenses = [
            make_expense("a", 1000, 20, 6.0, date(2024, 1, 1)),
            make_expense("b", 1000, 10, 3.0, date(2024, 1, 2)),
        ]
        segments = compute_distance_segments("V1", expenses)
        assert segments[0].distance == 0
        assert segments[0].liters == 0
        assert segments[0].is_anomaly

    def test_single_expense_yields_nothing(self):
        assert compute_distance_segments("V1", [make_expense("a", 1000, 20, 6.0, date(2024, 1, 1))]) == []

    def test_inputs_not_mutated(self):
        expenses = [
            make_expense("b", 1200, 15, 4.5, date(2024, 1, 10)),
            make_expense("a", 1000, 20, 6.0, date(2024, 1, 15)),
        ]
        compute_distance_segments("V1", expenses)
        assert [e.id for e in expenses] == ["b", "a"]


class TestMonthlyReport:
    def test_january_scenario(self):
        vehicles = [make_vehicle()]
        expenses = [
            make_expense("e1", 1000, 20, 6.0, date(2024, 1, 5)),
            make_expense("e2", 1200, 15, 4.5, date(2024, 1, 20)),
        ]
        report = build_monthly_report("2024-01", vehicles, expenses)

        assert len(report.items) == 1
        line = report.items[0]
        assert line.vehicle_name == "Hilux (1234 AB)"
        assert line.total_distance == 200
        assert line.total_liters == 15
        assert line.total_cost == pytest.approx(4.5)
        assert line.consumption == pytest.approx(13.333, rel=1e-3)
        assert report.totals.distance == 200
        assert report.totals.liters == 15
        assert report.totals.cost == pytest.approx(4.5)

    def test_segment_counts_toward_month_of_later_expense(self):
        vehicles = [make_vehicle()]
        expenses = [
            make_expense("e1", 1000, 20, 6.0, date(2023, 12, 28)),
            make_expense("e2", 1300, 25, 7.5, date(2024, 1, 3)),
        ]
        assert build_monthly_report("2023-12", vehicles, expenses).items == []
        january = build_monthly_report("2024-01", vehicles, expenses)
        assert january.items[0].total_distance == 300

    def test_vehicle_without_expenses_is_excluded(self):
        vehicles = [make_vehicle("V1"), make_vehicle("V2", plate="9999 ZZ")]
        expenses = [
            make_expense("e1", 1000, 20, 6.0, "2024-01-05"),
            make_expense("e2", 1100, 10, 3.0, "2024-01-06"),
        ]
        report = build_monthly_report("2024-01", vehicles, expenses)
        assert [i.vehicle_id for i in report.items] == ["V1"]

    def test_totals_are_sum_of_items(self):
        vehicles = [make_vehicle("V1"), make_vehicle("V2", plate="9999 ZZ")]
        expenses = [
            make_expense("a1", 100, 10, 3.0, date(2024, 2, 1), "V1"),
            make_expense("a2", 250, 12, 3.6, date(2024, 2, 9), "V1"),
            make_expense("b1", 5000, 40, 12.0, date(2024, 2, 2), "V2"),
            make_expense("b2", 5400, 38, 11.4, date(2024, 2, 20), "V2"),
        ]
        report = build_monthly_report("2024-02", vehicles, expenses)
        assert report.totals.distance == sum(i.total_distance for i in report.items) == 550
        assert report.totals.liters == pytest.approx(sum(i.total_liters for i in report.items))
        assert report.totals.cost == pytest.approx(15.0)

    def test_report_is_idempotent(self):
        vehicles = [make_vehicle()]
        expenses = [
            make_expense("e1", 1000, 20, 6.0, date(2024, 1, 5)),
            make_expense("e2", 1200, 15, 4.5, date(2024, 1, 20)),
        ]
        first = build_monthly_report("2024-01", vehicles, expenses)
        second = build_monthly_report("2024-01", vehicles, expenses)
        assert first == second

    def test_expense_of_unknown_vehicle_ignored(self):
        expenses = [
            make_expense("x1", 10, 5, 1.0, date(2024, 1, 1), "GONE"),
            make_expense("x2", 90, 5, 1.0, date(2024, 1, 2), "GONE"),
        ]
        report = build_monthly_report("2024-01", [make_vehicle()], expenses)
        assert report.items == []
        assert report.totals.distance == 0


class TestHelpers:
    @pytest.mark.parametrize("value", ["2024-13", "24-01", "2024-1", "", "2024-01-01"])
    def test_invalid_year_month_rejected(self, value):
        with pytest.raises(ValidationFailed):
            validate_year_month(value)

    def test_fuel_efficiency_without_fuel(self):
        assert fuel_efficiency(120, 0) == 0.0

    def test_month_key_accepts_dates_and_strings(self):
        assert month_key(date(2024, 3, 9)) == "2024-03"
        assert month_key("2024-03-09") == "2024-03"
