# tests/test_dashboard_service.py
"""Unit tests for the landing-page counters."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date
from maktabi.models.leave_request import LeaveRequest
from maktabi.services.dashboard_service import dashboard_summary

TODAY = date(2024, 3, 11)


@pytest.fixture
def leaves(db, users):
    rows = [
        # approved and covering today
        LeaveRequest(employee_id=users["staff"].id, leave_type="إجازة اعتيادية",
                     start_date=date(2024, 3, 10), end_date=date(2024, 3, 12), status="Approved"),
        # approved, ends today
        LeaveRequest(employee_id=users["head"].id, leave_type="إجازة مرضية",
                     start_date=date(2024, 3, 5), end_date=TODAY, status="Approved"),
        # approved but finished yesterday
        LeaveRequest(employee_id=users["admin"].id, leave_type="إجازة اعتيادية",
                     start_date=date(2024, 3, 1), end_date=date(2024, 3, 10), status="Approved"),
        # pending, covers today but does not count as on leave
        LeaveRequest(employee_id=users["staff"].id, leave_type="إجازة اعتيادية",
                     start_date=date(2024, 3, 11), end_date=date(2024, 3, 11), status="Pending"),
        LeaveRequest(employee_id=users["head"].id, leave_type="إجازة اعتيادية",
                     start_date=date(2024, 4, 1), end_date=date(2024, 4, 3), status="Pending"),
        LeaveRequest(employee_id=users["staff"].id, leave_type="إجازة اعتيادية",
                     start_date=date(2024, 3, 11), end_date=date(2024, 3, 13), status="Rejected"),
    ]
    db.add_all(rows)
    db.commit()
    return rows


class TestDashboardSummary:
    def test_admin_sees_whole_office(self, db, users, leaves):
        summary = dashboard_summary(db, users["admin"], today=TODAY)
        assert summary["total_employees"] == 3
        assert summary["on_leave_today"] == 2
        assert summary["pending_requests"] == 2
        assert summary["date"] == TODAY

    def test_head_of_department_sees_whole_office(self, db, users, leaves):
        summary = dashboard_summary(db, users["head"], today=TODAY)
        assert summary["total_employees"] == 3
        assert summary["pending_requests"] == 2

    def test_employee_sees_only_own_counts(self, db, users, leaves):
        summary = dashboard_summary(db, users["staff"], today=TODAY)
        assert summary["total_employees"] == 1
        assert summary["on_leave_today"] == 1
        assert summary["pending_requests"] == 1

    def test_empty_office(self, db, users):
        summary = dashboard_summary(db, users["staff"], today=TODAY)
        assert summary == {"total_employees": 1, "on_leave_today": 0, "pending_requests": 0, "date": TODAY}
