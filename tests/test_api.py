# tests/test_api.py
"""API tests: identity header, role checks, error mapping and the permit → fuel → report flow."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date
from unittest.mock import MagicMock
from maktabi.config import settings
from maktabi.exceptions import InvalidTransition


def as_user(employee) -> dict:
    return {"X-Employee-Id": employee.id}


class TestIdentity:
    def test_health_needs_no_identity(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["database"] == "ok"

    def test_missing_header_is_401(self, client):
        assert client.get("/api/v1/vehicles").status_code == 401

    def test_unknown_employee_is_401(self, client):
        assert client.get("/api/v1/vehicles", headers={"X-Employee-Id": "ghost"}).status_code == 401

    def test_me(self, client, users):
        response = client.get("/api/v1/employees/me", headers=as_user(users["head"]))
        assert response.json()["role"] == "Head of Department"


class TestPermissions:
    def test_employee_cannot_see_permits(self, client, users):
        assert client.get("/api/v1/permits", headers=as_user(users["staff"])).status_code == 403

    def test_head_cannot_manage_vehicles(self, client, users):
        body = {"type": "Hilux", "plate_number": "1 A"}
        assert client.post("/api/v1/vehicles", json=body, headers=as_user(users["head"])).status_code == 403

    def test_only_admin_reads_audit_log(self, client, users):
        assert client.get("/api/v1/audit-logs", headers=as_user(users["head"])).status_code == 403
        assert client.get("/api/v1/audit-logs", headers=as_user(users["admin"])).status_code == 200

    def test_settings_defaults_then_update(self, client, users):
        response = client.get("/api/v1/settings", headers=as_user(users["staff"]))
        assert "إجازة مرضية" in response.json()["leave_types"]

        response = client.put("/api/v1/settings", json={"petrol_stations": ["المها", "شل"]},
                              headers=as_user(users["admin"]))
        assert response.status_code == 200
        assert response.json()["petrol_stations"] == ["المها", "شل"]
        assert response.json()["leave_types"]

    def test_ramadan_dates_per_year(self, client, users):
        admin = as_user(users["admin"])
        response = client.put("/api/v1/settings/ramadan/2024", headers=admin,
                              json={"start": "2024-03-11", "end": "2024-04-09"})
        assert response.status_code == 200
        assert response.json()["ramadan_dates"]["2024"] == {"start": "2024-03-11", "end": "2024-04-09"}

        assert client.put("/api/v1/settings/ramadan/2024", headers=admin,
                          json={"start": "2024-04-09", "end": "2024-03-11"}).status_code == 422
        assert client.put("/api/v1/settings/ramadan/2024", headers=as_user(users["head"]),
                          json={"start": "2024-03-11", "end": "2024-04-09"}).status_code == 403


class TestFleetFlow:
    def test_checkout_checkin_fuel_report(self, client, users, vehicle):
        head = as_user(users["head"])

        response = client.post("/api/v1/permits", headers=head, json={
            "employee_name": "سالم", "vehicle_id": vehicle.id, "purpose": "تفتيش",
            "start_date": "2024-01-01T08:00:00", "odometer_out": 900,
        })
        assert response.status_code == 201
        permit = response.json()
        assert permit["status"] == "open"
        assert permit["destination"] == settings.PERMIT_DESTINATION
        assert permit["vehicle_name"] == "Toyota Hilux (1234 AB)"

        for odometer, liters, cost, day in [(1000, 20, 6.0, "2024-01-05"), (1200, 15, 4.5, "2024-01-20")]:
            response = client.post("/api/v1/fuel-expenses", headers=head, json={
                "permit_id": permit["id"], "date": day, "liters": liters, "cost": cost,
                "odometer_reading": odometer, "station_name": "المها",
            })
            assert response.status_code == 201
            assert response.json()["vehicle_id"] == vehicle.id

        response = client.post(f"/api/v1/permits/{permit['id']}/checkin", headers=head,
                               json={"end_date": "2024-01-21T15:00:00", "odometer_in": 1250})
        assert response.json()["distance"] == 350

        response = client.get(f"/api/v1/permits/opening-odometer?vehicle_id={vehicle.id}", headers=head)
        assert response.json()["odometer_out"] == 1250

        report = client.get("/api/v1/reports/fuel/2024-01", headers=head).json()
        assert report["totals"]["distance"] == 200
        assert report["items"][0]["consumption"] == pytest.approx(13.333, rel=1e-3)

        listing = client.get("/api/v1/fuel-expenses?month=2024-01", headers=head).json()
        assert [row["odometer_reading"] for row in listing] == [1200, 1000]
        assert listing[0]["permit_number"] == permit["permit_number"]

    def test_second_checkin_is_409(self, client, users, vehicle):
        head = as_user(users["head"])
        permit = client.post("/api/v1/permits", headers=head, json={
            "employee_name": "سالم", "vehicle_id": vehicle.id, "purpose": "تفتيش",
            "start_date": "2024-01-01T08:00:00",
        }).json()
        assert permit["odometer_out"] == 0

        body = {"end_date": "2024-01-02T08:00:00", "odometer_in": 40}
        assert client.post(f"/api/v1/permits/{permit['id']}/checkin", headers=head, json=body).status_code == 200
        response = client.post(f"/api/v1/permits/{permit['id']}/checkin", headers=head, json=body)
        assert response.status_code == 409
        assert "closed" in response.json()["detail"]

    def test_unknown_permit_is_404(self, client, users):
        response = client.get("/api/v1/permits/missing", headers=as_user(users["admin"]))
        assert response.status_code == 404

    def test_bad_report_month_is_422(self, client, users):
        response = client.get("/api/v1/reports/fuel/2024-13", headers=as_user(users["admin"]))
        assert response.status_code == 422

    def test_negative_odometer_rejected(self, client, users, vehicle):
        response = client.post("/api/v1/permits", headers=as_user(users["admin"]), json={
            "employee_name": "سالم", "vehicle_id": vehicle.id, "purpose": "تفتيش",
            "start_date": "2024-01-01T08:00:00", "odometer_out": -5,
        })
        assert response.status_code == 422


class TestLeavesApi:
    def test_employee_submits_and_head_approves(self, client, users):
        staff, head = as_user(users["staff"]), as_user(users["head"])
        response = client.post("/api/v1/leaves", headers=staff, json={
            "employee_id": users["staff"].id, "leave_type": "إجازة اعتيادية",
            "start_date": "2024-03-10", "end_date": "2024-03-12",
        })
        assert response.status_code == 201
        leave_id = response.json()["id"]

        assert client.post(f"/api/v1/leaves/{leave_id}/decision", headers=staff,
                           json={"status": "Approved"}).status_code == 403
        response = client.post(f"/api/v1/leaves/{leave_id}/decision", headers=head, json={"status": "Approved"})
        assert response.json()["status"] == "Approved"

        document = client.get(f"/api/v1/leaves/{leave_id}/document", headers=staff).json()
        assert document["template"] == "short"
        assert document["duration_days"] == 3

    def test_decision_can_be_reverted_to_pending(self, client, users):
        staff, head = as_user(users["staff"]), as_user(users["head"])
        leave_id = client.post("/api/v1/leaves", headers=staff, json={
            "employee_id": users["staff"].id, "leave_type": "إجازة اعتيادية",
            "start_date": "2024-03-10", "end_date": "2024-03-12",
        }).json()["id"]

        for status in ("Approved", "Rejected", "Pending"):
            response = client.post(f"/api/v1/leaves/{leave_id}/decision", headers=head, json={"status": status})
            assert response.status_code == 200
            assert response.json()["status"] == status

    def test_duration_endpoint(self, client, users):
        response = client.get("/api/v1/leaves/duration?start_date=2024-03-01&end_date=2024-03-10",
                              headers=as_user(users["staff"]))
        assert response.json() == {"duration_days": 10, "template": "long"}


class TestUserRequestsApi:
    def test_author_name_resolved_and_visibility(self, client, users):
        response = client.post("/api/v1/user-requests", headers=as_user(users["staff"]),
                               json={"title": "تكييف", "description": "المكيف معطل"})
        assert response.status_code == 201
        assert response.json()["employee_name"] == "سالم"
        assert response.json()["status"] == "Pending"

        assert len(client.get("/api/v1/user-requests", headers=as_user(users["head"])).json()) == 1
        assert client.get("/api/v1/user-requests", headers=as_user(users["admin"])).json()[0]["title"] == "تكييف"


class TestDashboardApi:
    def test_summary_is_role_aware(self, client, users):
        today = date.today().isoformat()
        staff, admin = as_user(users["staff"]), as_user(users["admin"])
        response = client.post("/api/v1/leaves", headers=staff, json={
            "employee_id": users["staff"].id, "leave_type": "إجازة اعتيادية",
            "start_date": today, "end_date": today,
        })
        leave_id = response.json()["id"]

        summary = client.get("/api/v1/dashboard/summary", headers=admin).json()
        assert summary["total_employees"] == 3
        assert summary["pending_requests"] == 1
        assert summary["on_leave_today"] == 0

        client.post(f"/api/v1/leaves/{leave_id}/decision", headers=admin, json={"status": "Approved"})
        summary = client.get("/api/v1/dashboard/summary", headers=staff).json()
        assert summary["total_employees"] == 1
        assert summary["on_leave_today"] == 1
        assert summary["pending_requests"] == 0

        response = client.get("/api/v1/dashboard/summary", headers=as_user(users["head"]))
        assert response.json()["total_employees"] == 3

    def test_needs_identity(self, client):
        assert client.get("/api/v1/dashboard/summary").status_code == 401


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_domain_error_keeps_its_status(self):
        from maktabi.main import domain_exception_handler
        response = await domain_exception_handler(MagicMock(), InvalidTransition("Permit 1/2024 is already closed"))
        assert response.status_code == 409
        assert b"already closed" in response.body

    @pytest.mark.asyncio
    async def test_unexpected_error_is_500(self):
        from maktabi.main import global_exception_handler
        response = await global_exception_handler(MagicMock(), RuntimeError("boom"))
        assert response.status_code == 500
        assert b"Internal server error" in response.body
