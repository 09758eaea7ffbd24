# maktabi/services/dashboard_service.py
"""
Landing-page counters. Managers see the whole office; an employee's counters
cover only their own record and their own leave requests.
"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from maktabi.models.employee import Employee
from maktabi.models.leave_request import LeaveRequest
from maktabi.services.authz import can_manage
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)


def dashboard_summary(db: Session, user, today: Optional[date] = None) -> dict:
    today = today or date.today()
    employees = db.query(Employee)
    leaves = db.query(LeaveRequest)
    if not can_manage(user, "leaves"):
        employees = employees.filter(Employee.id == user.id)
        leaves = leaves.filter(LeaveRequest.employee_id == user.id)

    summary = {
        "total_employees": employees.count(),
        "on_leave_today": leaves.filter(
            LeaveRequest.status == "Approved",
            LeaveRequest.start_date <= today,
            LeaveRequest.end_date >= today,
        ).count(),
        "pending_requests": leaves.filter(LeaveRequest.status == "Pending").count(),
        "date": today,
    }
    logger.debug(f"[Dashboard] {user.name}: {summary}")
    return summary
