# maktabi/services/leave_service.py
"""
Leave requests: duration, print-template choice, role-aware listing and approval.

Duration is a plain calendar-day count (start and end inclusive). Public holidays
and weekends are not deducted.
"""

import math
from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session

from maktabi.config import settings
from maktabi.exceptions import InvalidTransition, PermissionDenied, ValidationFailed
from maktabi.models.employee import Employee
from maktabi.models.leave_request import LeaveRequest
from maktabi.schemas.leave_request import LeaveRequestCreate, LeaveRequestUpdate
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.services.authz import can_manage, is_self
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)

PENDING = "Pending"
LEAVE_STATUSES = ("Pending", "Approved", "Rejected")


def _as_datetime(value) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value


def calculate_duration(start_date, end_date) -> int:
    """Inclusive day count: ceil(|end - start| in days) + 1, or 0 when a date is missing."""
    if not start_date or not end_date:
        return 0
    delta = abs(_as_datetime(end_date) - _as_datetime(start_date))
    return math.ceil(delta.total_seconds() / 86400) + 1


def select_leave_template(duration_days: int) -> str:
    return "short" if duration_days <= settings.SHORT_LEAVE_MAX_DAYS else "long"


def list_leave_requests(db: Session, user, status: Optional[str] = None,
                        date_from: Optional[date] = None, date_to: Optional[date] = None,
                        search: Optional[str] = None) -> list[dict]:
    """
    Newest start date first. Employees only see their own requests.
    status "All" (or None) disables the status filter; the date range matches
    requests overlapping [date_from, date_to].
    """
    filters = []
    if not can_manage(user, "leaves"):
        filters.append(LeaveRequest.employee_id == user.id)
    if status and status != "All":
        filters.append(LeaveRequest.status == status)
    if date_from:
        filters.append(LeaveRequest.end_date >= date_from)
    if date_to:
        filters.append(LeaveRequest.start_date <= date_to)

    requests = crud.list_records(db, LeaveRequest, *filters, order_by=LeaveRequest.start_date.desc())
    names = {e.id: e.name for e in crud.list_records(db, Employee)}

    rows = []
    needle = search.strip().lower() if search else None
    for r in requests:
        employee_name = names.get(r.employee_id, settings.MISSING_PLACEHOLDER)
        if needle and not any(needle in (text or "").lower()
                              for text in (employee_name, r.leave_type, r.reason)):
            continue
        rows.append({
            "id": r.id,
            "employee_id": r.employee_id,
            "employee_name": employee_name,
            "leave_type": r.leave_type,
            "start_date": r.start_date,
            "end_date": r.end_date,
            "reason": r.reason,
            "status": r.status,
            "duration_days": calculate_duration(r.start_date, r.end_date),
            "created_at": r.created_at,
        })
    return rows


def _check_owner_or_manager(user, request_employee_id: str):
    if not (is_self(user, request_employee_id) or can_manage(user, "leaves")):
        raise PermissionDenied("Not allowed to act on another employee's leave")


def create_leave_request(db: Session, body: LeaveRequestCreate, actor) -> LeaveRequest:
    _check_owner_or_manager(actor, body.employee_id)
    employee = crud.get_record(db, Employee, body.employee_id)
    leave = crud.create_record(db, LeaveRequest, {**body.model_dump(), "status": PENDING})
    days = calculate_duration(leave.start_date, leave.end_date)
    logger.info(f"[Leave] {employee.name} requested {leave.leave_type} for {days} days")
    record_activity(db, actor, "تقديم طلب إجازة", f"طلب إجازة {leave.leave_type} للموظف: {employee.name}")
    return leave


def update_leave_request(db: Session, leave_id: str, body: LeaveRequestUpdate, actor) -> LeaveRequest:
    leave = crud.get_record(db, LeaveRequest, leave_id)
    _check_owner_or_manager(actor, leave.employee_id)
    if leave.status != PENDING and not can_manage(actor, "leaves"):
        raise InvalidTransition("Only pending requests can be edited")
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    leave = crud.update_record(db, LeaveRequest, leave_id, changes)
    record_activity(db, actor, "تحديث طلب إجازة", f"تحديث طلب الإجازة {leave.id}")
    return leave


def decide_leave_request(db: Session, leave_id: str, status: str, actor) -> LeaveRequest:
    """Managers may move a request to any status at any time; the same status is a no-op."""
    if status not in LEAVE_STATUSES:
        raise ValidationFailed(f"Unknown leave status '{status}'")
    leave = crud.get_record(db, LeaveRequest, leave_id)
    if leave.status == status:
        return leave
    leave = crud.update_record(db, LeaveRequest, leave_id, {"status": status})
    logger.info(f"[Leave] {leave_id} → {status}")
    record_activity(db, actor, "تحديث حالة إجازة", f"تغيير حالة طلب الإجازة {leave_id} إلى {status}")
    return leave


def delete_leave_request(db: Session, leave_id: str, actor):
    leave = crud.get_record(db, LeaveRequest, leave_id)
    _check_owner_or_manager(actor, leave.employee_id)
    details = f"حذف طلب إجازة {leave.leave_type} من {leave.start_date} إلى {leave.end_date}"
    crud.delete_record(db, LeaveRequest, leave_id)
    record_activity(db, actor, "حذف طلب إجازة", details)
