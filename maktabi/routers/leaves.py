# maktabi/routers/leaves.py
"""Leave requests: role-aware listing, submission, approval and print view."""

from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.models.employee import Employee
from maktabi.models.leave_request import LeaveRequest
from maktabi.schemas.leave_request import (
    LeaveRequestCreate, LeaveRequestUpdate, LeaveDecision, LeaveRequestOut,
)
from maktabi.services import crud, leave_service
from maktabi.services.authz import can_manage, is_self
from maktabi.services.document_views import leave_document
from maktabi.exceptions import PermissionDenied

router = APIRouter()


@router.get("/leaves", response_model=list[LeaveRequestOut], summary="List leave requests")
def list_leaves(status: str = "All", date_from: date = None, date_to: date = None, q: str = None,
                db: Session = Depends(get_db), user=Depends(get_current_user)):
    """Employees see their own requests only."""
    return leave_service.list_leave_requests(db, user, status=status, date_from=date_from,
                                             date_to=date_to, search=q)


@router.get("/leaves/duration", summary="Inclusive calendar-day count and print template")
def leave_duration(start_date: date, end_date: date, user=Depends(get_current_user)):
    days = leave_service.calculate_duration(start_date, end_date)
    return {"duration_days": days, "template": leave_service.select_leave_template(days)}


@router.post("/leaves", response_model=LeaveRequestOut, status_code=201, summary="Submit a leave request")
def create_leave(body: LeaveRequestCreate, db: Session = Depends(get_db), user=Depends(get_current_user)):
    return leave_service.create_leave_request(db, body, actor=user)


@router.put("/leaves/{leave_id}", response_model=LeaveRequestOut)
def update_leave(leave_id: str, body: LeaveRequestUpdate, db: Session = Depends(get_db),
                 user=Depends(get_current_user)):
    return leave_service.update_leave_request(db, leave_id, body, actor=user)


@router.post("/leaves/{leave_id}/decision", response_model=LeaveRequestOut, summary="Approve or reject")
def decide_leave(leave_id: str, body: LeaveDecision, db: Session = Depends(get_db),
                 user=Depends(requires("leaves"))):
    return leave_service.decide_leave_request(db, leave_id, body.status, actor=user)


@router.delete("/leaves/{leave_id}")
def delete_leave(leave_id: str, db: Session = Depends(get_db), user=Depends(get_current_user)):
    leave_service.delete_leave_request(db, leave_id, actor=user)
    return {"status": "deleted", "id": leave_id}


@router.get("/leaves/{leave_id}/document", summary="Resolved print view (short or long form)")
def leave_print_view(leave_id: str, db: Session = Depends(get_db), user=Depends(get_current_user)):
    leave = crud.get_record(db, LeaveRequest, leave_id)
    if not (is_self(user, leave.employee_id) or can_manage(user, "leaves")):
        raise PermissionDenied("Not allowed to print another employee's leave")
    return leave_document(leave, crud.find_record(db, Employee, leave.employee_id))
