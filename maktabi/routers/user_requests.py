# maktabi/routers/user_requests.py
"""Suggestions / complaints. Employees submit and see their own; managers triage all."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.exceptions import PermissionDenied
from maktabi.models.user_request import UserRequest
from maktabi.schemas.user_request import UserRequestCreate, UserRequestUpdate, UserRequestOut
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.services.authz import can_manage, is_self

router = APIRouter()


@router.get("/user-requests", response_model=list[UserRequestOut])
def list_user_requests(status: str = None, q: str = None, db: Session = Depends(get_db),
                       user=Depends(get_current_user)):
    filters = []
    if not can_manage(user, "user_requests"):
        filters.append(UserRequest.employee_id == user.id)
    if status:
        filters.append(UserRequest.status == status)
    return crud.list_records(db, UserRequest, *filters, order_by=UserRequest.created_at.desc(),
                             search=q, search_fields=(UserRequest.title, UserRequest.description,
                                                      UserRequest.employee_name))


@router.post("/user-requests", response_model=UserRequestOut, status_code=201)
def create_user_request(body: UserRequestCreate, db: Session = Depends(get_db), user=Depends(get_current_user)):
    request = crud.create_record(db, UserRequest, {
        **body.model_dump(),
        "employee_id": user.id,
        "employee_name": user.name,
        "status": "Pending",
    })
    record_activity(db, user, "تقديم مقترح/شكوى", f"تقديم مقترح جديد بعنوان: {request.title}")
    return request


@router.put("/user-requests/{request_id}", response_model=UserRequestOut)
def update_user_request(request_id: str, body: UserRequestUpdate, db: Session = Depends(get_db),
                        user=Depends(get_current_user)):
    """Status changes need the user_requests capability; the author may edit the text."""
    current = crud.get_record(db, UserRequest, request_id)
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    if not can_manage(user, "user_requests"):
        if not is_self(user, current.employee_id) or "status" in changes:
            raise PermissionDenied("Not allowed to update this request")
    request = crud.update_record(db, UserRequest, request_id, changes)
    record_activity(db, user, "تحديث مقترح/شكوى", f'تحديث حالة المقترح "{request.title}" إلى {request.status}')
    return request


@router.delete("/user-requests/{request_id}")
def delete_user_request(request_id: str, db: Session = Depends(get_db), user=Depends(requires("user_requests"))):
    request = crud.get_record(db, UserRequest, request_id)
    details = f"حذف المقترح: {request.title}"
    crud.delete_record(db, UserRequest, request_id)
    record_activity(db, user, "حذف مقترح/شكوى", details)
    return {"status": "deleted", "id": request_id}
