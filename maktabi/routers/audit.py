# maktabi/routers/audit.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import requires
from maktabi.config import settings
from maktabi.database import get_db
from maktabi.models.audit_log import AuditLog
from maktabi.schemas.audit_log import AuditLogOut
from maktabi.services import crud

router = APIRouter()


@router.get("/audit-logs", response_model=list[AuditLogOut], summary="Activity trail, newest first")
def get_audit_logs(user_id: str = None, q: str = None, limit: int = None,
                   db: Session = Depends(get_db), user=Depends(requires("audit"))):
    filters = [AuditLog.user_id == user_id] if user_id else []
    return crud.list_records(db, AuditLog, *filters, order_by=AuditLog.timestamp.desc(),
                             search=q, search_fields=(AuditLog.action, AuditLog.details, AuditLog.user_name),
                             limit=limit or settings.DEFAULT_LIST_LIMIT)
