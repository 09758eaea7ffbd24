# maktabi/routers/training.py
"""Training records. Employees only see courses they are enrolled in."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.models.training_record import TrainingRecord
from maktabi.schemas.training_record import TrainingRecordCreate, TrainingRecordUpdate, TrainingRecordOut
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.services.authz import can_manage

router = APIRouter()


@router.get("/training", response_model=list[TrainingRecordOut])
def list_training(status: str = None, q: str = None, db: Session = Depends(get_db),
                  user=Depends(get_current_user)):
    filters = [TrainingRecord.status == status] if status else []
    records = crud.list_records(db, TrainingRecord, *filters, order_by=TrainingRecord.start_date.desc(),
                                search=q, search_fields=(TrainingRecord.course_name,
                                                         TrainingRecord.provider, TrainingRecord.location))
    if not can_manage(user, "training"):
        records = [r for r in records if user.id in (r.employee_ids or [])]
    return records


@router.post("/training", response_model=TrainingRecordOut, status_code=201)
def create_training(body: TrainingRecordCreate, db: Session = Depends(get_db), user=Depends(requires("training"))):
    record = crud.create_record(db, TrainingRecord, body.model_dump())
    record_activity(db, user, "إضافة سجل تدريبي", f"إضافة دورة: {record.course_name}")
    return record


@router.put("/training/{record_id}", response_model=TrainingRecordOut)
def update_training(record_id: str, body: TrainingRecordUpdate, db: Session = Depends(get_db),
                    user=Depends(requires("training"))):
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    record = crud.update_record(db, TrainingRecord, record_id, changes)
    record_activity(db, user, "تحديث سجل تدريبي", f"تحديث دورة: {record.course_name}")
    return record


@router.delete("/training/{record_id}")
def delete_training(record_id: str, db: Session = Depends(get_db), user=Depends(requires("training"))):
    record = crud.get_record(db, TrainingRecord, record_id)
    details = f"حذف دورة: {record.course_name}"
    crud.delete_record(db, TrainingRecord, record_id)
    record_activity(db, user, "حذف سجل تدريبي", details)
    return {"status": "deleted", "id": record_id}
