# maktabi/routers/holidays.py
from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.models.public_holiday import PublicHoliday
from maktabi.schemas.public_holiday import PublicHolidayCreate, PublicHolidayUpdate, PublicHolidayOut
from maktabi.services import crud
from maktabi.services.audit_service import record_activity

router = APIRouter()


@router.get("/holidays", response_model=list[PublicHolidayOut], summary="Public holidays, by date")
def list_holidays(date_from: date = None, date_to: date = None, q: str = None,
                  db: Session = Depends(get_db), user=Depends(get_current_user)):
    filters = []
    if date_from:
        filters.append(PublicHoliday.date >= date_from)
    if date_to:
        filters.append(PublicHoliday.date <= date_to)
    return crud.list_records(db, PublicHoliday, *filters, order_by=PublicHoliday.date,
                             search=q, search_fields=(PublicHoliday.name,))


@router.post("/holidays", response_model=PublicHolidayOut, status_code=201)
def create_holiday(body: PublicHolidayCreate, db: Session = Depends(get_db), user=Depends(requires("holidays"))):
    holiday = crud.create_record(db, PublicHoliday, body.model_dump())
    record_activity(db, user, "إضافة عطلة رسمية", f"إضافة عطلة: {holiday.name} بتاريخ {holiday.date}")
    return holiday


@router.put("/holidays/{holiday_id}", response_model=PublicHolidayOut)
def update_holiday(holiday_id: str, body: PublicHolidayUpdate, db: Session = Depends(get_db),
                   user=Depends(requires("holidays"))):
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    holiday = crud.update_record(db, PublicHoliday, holiday_id, changes)
    record_activity(db, user, "تحديث عطلة رسمية", f"تحديث عطلة: {holiday.name}")
    return holiday


@router.delete("/holidays/{holiday_id}")
def delete_holiday(holiday_id: str, db: Session = Depends(get_db), user=Depends(requires("holidays"))):
    holiday = crud.get_record(db, PublicHoliday, holiday_id)
    details = f"حذف عطلة: {holiday.name}"
    crud.delete_record(db, PublicHoliday, holiday_id)
    record_activity(db, user, "حذف عطلة رسمية", details)
    return {"status": "deleted", "id": holiday_id}
