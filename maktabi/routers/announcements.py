# maktabi/routers/announcements.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.models.announcement import Announcement
from maktabi.schemas.announcement import AnnouncementCreate, AnnouncementUpdate, AnnouncementOut
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.services.authz import can_manage

router = APIRouter()


@router.get("/announcements", response_model=list[AnnouncementOut], summary="Active announcements (all for Admin)")
def list_announcements(db: Session = Depends(get_db), user=Depends(get_current_user)):
    filters = [] if can_manage(user, "announcements") else [Announcement.is_active.is_(True)]
    return crud.list_records(db, Announcement, *filters, order_by=Announcement.created_at.desc())


@router.post("/announcements", response_model=AnnouncementOut, status_code=201)
def create_announcement(body: AnnouncementCreate, db: Session = Depends(get_db),
                        user=Depends(requires("announcements"))):
    announcement = crud.create_record(db, Announcement, body.model_dump())
    record_activity(db, user, "إنشاء إعلان", f"إنشاء إعلان: {announcement.message[:50]}")
    return announcement


@router.put("/announcements/{announcement_id}", response_model=AnnouncementOut)
def update_announcement(announcement_id: str, body: AnnouncementUpdate, db: Session = Depends(get_db),
                        user=Depends(requires("announcements"))):
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    announcement = crud.update_record(db, Announcement, announcement_id, changes)
    record_activity(db, user, "تحديث إعلان", f"تحديث إعلان: {announcement.message[:50]}")
    return announcement


@router.delete("/announcements/{announcement_id}")
def delete_announcement(announcement_id: str, db: Session = Depends(get_db),
                        user=Depends(requires("announcements"))):
    crud.delete_record(db, Announcement, announcement_id)
    record_activity(db, user, "حذف إعلان", f"حذف الإعلان {announcement_id}")
    return {"status": "deleted", "id": announcement_id}
