# maktabi/routers/correspondence.py
"""Entry-permit letters, customs letters and rejection notices, with print views."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import requires
from maktabi.database import get_db
from maktabi.models.correspondence import Correspondence, CustomsCorrespondence, RejectionNotice
from maktabi.schemas.correspondence import (
    CorrespondenceCreate, CorrespondenceUpdate, CorrespondenceOut,
    CustomsCorrespondenceCreate, CustomsCorrespondenceUpdate, CustomsCorrespondenceOut,
    RejectionNoticeCreate, RejectionNoticeUpdate, RejectionNoticeOut,
)
from maktabi.services import crud, correspondence_service
from maktabi.services.audit_service import record_activity
from maktabi.services.document_views import (
    correspondence_document, customs_document, rejection_notice_document,
)

router = APIRouter()
manager = requires("correspondence")


# ── Entry-permit letters ─────────────────────────────────────────────────────
@router.get("/correspondence", response_model=list[CorrespondenceOut])
def list_correspondence(type: str = None, q: str = None, db: Session = Depends(get_db), user=Depends(manager)):
    filters = [Correspondence.type == type] if type else []
    return crud.list_records(db, Correspondence, *filters, order_by=Correspondence.created_at.desc(),
                             search=q, search_fields=(Correspondence.reference_number,
                                                      Correspondence.recipient, Correspondence.subject))


@router.post("/correspondence", response_model=CorrespondenceOut, status_code=201)
def create_correspondence(body: CorrespondenceCreate, db: Session = Depends(get_db), user=Depends(manager)):
    return correspondence_service.create_correspondence(db, body, actor=user)


@router.put("/correspondence/{letter_id}", response_model=CorrespondenceOut)
def update_correspondence(letter_id: str, body: CorrespondenceUpdate, db: Session = Depends(get_db),
                          user=Depends(manager)):
    return correspondence_service.update_correspondence(db, letter_id, body, actor=user)


@router.delete("/correspondence/{letter_id}")
def delete_correspondence(letter_id: str, db: Session = Depends(get_db), user=Depends(manager)):
    letter = crud.get_record(db, Correspondence, letter_id)
    details = f"حذف المراسلة رقم {letter.reference_number}"
    crud.delete_record(db, Correspondence, letter_id)
    record_activity(db, user, "حذف مراسلة", details)
    return {"status": "deleted", "id": letter_id}


@router.get("/correspondence/{letter_id}/document")
def correspondence_print_view(letter_id: str, db: Session = Depends(get_db), user=Depends(manager)):
    return correspondence_document(crud.get_record(db, Correspondence, letter_id))


# ── Customs letters ──────────────────────────────────────────────────────────
@router.get("/customs-correspondence", response_model=list[CustomsCorrespondenceOut])
def list_customs(q: str = None, db: Session = Depends(get_db), user=Depends(manager)):
    return crud.list_records(db, CustomsCorrespondence, order_by=CustomsCorrespondence.created_at.desc(),
                             search=q, search_fields=(CustomsCorrespondence.reference_number,
                                                      CustomsCorrespondence.company_name,
                                                      CustomsCorrespondence.product))


@router.post("/customs-correspondence", response_model=CustomsCorrespondenceOut, status_code=201)
def create_customs(body: CustomsCorrespondenceCreate, db: Session = Depends(get_db), user=Depends(manager)):
    return correspondence_service.create_customs_correspondence(db, body, actor=user)


@router.put("/customs-correspondence/{letter_id}", response_model=CustomsCorrespondenceOut)
def update_customs(letter_id: str, body: CustomsCorrespondenceUpdate, db: Session = Depends(get_db),
                   user=Depends(manager)):
    return correspondence_service.update_customs_correspondence(db, letter_id, body, actor=user)


@router.delete("/customs-correspondence/{letter_id}")
def delete_customs(letter_id: str, db: Session = Depends(get_db), user=Depends(manager)):
    letter = crud.get_record(db, CustomsCorrespondence, letter_id)
    details = f"حذف المراسلة رقم {letter.reference_number}"
    crud.delete_record(db, CustomsCorrespondence, letter_id)
    record_activity(db, user, "حذف مراسلة جمركية", details)
    return {"status": "deleted", "id": letter_id}


@router.get("/customs-correspondence/{letter_id}/document")
def customs_print_view(letter_id: str, db: Session = Depends(get_db), user=Depends(manager)):
    return customs_document(crud.get_record(db, CustomsCorrespondence, letter_id))


# ── Rejection notices ────────────────────────────────────────────────────────
@router.get("/rejection-notices", response_model=list[RejectionNoticeOut])
def list_rejection_notices(q: str = None, db: Session = Depends(get_db), user=Depends(manager)):
    return crud.list_records(db, RejectionNotice, order_by=RejectionNotice.created_at.desc(),
                             search=q, search_fields=(RejectionNotice.importer_name,
                                                      RejectionNotice.exporter_name,
                                                      RejectionNotice.commodity))


@router.post("/rejection-notices", response_model=RejectionNoticeOut, status_code=201)
def create_rejection_notice(body: RejectionNoticeCreate, db: Session = Depends(get_db), user=Depends(manager)):
    notice = crud.create_record(db, RejectionNotice, body.model_dump())
    record_activity(db, user, "إنشاء إخطار رفض", f"إنشاء إخطار رفض للمستورد: {notice.importer_name}")
    return notice


@router.put("/rejection-notices/{notice_id}", response_model=RejectionNoticeOut)
def update_rejection_notice(notice_id: str, body: RejectionNoticeUpdate, db: Session = Depends(get_db),
                            user=Depends(manager)):
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    notice = crud.update_record(db, RejectionNotice, notice_id, changes)
    record_activity(db, user, "تحديث إخطار رفض", f"تحديث إخطار رفض للمستورد: {notice.importer_name}")
    return notice


@router.delete("/rejection-notices/{notice_id}")
def delete_rejection_notice(notice_id: str, db: Session = Depends(get_db), user=Depends(manager)):
    notice = crud.get_record(db, RejectionNotice, notice_id)
    details = f"حذف إخطار رفض للمستورد: {notice.importer_name}"
    crud.delete_record(db, RejectionNotice, notice_id)
    record_activity(db, user, "حذف إخطار رفض", details)
    return {"status": "deleted", "id": notice_id}


@router.get("/rejection-notices/{notice_id}/document")
def rejection_notice_print_view(notice_id: str, db: Session = Depends(get_db), user=Depends(manager)):
    return rejection_notice_document(crud.get_record(db, RejectionNotice, notice_id))
