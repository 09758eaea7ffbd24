# maktabi/services/correspondence_service.py
"""
Outgoing letters. Entry-permit letters and customs letters draw from one shared
yearly sequence "<prefix>/<n>/<year>"; rejection notices are not numbered.
"""

from datetime import datetime
from typing import Iterable

from sqlalchemy.orm import Session

from maktabi.config import settings
from maktabi.models.correspondence import Correspondence, CustomsCorrespondence
from maktabi.schemas.correspondence import (
    CorrespondenceCreate, CorrespondenceUpdate,
    CustomsCorrespondenceCreate, CustomsCorrespondenceUpdate,
)
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)

PERIOD_TYPE = "temporary_period"


def next_reference_number(reference_numbers: Iterable[str], year: int, prefix: str) -> str:
    """1 + highest middle segment among this year's three-part numbers."""
    suffix = f"/{year}"
    highest = 0
    for number in reference_numbers:
        if not number or not number.endswith(suffix):
            continue
        parts = number.split("/")
        if len(parts) == 3 and parts[1].isdigit():
            highest = max(highest, int(parts[1]))
    return f"{prefix}/{highest + 1}{suffix}"


def _issue_reference_number(db: Session) -> str:
    numbers = [c.reference_number for c in crud.list_records(db, Correspondence)]
    numbers += [c.reference_number for c in crud.list_records(db, CustomsCorrespondence)]
    return next_reference_number(numbers, datetime.utcnow().year, settings.CORRESPONDENCE_PREFIX)


def _period_fields(fields: dict, letter_type: str) -> dict:
    # Only temporary_period letters keep a date range
    if letter_type != PERIOD_TYPE:
        fields["start_date"] = None
        fields["end_date"] = None
    return fields


def create_correspondence(db: Session, body: CorrespondenceCreate, actor=None) -> Correspondence:
    fields = _period_fields(body.model_dump(), body.type)
    fields["reference_number"] = _issue_reference_number(db)
    letter = crud.create_record(db, Correspondence, fields)
    logger.info(f"[Correspondence] {letter.reference_number} → {letter.recipient}")
    record_activity(db, actor, "إنشاء مراسلة", f"إنشاء مراسلة جديدة إلى {letter.recipient} بعنوان {letter.subject}")
    return letter


def update_correspondence(db: Session, letter_id: str, body: CorrespondenceUpdate, actor=None) -> Correspondence:
    current = crud.get_record(db, Correspondence, letter_id)
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    changes = _period_fields(changes, changes.get("type", current.type))
    letter = crud.update_record(db, Correspondence, letter_id, changes)
    record_activity(db, actor, "تحديث مراسلة", f"تحديث المراسلة رقم {letter.reference_number}")
    return letter


def create_customs_correspondence(db: Session, body: CustomsCorrespondenceCreate, actor=None) -> CustomsCorrespondence:
    fields = body.model_dump()
    fields["reference_number"] = _issue_reference_number(db)
    letter = crud.create_record(db, CustomsCorrespondence, fields)
    logger.info(f"[Correspondence] Customs {letter.reference_number} → {letter.recipient}")
    record_activity(db, actor, "إنشاء مراسلة جمركية", f"إنشاء مراسلة إلى {letter.recipient} بعنوان {letter.subject}")
    return letter


def update_customs_correspondence(db: Session, letter_id: str, body: CustomsCorrespondenceUpdate,
                                  actor=None) -> CustomsCorrespondence:
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    letter = crud.update_record(db, CustomsCorrespondence, letter_id, changes)
    record_activity(db, actor, "تحديث مراسلة جمركية", f"تحديث المراسلة رقم {letter.reference_number}")
    return letter
