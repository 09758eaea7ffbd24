# maktabi/services/crud.py
"""
Generic persistence helpers shared by every entity service.
list / get / create / update (partial merge) / delete, no cascades anywhere.
Commit failures propagate to the caller after a rollback; nothing is retried.
"""

from datetime import datetime
from typing import Iterable, Optional, Type

from sqlalchemy import or_
from sqlalchemy.orm import Session

from maktabi.exceptions import RecordNotFound
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)

IMMUTABLE_FIELDS = {"id", "created_at"}


def _commit(db: Session):
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def list_records(db: Session, model: Type, *filters, order_by=None, search: Optional[str] = None,
                 search_fields: Iterable = (), limit: Optional[int] = None) -> list:
    """All rows of `model`, optionally filtered and free-text searched (case-insensitive LIKE)."""
    q = db.query(model)
    if filters:
        q = q.filter(*filters)
    if search and search_fields:
        pattern = f"%{search.strip()}%"
        q = q.filter(or_(*[column.ilike(pattern) for column in search_fields]))
    if order_by is not None:
        q = q.order_by(order_by)
    if limit:
        q = q.limit(limit)
    return q.all()


def get_record(db: Session, model: Type, record_id: str):
    record = db.get(model, record_id)
    if record is None:
        raise RecordNotFound(model.__name__, record_id)
    return record


def find_record(db: Session, model: Type, record_id: Optional[str]):
    """Like get_record but returns None for a missing or empty id."""
    if not record_id:
        return None
    return db.get(model, record_id)


def create_record(db: Session, model: Type, fields: dict):
    """Insert a row; the id and created_at are assigned here."""
    record = model(**fields)
    if hasattr(model, "created_at") and getattr(record, "created_at", None) is None:
        record.created_at = datetime.utcnow()
    db.add(record)
    _commit(db)
    db.refresh(record)
    logger.info(f"[CRUD] Created {model.__name__} id={record.id}")
    return record


def update_record(db: Session, model: Type, record_id: str, changes: dict):
    """Merge `changes` into an existing row. Unknown and immutable keys are ignored."""
    record = get_record(db, model, record_id)
    for key, value in changes.items():
        if key in IMMUTABLE_FIELDS or not hasattr(model, key):
            continue
        setattr(record, key, value)
    _commit(db)
    db.refresh(record)
    logger.info(f"[CRUD] Updated {model.__name__} id={record_id} fields={sorted(changes)}")
    return record


def delete_record(db: Session, model: Type, record_id: str):
    """Remove a row and return the detached instance (for audit details)."""
    record = get_record(db, model, record_id)
    db.delete(record)
    _commit(db)
    logger.info(f"[CRUD] Deleted {model.__name__} id={record_id}")
    return record
