# maktabi/services/audit_service.py
"""
Shared activity-trail service.
Used by every entity service after a successful create/update/delete.
An audit write that fails is logged and does not undo the mutation it describes.
"""

from datetime import datetime
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from maktabi.models.audit_log import AuditLog
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)


def record_activity(db: Session, actor, action: str, details: str):
    """Persist one audit row for `actor` (an Employee). No-op without an actor."""
    if actor is None:
        return None
    entry = AuditLog(user_id=actor.id, user_name=actor.name, action=action,
                     details=details, timestamp=datetime.utcnow())
    try:
        db.add(entry)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[AUDIT] Failed to record '{action}' for {actor.name}: {e}")
        return None
    logger.info(f"[AUDIT] {actor.name}: {action} | {details}")
    return entry
