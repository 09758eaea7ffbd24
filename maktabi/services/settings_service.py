# maktabi/services/settings_service.py
"""
Lookup lists for form drop-downs, stored as a single row.
The same row keeps the Ramadan date range of each year, keyed by year.
"""

from datetime import datetime

from sqlalchemy.orm import Session

from maktabi.models.app_settings import AppSettings, SETTINGS_ROW_ID
from maktabi.schemas.app_settings import AppSettingsUpdate, RamadanDateRange
from maktabi.services.audit_service import record_activity
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LEAVE_TYPES = ["إجازة اعتيادية", "إجازة مرضية", "إجازة طارئة"]

LIST_FIELDS = (
    "nationalities", "job_titles", "education_degrees", "leave_types",
    "correspondence_recipients", "departments", "petrol_stations",
)


def default_settings() -> AppSettings:
    values = {name: [] for name in LIST_FIELDS}
    values["leave_types"] = list(DEFAULT_LEAVE_TYPES)
    return AppSettings(id=SETTINGS_ROW_ID, ramadan_dates={}, **values)


def get_settings(db: Session) -> AppSettings:
    """Saved settings, or unsaved defaults when nothing was stored yet."""
    return db.get(AppSettings, SETTINGS_ROW_ID) or default_settings()


def _stored_row(db: Session) -> AppSettings:
    row = db.get(AppSettings, SETTINGS_ROW_ID)
    if row is None:
        row = default_settings()
        db.add(row)
    return row


def _save(db: Session, row: AppSettings) -> AppSettings:
    row.updated_at = datetime.utcnow()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    return row


def update_settings(db: Session, body: AppSettingsUpdate, actor=None) -> AppSettings:
    row = _stored_row(db)
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    for key, value in changes.items():
        setattr(row, key, value)
    row = _save(db, row)
    logger.info(f"[Settings] Updated {sorted(changes)}")
    record_activity(db, actor, "تحديث الإعدادات", f"تحديث: {', '.join(sorted(changes))}")
    return row


def set_ramadan_dates(db: Session, year: int, dates: RamadanDateRange, actor=None) -> AppSettings:
    """Store (or replace) one year's range; other years are left untouched."""
    row = _stored_row(db)
    # New dict so the JSON column is flagged dirty
    row.ramadan_dates = {**(row.ramadan_dates or {}), str(year): dates.model_dump(mode="json")}
    row = _save(db, row)
    logger.info(f"[Settings] Ramadan {year}: {dates.start} → {dates.end}")
    record_activity(db, actor, "تحديث تواريخ رمضان",
                    f"تحديث تواريخ رمضان لسنة {year}: من {dates.start} إلى {dates.end}")
    return row
