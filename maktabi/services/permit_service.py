# maktabi/services/permit_service.py
"""
Vehicle permit lifecycle: checkout (open) → check-in (closed).

How it works:
  - checkout_permit creates an open permit, numbers it "<n>/<year>" and defaults
    odometer_out to the vehicle's last closing reading
  - checkin_permit closes it; a reversed reading is stored but flagged
  - update_permit is the administrator's unconstrained edit
  - delete_permit removes the permit only; its fuel expenses stay
"""

from datetime import datetime
from typing import Iterable

from sqlalchemy.orm import Session

from maktabi.config import settings
from maktabi.exceptions import InvalidTransition
from maktabi.models.vehicle import Vehicle
from maktabi.models.vehicle_permit import VehiclePermit
from maktabi.schemas.vehicle_permit import (
    CreatePermitRequest, CheckinPermitRequest, UpdatePermitRequest,
)
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.services.fleet_ledger import (
    resolve_opening_odometer, permit_distance, permit_status, has_inconsistent_reading,
)
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)

CLEARABLE_FIELDS = {"end_date", "odometer_in"}


def next_permit_number(permits: Iterable, year: int) -> str:
    """1 + highest numeric prefix among this year's "<n>/<year>" numbers."""
    suffix = f"/{year}"
    highest = 0
    for permit in permits:
        number = permit.permit_number or ""
        if not number.endswith(suffix):
            continue
        prefix = number.split("/")[0]
        if prefix.isdigit():
            highest = max(highest, int(prefix))
    return f"{highest + 1}{suffix}"


def list_permits(db: Session) -> list:
    """Newest first (by created_at)."""
    permits = crud.list_records(db, VehiclePermit)
    return sorted(permits, key=lambda p: p.created_at or datetime.min, reverse=True)


def opening_odometer(db: Session, vehicle_id: str) -> int:
    permits = crud.list_records(db, VehiclePermit, VehiclePermit.vehicle_id == vehicle_id)
    return resolve_opening_odometer(vehicle_id, permits)


def describe_permit(permit: VehiclePermit, vehicles: dict) -> dict:
    """Row for list / detail views: the permit plus derived and joined fields."""
    vehicle = vehicles.get(permit.vehicle_id)
    return {
        "id": permit.id,
        "permit_number": permit.permit_number,
        "employee_name": permit.employee_name,
        "vehicle_id": permit.vehicle_id,
        "vehicle_name": vehicle.display_name if vehicle else settings.UNKNOWN_VEHICLE_LABEL,
        "purpose": permit.purpose,
        "destination": permit.destination,
        "start_date": permit.start_date,
        "end_date": permit.end_date,
        "odometer_out": permit.odometer_out,
        "odometer_in": permit.odometer_in,
        "distance": permit_distance(permit),
        "status": permit_status(permit),
        "inconsistent_reading": has_inconsistent_reading(permit),
        "created_at": permit.created_at,
    }


def vehicle_index(db: Session) -> dict:
    return {v.id: v for v in crud.list_records(db, Vehicle)}


def checkout_permit(db: Session, body: CreatePermitRequest, actor=None) -> VehiclePermit:
    crud.get_record(db, Vehicle, body.vehicle_id)

    all_permits = crud.list_records(db, VehiclePermit)
    odometer_out = body.odometer_out
    if odometer_out is None:
        odometer_out = resolve_opening_odometer(body.vehicle_id, all_permits)

    permit_number = next_permit_number(all_permits, datetime.utcnow().year)
    permit = crud.create_record(db, VehiclePermit, {
        "permit_number": permit_number,
        "employee_name": body.employee_name,
        "vehicle_id": body.vehicle_id,
        "purpose": body.purpose,
        "destination": settings.PERMIT_DESTINATION,
        "start_date": body.start_date,
        "odometer_out": odometer_out,
    })
    logger.info(f"[Permit] Checkout {permit_number} | Vehicle={body.vehicle_id} | "
                f"Employee={body.employee_name} | OdometerOut={odometer_out}")
    record_activity(db, actor, "إنشاء تصريح مركبة",
                    f"إنشاء تصريح رقم {permit_number} للموظف: {body.employee_name}")
    return permit


def checkin_permit(db: Session, permit_id: str, body: CheckinPermitRequest, actor=None) -> VehiclePermit:
    permit = crud.get_record(db, VehiclePermit, permit_id)
    if not permit.is_open:
        raise InvalidTransition(f"Permit {permit.permit_number} is already closed")

    if body.odometer_in < permit.odometer_out:
        logger.warning(f"[Permit] {permit.permit_number} checked in with odometer {body.odometer_in} "
                       f"below checkout reading {permit.odometer_out}; stored, distance undefined")

    permit = crud.update_record(db, VehiclePermit, permit_id, {
        "end_date": body.end_date,
        "odometer_in": body.odometer_in,
        "destination": settings.PERMIT_DESTINATION,
    })
    logger.info(f"[Permit] Check-in {permit.permit_number} | OdometerIn={body.odometer_in} | "
                f"Distance={permit_distance(permit)}")
    record_activity(db, actor, "تحديث تصريح مركبة",
                    f"إغلاق تصريح رقم {permit.permit_number} للموظف: {permit.employee_name}")
    return permit


def update_permit(db: Session, permit_id: str, body: UpdatePermitRequest, actor=None) -> VehiclePermit:
    # Only the return fields may be cleared; the rest keep their value when sent as null
    changes = {
        key: value for key, value in body.model_dump(exclude_unset=True).items()
        if value is not None or key in CLEARABLE_FIELDS
    }
    changes["destination"] = settings.PERMIT_DESTINATION
    permit = crud.update_record(db, VehiclePermit, permit_id, changes)
    if has_inconsistent_reading(permit):
        logger.warning(f"[Permit] {permit.permit_number} now has odometer_in {permit.odometer_in} "
                       f"< odometer_out {permit.odometer_out}")
    record_activity(db, actor, "تحديث تصريح مركبة",
                    f"تحديث تصريح رقم {permit.permit_number} للموظف: {permit.employee_name}")
    return permit


def delete_permit(db: Session, permit_id: str, actor=None):
    permit = crud.get_record(db, VehiclePermit, permit_id)
    details = f"حذف تصريح رقم {permit.permit_number or '(غير مرقم)'} للموظف: {permit.employee_name}"
    crud.delete_record(db, VehiclePermit, permit_id)
    record_activity(db, actor, "حذف تصريح مركبة", details)
