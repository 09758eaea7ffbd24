# maktabi/routers/permits.py
"""Vehicle permits: checkout, check-in, administrator edit, print view."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import requires
from maktabi.database import get_db
from maktabi.models.vehicle import Vehicle
from maktabi.models.vehicle_permit import VehiclePermit
from maktabi.schemas.vehicle_permit import (
    CreatePermitRequest, CheckinPermitRequest, UpdatePermitRequest,
    VehiclePermitOut, OpeningOdometerOut,
)
from maktabi.services import crud, permit_service
from maktabi.services.document_views import permit_document

router = APIRouter()


@router.get("/permits", response_model=list[VehiclePermitOut], summary="List permits, newest first")
def list_permits(status: str = None, vehicle_id: str = None, q: str = None,
                 db: Session = Depends(get_db), user=Depends(requires("permits"))):
    """status: open | closed. q searches employee name, permit number and purpose."""
    vehicles = permit_service.vehicle_index(db)
    rows = [permit_service.describe_permit(p, vehicles) for p in permit_service.list_permits(db)]
    if status:
        rows = [r for r in rows if r["status"] == status]
    if vehicle_id:
        rows = [r for r in rows if r["vehicle_id"] == vehicle_id]
    if q:
        needle = q.strip().lower()
        rows = [r for r in rows if any(needle in (r[k] or "").lower()
                                       for k in ("employee_name", "permit_number", "purpose"))]
    return rows


@router.get("/permits/opening-odometer", response_model=OpeningOdometerOut,
            summary="Default checkout odometer for a vehicle")
def get_opening_odometer(vehicle_id: str, db: Session = Depends(get_db), user=Depends(requires("permits"))):
    return {"vehicle_id": vehicle_id, "odometer_out": permit_service.opening_odometer(db, vehicle_id)}


@router.get("/permits/{permit_id}", response_model=VehiclePermitOut)
def get_permit(permit_id: str, db: Session = Depends(get_db), user=Depends(requires("permits"))):
    permit = crud.get_record(db, VehiclePermit, permit_id)
    return permit_service.describe_permit(permit, permit_service.vehicle_index(db))


@router.post("/permits", response_model=VehiclePermitOut, status_code=201, summary="Check out a vehicle")
def checkout(body: CreatePermitRequest, db: Session = Depends(get_db), user=Depends(requires("permits"))):
    permit = permit_service.checkout_permit(db, body, actor=user)
    return permit_service.describe_permit(permit, permit_service.vehicle_index(db))


@router.post("/permits/{permit_id}/checkin", response_model=VehiclePermitOut, summary="Return a vehicle")
def checkin(permit_id: str, body: CheckinPermitRequest, db: Session = Depends(get_db),
            user=Depends(requires("permits"))):
    permit = permit_service.checkin_permit(db, permit_id, body, actor=user)
    return permit_service.describe_permit(permit, permit_service.vehicle_index(db))


@router.put("/permits/{permit_id}", response_model=VehiclePermitOut, summary="Edit any permit field")
def update(permit_id: str, body: UpdatePermitRequest, db: Session = Depends(get_db),
           user=Depends(requires("permits"))):
    permit = permit_service.update_permit(db, permit_id, body, actor=user)
    return permit_service.describe_permit(permit, permit_service.vehicle_index(db))


@router.delete("/permits/{permit_id}", summary="Delete a permit (fuel expenses are kept)")
def delete(permit_id: str, db: Session = Depends(get_db), user=Depends(requires("permits"))):
    permit_service.delete_permit(db, permit_id, actor=user)
    return {"status": "deleted", "id": permit_id}


@router.get("/permits/{permit_id}/document", summary="Resolved print view")
def permit_print_view(permit_id: str, db: Session = Depends(get_db), user=Depends(requires("permits"))):
    permit = crud.get_record(db, VehiclePermit, permit_id)
    vehicle = crud.find_record(db, Vehicle, permit.vehicle_id)
    return permit_document(permit, vehicle)
