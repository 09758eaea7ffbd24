# maktabi/routers/vehicles.py
"""Vehicle registry: CRUD. Deleting a vehicle leaves its permits and expenses in place."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.models.vehicle import Vehicle
from maktabi.schemas.vehicle import VehicleCreate, VehicleUpdate, VehicleOut
from maktabi.services import crud
from maktabi.services.audit_service import record_activity

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], summary="List vehicles")
def list_vehicles(q: str = None, db: Session = Depends(get_db), user=Depends(get_current_user)):
    return crud.list_records(db, Vehicle, order_by=Vehicle.type, search=q,
                             search_fields=(Vehicle.type, Vehicle.plate_number))


@router.post("/vehicles", response_model=VehicleOut, status_code=201, summary="Add a vehicle")
def create_vehicle(body: VehicleCreate, db: Session = Depends(get_db), user=Depends(requires("vehicles"))):
    vehicle = crud.create_record(db, Vehicle, body.model_dump())
    record_activity(db, user, "إضافة مركبة", f"إضافة مركبة: {vehicle.display_name}")
    return vehicle


@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Edit a vehicle")
def update_vehicle(vehicle_id: str, body: VehicleUpdate, db: Session = Depends(get_db),
                   user=Depends(requires("vehicles"))):
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    vehicle = crud.update_record(db, Vehicle, vehicle_id, changes)
    record_activity(db, user, "تحديث مركبة", f"تحديث مركبة: {vehicle.display_name}")
    return vehicle


@router.delete("/vehicles/{vehicle_id}", summary="Remove a vehicle")
def delete_vehicle(vehicle_id: str, db: Session = Depends(get_db), user=Depends(requires("vehicles"))):
    vehicle = crud.get_record(db, Vehicle, vehicle_id)
    details = f"حذف مركبة: {vehicle.display_name}"
    crud.delete_record(db, Vehicle, vehicle_id)
    record_activity(db, user, "حذف مركبة", details)
    return {"status": "deleted", "id": vehicle_id}
