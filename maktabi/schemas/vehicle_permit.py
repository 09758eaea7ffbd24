# maktabi/schemas/vehicle_permit.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from maktabi.schemas.common import UtcDatetime


class CreatePermitRequest(BaseModel):
    """Checkout: the permit starts open. odometer_out defaults to the last closing reading."""
    employee_name: str = Field(min_length=1)
    vehicle_id: str
    purpose: str = Field(min_length=1)
    start_date: UtcDatetime
    odometer_out: Optional[int] = Field(default=None, ge=0)


class CheckinPermitRequest(BaseModel):
    end_date: UtcDatetime
    odometer_in: int = Field(ge=0)


class UpdatePermitRequest(BaseModel):
    """Administrator edit: any field, no state checks. permit_number / destination are not editable."""
    employee_name: Optional[str] = Field(default=None, min_length=1)
    vehicle_id: Optional[str] = None
    purpose: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[UtcDatetime] = None
    end_date: Optional[UtcDatetime] = None
    odometer_out: Optional[int] = Field(default=None, ge=0)
    odometer_in: Optional[int] = Field(default=None, ge=0)


class VehiclePermitOut(BaseModel):
    id: str
    permit_number: str
    employee_name: str
    vehicle_id: Optional[str]
    vehicle_name: Optional[str] = None
    purpose: str
    destination: Optional[str]
    start_date: datetime
    end_date: Optional[datetime]
    odometer_out: int
    odometer_in: Optional[int]
    distance: Optional[int] = None          # None when open or the reading is inconsistent
    status: Optional[str] = None            # open | closed
    inconsistent_reading: bool = False
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class OpeningOdometerOut(BaseModel):
    vehicle_id: str
    odometer_out: int
