# maktabi/schemas/vehicle.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class VehicleCreate(BaseModel):
    type: str = Field(min_length=1)
    plate_number: str = Field(min_length=1)


class VehicleUpdate(BaseModel):
    type: Optional[str] = Field(default=None, min_length=1)
    plate_number: Optional[str] = Field(default=None, min_length=1)


class VehicleOut(BaseModel):
    id: str
    type: str
    plate_number: str
    display_name: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
