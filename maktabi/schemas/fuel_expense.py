# maktabi/schemas/fuel_expense.py
from pydantic import BaseModel, Field
import datetime as dt
from typing import Optional


class CreateFuelExpenseRequest(BaseModel):
    permit_id: str
    date: dt.date
    liters: float = Field(ge=0)
    cost: float = Field(ge=0)
    odometer_reading: int = Field(ge=0)
    station_name: str = ""


class UpdateFuelExpenseRequest(BaseModel):
    """vehicle_id is fixed at creation and cannot be changed here."""
    permit_id: Optional[str] = None
    date: Optional[dt.date] = None
    liters: Optional[float] = Field(default=None, ge=0)
    cost: Optional[float] = Field(default=None, ge=0)
    odometer_reading: Optional[int] = Field(default=None, ge=0)
    station_name: Optional[str] = None


class FuelExpenseOut(BaseModel):
    id: str
    permit_id: Optional[str]
    permit_number: Optional[str] = None
    vehicle_id: str
    vehicle_name: Optional[str] = None
    date: dt.date
    liters: float
    cost: float
    odometer_reading: int
    station_name: Optional[str]

    class Config:
        from_attributes = True


class VehicleConsumptionOut(BaseModel):
    vehicle_id: str
    vehicle_name: str
    total_distance: int
    total_liters: float
    total_cost: float
    consumption: float

    class Config:
        from_attributes = True


class FleetTotalsOut(BaseModel):
    distance: int
    liters: float
    cost: float

    class Config:
        from_attributes = True


class MonthlyFleetReportOut(BaseModel):
    year_month: str
    items: list[VehicleConsumptionOut]
    totals: FleetTotalsOut

    class Config:
        from_attributes = True
