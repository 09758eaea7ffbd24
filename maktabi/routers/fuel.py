# maktabi/routers/fuel.py
"""Fuel expenses: CRUD and the monthly consumption report."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import requires
from maktabi.database import get_db
from maktabi.schemas.fuel_expense import (
    CreateFuelExpenseRequest, UpdateFuelExpenseRequest, FuelExpenseOut, MonthlyFleetReportOut,
)
from maktabi.services import fuel_service
from maktabi.services.document_views import fuel_report_document
from maktabi.services.fleet_ledger import validate_year_month

router = APIRouter()


@router.get("/fuel-expenses", response_model=list[FuelExpenseOut], summary="List fuel expenses")
def list_fuel_expenses(month: str = None, vehicle_id: str = None,
                       db: Session = Depends(get_db), user=Depends(requires("fuel"))):
    """month: YYYY-MM. Sorted by date, newest first."""
    return fuel_service.list_fuel_expenses(db, year_month=month, vehicle_id=vehicle_id)


@router.post("/fuel-expenses", response_model=FuelExpenseOut, status_code=201, summary="Record a refuelling")
def create_fuel_expense(body: CreateFuelExpenseRequest, db: Session = Depends(get_db),
                        user=Depends(requires("fuel"))):
    return fuel_service.create_fuel_expense(db, body, actor=user)


@router.put("/fuel-expenses/{expense_id}", response_model=FuelExpenseOut)
def update_fuel_expense(expense_id: str, body: UpdateFuelExpenseRequest, db: Session = Depends(get_db),
                        user=Depends(requires("fuel"))):
    return fuel_service.update_fuel_expense(db, expense_id, body, actor=user)


@router.delete("/fuel-expenses/{expense_id}")
def delete_fuel_expense(expense_id: str, db: Session = Depends(get_db), user=Depends(requires("fuel"))):
    fuel_service.delete_fuel_expense(db, expense_id, actor=user)
    return {"status": "deleted", "id": expense_id}


@router.get("/reports/fuel/{year_month}", response_model=MonthlyFleetReportOut,
            summary="Monthly distance / fuel / cost per vehicle")
def monthly_fuel_report(year_month: str, db: Session = Depends(get_db), user=Depends(requires("fuel"))):
    validate_year_month(year_month)
    return fuel_service.monthly_fleet_report(db, year_month)


@router.get("/reports/fuel/{year_month}/document", summary="Monthly fuel report print view")
def monthly_fuel_report_document(year_month: str, db: Session = Depends(get_db),
                                 user=Depends(requires("fuel"))):
    return fuel_report_document(fuel_service.monthly_fleet_report(db, year_month))
