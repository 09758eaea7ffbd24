# maktabi/services/fuel_service.py
"""
Fuel expenses and the monthly fleet fuel report.

How it works:
  - create_fuel_expense resolves the permit and copies its vehicle_id onto the expense;
    that vehicle_id is never rewritten afterwards
  - list_fuel_expenses joins permit number / vehicle name for display ("-" when gone)
  - monthly_fleet_report loads every vehicle + every expense and hands them to the
    pure ledger (fleet_ledger.build_monthly_report)
"""

from typing import Optional

from sqlalchemy.orm import Session

from maktabi.config import settings
from maktabi.models.fuel_expense import FuelExpense
from maktabi.models.vehicle import Vehicle
from maktabi.models.vehicle_permit import VehiclePermit
from maktabi.schemas.fuel_expense import CreateFuelExpenseRequest, UpdateFuelExpenseRequest
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.services.fleet_ledger import build_monthly_report, month_key, validate_year_month
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)


def create_fuel_expense(db: Session, body: CreateFuelExpenseRequest, actor=None) -> FuelExpense:
    permit = crud.get_record(db, VehiclePermit, body.permit_id)
    expense = crud.create_record(db, FuelExpense, {
        **body.model_dump(),
        "vehicle_id": permit.vehicle_id,
    })
    logger.info(f"[Fuel] Permit={permit.permit_number} | Vehicle={permit.vehicle_id} | "
                f"{body.liters}L | cost={body.cost} | odometer={body.odometer_reading}")
    record_activity(db, actor, "إضافة مصروف وقود", f"إضافة وقود للمركبة بتاريخ {body.date}")
    return expense


def update_fuel_expense(db: Session, expense_id: str, body: UpdateFuelExpenseRequest, actor=None) -> FuelExpense:
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    if "permit_id" in changes:
        crud.get_record(db, VehiclePermit, changes["permit_id"])
    expense = crud.update_record(db, FuelExpense, expense_id, changes)
    record_activity(db, actor, "تحديث مصروف وقود", f"تحديث مصروف وقود بتاريخ {expense.date}")
    return expense


def delete_fuel_expense(db: Session, expense_id: str, actor=None):
    expense = crud.get_record(db, FuelExpense, expense_id)
    details = f"حذف مصروف وقود بتاريخ {expense.date}"
    crud.delete_record(db, FuelExpense, expense_id)
    record_activity(db, actor, "حذف مصروف وقود", details)


def describe_expense(expense: FuelExpense, permits: dict, vehicles: dict) -> dict:
    permit = permits.get(expense.permit_id)
    vehicle = vehicles.get(expense.vehicle_id)
    return {
        "id": expense.id,
        "permit_id": expense.permit_id,
        "permit_number": permit.permit_number if permit else settings.MISSING_PLACEHOLDER,
        "vehicle_id": expense.vehicle_id,
        "vehicle_name": vehicle.display_name if vehicle else settings.UNKNOWN_VEHICLE_LABEL,
        "date": expense.date,
        "liters": expense.liters,
        "cost": expense.cost,
        "odometer_reading": expense.odometer_reading,
        "station_name": expense.station_name,
    }


def list_fuel_expenses(db: Session, year_month: Optional[str] = None, vehicle_id: Optional[str] = None) -> list[dict]:
    """Expenses (optionally of one month / vehicle), newest date first, with joined display fields."""
    filters = []
    if vehicle_id:
        filters.append(FuelExpense.vehicle_id == vehicle_id)
    expenses = crud.list_records(db, FuelExpense, *filters)
    if year_month:
        validate_year_month(year_month)
        expenses = [e for e in expenses if month_key(e.date) == year_month]
    expenses.sort(key=lambda e: e.date, reverse=True)

    permits = {p.id: p for p in crud.list_records(db, VehiclePermit)}
    vehicles = {v.id: v for v in crud.list_records(db, Vehicle)}
    dangling = [e.id for e in expenses if e.permit_id not in permits]
    if dangling:
        logger.warning(f"[Fuel] {len(dangling)} expenses point to deleted permits: {dangling[:5]}")
    return [describe_expense(e, permits, vehicles) for e in expenses]


def monthly_fleet_report(db: Session, year_month: str):
    vehicles = crud.list_records(db, Vehicle)
    expenses = crud.list_records(db, FuelExpense)
    report = build_monthly_report(year_month, vehicles, expenses)
    logger.info(f"[Fuel] Report {year_month}: {len(report.items)} vehicles | "
                f"{report.totals.distance} km | {report.totals.liters:.2f} L")
    return report
