# maktabi/services/fleet_ledger.py
"""
Fleet usage ledger: odometer chaining and monthly fuel consumption.

Everything here is a pure function over collections the caller has already
loaded (ORM rows or any object with the same attribute names). Nothing reads
the database or mutates its inputs, so a report can be rebuilt as often as the
underlying permits / fuel expenses change.

How it works:
  - resolve_opening_odometer: latest closing reading (by end_date) of the vehicle's
    closed permits → default odometer_out for the next checkout
  - compute_distance_segments: fuel expenses of one vehicle ordered by odometer
    reading (NOT by date), diffed pairwise; regressions give a zero segment
  - build_monthly_report: segments whose later expense falls in the target month
    are summed per vehicle; consumption = km per liter
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Iterable, Optional

from maktabi.exceptions import ValidationFailed
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)

YEAR_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


@dataclass(frozen=True)
class DistanceSegment:
    vehicle_id: str
    previous_expense_id: Optional[str]
    expense_id: Optional[str]
    expense_date: object        # date or "YYYY-MM-DD" string, as stored
    distance: int               # 0 for an odometer regression
    liters: float               # attributed liters, 0 unless distance > 0
    cost: float
    is_anomaly: bool = False    # reading did not increase over the previous one


@dataclass
class VehicleConsumption:
    vehicle_id: str
    vehicle_name: str
    total_distance: int = 0
    total_liters: float = 0.0
    total_cost: float = 0.0
    consumption: float = 0.0    # km per liter


@dataclass
class FleetTotals:
    distance: int = 0
    liters: float = 0.0
    cost: float = 0.0


@dataclass
class MonthlyFleetReport:
    year_month: str
    items: list[VehicleConsumption] = field(default_factory=list)
    totals: FleetTotals = field(default_factory=FleetTotals)


# ── Permits ─────────────────────────────────────────────────────────────────

def permit_distance(permit) -> Optional[int]:
    """
    Distance driven on a permit, or None when it cannot be trusted.
    A reversed or equal reading (odometer_in <= odometer_out) is None, never 0 or negative.
    """
    if permit.odometer_in is None or permit.odometer_out is None:
        return None
    if permit.odometer_in > permit.odometer_out:
        return permit.odometer_in - permit.odometer_out
    return None


def permit_status(permit) -> str:
    return "open" if permit.odometer_in is None else "closed"


def has_inconsistent_reading(permit) -> bool:
    return permit.odometer_in is not None and permit.odometer_in < permit.odometer_out


def _sortable(moment) -> datetime:
    """Naive UTC datetime so aware and naive values can be compared."""
    if isinstance(moment, str):
        moment = datetime.fromisoformat(moment.replace("Z", "+00:00"))
    elif isinstance(moment, date) and not isinstance(moment, datetime):
        moment = datetime(moment.year, moment.month, moment.day)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def resolve_opening_odometer(vehicle_id: str, permits: Iterable, default: int = 0) -> int:
    """
    Odometer value a new permit for this vehicle should start from.
    Only closed permits with both odometer_in and end_date count; the one with the
    latest end_date wins. Falls back to `default` (0) when there is none.
    """
    closed = [
        p for p in permits
        if p.vehicle_id == vehicle_id and p.odometer_in is not None and p.end_date is not None
    ]
    if not closed:
        return max(default, 0)
    latest = max(closed, key=lambda p: _sortable(p.end_date))
    return max(latest.odometer_in, 0)


# ── Fuel ────────────────────────────────────────────────────────────────────

def compute_distance_segments(vehicle_id: str, fuel_expenses: Iterable) -> list[DistanceSegment]:
    """
    Pairwise distance segments for one vehicle's fuel expenses.
    The first expense in odometer order never yields a segment.
    """
    chain = sorted(
        (e for e in fuel_expenses if e.vehicle_id == vehicle_id),
        key=lambda e: e.odometer_reading,
    )
    segments = []
    for prev, current in zip(chain, chain[1:]):
        delta = current.odometer_reading - prev.odometer_reading
        if delta > 0:
            segments.append(DistanceSegment(
                vehicle_id=vehicle_id,
                previous_expense_id=getattr(prev, "id", None),
                expense_id=getattr(current, "id", None),
                expense_date=current.date,
                distance=delta,
                liters=current.liters,
                cost=current.cost,
            ))
        else:
            logger.debug(
                f"[Ledger] Vehicle={vehicle_id} odometer {current.odometer_reading} "
                f"does not advance past {prev.odometer_reading}, zero segment"
            )
            segments.append(DistanceSegment(
                vehicle_id=vehicle_id,
                previous_expense_id=getattr(prev, "id", None),
                expense_id=getattr(current, "id", None),
                expense_date=current.date,
                distance=0,
                liters=0.0,
                cost=0.0,
                is_anomaly=True,
            ))
    return segments


def month_key(value) -> str:
    """'YYYY-MM' of a date, datetime or ISO date string."""
    if isinstance(value, str):
        return value[:7]
    return value.strftime("%Y-%m")


def validate_year_month(year_month: str) -> str:
    if not isinstance(year_month, str) or not YEAR_MONTH_RE.match(year_month):
        raise ValidationFailed(f"Invalid month '{year_month}', expected YYYY-MM")
    return year_month


def fuel_efficiency(distance: float, liters: float) -> float:
    """km per liter; 0 when no fuel was recorded."""
    return distance / liters if liters > 0 else 0.0


def build_monthly_report(year_month: str, vehicles: Iterable, fuel_expenses: Iterable) -> MonthlyFleetReport:
    """
    Per-vehicle distance / liters / cost for one calendar month plus fleet totals.

    Each vehicle's whole expense history is chained (a segment may start before the
    month); a segment counts toward the month of its later expense. Vehicles with
    no distance and no liters are left out. Expenses whose vehicle is not in
    `vehicles` are ignored.
    """
    validate_year_month(year_month)
    expenses = list(fuel_expenses)
    report = MonthlyFleetReport(year_month=year_month)
    vehicles = list(vehicles)

    known = {v.id for v in vehicles}
    orphaned = sum(1 for e in expenses if e.vehicle_id not in known)
    if orphaned:
        logger.warning(f"[Ledger] {year_month}: {orphaned} fuel expenses reference unknown vehicles, skipped")

    for vehicle in vehicles:
        line = VehicleConsumption(vehicle_id=vehicle.id, vehicle_name=f"{vehicle.type} ({vehicle.plate_number})")
        for segment in compute_distance_segments(vehicle.id, expenses):
            if segment.distance <= 0 or month_key(segment.expense_date) != year_month:
                continue
            line.total_distance += segment.distance
            line.total_liters += segment.liters
            line.total_cost += segment.cost

        if line.total_distance == 0 and line.total_liters == 0:
            continue
        line.consumption = fuel_efficiency(line.total_distance, line.total_liters)
        report.items.append(line)

        report.totals.distance += line.total_distance
        report.totals.liters += line.total_liters
        report.totals.cost += line.total_cost

    return report
