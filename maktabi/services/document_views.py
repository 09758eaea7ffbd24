# maktabi/services/document_views.py
"""
Fully-resolved print views handed to the export / print front end.

Each builder joins the record with what it references and formats dates for an
Arabic document. A missing reference becomes a placeholder ("-" / "غير محدد")
instead of an error, so a permit whose vehicle was deleted still prints.
Turning these views into PDF is done by the client.
"""

from datetime import date, datetime
from typing import Optional

from maktabi.config import settings
from maktabi.services.fleet_ledger import permit_distance, permit_status
from maktabi.services.leave_service import calculate_duration, select_leave_template

CORRESPONDENCE_TYPE_LABELS = {
    "permanent": "تصريح دخول دائم",
    "temporary": "تصريح دخول مؤقت",
    "temporary_period": "تصريح دخول لفترة محددة",
    "nutrition_card": "بطاقة تغذية",
}


def format_date(value) -> str:
    if value is None or value == "":
        return settings.MISSING_PLACEHOLDER
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _or_placeholder(value) -> str:
    return settings.MISSING_PLACEHOLDER if value is None or value == "" else str(value)


def permit_document(permit, vehicle: Optional[object]) -> dict:
    distance = permit_distance(permit)
    return {
        "document": "vehicle_permit",
        "permit_number": permit.permit_number,
        "employee_name": permit.employee_name,
        "vehicle_type": vehicle.type if vehicle else settings.UNKNOWN_VEHICLE_LABEL,
        "plate_number": vehicle.plate_number if vehicle else settings.MISSING_PLACEHOLDER,
        "purpose": permit.purpose,
        "destination": permit.destination or settings.PERMIT_DESTINATION,
        "start": format_date(permit.start_date),
        "end": format_date(permit.end_date),
        "odometer_out": permit.odometer_out,
        "odometer_in": _or_placeholder(permit.odometer_in),
        "distance": _or_placeholder(distance),
        "status": permit_status(permit),
    }


def leave_document(leave, employee: Optional[object]) -> dict:
    days = calculate_duration(leave.start_date, leave.end_date)
    return {
        "document": "leave_request",
        "template": select_leave_template(days),
        "employee_name": employee.name if employee else settings.MISSING_PLACEHOLDER,
        "employee_number": _or_placeholder(getattr(employee, "employee_number", None)),
        "department": _or_placeholder(getattr(employee, "department", None)),
        "job_title": _or_placeholder(getattr(employee, "job_title", None)),
        "leave_type": leave.leave_type,
        "start": format_date(leave.start_date),
        "end": format_date(leave.end_date),
        "duration_days": days,
        "reason": _or_placeholder(leave.reason),
        "status": leave.status,
    }


def correspondence_document(letter) -> dict:
    return {
        "document": "entry_permit_letter",
        "reference_number": letter.reference_number,
        "recipient": letter.recipient,
        "subject": letter.subject,
        "type": letter.type,
        "type_label": CORRESPONDENCE_TYPE_LABELS.get(letter.type, letter.type),
        "period": ({"start": format_date(letter.start_date), "end": format_date(letter.end_date)}
                   if letter.type == "temporary_period" else None),
        "persons": [
            {
                "name": p.get("name", settings.MISSING_PLACEHOLDER),
                "job_title": _or_placeholder(p.get("job_title")),
                "national_id": _or_placeholder(p.get("national_id")),
            }
            for p in (letter.persons or [])
        ],
        "date": format_date(letter.created_at.date() if letter.created_at else None),
    }


def customs_document(letter) -> dict:
    return {
        "document": "customs_letter",
        "reference_number": letter.reference_number,
        "recipient": letter.recipient,
        "subject": letter.subject,
        "company_name": letter.company_name,
        "product": letter.product,
        "country_of_origin": _or_placeholder(letter.country_of_origin),
        "customs_declaration_number": _or_placeholder(letter.customs_declaration_number),
        "rejection_reasons": _or_placeholder(letter.rejection_reasons),
        "second_issuance_reasons": _or_placeholder(letter.second_issuance_reasons),
        "date": format_date(letter.created_at.date() if letter.created_at else None),
    }


REJECTION_FIELDS = (
    "exporter_name", "importer_name", "country_of_origin", "point_of_entry",
    "custom_declaration_no", "no_of_packages", "weight", "scientific_name",
    "common_name", "commodity", "action_taken", "cause_of_non_compliance",
    "head_department_name", "authorized_officer_name",
)


def rejection_notice_document(notice) -> dict:
    view = {"document": "rejection_notice"}
    for name in REJECTION_FIELDS:
        view[name] = _or_placeholder(getattr(notice, name))
    view["notification_date"] = format_date(notice.notification_date)
    view["arrival_date"] = format_date(notice.arrival_date)
    return view


def fuel_report_document(report) -> dict:
    """Monthly report rounded for display (2 decimals)."""
    return {
        "document": "fuel_report",
        "title": f"FuelReport_{report.year_month}",
        "year_month": report.year_month,
        "rows": [
            {
                "vehicle_name": item.vehicle_name,
                "total_distance": item.total_distance,
                "total_liters": round(item.total_liters, 2),
                "total_cost": round(item.total_cost, 2),
                "consumption": round(item.consumption, 2),
            }
            for item in report.items
        ],
        "totals": {
            "distance": report.totals.distance,
            "liters": round(report.totals.liters, 2),
            "cost": round(report.totals.cost, 2),
        },
    }
