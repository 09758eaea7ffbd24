# maktabi/routers/employees.py
"""Employee directory: CRUD (Admin), read access for heads of department."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.exceptions import PermissionDenied
from maktabi.models.employee import Employee
from maktabi.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from maktabi.services import crud
from maktabi.services.audit_service import record_activity
from maktabi.services.authz import can_manage, is_self

router = APIRouter()


@router.get("/employees", response_model=list[EmployeeOut], summary="List employees")
def list_employees(department: str = None, role: str = None, status: str = None, q: str = None,
                   db: Session = Depends(get_db), user=Depends(requires("employees.view"))):
    filters = []
    if department:
        filters.append(Employee.department == department)
    if role:
        filters.append(Employee.role == role)
    if status:
        filters.append(Employee.status == status)
    return crud.list_records(db, Employee, *filters, order_by=Employee.name, search=q,
                             search_fields=(Employee.name, Employee.job_title,
                                            Employee.employee_number, Employee.national_id))


@router.get("/employees/me", response_model=EmployeeOut, summary="Current user's profile")
def get_me(user=Depends(get_current_user)):
    return user


@router.get("/employees/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: str, db: Session = Depends(get_db), user=Depends(get_current_user)):
    if not (is_self(user, employee_id) or can_manage(user, "employees.view")):
        raise PermissionDenied("Not allowed to view other employees")
    return crud.get_record(db, Employee, employee_id)


@router.post("/employees", response_model=EmployeeOut, status_code=201)
def create_employee(body: EmployeeCreate, db: Session = Depends(get_db), user=Depends(requires("employees"))):
    employee = crud.create_record(db, Employee, body.model_dump())
    record_activity(db, user, "إضافة موظف", f"إضافة الموظف: {employee.name}")
    return employee


@router.put("/employees/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: str, body: EmployeeUpdate, db: Session = Depends(get_db),
                    user=Depends(requires("employees"))):
    changes = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    employee = crud.update_record(db, Employee, employee_id, changes)
    record_activity(db, user, "تحديث موظف", f"تحديث بيانات الموظف: {employee.name}")
    return employee


@router.delete("/employees/{employee_id}")
def delete_employee(employee_id: str, db: Session = Depends(get_db), user=Depends(requires("employees"))):
    employee = crud.get_record(db, Employee, employee_id)
    details = f"حذف الموظف: {employee.name}"
    crud.delete_record(db, Employee, employee_id)
    record_activity(db, user, "حذف موظف", details)
    return {"status": "deleted", "id": employee_id}
