# maktabi/schemas/employee.py
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Literal, Optional

Role = Literal["Admin", "Head of Department", "Employee"]
EmployeeStatus = Literal["Active", "Inactive", "On Leave"]


class EmployeeCreate(BaseModel):
    name: str = Field(min_length=1)
    department: str = Field(min_length=1)
    employee_number: Optional[str] = None
    job_title: Optional[str] = None
    national_id: Optional[str] = None
    nationality: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    hire_date: Optional[date] = None
    status: EmployeeStatus = "Active"
    role: Role = "Employee"
    annual_leave_balance: Optional[int] = None
    sick_leave_balance: Optional[int] = None


class EmployeeUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    department: Optional[str] = Field(default=None, min_length=1)
    employee_number: Optional[str] = None
    job_title: Optional[str] = None
    national_id: Optional[str] = None
    nationality: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    hire_date: Optional[date] = None
    status: Optional[EmployeeStatus] = None
    role: Optional[Role] = None
    annual_leave_balance: Optional[int] = None
    sick_leave_balance: Optional[int] = None


class EmployeeOut(BaseModel):
    id: str
    name: str
    department: str
    employee_number: Optional[str]
    job_title: Optional[str]
    national_id: Optional[str]
    nationality: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    hire_date: Optional[date]
    status: Optional[str]
    role: str
    annual_leave_balance: Optional[int]
    sick_leave_balance: Optional[int]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
