# maktabi/models/employee.py
"""Employees and their coarse role (Admin / Head of Department / Employee)."""

from sqlalchemy import Column, Integer, String, Date, DateTime
from maktabi.database import Base, new_id


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False, index=True)
    employee_number = Column(String(50))
    department = Column(String(200), nullable=False)
    job_title = Column(String(200))
    national_id = Column(String(50))                 # Civil ID
    nationality = Column(String(100))
    phone = Column(String(50))
    email = Column(String(200))
    hire_date = Column(Date)
    status = Column(String(20), default="Active")   # Active | Inactive | On Leave
    role = Column(String(30), default="Employee", nullable=False)
    annual_leave_balance = Column(Integer)
    sick_leave_balance = Column(Integer)
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<Employee {self.name} role={self.role}>"
