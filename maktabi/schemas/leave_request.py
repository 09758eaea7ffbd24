# maktabi/schemas/leave_request.py
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Literal, Optional

LeaveStatus = Literal["Pending", "Approved", "Rejected"]


class LeaveRequestCreate(BaseModel):
    employee_id: str
    leave_type: str = Field(min_length=1)
    start_date: date
    end_date: date
    reason: Optional[str] = None


class LeaveRequestUpdate(BaseModel):
    leave_type: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reason: Optional[str] = None


class LeaveDecision(BaseModel):
    status: LeaveStatus


class LeaveRequestOut(BaseModel):
    id: str
    employee_id: str
    employee_name: Optional[str] = None
    leave_type: str
    start_date: date
    end_date: date
    reason: Optional[str]
    status: str
    duration_days: Optional[int] = None
    created_at: Optional[datetime]

    class Config:
        from_attributes = True

