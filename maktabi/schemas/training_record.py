# maktabi/schemas/training_record.py
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Literal, Optional

TrainingStatus = Literal["Planned", "In Progress", "Completed"]


class TrainingRecordCreate(BaseModel):
    employee_ids: list[str] = Field(min_length=1)
    course_name: str = Field(min_length=1)
    provider: Optional[str] = None
    location: Optional[str] = None
    start_date: date
    end_date: date
    status: TrainingStatus = "Planned"


class TrainingRecordUpdate(BaseModel):
    employee_ids: Optional[list[str]] = None
    course_name: Optional[str] = Field(default=None, min_length=1)
    provider: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[TrainingStatus] = None


class TrainingRecordOut(BaseModel):
    id: str
    employee_ids: list[str]
    course_name: str
    provider: Optional[str]
    location: Optional[str]
    start_date: date
    end_date: date
    status: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
