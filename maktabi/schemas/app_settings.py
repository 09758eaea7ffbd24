# maktabi/schemas/app_settings.py
from pydantic import BaseModel, model_validator
from datetime import date, datetime
from typing import Optional


class RamadanDateRange(BaseModel):
    start: date
    end: date

    @model_validator(mode="after")
    def check_order(self):
        if self.end < self.start:
            raise ValueError("Ramadan end date is before its start date")
        return self


class AppSettingsUpdate(BaseModel):
    nationalities: Optional[list[str]] = None
    job_titles: Optional[list[str]] = None
    education_degrees: Optional[list[str]] = None
    leave_types: Optional[list[str]] = None
    correspondence_recipients: Optional[list[str]] = None
    departments: Optional[list[str]] = None
    petrol_stations: Optional[list[str]] = None


class AppSettingsOut(BaseModel):
    nationalities: list[str]
    job_titles: list[str]
    education_degrees: list[str]
    leave_types: list[str]
    correspondence_recipients: list[str]
    departments: list[str]
    petrol_stations: list[str]
    ramadan_dates: Optional[dict[str, RamadanDateRange]] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
