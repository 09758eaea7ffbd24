# maktabi/schemas/public_holiday.py
from pydantic import BaseModel, Field
import datetime as dt
from typing import Optional


class PublicHolidayCreate(BaseModel):
    name: str = Field(min_length=1)
    date: dt.date


class PublicHolidayUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    date: Optional[dt.date] = None


class PublicHolidayOut(BaseModel):
    id: str
    name: str
    date: dt.date
    created_at: Optional[dt.datetime]

    class Config:
        from_attributes = True
