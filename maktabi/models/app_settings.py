# maktabi/models/app_settings.py
"""
Single-row lookup lists used to fill form drop-downs.
Vehicles live in their own table, not here.
"""

from sqlalchemy import Column, String, DateTime, JSON
from maktabi.database import Base

SETTINGS_ROW_ID = "main"


class AppSettings(Base):
    __tablename__ = "app_settings"

    id = Column(String(36), primary_key=True, default=SETTINGS_ROW_ID)
    nationalities = Column(JSON, nullable=False, default=list)
    job_titles = Column(JSON, nullable=False, default=list)
    education_degrees = Column(JSON, nullable=False, default=list)
    leave_types = Column(JSON, nullable=False, default=list)
    correspondence_recipients = Column(JSON, nullable=False, default=list)
    departments = Column(JSON, nullable=False, default=list)
    petrol_stations = Column(JSON, nullable=False, default=list)
    ramadan_dates = Column(JSON, nullable=False, default=dict)   # {"2025": {"start": "...", "end": "..."}}
    updated_at = Column(DateTime)
