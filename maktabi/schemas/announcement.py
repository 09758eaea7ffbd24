# maktabi/schemas/announcement.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional

AnnouncementType = Literal["info", "warning", "danger"]


class AnnouncementCreate(BaseModel):
    message: str = Field(min_length=1)
    type: AnnouncementType = "info"
    is_active: bool = True


class AnnouncementUpdate(BaseModel):
    message: Optional[str] = Field(default=None, min_length=1)
    type: Optional[AnnouncementType] = None
    is_active: Optional[bool] = None


class AnnouncementOut(BaseModel):
    id: str
    message: str
    type: str
    is_active: bool
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
