# maktabi/schemas/user_request.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional

UserRequestStatus = Literal["Pending", "In Progress", "Completed"]


class UserRequestCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)


class UserRequestUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[UserRequestStatus] = None


class UserRequestOut(BaseModel):
    id: str
    employee_id: str
    employee_name: str
    title: str
    description: str
    status: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
