# maktabi/schemas/audit_log.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class AuditLogOut(BaseModel):
    id: str
    timestamp: datetime
    user_id: str
    user_name: str
    action: str
    details: Optional[str]

    class Config:
        from_attributes = True
