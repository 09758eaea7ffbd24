# maktabi/models/audit_log.py
"""
Activity trail: one row per create/update/delete made through the services.
Written by audit_service.record_activity.
"""

from sqlalchemy import Column, String, DateTime, Text
from maktabi.database import Base, new_id


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(String(36), primary_key=True, default=new_id)
    timestamp = Column(DateTime, nullable=False, index=True)
    user_id = Column(String(36), nullable=False)
    user_name = Column(String(200), nullable=False)
    action = Column(String(200), nullable=False)
    details = Column(Text)

    def __repr__(self):
        return f"<AuditLog {self.action} by={self.user_name}>"
