# maktabi/models/user_request.py
"""Suggestions and complaints submitted by employees."""

from sqlalchemy import Column, String, DateTime, Text
from maktabi.database import Base, new_id


class UserRequest(Base):
    __tablename__ = "user_requests"

    id = Column(String(36), primary_key=True, default=new_id)
    employee_id = Column(String(36), nullable=False, index=True)
    employee_name = Column(String(200), nullable=False)     # resolved at submission
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(20), default="Pending", nullable=False)  # Pending | In Progress | Completed
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<UserRequest {self.title!r} status={self.status}>"
