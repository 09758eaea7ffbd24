# maktabi/models/leave_request.py
from sqlalchemy import Column, String, Date, DateTime, Text
from maktabi.database import Base, new_id


class LeaveRequest(Base):
    __tablename__ = "leave_requests"

    id = Column(String(36), primary_key=True, default=new_id)
    employee_id = Column(String(36), nullable=False, index=True)
    leave_type = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    reason = Column(Text)
    status = Column(String(20), default="Pending", nullable=False, index=True)  # Pending | Approved | Rejected
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<LeaveRequest {self.id} employee={self.employee_id} status={self.status}>"
