# maktabi/models/training_record.py
from sqlalchemy import Column, String, Date, DateTime, JSON
from maktabi.database import Base, new_id


class TrainingRecord(Base):
    __tablename__ = "training_records"

    id = Column(String(36), primary_key=True, default=new_id)
    employee_ids = Column(JSON, nullable=False, default=list)
    course_name = Column(String(300), nullable=False)
    provider = Column(String(200))
    location = Column(String(200))
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(String(20), default="Planned", nullable=False)  # Planned | In Progress | Completed
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<TrainingRecord {self.course_name} status={self.status}>"
