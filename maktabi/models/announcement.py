# maktabi/models/announcement.py
from sqlalchemy import Column, String, DateTime, Text, Boolean
from maktabi.database import Base, new_id


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(String(36), primary_key=True, default=new_id)
    message = Column(Text, nullable=False)
    type = Column(String(20), default="info", nullable=False)   # info | warning | danger
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<Announcement {self.id} type={self.type} active={self.is_active}>"
