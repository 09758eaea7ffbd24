# maktabi/models/public_holiday.py
from sqlalchemy import Column, String, Date, DateTime
from maktabi.database import Base, new_id


class PublicHoliday(Base):
    __tablename__ = "public_holidays"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<PublicHoliday {self.name} {self.date}>"
