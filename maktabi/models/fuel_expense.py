# maktabi/models/fuel_expense.py
"""
Refuelling events. Each is tied to a permit; vehicle_id is copied from the
permit at creation and never changes afterwards.
"""

from sqlalchemy import Column, Integer, String, Date, Float
from maktabi.database import Base, new_id


class FuelExpense(Base):
    __tablename__ = "fuel_expenses"

    id = Column(String(36), primary_key=True, default=new_id)
    permit_id = Column(String(36), index=True)
    vehicle_id = Column(String(36), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    liters = Column(Float, nullable=False)
    cost = Column(Float, nullable=False)
    odometer_reading = Column(Integer, nullable=False)
    station_name = Column(String(200))

    def __repr__(self):
        return f"<FuelExpense {self.id} vehicle={self.vehicle_id} odo={self.odometer_reading}>"
