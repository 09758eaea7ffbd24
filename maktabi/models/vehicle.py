# maktabi/models/vehicle.py
"""
Government vehicles available for permits.
Permits and fuel expenses reference vehicles by id; deleting a vehicle
leaves those references dangling on purpose (no cascade).
"""

from sqlalchemy import Column, String, DateTime
from maktabi.database import Base, new_id


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(String(36), primary_key=True, default=new_id)
    type = Column(String(100), nullable=False)          # free-text category, e.g. "Pickup"
    plate_number = Column(String(50), nullable=False, index=True)
    created_at = Column(DateTime)

    @property
    def display_name(self) -> str:
        return f"{self.type} ({self.plate_number})"

    def __repr__(self):
        return f"<Vehicle {self.plate_number} type={self.type}>"
