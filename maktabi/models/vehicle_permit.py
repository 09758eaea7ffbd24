# maktabi/models/vehicle_permit.py
"""
Vehicle usage permits: one checkout / check-in cycle of a vehicle by an employee.
A permit is open while odometer_in is unset.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from maktabi.database import Base, new_id


class VehiclePermit(Base):
    __tablename__ = "vehicle_permits"

    id = Column(String(36), primary_key=True, default=new_id)
    permit_number = Column(String(20), nullable=False, index=True)   # "<n>/<year>", never changed
    employee_name = Column(String(200), nullable=False)
    vehicle_id = Column(String(36), index=True)     # reference to vehicles.id, may dangle
    purpose = Column(Text, nullable=False)
    destination = Column(String(200))
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime)                      # set on check-in
    odometer_out = Column(Integer, nullable=False)
    odometer_in = Column(Integer)                    # set on check-in
    created_at = Column(DateTime, index=True)

    @property
    def is_open(self) -> bool:
        return self.odometer_in is None

    def __repr__(self):
        return f"<VehiclePermit {self.permit_number} vehicle={self.vehicle_id} open={self.is_open}>"
