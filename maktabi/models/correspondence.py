# maktabi/models/correspondence.py
"""
Outgoing correspondence: entry-permit letters, customs letters and rejection notices.
Entry-permit and customs letters share one yearly reference sequence.
"""

from sqlalchemy import Column, String, Date, DateTime, Text, JSON
from maktabi.database import Base, new_id


class Correspondence(Base):
    __tablename__ = "correspondences"

    id = Column(String(36), primary_key=True, default=new_id)
    reference_number = Column(String(30), nullable=False, index=True)   # "<prefix>/<n>/<year>"
    recipient = Column(String(300), nullable=False)
    subject = Column(String(300), nullable=False)
    persons = Column(JSON, nullable=False, default=list)   # [{name, job_title, national_id}]
    type = Column(String(30), nullable=False)   # permanent | temporary | temporary_period | nutrition_card
    start_date = Column(Date)                   # temporary_period only
    end_date = Column(Date)
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<Correspondence {self.reference_number} type={self.type}>"


class CustomsCorrespondence(Base):
    __tablename__ = "customs_correspondences"

    id = Column(String(36), primary_key=True, default=new_id)
    reference_number = Column(String(30), nullable=False, index=True)
    recipient = Column(String(300), nullable=False)
    subject = Column(String(300), nullable=False)
    company_name = Column(String(300), nullable=False)
    product = Column(String(300), nullable=False)
    country_of_origin = Column(String(100))
    customs_declaration_number = Column(String(100))
    rejection_reasons = Column(Text)
    second_issuance_reasons = Column(Text)
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<CustomsCorrespondence {self.reference_number}>"


class RejectionNotice(Base):
    __tablename__ = "rejection_notices"

    id = Column(String(36), primary_key=True, default=new_id)
    # Consignment
    exporter_name = Column(String(300), nullable=False)
    importer_name = Column(String(300), nullable=False)
    country_of_origin = Column(String(100))
    point_of_entry = Column(String(200))
    custom_declaration_no = Column(String(100))
    no_of_packages = Column(String(50))
    weight = Column(String(50))
    scientific_name = Column(String(200))
    common_name = Column(String(200))
    commodity = Column(String(200))
    # Rejection
    notification_date = Column(Date)
    arrival_date = Column(Date)
    action_taken = Column(Text)
    cause_of_non_compliance = Column(Text)
    # Signatures
    head_department_name = Column(String(200))
    authorized_officer_name = Column(String(200))
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<RejectionNotice importer={self.importer_name}>"
