# maktabi/schemas/correspondence.py
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Literal, Optional

CorrespondenceType = Literal["permanent", "temporary", "temporary_period", "nutrition_card"]


class PersonForPermit(BaseModel):
    name: str = Field(min_length=1)
    job_title: str = ""
    national_id: str = ""


class CorrespondenceCreate(BaseModel):
    recipient: str = Field(min_length=1)
    subject: str = Field(min_length=1)
    persons: list[PersonForPermit] = Field(min_length=1)
    type: CorrespondenceType
    start_date: Optional[date] = None     # temporary_period only
    end_date: Optional[date] = None


class CorrespondenceUpdate(BaseModel):
    recipient: Optional[str] = Field(default=None, min_length=1)
    subject: Optional[str] = Field(default=None, min_length=1)
    persons: Optional[list[PersonForPermit]] = None
    type: Optional[CorrespondenceType] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class CorrespondenceOut(BaseModel):
    id: str
    reference_number: str
    recipient: str
    subject: str
    persons: list[PersonForPermit]
    type: str
    start_date: Optional[date]
    end_date: Optional[date]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class CustomsCorrespondenceCreate(BaseModel):
    recipient: str = Field(min_length=1)
    subject: str = "إصدار بيان ثان"
    company_name: str = Field(min_length=1)
    product: str = Field(min_length=1)
    country_of_origin: Optional[str] = None
    customs_declaration_number: Optional[str] = None
    rejection_reasons: Optional[str] = None
    second_issuance_reasons: Optional[str] = None


class CustomsCorrespondenceUpdate(BaseModel):
    recipient: Optional[str] = Field(default=None, min_length=1)
    subject: Optional[str] = None
    company_name: Optional[str] = Field(default=None, min_length=1)
    product: Optional[str] = Field(default=None, min_length=1)
    country_of_origin: Optional[str] = None
    customs_declaration_number: Optional[str] = None
    rejection_reasons: Optional[str] = None
    second_issuance_reasons: Optional[str] = None


class CustomsCorrespondenceOut(BaseModel):
    id: str
    reference_number: str
    recipient: str
    subject: str
    company_name: str
    product: str
    country_of_origin: Optional[str]
    customs_declaration_number: Optional[str]
    rejection_reasons: Optional[str]
    second_issuance_reasons: Optional[str]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class RejectionNoticeCreate(BaseModel):
    exporter_name: str = Field(min_length=1)
    importer_name: str = Field(min_length=1)
    country_of_origin: Optional[str] = None
    point_of_entry: Optional[str] = None
    custom_declaration_no: Optional[str] = None
    no_of_packages: Optional[str] = None
    weight: Optional[str] = None
    scientific_name: Optional[str] = None
    common_name: Optional[str] = None
    commodity: Optional[str] = None
    notification_date: Optional[date] = None
    arrival_date: Optional[date] = None
    action_taken: Optional[str] = None
    cause_of_non_compliance: Optional[str] = None
    head_department_name: Optional[str] = None
    authorized_officer_name: Optional[str] = None


class RejectionNoticeUpdate(RejectionNoticeCreate):
    exporter_name: Optional[str] = Field(default=None, min_length=1)
    importer_name: Optional[str] = Field(default=None, min_length=1)


class RejectionNoticeOut(RejectionNoticeCreate):
    id: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
