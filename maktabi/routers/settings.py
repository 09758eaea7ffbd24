# maktabi/routers/settings.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user, requires
from maktabi.database import get_db
from maktabi.schemas.app_settings import AppSettingsUpdate, AppSettingsOut, RamadanDateRange
from maktabi.services import settings_service

router = APIRouter()


@router.get("/settings", response_model=AppSettingsOut, summary="Lookup lists for forms")
def get_settings(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return settings_service.get_settings(db)


@router.put("/settings", response_model=AppSettingsOut, summary="Replace one or more lookup lists")
def update_settings(body: AppSettingsUpdate, db: Session = Depends(get_db), user=Depends(requires("settings"))):
    return settings_service.update_settings(db, body, actor=user)


@router.put("/settings/ramadan/{year}", response_model=AppSettingsOut, summary="Set one year's Ramadan dates")
def set_ramadan_dates(year: int, body: RamadanDateRange, db: Session = Depends(get_db),
                      user=Depends(requires("settings"))):
    return settings_service.set_ramadan_dates(db, year, body, actor=user)
