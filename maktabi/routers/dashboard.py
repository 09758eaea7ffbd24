# maktabi/routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from maktabi.auth import get_current_user
from maktabi.database import get_db
from maktabi.services.dashboard_service import dashboard_summary

router = APIRouter()


@router.get("/dashboard/summary", summary="Employee, on-leave and pending-request counts")
def get_dashboard_summary(db: Session = Depends(get_db), user=Depends(get_current_user)):
    return dashboard_summary(db, user)
