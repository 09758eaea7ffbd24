# maktabi/auth.py
"""
Acting-user resolution for routers.
The caller identifies itself with the X-Employee-Id header; sign-in happens upstream.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from maktabi.database import get_db
from maktabi.exceptions import NotAuthenticated
from maktabi.models.employee import Employee
from maktabi.services.authz import require


def get_current_user(
    x_employee_id: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Employee:
    if not x_employee_id:
        raise NotAuthenticated("Missing X-Employee-Id header")
    employee = db.get(Employee, x_employee_id)
    if employee is None:
        raise NotAuthenticated(f"Unknown employee '{x_employee_id}'")
    return employee


def requires(action: str):
    """Dependency factory: the current user, provided they can manage `action`."""
    def _dependency(user: Employee = Depends(get_current_user)) -> Employee:
        require(user, action)
        return user
    return _dependency
