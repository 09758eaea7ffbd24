# maktabi/services/authz.py
"""
Single capability check for the three coarse roles.

    can_manage(user, "permits")   # Admin or Head of Department
    require(user, "settings")     # raises PermissionDenied unless Admin

Views never compare roles inline; they ask for a capability.
"""

from maktabi.exceptions import PermissionDenied
from maktabi.utils.logger import get_logger

logger = get_logger(__name__)

ADMIN = "Admin"
HEAD_OF_DEPARTMENT = "Head of Department"
EMPLOYEE = "Employee"

ROLES = (ADMIN, HEAD_OF_DEPARTMENT, EMPLOYEE)

# Actions granted per role. Admin is granted everything.
CAPABILITIES = {
    HEAD_OF_DEPARTMENT: {
        "permits",
        "fuel",
        "leaves",
        "training",
        "correspondence",
        "user_requests",
        "employees.view",
    },
    EMPLOYEE: set(),
}

ADMIN_ONLY = {"vehicles", "settings", "audit", "employees", "announcements", "holidays"}


def can_manage(user, action: str) -> bool:
    if user is None:
        return False
    role = getattr(user, "role", None) or EMPLOYEE
    if role == ADMIN:
        return True
    if action in ADMIN_ONLY:
        return False
    return action in CAPABILITIES.get(role, set())


def require(user, action: str):
    if not can_manage(user, action):
        name = getattr(user, "name", "anonymous")
        logger.warning(f"[AUTHZ] {name} denied '{action}'")
        raise PermissionDenied(f"Not allowed to manage {action}")


def is_self(user, employee_id: str) -> bool:
    return user is not None and user.id == employee_id
