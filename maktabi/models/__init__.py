# Maktabi Database Models
# Import all models here for SQLAlchemy discovery

from maktabi.models.vehicle import Vehicle                     # noqa
from maktabi.models.vehicle_permit import VehiclePermit        # noqa
from maktabi.models.fuel_expense import FuelExpense            # noqa
from maktabi.models.employee import Employee                   # noqa
from maktabi.models.leave_request import LeaveRequest          # noqa
from maktabi.models.public_holiday import PublicHoliday        # noqa
from maktabi.models.training_record import TrainingRecord      # noqa
from maktabi.models.user_request import UserRequest            # noqa
from maktabi.models.correspondence import (                    # noqa
    Correspondence, CustomsCorrespondence, RejectionNotice,
)
from maktabi.models.announcement import Announcement           # noqa
from maktabi.models.app_settings import AppSettings            # noqa
from maktabi.models.audit_log import AuditLog                  # noqa
