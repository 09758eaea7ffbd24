# tests/test_audit_service.py
"""Unit tests for the activity trail."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import MagicMock
from sqlalchemy.exc import OperationalError
from maktabi.models.audit_log import AuditLog
from maktabi.services.audit_service import record_activity


class TestRecordActivity:
    def test_entry_written_for_actor(self, db, users):
        entry = record_activity(db, users["admin"], "إضافة مركبة", "إضافة مركبة: Hilux (1 A)")
        assert entry is not None
        stored = db.query(AuditLog).one()
        assert stored.user_name == "مدير النظام"
        assert stored.timestamp is not None

    def test_no_actor_no_entry(self):
        db = MagicMock()
        assert record_activity(db, None, "x", "y") is None
        db.add.assert_not_called()

    def test_failed_write_is_logged_not_raised(self):
        db = MagicMock()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
        actor = MagicMock(id="E1")
        actor.name = "tester"
        assert record_activity(db, actor, "x", "y") is None
        db.rollback.assert_called_once()
