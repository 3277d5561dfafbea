"""Notification, report, export and integration operations for certiweb.

All four tables share one policy: the write always overwrites the slot for
the id and never fails; the read returns the current value or None.
"""

from typing import Optional

from certiweb.storage import (
    exports_crud,
    integrations_crud,
    notifications_crud,
    reports_crud,
)
from certiweb.types import Report, TableName


class ReportingMixin:
    """Notification settings, generated reports, data exports and integrations."""

    # =========================================================================
    # NOTIFICATIONS
    # =========================================================================

    def configure_notification(self, id: int, type: str) -> None:
        id = self._validate_record_id(id)
        type = self._validate_text(type, "type")
        with self._invocation("configure_notification", TableName.NOTIFICATIONS, id):
            notifications_crud.configure_notification(self._store, id, type)

    def send_notification(self, id: int) -> Optional[str]:
        """Return the notification type configured for ``id``, or None."""
        id = self._validate_record_id(id)
        return notifications_crud.send_notification(self._store, id)

    # =========================================================================
    # REPORTS
    # =========================================================================

    def generate_report(self, id: int, format: str) -> None:
        """Record a report generated now, in ``format``."""
        id = self._validate_record_id(id)
        format = self._validate_text(format, "format")
        with self._invocation("generate_report", TableName.REPORTS, id):
            reports_crud.generate_report(self._store, self._clock, id, format)

    def export_report(self, id: int) -> Optional[Report]:
        """Return the latest report for ``id`` (generation time and format), or None."""
        id = self._validate_record_id(id)
        return reports_crud.export_report(self._store, id)

    # =========================================================================
    # EXPORTS
    # =========================================================================

    def export_data(self, id: int, format: str) -> None:
        id = self._validate_record_id(id)
        format = self._validate_text(format, "format")
        with self._invocation("export_data", TableName.EXPORTS, id):
            exports_crud.export_data(self._store, id, format)

    def validate_export(self, id: int) -> Optional[str]:
        id = self._validate_record_id(id)
        return exports_crud.validate_export(self._store, id)

    # =========================================================================
    # INTEGRATIONS
    # =========================================================================

    def sync_integration(self, id: int, system_name: str) -> None:
        id = self._validate_record_id(id)
        system_name = self._validate_text(system_name, "system_name")
        with self._invocation("sync_integration", TableName.INTEGRATIONS, id):
            integrations_crud.sync_integration(self._store, id, system_name)

    def verify_integration(self, id: int) -> Optional[str]:
        """Return the external system last synced for ``id``, or None."""
        id = self._validate_record_id(id)
        return integrations_crud.verify_integration(self._store, id)
