"""Reports table operations.

Upsert only. Each generation is stamped with the host clock.
"""

import logging
from typing import Optional

from certiweb.protocols import Clock, KeyValueStore
from certiweb.types import Report, TableName

from .keyed_table import get_table

logger = logging.getLogger(__name__)

_reports = get_table(TableName.REPORTS)


def generate_report(
    store: KeyValueStore, clock: Clock, report_id: int, report_format: str
) -> Report:
    """Record a report generated now in ``report_format``, replacing any prior one."""
    reports = _reports.load(store)
    report = Report(generated_at=clock.now(), format=report_format)
    reports[report_id] = report
    _reports.store(store, reports)
    logger.info(f"Generated report {report_id} ({report_format}) at {report.generated_at}")
    return report


def export_report(store: KeyValueStore, report_id: int) -> Optional[Report]:
    """Return the latest generated report for ``report_id`` or None."""
    return _reports.load(store).get(report_id)
