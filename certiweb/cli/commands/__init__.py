"""Command handlers for certiweb CLI."""

from certiweb.cli.commands.accounts import cmd_session, cmd_user
from certiweb.cli.commands.documents import cmd_backup, cmd_document
from certiweb.cli.commands.reporting import (
    cmd_export,
    cmd_integration,
    cmd_notification,
    cmd_report,
)

__all__ = [
    "cmd_document",
    "cmd_backup",
    "cmd_user",
    "cmd_session",
    "cmd_notification",
    "cmd_report",
    "cmd_export",
    "cmd_integration",
]
