"""
certiweb CLI - Command-line interface for the certification registry.

Usage:
    certiweb document register ID TITLE STATUS CREATED_AT
    certiweb document show ID
    certiweb document status ID NEW_STATUS
    certiweb document verify ID OUTCOME
    certiweb document append-history ID TIMESTAMP OUTCOME
    certiweb document history ID
    certiweb backup register ID TIMESTAMP LOCATION AUTHOR
    certiweb user create ID NAME ROLE
    certiweb session authenticate ID CREDENTIALS
    certiweb report generate ID FORMAT
    certiweb [--registry R] [--json] ...
"""

import argparse
import logging
import sys

from certiweb import Certiweb
from certiweb.cli.commands import (
    cmd_backup,
    cmd_document,
    cmd_export,
    cmd_integration,
    cmd_notification,
    cmd_report,
    cmd_session,
    cmd_user,
)
from certiweb.cli.commands.helpers import record_id, timestamp
from certiweb.config import get_settings
from certiweb.logging_config import setup_certiweb_logging
from certiweb.protocols import CertiwebError

# Set up logging
logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

COMMANDS = {
    "document": cmd_document,
    "backup": cmd_backup,
    "user": cmd_user,
    "session": cmd_session,
    "notification": cmd_notification,
    "report": cmd_report,
    "export": cmd_export,
    "integration": cmd_integration,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="certiweb",
        description="Persistent registry for academic and certification records",
    )
    parser.add_argument("--registry", "-r", help="Registry ID", default=None)
    parser.add_argument("--json", "-j", action="store_true", help="Print JSON output")
    parser.add_argument("--log-level", dest="log_level", default=None, help="Log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # document
    p_document = subparsers.add_parser("document", help="Documents and verification history")
    doc_sub = p_document.add_subparsers(dest="document_action", required=True)

    doc_register = doc_sub.add_parser("register", help="Register a new document")
    doc_register.add_argument("id", type=record_id)
    doc_register.add_argument("title")
    doc_register.add_argument("status")
    doc_register.add_argument("created_at", type=timestamp, help="Creation time (integer)")

    doc_show = doc_sub.add_parser("show", help="Show a document")
    doc_show.add_argument("id", type=record_id)

    doc_status = doc_sub.add_parser("status", help="Update a document's status")
    doc_status.add_argument("id", type=record_id)
    doc_status.add_argument("status", help="New status")

    doc_verify = doc_sub.add_parser("verify", help="Record a verification outcome now")
    doc_verify.add_argument("id", type=record_id)
    doc_verify.add_argument("outcome")

    doc_append = doc_sub.add_parser("append-history", help="Add a history entry")
    doc_append.add_argument("id", type=record_id)
    doc_append.add_argument("timestamp", type=timestamp)
    doc_append.add_argument("outcome")

    doc_history = doc_sub.add_parser("history", help="Show the history entry for an id")
    doc_history.add_argument("id", type=record_id)

    # backup
    p_backup = subparsers.add_parser("backup", help="Backup records")
    backup_sub = p_backup.add_subparsers(dest="backup_action", required=True)

    backup_register = backup_sub.add_parser("register", help="Register a backup")
    backup_register.add_argument("id", type=record_id)
    backup_register.add_argument("timestamp", type=timestamp)
    backup_register.add_argument("location")
    backup_register.add_argument("author")

    backup_show = backup_sub.add_parser("show", help="Show a backup")
    backup_show.add_argument("id", type=record_id)

    # user
    p_user = subparsers.add_parser("user", help="User accounts")
    user_sub = p_user.add_subparsers(dest="user_action", required=True)

    user_create = user_sub.add_parser("create", help="Create a user")
    user_create.add_argument("id", type=record_id)
    user_create.add_argument("name")
    user_create.add_argument("role")

    user_role = user_sub.add_parser("role", help="Assign a role")
    user_role.add_argument("id", type=record_id)
    user_role.add_argument("role")

    user_show = user_sub.add_parser("show", help="Show a user")
    user_show.add_argument("id", type=record_id)

    # session
    p_session = subparsers.add_parser("session", help="Authentication sessions")
    session_sub = p_session.add_subparsers(dest="session_action", required=True)

    session_auth = session_sub.add_parser("authenticate", help="Open or replace a session")
    session_auth.add_argument("id", type=record_id)
    session_auth.add_argument("credentials")

    session_perms = session_sub.add_parser("permissions", help="Assign session permissions")
    session_perms.add_argument("id", type=record_id)
    session_perms.add_argument("permissions")

    session_show = session_sub.add_parser("show", help="Show a session slot")
    session_show.add_argument("id", type=record_id)

    # notification
    p_notification = subparsers.add_parser("notification", help="Notification settings")
    notif_sub = p_notification.add_subparsers(dest="notification_action", required=True)

    notif_configure = notif_sub.add_parser("configure", help="Set the notification type")
    notif_configure.add_argument("id", type=record_id)
    notif_configure.add_argument("type", help="Notification type (e.g. Email)")

    notif_send = notif_sub.add_parser("send", help="Look up the notification type")
    notif_send.add_argument("id", type=record_id)

    # report
    p_report = subparsers.add_parser("report", help="Generated reports")
    report_sub = p_report.add_subparsers(dest="report_action", required=True)

    report_generate = report_sub.add_parser("generate", help="Generate a report now")
    report_generate.add_argument("id", type=record_id)
    report_generate.add_argument("format", help="Report format (e.g. PDF)")

    report_export = report_sub.add_parser("export", help="Show a generated report")
    report_export.add_argument("id", type=record_id)

    # export
    p_export = subparsers.add_parser("export", help="Data exports")
    export_sub = p_export.add_subparsers(dest="export_action", required=True)

    export_create = export_sub.add_parser("create", help="Record a data export")
    export_create.add_argument("id", type=record_id)
    export_create.add_argument("format", help="Export format (e.g. JSON)")

    export_validate = export_sub.add_parser("validate", help="Show an export's format")
    export_validate.add_argument("id", type=record_id)

    # integration
    p_integration = subparsers.add_parser("integration", help="External system integrations")
    integ_sub = p_integration.add_subparsers(dest="integration_action", required=True)

    integ_sync = integ_sub.add_parser("sync", help="Record a sync with an external system")
    integ_sync.add_argument("id", type=record_id)
    integ_sync.add_argument("system", help="External system name")

    integ_verify = integ_sub.add_parser("verify", help="Show the synced system")
    integ_verify.add_argument("id", type=record_id)

    return parser


def main(argv=None, registry=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if registry is None:
            settings = get_settings()
            registry_id = args.registry or settings.registry_id
            setup_certiweb_logging(
                registry_id, args.log_level or settings.log_level, settings.data_dir
            )
            registry = Certiweb(registry_id=registry_id, settings=settings)

        COMMANDS[args.command](args, registry)
    except (CertiwebError, ValueError) as e:
        logger.debug(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
