"""Notification, report, export and integration commands for certiweb CLI."""

from typing import TYPE_CHECKING

from certiweb.cli.commands.helpers import clean_input, print_json, print_missing

if TYPE_CHECKING:
    from certiweb import Certiweb


def cmd_notification(args, registry: "Certiweb"):
    if args.notification_action == "configure":
        registry.configure_notification(args.id, clean_input(args.type))
        if args.json:
            print_json({"configured": args.id, "type": args.type})
        else:
            print(f"✓ Notification {args.id} configured: {args.type}")

    elif args.notification_action == "send":
        notification_type = registry.send_notification(args.id)
        if notification_type is None:
            print_missing("Notification", args.id, args.json)
            return
        if args.json:
            print_json({"id": args.id, "type": notification_type})
        else:
            print(f"Notification {args.id}: {notification_type}")


def cmd_report(args, registry: "Certiweb"):
    if args.report_action == "generate":
        registry.generate_report(args.id, clean_input(args.format))
        if args.json:
            print_json({"generated": args.id, "format": args.format})
        else:
            print(f"✓ Report {args.id} generated ({args.format})")

    elif args.report_action == "export":
        report = registry.export_report(args.id)
        if report is None:
            print_missing("Report", args.id, args.json)
            return
        if args.json:
            print_json(report)
        else:
            print(f"Report {args.id}: {report.format}, generated at {report.generated_at}")


def cmd_export(args, registry: "Certiweb"):
    if args.export_action == "create":
        registry.export_data(args.id, clean_input(args.format))
        if args.json:
            print_json({"exported": args.id, "format": args.format})
        else:
            print(f"✓ Export {args.id} recorded ({args.format})")

    elif args.export_action == "validate":
        export_format = registry.validate_export(args.id)
        if export_format is None:
            print_missing("Export", args.id, args.json)
            return
        if args.json:
            print_json({"id": args.id, "format": export_format})
        else:
            print(f"Export {args.id}: {export_format}")


def cmd_integration(args, registry: "Certiweb"):
    if args.integration_action == "sync":
        registry.sync_integration(args.id, clean_input(args.system))
        if args.json:
            print_json({"synced": args.id, "system": args.system})
        else:
            print(f"✓ Integration {args.id} synced with {args.system}")

    elif args.integration_action == "verify":
        system_name = registry.verify_integration(args.id)
        if system_name is None:
            print_missing("Integration", args.id, args.json)
            return
        if args.json:
            print_json({"id": args.id, "system": system_name})
        else:
            print(f"Integration {args.id}: {system_name}")
