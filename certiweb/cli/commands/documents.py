"""Document, history and backup commands for certiweb CLI."""

from typing import TYPE_CHECKING

from certiweb.cli.commands.helpers import clean_input, print_json, print_missing

if TYPE_CHECKING:
    from certiweb import Certiweb


def cmd_document(args, registry: "Certiweb"):
    """Handle document subcommands."""
    if args.document_action == "register":
        registry.register_document(
            args.id,
            clean_input(args.title),
            clean_input(args.status),
            args.created_at,
        )
        if args.json:
            print_json({"registered": args.id})
        else:
            print(f"✓ Document {args.id} registered: {args.title} ({args.status})")

    elif args.document_action == "show":
        document = registry.get_document(args.id)
        if document is None:
            print_missing("Document", args.id, args.json)
            return
        if args.json:
            print_json(document)
        else:
            print(f"Document {args.id}")
            print(f"  Title:   {document.title}")
            print(f"  Status:  {document.status}")
            print(f"  Created: {document.created_at}")

    elif args.document_action == "status":
        registry.update_document_status(args.id, clean_input(args.status))
        if args.json:
            print_json({"updated": args.id, "status": args.status})
        else:
            print(f"✓ Document {args.id} status set to {args.status}")

    elif args.document_action == "verify":
        registry.verify_document(args.id, clean_input(args.outcome))
        entry = registry.get_history(args.id)
        if args.json:
            print_json(entry)
        else:
            print(f"✓ Document {args.id} verified at {entry.timestamp}: {entry.outcome}")

    elif args.document_action == "append-history":
        registry.append_history(args.id, args.timestamp, clean_input(args.outcome))
        if args.json:
            print_json({"appended": args.id})
        else:
            print(f"✓ History entry {args.id} added")

    elif args.document_action == "history":
        entry = registry.get_history(args.id)
        if entry is None:
            print_missing("History entry", args.id, args.json)
            return
        if args.json:
            print_json(entry)
        else:
            print(f"History {args.id}: [{entry.timestamp}] {entry.outcome}")


def cmd_backup(args, registry: "Certiweb"):
    """Handle backup subcommands."""
    if args.backup_action == "register":
        registry.register_backup(
            args.id,
            args.timestamp,
            clean_input(args.location),
            clean_input(args.author),
        )
        if args.json:
            print_json({"registered": args.id})
        else:
            print(f"✓ Backup {args.id} registered at {args.location}")

    elif args.backup_action == "show":
        backup = registry.get_backup(args.id)
        if backup is None:
            print_missing("Backup", args.id, args.json)
            return
        if args.json:
            print_json(backup)
        else:
            print(f"Backup {args.id}")
            print(f"  Taken:    {backup.timestamp}")
            print(f"  Location: {backup.location}")
            print(f"  Author:   {backup.author}")
