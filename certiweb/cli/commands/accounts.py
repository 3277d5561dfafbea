"""User and session commands for certiweb CLI."""

from typing import TYPE_CHECKING

from certiweb.cli.commands.helpers import clean_input, print_json, print_missing

if TYPE_CHECKING:
    from certiweb import Certiweb


def cmd_user(args, registry: "Certiweb"):
    """Handle user subcommands."""
    if args.user_action == "create":
        registry.create_user(args.id, clean_input(args.name), clean_input(args.role))
        if args.json:
            print_json({"created": args.id})
        else:
            print(f"✓ User {args.id} created: {args.name} ({args.role})")

    elif args.user_action == "role":
        registry.assign_role(args.id, clean_input(args.role))
        if args.json:
            print_json({"updated": args.id, "role": args.role})
        else:
            print(f"✓ User {args.id} role set to {args.role}")

    elif args.user_action == "show":
        user = registry.get_user(args.id)
        if user is None:
            print_missing("User", args.id, args.json)
            return
        if args.json:
            print_json(user)
        else:
            print(f"User {args.id}: {user.name} ({user.role})")


def cmd_session(args, registry: "Certiweb"):
    """Handle session subcommands."""
    if args.session_action == "authenticate":
        registry.authenticate(args.id, clean_input(args.credentials))
        if args.json:
            print_json({"authenticated": args.id})
        else:
            print(f"✓ Session {args.id} authenticated")

    elif args.session_action == "permissions":
        registry.assign_permissions(args.id, clean_input(args.permissions))
        if args.json:
            print_json({"updated": args.id, "permissions": args.permissions})
        else:
            print(f"✓ Session {args.id} permissions set to {args.permissions}")

    elif args.session_action == "show":
        session = registry.get_session(args.id)
        if session is None:
            print_missing("Session", args.id, args.json)
            return
        if args.json:
            print_json(session)
        else:
            print(f"Session {args.id}: {session.payload}")
