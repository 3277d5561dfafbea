"""Shared helper functions for CLI commands."""

import argparse
import json
import re
from dataclasses import asdict, is_dataclass
from typing import Any

from certiweb.core.validation import sanitize_record_id


CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def clean_input(value: str) -> str:
    """Drop control characters (tabs and newlines survive) from a CLI argument.

    Type and length are checked by the registry itself against the
    configured ``max_text_length``.
    """
    return CONTROL_CHARS.sub("", value)


def record_id(value: str) -> int:
    """argparse type for table ids."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Id must be an integer, got '{value}'")
    try:
        return sanitize_record_id(ivalue)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def timestamp(value: str) -> int:
    """argparse type for integer timestamps."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Timestamp must be an integer, got '{value}'")
    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"Timestamp must be non-negative, got {ivalue}")
    return ivalue


def print_json(data: Any) -> None:
    """Print data as formatted JSON."""
    if is_dataclass(data):
        data = asdict(data)
    print(json.dumps(data, indent=2, default=str))


def print_missing(kind: str, id: int, as_json: bool) -> None:
    if as_json:
        print(json.dumps(None))
    else:
        print(f"{kind} {id} not found.")
