"""
CLI interface for dynjson.

Reads a JSON object, optionally walks a dotted member path through
DynamicDocument, and prints the result.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from .config import get_config
from .document import DynamicDocument
from .errors import NotAnObjectError
from .loader import loads
from .serializer import SerializerOptions, serialize


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="dynjson",
        description="Read JSON objects through member-style access",
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="Input file (reads from stdin if not provided)",
    )

    parser.add_argument(
        "--get",
        "-g",
        metavar="PATH",
        help="Dotted member path, e.g. user.name or items.0.id",
    )

    parser.add_argument(
        "--escape",
        action=argparse.BooleanOptionalAction,
        default=config.serializer.escape_strings,
        help="Escape keys and strings in serialized output",
    )

    parser.add_argument(
        "--null-literal",
        action=argparse.BooleanOptionalAction,
        default=config.serializer.null_literal,
        help="Render null as null instead of empty text",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging on stderr",
    )

    return parser.parse_args(args)


def read_input(filepath: str | None) -> str:
    """Read input from file or stdin."""
    if filepath is None:
        return sys.stdin.read()
    with open(filepath, encoding="utf-8") as f:
        return f.read()


def walk_path(doc: DynamicDocument, path: str) -> Any:
    """Resolve each segment of *path* in turn.

    Integer segments index into sequences; anything that cannot be walked
    further yields None, matching member resolution.
    """
    current: Any = doc
    for segment in path.split("."):
        if isinstance(current, DynamicDocument):
            current = current[segment]
        elif isinstance(current, (list, tuple)) and segment.lstrip("-").isdigit():
            idx = int(segment)
            current = current[idx] if -len(current) <= idx < len(current) else None
        else:
            return None
    return current


def format_value(value: Any, options: SerializerOptions) -> str | None:
    """Text for *value*; None means print nothing."""
    if value is None:
        return None
    if isinstance(value, DynamicDocument):
        return serialize(value, options)
    if isinstance(value, (list, tuple)):
        lines = [format_value(item, options) for item in value]
        return "\n".join(line if line is not None else "" for line in lines)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return serialize(DynamicDocument(value), options)
    return str(value)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        content = read_input(parsed.file)
    except FileNotFoundError:
        print(f"Error: File not found: {parsed.file}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    try:
        doc = loads(content)
    except json.JSONDecodeError as e:
        print(f"Error: invalid JSON: {e}", file=sys.stderr)
        return 1
    except NotAnObjectError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    options = SerializerOptions(
        escape_strings=parsed.escape,
        null_literal=parsed.null_literal,
    )
    value = walk_path(doc, parsed.get) if parsed.get else doc

    text = format_value(value, options)
    if text is not None:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
