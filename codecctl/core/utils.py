import argparse
import json
from datetime import datetime
from pathlib import Path
from typing import Any


def read_input(namespace: argparse.Namespace) -> bytes:
    """Payload bytes from --file, or from the standard input."""
    file = getattr(namespace, "file", None)
    if file:
        return Path(file).read_bytes()
    return namespace.stdin.read()


def parse_value(raw: str, kind: str) -> Any:
    """
    Turn a command line argument into the value to encode.

    - json: the argument is JSON text
    - string: the argument is taken verbatim
    - date: the argument is an ISO-8601 date or datetime
    """
    match kind:
        case "json":
            try:
                return json.loads(raw)
            except json.JSONDecodeError as ex:
                raise ValueError(f"Invalid JSON value: {ex}")
        case "string":
            return raw
        case "date":
            try:
                return datetime.fromisoformat(raw)
            except ValueError:
                raise ValueError(f"Invalid ISO-8601 date: {raw}")
        case _:
            raise ValueError(f"Unknown value kind: {kind}")
