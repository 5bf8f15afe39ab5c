import argparse
from typing import Any

from codecctl.bootstrap.deps import get_dispatcher
from codecctl.core.utils import parse_value, read_input
from chaincodec.core.facade import Transform
from chaincodec.core.models.result import Parsed, RawText

dispatcher = get_dispatcher()


@dispatcher.command("encode")
def encode(transform: Transform, namespace: argparse.Namespace) -> bytes:
    value = parse_value(namespace.value, namespace.kind)
    return transform.serialize(value)


@dispatcher.command("decode")
def decode(transform: Transform, namespace: argparse.Namespace) -> dict[str, Any]:
    data = read_input(namespace)
    if namespace.container == "array":
        data = bytearray(data)

    match transform.parse_payload(data):
        case Parsed(value):
            return {"type": "json", "value": value}
        case RawText(text=""):
            return {"type": "empty", "value": None}
        case RawText(text):
            return {"type": "text", "value": text}


@dispatcher.command("date")
def date(transform: Transform, namespace: argparse.Namespace) -> dict[str, Any]:
    data = read_input(namespace)
    return {"date": transform.buffer_to_date(data)}


@dispatcher.command("string")
def string(transform: Transform, namespace: argparse.Namespace) -> dict[str, Any]:
    data = read_input(namespace)
    return {"string": transform.buffer_to_string(data)}
