from collections.abc import Mapping, Sequence
from datetime import date
from enum import StrEnum
from typing import Any


class ValueKind(StrEnum):
    binary = "binary"
    date = "date"
    string = "string"
    sequence = "sequence"
    mapping = "mapping"
    scalar = "scalar"
    null = "null"


def classify(value: Any) -> ValueKind:
    """
    Assign a ValueKind to an arbitrary application value.

    The order of the checks is significant:
    - binary before sequence, since bytes are sequences of ints
    - date before anything container-like
    - string before sequence, since str is a Sequence
    """
    if value is None:
        return ValueKind.null

    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.binary

    # datetime is a subclass of date
    if isinstance(value, date):
        return ValueKind.date

    if isinstance(value, str):
        return ValueKind.string

    if isinstance(value, Mapping):
        return ValueKind.mapping

    if isinstance(value, Sequence):
        return ValueKind.sequence

    return ValueKind.scalar
