import json
from typing import Any

from chaincodec.core.codec.normalizer import normalize
from chaincodec.core.models.value import ValueKind, classify


def serialize(value: Any, encoding: str = "utf-8") -> bytes:
    """
    Encode a value into the bytes stored in the ledger.

    - bytes are returned as-is, other binary containers are copied
    - dates and strings are written as bare text (no JSON quoting), a
      date as the decimal digits of its epoch milliseconds
    - everything else is normalized and written as compact JSON, with
      NaN and infinite floats written as null

    Values the JSON encoder cannot represent raise its TypeError;
    circular containers raise ValueError.
    """
    match classify(value):
        case ValueKind.binary:
            if isinstance(value, bytes):
                return value
            return bytes(value)
        case ValueKind.date | ValueKind.string:
            return str(normalize(value)).encode(encoding)
        case _:
            text = json.dumps(
                normalize(value),
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
            return text.encode(encoding)
