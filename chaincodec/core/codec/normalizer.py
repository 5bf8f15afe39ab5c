import math
from typing import Any

from chaincodec.core.helpers.epoch import to_epoch_millis
from chaincodec.core.models.value import ValueKind, classify


def normalize(value: Any) -> Any:
    """
    Reshape a value into a form the JSON encoder accepts.

    Dates become epoch milliseconds, containers are rebuilt with their
    members normalized, and NaN or infinite floats become None, the way
    JSON.stringify writes them as null. Everything else is returned
    untouched. The input is never mutated.
    """
    match classify(value):
        case ValueKind.date:
            return to_epoch_millis(value)
        case ValueKind.string:
            return value
        case ValueKind.sequence:
            return [normalize(v) for v in value]
        case ValueKind.mapping:
            return {k: normalize(v) for k, v in value.items()}
        case ValueKind.scalar:
            if isinstance(value, float) and not math.isfinite(value):
                return None
            return value
        case ValueKind.binary | ValueKind.null:
            return value
