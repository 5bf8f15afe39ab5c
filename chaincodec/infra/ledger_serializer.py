from typing import Any

from chaincodec.core.facade import Transform
from chaincodec.core.ports.serializer import Serializer


class LedgerSerializer(Serializer):
    """
    Serializer implementation backed by a Transform.

    - dates and strings stored as bare text
    - everything else stored as compact JSON
    - reads fall back to the raw text when the payload is not JSON
    """
    def __init__(self, transform: Transform) -> None:
        self._transform = transform

    def serialize(self, value: Any) -> bytes:
        return self._transform.serialize(value)

    def deserialize(self, data: bytes | None) -> Any:
        return self._transform.buffer_to_object(data)
