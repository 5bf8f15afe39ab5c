import logging
from datetime import datetime
from typing import Any

from chaincodec.core.codec.deserializer import ByteArray, Deserializer
from chaincodec.core.codec.normalizer import normalize
from chaincodec.core.codec.serializer import serialize
from chaincodec.core.iteration.drainer import (
    iterator_to_history_list,
    iterator_to_kv_list,
    iterator_to_list,
)
from chaincodec.core.models.config import CodecConfig
from chaincodec.core.models.records import KV, KeyModificationItem
from chaincodec.core.models.result import ParseResult
from chaincodec.core.ports.iterator import (
    HistoryQueryIterator,
    Payload,
    QueryIterator,
    StateQueryIterator,
)


class Transform:
    """
    Single entry point for converting chaincode values to and from the
    format stored in the ledger, and for materializing query iterators.

    Each instance carries its own codec configuration and logger; there
    is no process-wide state.
    """

    def __init__(
        self,
        config: CodecConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or CodecConfig()
        self._logger = logger or logging.getLogger("core.transform")
        self._deserializer = Deserializer(self._config, self._logger)

    @property
    def config(self) -> CodecConfig:
        return self._config

    def normalize(self, value: Any) -> Any:
        return normalize(value)

    def serialize(self, value: Any) -> bytes:
        return serialize(value, self._config.encoding)

    def parse_payload(self, data: bytes | ByteArray) -> ParseResult:
        return self._deserializer.parse_payload(data)

    def buffer_to_object(self, buffer: bytes | None) -> Any:
        return self._deserializer.buffer_to_object(buffer)

    def byte_array_to_object(self, payload: ByteArray | None) -> Any:
        return self._deserializer.byte_array_to_object(payload)

    def buffer_to_date(self, buffer: bytes | None) -> datetime | None:
        return self._deserializer.buffer_to_date(buffer)

    def buffer_to_string(self, buffer: bytes | None) -> str | None:
        return self._deserializer.buffer_to_string(buffer)

    async def iterator_to_list(
        self, iterator: QueryIterator[Payload]
    ) -> list[Any]:
        return await iterator_to_list(iterator, self._config)

    async def iterator_to_kv_list(
        self, iterator: StateQueryIterator
    ) -> list[KV]:
        return await iterator_to_kv_list(iterator, self._config)

    async def iterator_to_history_list(
        self, iterator: HistoryQueryIterator
    ) -> list[KeyModificationItem]:
        return await iterator_to_history_list(iterator, self._config)
