import contextlib
from typing import Any, AsyncGenerator, Callable, TypeVar

from chaincodec.core.codec.deserializer import decode_text, parse_text
from chaincodec.core.models.config import CodecConfig
from chaincodec.core.models.records import KV, KeyModificationItem
from chaincodec.core.ports.iterator import (
    HistoryQueryIterator,
    KeyModification,
    KeyValue,
    Payload,
    QueryIterator,
    StateQueryIterator,
)

T = TypeVar("T", bound=Payload)
R = TypeVar("R")

_DEFAULT_CONFIG = CodecConfig()


@contextlib.asynccontextmanager
async def closing(
    iterator: QueryIterator[T],
) -> AsyncGenerator[QueryIterator[T], None]:
    """
    Scope a query iterator: close() is awaited exactly once when the
    block exits, whether it completes, raises or is cancelled.
    """
    try:
        yield iterator
    finally:
        await iterator.close()


async def drain(
    iterator: QueryIterator[T],
    build: Callable[[T, Any], R],
    config: CodecConfig = _DEFAULT_CONFIG,
) -> list[R]:
    """
    Consume `iterator` until it reports done and collect one record per
    item carrying a non-empty payload. Payloads are parsed as JSON and
    kept as decoded text when they are not; `build` receives the item
    and the parsed value.

    Errors raised by next() propagate to the caller once the iterator
    has been closed.
    """
    results: list[R] = []

    async with closing(iterator):
        done = False
        while not done:
            res = await iterator.next()
            done = res.done

            item = res.value
            if item is None or item.value is None:
                continue

            text = decode_text(item.value, config)
            if not text:
                continue

            results.append(build(item, parse_text(text).unwrap()))

    return results


async def iterator_to_list(
    iterator: QueryIterator[Payload],
    config: CodecConfig = _DEFAULT_CONFIG,
) -> list[Any]:
    return await drain(iterator, lambda _, value: value, config)


async def iterator_to_kv_list(
    iterator: StateQueryIterator,
    config: CodecConfig = _DEFAULT_CONFIG,
) -> list[KV]:
    return await drain(iterator, _to_kv, config)


async def iterator_to_history_list(
    iterator: HistoryQueryIterator,
    config: CodecConfig = _DEFAULT_CONFIG,
) -> list[KeyModificationItem]:
    return await drain(iterator, _to_modification, config)


def _to_kv(item: KeyValue, value: Any) -> KV:
    return KV(key=item.key, value=value)


def _to_modification(item: KeyModification, value: Any) -> KeyModificationItem:
    timestamp = item.timestamp
    return KeyModificationItem(
        is_delete=bool(item.is_delete),
        value=value,
        timestamp=int(timestamp.seconds) if timestamp is not None else None,
        tx_id=item.tx_id,
    )
