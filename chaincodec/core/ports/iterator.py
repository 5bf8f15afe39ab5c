from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


class Payload(Protocol):
    @property
    def value(self) -> bytes:
        """Raw bytes stored in the ledger for this entry."""


class KeyValue(Payload, Protocol):
    """
    One entry of a range or rich query.
    """

    @property
    def key(self) -> str:
        ...


class Timestamp(Protocol):
    @property
    def seconds(self) -> int:
        ...


class KeyModification(Payload, Protocol):
    """
    One entry of a key history query. `timestamp` is the commit time of
    the transaction that wrote (or deleted) the key.
    """

    @property
    def is_delete(self) -> bool:
        ...

    @property
    def tx_id(self) -> str:
        ...

    @property
    def timestamp(self) -> Timestamp | None:
        ...


@dataclass
class NextResult(Generic[T]):
    """
    Outcome of a single fetch on a query iterator.

    `value` may be None, typically on the final result where the iterator
    only signals exhaustion. A result may carry both an item and
    done=True.
    """
    value: T | None
    done: bool


class QueryIterator(Protocol[T]):
    """
    Asynchronous, forward-only cursor over ledger query results.

    The iterator is single-use: once `done` has been reported it cannot
    be restarted, and draining it twice is undefined. `close()` releases
    the underlying query resources and must be called exactly once by
    the consumer, on every exit path.
    """

    async def next(self) -> NextResult[T]:
        """
        Fetch the next result, suspending until it is available. May
        transparently fetch the next page from the peer.
        """

    async def close(self) -> None:
        """
        Release the resources held by this query.
        """


StateQueryIterator = QueryIterator[KeyValue]
HistoryQueryIterator = QueryIterator[KeyModification]
