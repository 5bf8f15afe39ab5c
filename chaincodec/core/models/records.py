from dataclasses import dataclass, asdict
from typing import Any


@dataclass
class KV:
    """
    A key from a range query paired with its deserialized value.
    """
    key: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class KeyModificationItem:
    """
    One historical write or delete of a single key.
    """
    is_delete: bool
    value: Any
    timestamp: int | None
    """
    Seconds since epoch of the transaction, as reported by the ledger.
    """

    tx_id: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
