from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for encoding/decoding values written to and
    read from the ledger world state.

    Implementations must be:
    - deterministic
    - pure (no side effects beyond logging)
    - safe against malformed input on the decoding side
    """

    def serialize(self, value: Any) -> bytes:
        """Encode a Python value into the bytes stored under a key."""

    def deserialize(self, data: bytes | None) -> Any:
        """Decode bytes read from the ledger into a Python value."""
