from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Parsed:
    """The payload was valid JSON."""
    value: Any

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class RawText:
    """
    The payload was not valid JSON and is kept as decoded text.
    `error` carries the parser message for logging.
    """
    text: str
    error: str = ""

    def unwrap(self) -> str:
        return self.text


ParseResult = Parsed | RawText
