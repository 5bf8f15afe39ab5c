import json
import logging
import re
from collections.abc import Sequence
from datetime import datetime

from chaincodec.core.helpers.epoch import from_epoch_millis
from chaincodec.core.models.config import CodecConfig
from chaincodec.core.models.result import Parsed, ParseResult, RawText

ByteArray = bytearray | memoryview | Sequence[int]

_DIGITS = re.compile(r"[+-]?\d+")


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_text(text: str) -> ParseResult:
    """
    Parse decoded payload text as JSON.

    NaN and Infinity are not JSON and are rejected. Any failure,
    including pathologically deep nesting, yields RawText instead of
    raising.
    """
    try:
        return Parsed(json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as ex:
        return RawText(text=text, error=str(ex))


def decode_text(data: bytes | ByteArray, config: CodecConfig) -> str:
    return bytes(data).decode(config.encoding, config.decode_errors)


class Deserializer:
    """
    Turns payloads read from the ledger back into application values.

    None of the entry points raise on malformed content: anything that is
    not valid JSON comes back as the decoded text. Those fallbacks are
    reported on the injected logger.
    """

    def __init__(
        self,
        config: CodecConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or CodecConfig()
        self._logger = logger or logging.getLogger("core.codec.deserializer")

    @property
    def config(self) -> CodecConfig:
        return self._config

    def parse_payload(self, data: bytes | ByteArray) -> ParseResult:
        """
        Decode and parse a payload, keeping track of which outcome
        occurred.
        """
        return parse_text(decode_text(data, self._config))

    def buffer_to_object(self, buffer: bytes | None):
        if buffer is None:
            return None

        return self._to_object(buffer, "buffer")

    def byte_array_to_object(self, payload: ByteArray | None):
        if payload is None:
            return None

        try:
            data = bytes(payload)
        except (TypeError, ValueError) as ex:
            self._logger.error(f"Invalid byte array ({ex})")
            return None

        return self._to_object(data, "byte array")

    def buffer_to_date(self, buffer: bytes | None) -> datetime | None:
        """
        Read a payload written from a date, i.e. the decimal digits of its
        epoch milliseconds. The first run of digits, with a sign directly
        in front of it, is taken as the timestamp. Returns None when there
        is nothing to read or the timestamp is out of range.
        """
        if buffer is None:
            return None

        text = decode_text(buffer, self._config)
        if not text:
            return None

        match = _DIGITS.search(text)
        if match is None:
            return None

        try:
            return from_epoch_millis(int(match.group()))
        except (OverflowError, ValueError):
            self._logger.error(f"Timestamp out of range: {match.group()[:32]}")
            return None

    def buffer_to_string(self, buffer: bytes | None) -> str | None:
        if buffer is None:
            return None

        return decode_text(buffer, self._config)

    def _to_object(self, data: bytes | ByteArray, source: str):
        text = decode_text(data, self._config)
        if not text:
            return None

        result = parse_text(text)
        if isinstance(result, RawText) and self._config.log_parse_fallback:
            self._logger.error(
                f"Error parsing {source} to JSON ({result.error}): {text!r}"
            )

        return result.unwrap()
