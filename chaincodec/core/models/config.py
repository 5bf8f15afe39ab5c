from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """
    Static configuration for the payload codec.

    Built by the bootstrap layer from the user settings; the core only
    ever sees this structure.
    """
    encoding: str = "utf-8"
    """
    Text encoding of every payload written to or read from the ledger.
    """

    decode_errors: str = "replace"
    """
    Error handler passed to bytes.decode(). The default replaces invalid
    sequences with U+FFFD so decoding never raises.
    """

    log_parse_fallback: bool = True
    """
    Whether the deserializer logs payloads that are not valid JSON.
    """
