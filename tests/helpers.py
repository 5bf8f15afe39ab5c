import logging


def error_records(caplog, name: str | None = None) -> list[logging.LogRecord]:
    return [
        r for r in caplog.records
        if r.levelno == logging.ERROR and (name is None or r.name == name)
    ]
