from datetime import date, datetime, timedelta, UTC

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_millis(value: date) -> int:
    """
    Return the number of milliseconds elapsed since the Unix epoch.

    Naive datetimes are read as UTC so the result does not depend on the
    host timezone. A plain date stands for midnight UTC of that day.
    Sub-millisecond precision is truncated toward negative infinity.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=UTC)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=UTC)

    return (value - EPOCH) // ONE_MILLISECOND


def from_epoch_millis(millis: int) -> datetime:
    """
    Build an aware UTC datetime from epoch milliseconds.

    Raises OverflowError when the value falls outside the range
    supported by datetime.
    """
    return EPOCH + timedelta(milliseconds=millis)
