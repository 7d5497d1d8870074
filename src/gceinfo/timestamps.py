import re
from datetime import datetime, timedelta, timezone

from pydantic import TypeAdapter, ValidationError

from .core import TIMESTAMP_PRECISION
from .errors import MalformedWireDataError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)

# Reusable, stateless validator for RFC 3339 / ISO-8601 strings.
_DATETIME_ADAPTER: TypeAdapter[datetime] = TypeAdapter(datetime)

# date T time, optional fraction and offset. pydantic alone would also take
# unix seconds, bare dates and space separated date-times.
_ISO_DATETIME = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}"
    r"(?:\.[0-9]+)?(?:Z|[+-][0-9]{2}:[0-9]{2})?"
)


def parse_timestamp(text: str) -> int:
    """
    Parses an ISO-8601 date-time string into milliseconds since epoch.
    Strings without an offset are read as UTC.
    """
    if not isinstance(text, str):
        raise MalformedWireDataError(f"Timestamp must be a string, got {text!r}")
    if _ISO_DATETIME.fullmatch(text) is None:
        raise MalformedWireDataError(f"{text!r} is not an ISO-8601 date-time")
    try:
        parsed = _DATETIME_ADAPTER.validate_python(text)
    except ValidationError as e:
        raise MalformedWireDataError(f"Malformed timestamp {text!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - EPOCH) // _ONE_MILLISECOND


def format_timestamp(millis: int) -> str:
    """Renders milliseconds since epoch as an ISO-8601 string in UTC."""
    moment = EPOCH + timedelta(milliseconds=millis)
    return moment.isoformat(timespec=TIMESTAMP_PRECISION)
