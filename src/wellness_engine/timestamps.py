"""
Timestamp resolution for heterogeneous activity records.

Records reach the engine from several sources and carry their instant
under different field names and in different shapes:

- a framework timestamp object exposing a conversion method
  (``to_datetime()``, ``ToDatetime()`` or ``toDate()``); a naive result
  of such a method is read as UTC
- a raw ``datetime`` (or ``date``)
- a primitive: epoch milliseconds, an ISO-8601 string, or a serialized
  Firestore timestamp mapping (``seconds``/``nanoseconds``)

``resolve_instant`` probes the candidate fields in priority order and
each shape in the order above. It never raises; an unresolvable record
yields ``None`` and is left out of any time-windowed aggregation.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

MOOD_FIELDS = ("date_time",)
SESSION_FIELDS = ("timestamp", "startTime")
JOURNAL_FIELDS = ("date_time",)
ASSESSMENT_FIELDS = ("submit_time", "created_at")
ACTIVITY_FIELDS = ("timestamp", "date_time", "submit_time")

_CONVERSION_METHODS = ("to_datetime", "ToDatetime", "toDate")

_MISSING = object()


def get_field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a mapping or an attribute-style record."""
    if record is None:
        return default
    if isinstance(record, dict):
        return record.get(name, default)
    getter = getattr(record, "get", None)
    if callable(getter) and not hasattr(record, name):
        try:
            return getter(name, default)
        except (TypeError, KeyError):
            return default
    return getattr(record, name, default)


def _from_epoch_ms(value: float) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _from_serialized(value: dict) -> Optional[datetime]:
    seconds = value.get("seconds", value.get("_seconds", _MISSING))
    if seconds is _MISSING or isinstance(seconds, bool):
        return None
    nanos = value.get("nanoseconds", value.get("_nanoseconds", 0)) or 0
    try:
        return datetime.fromtimestamp(float(seconds) + float(nanos) / 1e9, tz=timezone.utc)
    except (TypeError, OverflowError, OSError, ValueError):
        return None


def _from_string(value: str) -> Optional[datetime]:
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _coerce(value: Any) -> Optional[datetime]:
    """Convert one raw value to a datetime, or None if the shape is unsupported."""
    # 1. Framework timestamp object
    for method_name in _CONVERSION_METHODS:
        method = getattr(value, method_name, None)
        if callable(method):
            try:
                converted = method()
            except Exception as e:  # third-party conversion; treat as unresolvable
                logger.debug(f"[TIMESTAMPS] {method_name}() failed: {e}")
                return None
            if not isinstance(converted, datetime):
                return None
            # protobuf ToDatetime() and friends return naive UTC
            if converted.tzinfo is None:
                converted = converted.replace(tzinfo=timezone.utc)
            return converted

    # 2. Raw date/datetime
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    # 3. Primitives
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return None
        return _from_epoch_ms(value)
    if isinstance(value, str):
        return _from_string(value)
    if isinstance(value, dict):
        return _from_serialized(value)

    return None


def align(instant: datetime, tz: Optional[tzinfo]) -> datetime:
    """
    Express an instant in the reference timezone.

    Aware instants are converted; naive instants are assumed to already
    be in the reference zone. With a naive reference, aware instants are
    converted to local time and made naive.
    """
    if tz is None:
        if instant.tzinfo is None:
            return instant
        return instant.astimezone().replace(tzinfo=None)
    if instant.tzinfo is None:
        return instant.replace(tzinfo=tz)
    return instant.astimezone(tz)


def resolve_instant(
    record: Any,
    fields: Sequence[str],
    tz: Optional[tzinfo] = None,
) -> Optional[datetime]:
    """
    Resolve the instant of a record.

    Args:
        record: Mapping or attribute-style record
        fields: Candidate field names in priority order
        tz: Reference timezone (usually ``now.tzinfo``)

    Returns:
        The resolved datetime aligned to ``tz``, or None if no field
        holds a usable value
    """
    for name in fields:
        value = get_field(record, name)
        if value is None:
            continue
        instant = _coerce(value)
        if instant is None:
            continue
        try:
            return align(instant, tz)
        except (OverflowError, OSError, ValueError):
            continue

    logger.debug(f"[TIMESTAMPS] Unresolvable record (fields={list(fields)})")
    return None


def resolved_instants(
    records: Iterable[Any],
    fields: Sequence[str],
    tz: Optional[tzinfo] = None,
) -> list[datetime]:
    """Resolve every record, dropping the ones without a usable instant."""
    instants = []
    for record in records:
        instant = resolve_instant(record, fields, tz)
        if instant is not None:
            instants.append(instant)
    return instants


def within(instant: datetime, start: datetime, end: datetime, include_end: bool = True) -> bool:
    """Whether ``instant`` falls in ``[start, end]`` (or ``[start, end)``)."""
    if instant < start:
        return False
    return instant <= end if include_end else instant < end


def count_within(
    records: Iterable[Any],
    fields: Sequence[str],
    now: datetime,
    days: int,
) -> int:
    """Count records whose instant lies in ``[now - days, now]``."""
    start = now - timedelta(days=days)
    return sum(
        1 for instant in resolved_instants(records, fields, now.tzinfo)
        if within(instant, start, now)
    )
