"""CPU and wall-clock timers plus an RFC 3339 local timestamp."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

__all__ = [
    "TimerError",
    "process_cpu_usage",
    "thread_cpu_usage",
    "chrono_clock_now",
    "format_rfc3339",
    "local_date_time_string",
]

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
_UNKNOWN_OFFSET = "-00:00"


class TimerError(RuntimeError):
    """Raised when the operating system cannot report a clock value."""


def process_cpu_usage() -> float:
    """Return the user plus system CPU time of the current process, in seconds."""
    try:
        return float(time.process_time())
    except OSError as exc:
        raise TimerError(f"process CPU time query failed: {exc}") from exc


def thread_cpu_usage() -> float:
    """Return the user plus system CPU time of the current thread, in seconds.

    Platforms without per-thread timing report the process CPU time instead.
    """
    thread_time = getattr(time, "thread_time", None)
    if thread_time is None:
        return process_cpu_usage()
    try:
        return float(thread_time())
    except OSError as exc:
        raise TimerError(f"thread CPU time query failed: {exc}") from exc


def chrono_clock_now() -> float:
    """Return a reading of the steady high-resolution clock, in seconds.

    Only differences between readings are meaningful.
    """
    return time.perf_counter()


def _format_offset(offset: timedelta) -> str:
    total_seconds = int(offset.total_seconds())
    sign = "-" if total_seconds < 0 else "+"
    minutes = abs(total_seconds) // 60
    hours, minutes = divmod(minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _format_timestamp(moment: datetime) -> str:
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def format_rfc3339(moment: datetime) -> str:
    """Format *moment* as ``yyyy-mm-ddTHH:MM:SS+HH:MM``.

    Fractional seconds are dropped. When the offset from UTC is unknown
    (a naive datetime), the moment is taken as local time, converted to
    UTC and written with the ``-00:00`` offset, as RFC 3339 specifies.
    """
    if not isinstance(moment, datetime):
        raise TypeError(f"expected a datetime, got {type(moment).__name__}")
    offset = moment.utcoffset()
    if offset is None:
        try:
            utc_moment = moment.astimezone(timezone.utc)
        except (OSError, OverflowError, ValueError) as exc:
            raise TimerError(f"cannot convert {moment!r} to UTC: {exc}") from exc
        return _format_timestamp(utc_moment) + _UNKNOWN_OFFSET
    return _format_timestamp(moment) + _format_offset(offset)


def local_date_time_string() -> str:
    """Return the current local time in RFC 3339 form."""
    now = datetime.now().replace(microsecond=0)
    try:
        local = now.astimezone()
    except (OSError, OverflowError, ValueError):
        return format_rfc3339(now)
    return format_rfc3339(local)