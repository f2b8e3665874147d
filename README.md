# benchtimers

Small timing primitives for benchmark harnesses: CPU time used by the
process and by the current thread, a monotonic high-resolution clock, and
a date-time stamp in RFC 3339 form.

Everything lives in the `benchtimers.timers` module. The package has no
dependencies beyond the standard library.

## Installation

```
pip install benchtimers
```

## Usage

```python
from benchtimers.timers import (
    chrono_clock_now,
    local_date_time_string,
    process_cpu_usage,
    thread_cpu_usage,
)

wall_start = chrono_clock_now()
cpu_start = process_cpu_usage()
thread_start = thread_cpu_usage()

total = sum(i * i for i in range(1_000_000))

print("real:", chrono_clock_now() - wall_start, "s")
print("cpu (process):", process_cpu_usage() - cpu_start, "s")
print("cpu (thread):", thread_cpu_usage() - thread_start, "s")
print("run on", local_date_time_string())
```

Formatting a given moment:

```python
from datetime import datetime, timedelta, timezone
from benchtimers.timers import format_rfc3339

tz = timezone(timedelta(hours=-3, minutes=-30))
format_rfc3339(datetime(2024, 5, 17, 8, 9, 10, 500000, tzinfo=tz))
# '2024-05-17T08:09:10-03:30'
```

### Functions

- `process_cpu_usage()`: user plus system CPU seconds used by the whole
  process so far, as a float.
- `thread_cpu_usage()`: user plus system CPU seconds used by the calling
  thread so far. Where the platform offers no per-thread accounting, the
  process figure is returned instead.
- `chrono_clock_now()`: seconds from a steady, high-resolution clock.
  Its origin is not fixed, so only differences between readings mean
  anything.
- `format_rfc3339(moment)`: formats a `datetime` as
  `YYYY-MM-DDTHH:MM:SS+HH:MM`, dropping fractional seconds. An aware
  value is written with its own offset. A naive value has no known
  offset: it is taken as local time, converted to UTC and written with
  the `-00:00` "unknown offset" suffix. Anything other than a `datetime`
  raises `TypeError`.
- `local_date_time_string()`: the current local time, to the second,
  formatted by `format_rfc3339` with the local UTC offset. If the local
  offset cannot be determined, the `-00:00` form is used.

### Errors

`TimerError` (a subclass of `RuntimeError`) is raised when the operating
system refuses to report CPU time, or when `format_rfc3339` cannot
convert a naive datetime to UTC.

## Running the tests

```
pip install -e ".[test]"
pytest
```