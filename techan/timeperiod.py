"""Time periods with a start and an end, plus parsing of period strings."""

import re
from dataclasses import dataclass
from datetime import datetime, timezone

SIMPLE_DATE_TIME_FORMAT = "%m/%d/%YT%H:%M:%S"
SIMPLE_DATE_FORMAT = "%m/%d/%Y"
SIMPLE_TIME_FORMAT = "%H:%M:%S"
SIMPLE_DATE_FORMAT_V2 = "%Y-%m-%d"
ISO_DATE_TIME_FORMAT = f"{SIMPLE_DATE_FORMAT_V2}T{SIMPLE_TIME_FORMAT}"

SIMPLE_TIME_FORMAT_REGEX = re.compile(r"T\d{2}:\d{2}:\d{2}")
SIMPLE_DATE_FORMAT_V2_REGEX = re.compile(r"\d{4}-\d{2}-\d{2}")

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

# Rendered widths of SIMPLE_DATE_TIME_FORMAT and SIMPLE_DATE_FORMAT.
_LEGACY_LAYOUTS = ((SIMPLE_DATE_TIME_FORMAT, 19), (SIMPLE_DATE_FORMAT, 10))


@dataclass(frozen=True)
class TimePeriod:
    """A span of time from ``start`` to ``end``."""

    start: datetime
    end: datetime

    def astimezone(self, tz):
        """Return a copy with both ends converted to ``tz``."""
        return TimePeriod(self.start.astimezone(tz), self.end.astimezone(tz))

    def utc(self):
        """Return a copy with both ends converted to UTC."""
        return self.astimezone(timezone.utc)

    def length(self):
        """Return the duration of the period."""
        return self.end - self.start

    def since(self, other):
        """Return the time elapsed between the end of ``other`` and the start of this period."""
        return self.start - other.end

    def format(self, layout):
        """Render the period as ``"<start> -> <end>"`` using a strftime layout."""
        return f"{self.start.strftime(layout)} -> {self.end.strftime(layout)}"

    def advance(self, iterations):
        """Return the period shifted by ``iterations`` of its own length."""
        shift = self.length() * iterations
        return TimePeriod(self.start + shift, self.end + shift)

    def __str__(self):
        return self.format(ISO_DATE_TIME_FORMAT)


def new_time_period(start, duration):
    """Return a period that starts at ``start`` and lasts ``duration``."""
    return TimePeriod(start, start + duration)


def _parse_utc(text, layout):
    try:
        return datetime.strptime(text, layout).replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise ValueError(f"could not parse time string {text}") from exc


def parse_time_period(period):
    """Parse up to two ``yyyy-mm-dd[Thh:mm:ss]`` datetimes from a string.

    Any separator may stand between them. Without a second datetime the
    period ends now.
    """
    pending_times = list(SIMPLE_TIME_FORMAT_REGEX.finditer(period))
    times = []
    for date_match in SIMPLE_DATE_FORMAT_V2_REGEX.finditer(period):
        text, layout = date_match.group(), SIMPLE_DATE_FORMAT_V2
        if pending_times and pending_times[0].start() == date_match.end():
            text += pending_times.pop(0).group()
            layout = ISO_DATE_TIME_FORMAT
        times.append(_parse_utc(text, layout))

    if len(times) > 2:
        raise ValueError(f"too many datetimes in time period {period}")

    start = times[0] if times else ZERO_TIME
    end = times[1] if len(times) == 2 and times[1] != ZERO_TIME else datetime.now(timezone.utc)
    return TimePeriod(start, end)


def parse(timerange):
    """Parse ``mm/dd/yyyy[Thh:mm:ss]`` start and optional end joined by one separator.

    Prefer :func:`parse_time_period`. Without an end the period ends now.
    """
    for layout, width in _LEGACY_LAYOUTS:
        if len(timerange) in (2 * width + 1, width + 1):
            break
    else:
        raise ValueError(f"could not parse timerange string {timerange}")

    start = _parse_utc(timerange[:width], layout)
    end_text = timerange[width + 1 :]
    end = _parse_utc(end_text, layout) if end_text else datetime.now(timezone.utc)
    return TimePeriod(start, end)