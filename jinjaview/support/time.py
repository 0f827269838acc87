"""
Time Helper
Timezone aware datetime construction and formatting
"""
from datetime import datetime, date, timezone
from typing import List, Optional, Union
from zoneinfo import ZoneInfo, available_timezones

TimeValue = Union[datetime, date, int, float, str, None]


class Time:
    """
    Time helper class

    Example:
        Time.parse('2024-01-31 10:00', 'Europe/Amsterdam')
        Time.nice(Time.parse('2024-01-31 10:00'))  # 'Jan 31, 2024, 10:00 AM'
        Time.time_ago_in_words(Time.now().replace(year=2020))
    """

    NICE_FORMAT = '%b %d, %Y, %I:%M %p'

    @staticmethod
    def _zone(tz: Union[str, timezone, ZoneInfo, None]):
        if tz is None:
            return timezone.utc
        if isinstance(tz, str):
            return ZoneInfo(tz)
        return tz

    @classmethod
    def now(cls, tz: Optional[str] = None) -> datetime:
        return datetime.now(cls._zone(tz))

    @classmethod
    def parse(cls, value: TimeValue = None, tz: Optional[str] = None) -> datetime:
        """
        Build an aware datetime from a datetime, date, timestamp or ISO string

        Naive values are taken to be in tz (UTC when tz is None).
        """
        zone = cls._zone(tz)

        if value is None or value == 'now':
            return datetime.now(zone)
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, (int, float)):
            return datetime.fromtimestamp(value, zone)
        else:
            parsed = datetime.fromisoformat(str(value))

        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=zone)
        return parsed.astimezone(zone) if tz is not None else parsed

    @classmethod
    def nice(cls, value: TimeValue = None, tz: Optional[str] = None, format: str = None) -> str:
        return cls.parse(value, tz).strftime(format or cls.NICE_FORMAT)

    @classmethod
    def time_ago_in_words(cls, value: TimeValue, now: TimeValue = None) -> str:
        """
        Relative description of a moment against now

        Example:
            '3 days ago', 'in 2 hours', 'just now'
        """
        moment = cls.parse(value)
        reference = cls.parse(now)
        seconds = int((reference - moment).total_seconds())
        future = seconds < 0
        seconds = abs(seconds)

        if seconds < 60:
            return 'just now'

        for unit, size in (('year', 31536000), ('month', 2592000), ('week', 604800),
                           ('day', 86400), ('hour', 3600), ('minute', 60)):
            if seconds >= size:
                count = seconds // size
                words = f"{count} {unit}{'s' if count != 1 else ''}"
                return f'in {words}' if future else f'{words} ago'

        return 'just now'

    @staticmethod
    def timezones() -> List[str]:
        """Sorted list of IANA timezone identifiers"""
        return sorted(available_timezones())
