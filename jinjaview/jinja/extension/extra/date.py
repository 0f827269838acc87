"""
Date Extension
Locale style date formatting, ages and durations
"""
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional, Sequence

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import Time

DATE_FORMATS = {
    'short': '%m/%d/%y',
    'medium': '%b %d, %Y',
    'long': '%B %d, %Y',
    'full': '%A, %B %d, %Y',
}

TIME_FORMATS = {
    'short': '%H:%M',
    'medium': '%H:%M:%S',
    'long': '%H:%M:%S %Z',
    'full': '%H:%M:%S %Z',
}

# Seconds per unit, largest first
DURATION_UNITS = (
    ('y', 31536000),
    ('w', 604800),
    ('d', 86400),
    ('h', 3600),
    ('m', 60),
    ('s', 1),
)


def _format(value: Any, formats: Dict[str, str], format: str, timezone: Optional[str]) -> Optional[str]:
    if value is None or value == '':
        return None
    moment = Time.parse(value, timezone)
    return moment.strftime(formats.get(format, format))


def localdate(value: Any, format: str = 'short', timezone: Optional[str] = None) -> Optional[str]:
    """
    Example:
        {{ article.created|localdate('long') }}  -> "March 14, 2024"
    """
    return _format(value, DATE_FORMATS, format, timezone)


def localtime(value: Any, format: str = 'short', timezone: Optional[str] = None) -> Optional[str]:
    return _format(value, TIME_FORMATS, format, timezone)


def localdatetime(value: Any, date_format: str = 'short', time_format: str = 'short',
                  timezone: Optional[str] = None) -> Optional[str]:
    if value is None or value == '':
        return None
    pattern = '%s %s' % (DATE_FORMATS.get(date_format, date_format), TIME_FORMATS.get(time_format, time_format))
    return Time.parse(value, timezone).strftime(pattern)


def age(value: Any) -> Optional[int]:
    """Whole years between value and today"""
    if value is None or value == '':
        return None
    born = Time.parse(value)
    born_date = born.date() if isinstance(born, datetime) else born
    today = date.today()
    years = today.year - born_date.year
    if (today.month, today.day) < (born_date.month, born_date.day):
        years -= 1
    return years


def duration(value: Any, units: Optional[Sequence[str]] = None, separator: str = ' ') -> Optional[str]:
    """
    Seconds as a compact duration

    Example:
        {{ 3700|duration }}  -> "1h 1m 40s"
    """
    if value is None or value == '':
        return None

    allowed = set(units) if units is not None else {unit for unit, _ in DURATION_UNITS}
    remaining = int(value)
    parts = []
    for unit, seconds in DURATION_UNITS:
        if unit not in allowed or remaining < seconds:
            continue
        amount, remaining = divmod(remaining, seconds)
        parts.append(f'{amount}{unit}')

    if not parts:
        smallest = next((unit for unit, _ in reversed(DURATION_UNITS) if unit in allowed), 's')
        return f'0{smallest}'
    return separator.join(parts)


class DateExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'localdate': localdate,
            'localtime': localtime,
            'localdatetime': localdatetime,
            'age': age,
            'duration': duration,
        }
