"""
Number Helper
Formatting of sizes, percentages, currencies and deltas
"""
import re
from typing import Union

Numeric = Union[int, float]


class Number:
    """
    Number formatting helper class

    Example:
        Number.to_readable_size(1536)        # '1.5 KB'
        Number.from_readable_size('1.5 KB')  # 1536
        Number.to_percentage(45.5)           # '45.50%'
        Number.format(1234.5, places=2)      # '1,234.50'
        Number.currency(1234.5, 'EUR')       # '€1,234.50'
    """

    SIZE_UNITS = ('Bytes', 'KB', 'MB', 'GB', 'TB')

    CURRENCY_SYMBOLS = {
        'USD': '$',
        'EUR': '€',
        'GBP': '£',
        'JPY': '¥',
    }

    DEFAULT_CURRENCY = 'USD'

    @staticmethod
    def precision(value: Numeric, precision: int = 3) -> str:
        """Fixed number of decimal places"""
        return f'{float(value):.{precision}f}'

    @classmethod
    def to_readable_size(cls, size: Numeric) -> str:
        """
        Human readable byte size (1024 based)

        Example:
            Number.to_readable_size(1)        # '1 Byte'
            Number.to_readable_size(1048576)  # '1 MB'
        """
        size = int(size)
        if size == 1:
            return '1 Byte'
        if size < 1024:
            return f'{size} Bytes'

        value = float(size)
        unit = 0
        while value >= 1024 and unit < len(cls.SIZE_UNITS) - 1:
            value /= 1024
            unit += 1

        formatted = f'{value:.2f}'.rstrip('0').rstrip('.')
        return f'{formatted} {cls.SIZE_UNITS[unit]}'

    @classmethod
    def from_readable_size(cls, size: str, default: Union[int, bool] = False) -> Union[int, bool]:
        """
        Parse a size like '1.5MB' or '10 KB' back to bytes

        Returns default when the string cannot be parsed.
        """
        match = re.fullmatch(r'\s*(\d+(?:\.\d+)?)\s*([KMGT]?B?|Bytes?)\s*', str(size), re.IGNORECASE)
        if not match:
            return default

        amount = float(match.group(1))
        unit = match.group(2).upper()
        exponents = {'': 0, 'B': 0, 'BYTE': 0, 'BYTES': 0, 'K': 1, 'KB': 1, 'M': 2, 'MB': 2,
                     'G': 3, 'GB': 3, 'T': 4, 'TB': 4}
        if unit not in exponents:
            return default
        return int(amount * (1024 ** exponents[unit]))

    @staticmethod
    def to_percentage(value: Numeric, precision: int = 2, multiply: bool = False) -> str:
        """
        Percentage string

        Args:
            multiply: Treat value as a ratio (0.5 -> 50%)
        """
        value = float(value)
        if multiply:
            value *= 100
        return f'{value:.{precision}f}%'

    @staticmethod
    def format(value: Numeric, places: int = 0, before: str = '', after: str = '',
               thousands: str = ',', decimals: str = '.') -> str:
        """
        Group thousands and fix decimal places

        Example:
            Number.format(1234567.891, places=2)  # '1,234,567.89'
        """
        formatted = f'{float(value):,.{places}f}'
        formatted = formatted.replace(',', '\0').replace('.', decimals).replace('\0', thousands)
        return f'{before}{formatted}{after}'

    @classmethod
    def format_delta(cls, value: Numeric, places: int = 0, **options) -> str:
        """Like format() but always signed (+1,200 / -5)"""
        formatted = cls.format(abs(value), places, **options)
        if value > 0:
            return '+' + formatted
        if value < 0:
            return '-' + formatted
        return formatted

    @classmethod
    def currency(cls, value: Numeric, currency: str = None, places: int = 2) -> str:
        """
        Currency amount with symbol (or ISO code when no symbol is known)

        Example:
            Number.currency(-5, 'GBP')  # '-£5.00'
        """
        currency = (currency or cls.DEFAULT_CURRENCY).upper()
        symbol = cls.CURRENCY_SYMBOLS.get(currency)
        amount = cls.format(abs(value), places)
        sign = '-' if value < 0 else ''
        if symbol is None:
            return f'{sign}{amount} {currency}'
        return f'{sign}{symbol}{amount}'
