"""
Number Extension
Size, percentage, currency and grouping filters
"""
from typing import Callable, Dict

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import Number


class NumberExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'to_readable_size': Number.to_readable_size,
            'from_readable_size': Number.from_readable_size,
            'to_percentage': Number.to_percentage,
            'number_format': Number.format,
            'format_delta': Number.format_delta,
            'currency': Number.currency,
            'precision': Number.precision,
        }
