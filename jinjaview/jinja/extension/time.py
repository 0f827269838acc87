"""
Time Extension
Datetime construction and formatting
"""
from typing import Callable, Dict

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import Time


class TimeExtension(Extension):

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'time': Time.parse,
            'timezones': Time.timezones,
        }

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'nice': Time.nice,
            'time_ago_in_words': Time.time_ago_in_words,
        }
