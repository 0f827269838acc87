"""
Additional filter bundles (dates, arrays, regular expressions, text)
"""
from jinjaview.jinja.extension.extra.array import ArrayExtension
from jinjaview.jinja.extension.extra.date import DateExtension
from jinjaview.jinja.extension.extra.pcre import PcreExtension
from jinjaview.jinja.extension.extra.text import TextExtension

__all__ = [
    'ArrayExtension',
    'DateExtension',
    'PcreExtension',
    'TextExtension',
]
