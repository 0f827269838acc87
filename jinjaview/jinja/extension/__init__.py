"""
Template function, filter and test providers
"""
from jinjaview.jinja.extension.base import Extension
from jinjaview.jinja.extension.arrays import ArraysExtension
from jinjaview.jinja.extension.basic import BasicExtension
from jinjaview.jinja.extension.configure import ConfigureExtension
from jinjaview.jinja.extension.debug import DebugExtension
from jinjaview.jinja.extension.i18n import I18nExtension
from jinjaview.jinja.extension.inflector import InflectorExtension
from jinjaview.jinja.extension.markdown import MarkdownExtension
from jinjaview.jinja.extension.number import NumberExtension
from jinjaview.jinja.extension.profiler import ProfilerExtension
from jinjaview.jinja.extension.string_loader import StringLoaderExtension
from jinjaview.jinja.extension.strings import StringsExtension
from jinjaview.jinja.extension.time import TimeExtension
from jinjaview.jinja.extension.utils import UtilsExtension
from jinjaview.jinja.extension.view import ViewExtension
from jinjaview.jinja.extension.extra import ArrayExtension, DateExtension, PcreExtension, TextExtension

__all__ = [
    'Extension',
    'ArraysExtension',
    'BasicExtension',
    'ConfigureExtension',
    'DebugExtension',
    'I18nExtension',
    'InflectorExtension',
    'MarkdownExtension',
    'NumberExtension',
    'ProfilerExtension',
    'StringLoaderExtension',
    'StringsExtension',
    'TimeExtension',
    'UtilsExtension',
    'ViewExtension',
    'ArrayExtension',
    'DateExtension',
    'PcreExtension',
    'TextExtension',
]
