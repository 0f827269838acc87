"""
Inflector Extension
Word inflection filters
"""
from typing import Callable, Dict

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import Inflector


class InflectorExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'pluralize': Inflector.pluralize,
            'singularize': Inflector.singularize,
            'camelize': Inflector.camelize,
            'underscore': Inflector.underscore,
            'humanize': Inflector.humanize,
            'tableize': Inflector.tableize,
            'classify': Inflector.classify,
            'variable': Inflector.variable,
            'slug': Inflector.slug,
            'dasherize': Inflector.dasherize,
        }
