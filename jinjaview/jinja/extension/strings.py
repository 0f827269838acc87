"""
Strings Extension
Text manipulation filters
"""
from typing import Callable, Dict

from markupsafe import Markup, escape

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import Str


def highlight(value: str, phrase: str, format: str = '<span class="highlight">\\1</span>') -> Markup:
    """Highlight phrase in escaped text; only the wrapper markup is trusted"""
    return Markup(Str.highlight(str(escape(value)), str(escape(phrase)), format))


class StringsExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'substr': Str.substr,
            'tokenize': Str.tokenize,
            'insert': Str.insert,
            'wrap': Str.wrap,
            'excerpt': Str.excerpt,
            'to_list': Str.to_list,
            'is_multibyte': Str.is_multibyte,
            'utf8': Str.utf8,
            'ascii': Str.ascii,
            'truncate': Str.truncate,
            'tail': Str.tail,
            'highlight': highlight,
            'str_replace': lambda value, search, replace: str(value).replace(search, replace),
        }

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'uuid': Str.uuid,
        }
