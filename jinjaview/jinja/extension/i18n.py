"""
I18n Extension
Translation functions for templates
"""
from typing import Callable, Dict

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import i18n

# Built at module level: inside a class body the dunder-prefixed names would be mangled
TRANSLATION_FUNCTIONS: Dict[str, Callable] = {
    '__': i18n.__,
    '__n': i18n.__n,
    '__d': i18n.__d,
    '__dn': i18n.__dn,
    '__x': i18n.__x,
    '__xn': i18n.__xn,
    '__dx': i18n.__dx,
    '__dxn': i18n.__dxn,
}


class I18nExtension(Extension):

    def get_functions(self) -> Dict[str, Callable]:
        return dict(TRANSLATION_FUNCTIONS)
