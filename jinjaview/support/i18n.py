"""
Internationalization
gettext backed message lookup with domain and context support

Messages use positional {0} placeholders (or {name} when a single dict is
passed), formatted after translation.
"""
import gettext
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from jinjaview.support.storage import Storage


class I18n:
    """
    Translation catalog registry

    Catalogs are standard compiled gettext files:
        resources/locales/<locale>/LC_MESSAGES/<domain>.mo

    Example:
        I18n.set_locale('fr_FR')
        __('Hello {0}', 'Ada')
        __d('blog', 'Read more')
    """

    DEFAULT_DOMAIN = 'default'
    DEFAULT_LOCALE = 'en_US'

    _locale: str = DEFAULT_LOCALE
    _locale_path: Optional[Path] = None
    _translators: Dict[Tuple[str, str], gettext.NullTranslations] = {}

    @classmethod
    def set_locale(cls, locale: str):
        cls._locale = locale

    @classmethod
    def get_locale(cls) -> str:
        return cls._locale

    @classmethod
    def set_locale_path(cls, path: Union[str, Path]):
        cls._locale_path = Path(path)
        cls._translators.clear()

    @classmethod
    def locale_path(cls) -> Path:
        return cls._locale_path or Storage.resources('locales')

    @classmethod
    def set_translator(cls, domain: str, translator: gettext.NullTranslations, locale: Optional[str] = None):
        """Register a ready-made catalog (bypasses .mo lookup)"""
        cls._translators[(domain, locale or cls._locale)] = translator

    @classmethod
    def translator(cls, domain: Optional[str] = None) -> gettext.NullTranslations:
        domain = domain or cls.DEFAULT_DOMAIN
        key = (domain, cls._locale)
        if key not in cls._translators:
            cls._translators[key] = gettext.translation(
                domain,
                localedir=str(cls.locale_path()),
                languages=[cls._locale],
                fallback=True,
            )
        return cls._translators[key]

    @classmethod
    def clear(cls):
        cls._translators.clear()
        cls._locale = cls.DEFAULT_LOCALE
        cls._locale_path = None


def _format(message: str, args: Tuple[Any, ...]) -> str:
    if not args:
        return message
    if len(args) == 1 and isinstance(args[0], dict):
        return message.format(**args[0])
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return message.format(*args[0])
    return message.format(*args)


def __(singular: str, *args: Any) -> str:
    """Translate a message in the default domain"""
    if not singular:
        return ''
    return _format(I18n.translator().gettext(singular), args)


def __n(singular: str, plural: str, count: int, *args: Any) -> str:
    """Plural-aware translation in the default domain"""
    if not singular:
        return ''
    return _format(I18n.translator().ngettext(singular, plural, count), args)


def __d(domain: str, msg: str, *args: Any) -> str:
    """Translate a message in a specific domain"""
    if not msg:
        return ''
    return _format(I18n.translator(domain).gettext(msg), args)


def __dn(domain: str, singular: str, plural: str, count: int, *args: Any) -> str:
    """Plural-aware translation in a specific domain"""
    if not singular:
        return ''
    return _format(I18n.translator(domain).ngettext(singular, plural, count), args)


def __x(context: str, singular: str, *args: Any) -> str:
    """Translate a message disambiguated by context"""
    if not singular:
        return ''
    return _format(I18n.translator().pgettext(context, singular), args)


def __xn(context: str, singular: str, plural: str, count: int, *args: Any) -> str:
    """Plural-aware translation disambiguated by context"""
    if not singular:
        return ''
    return _format(I18n.translator().npgettext(context, singular, plural, count), args)


def __dx(domain: str, context: str, msg: str, *args: Any) -> str:
    """Translate in a specific domain, disambiguated by context"""
    if not msg:
        return ''
    return _format(I18n.translator(domain).pgettext(context, msg), args)


def __dxn(domain: str, context: str, singular: str, plural: str, count: int, *args: Any) -> str:
    """Plural-aware translation in a domain, disambiguated by context"""
    if not singular:
        return ''
    return _format(I18n.translator(domain).npgettext(context, singular, plural, count), args)
