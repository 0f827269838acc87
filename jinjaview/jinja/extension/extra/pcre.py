"""
PCRE Extension
Regular expression filters accepting delimited patterns (e.g. '/^foo/i')
"""
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Pattern

from jinjaview.exceptions import ViewException
from jinjaview.jinja.extension.base import Extension

CLOSING_DELIMITERS = {'(': ')', '{': '}', '[': ']', '<': '>'}

MODIFIERS = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
    'u': 0,
}

_BACKREFERENCE = re.compile(r'\$\{(\d+)\}|\$(\d+)|\\(\d+)')


def compile_pattern(pattern: str) -> Pattern:
    """
    Compile a delimited pattern into a Python regex

    A pattern whose first character is alphanumeric or a backslash is used
    as-is.

    Raises:
        ViewException: Unterminated pattern or unsupported modifier
    """
    if not pattern or pattern[0].isalnum() or pattern[0] in '\\ ':
        return re.compile(pattern)

    opening = pattern[0]
    closing = CLOSING_DELIMITERS.get(opening, opening)
    end = pattern.rfind(closing)
    if end <= 0:
        raise ViewException(f"No ending delimiter `{closing}` found in pattern `{pattern}`.")

    flags = 0
    for modifier in pattern[end + 1:]:
        if modifier not in MODIFIERS:
            raise ViewException(f"Unknown modifier `{modifier}` in pattern `{pattern}`.")
        flags |= MODIFIERS[modifier]
    return re.compile(pattern[1:end], flags)


def convert_replacement(replacement: str) -> str:
    """$1, ${1} and \\1 style references become \\g<1>"""
    return _BACKREFERENCE.sub(
        lambda match: '\\g<%s>' % (match.group(1) or match.group(2) or match.group(3)),
        replacement,
    )


def preg_quote(value: Any, delimiter: Optional[str] = None) -> str:
    quoted = re.escape(str(value))
    if delimiter and delimiter not in '\\':
        quoted = quoted.replace(delimiter, '\\' + delimiter)
    return quoted


def preg_match(value: Any, pattern: str) -> bool:
    if value is None:
        return False
    return compile_pattern(pattern).search(str(value)) is not None


def preg_get(value: Any, pattern: str, group: Any = 0) -> Optional[str]:
    if value is None:
        return None
    match = compile_pattern(pattern).search(str(value))
    return match.group(group) if match else None


def preg_get_all(value: Any, pattern: str, group: Any = 0) -> List[str]:
    if value is None:
        return []
    return [match.group(group) for match in compile_pattern(pattern).finditer(str(value))]


def preg_grep(values: Iterable[Any], pattern: str, flags: str = '') -> List[Any]:
    """Items matching pattern (or not matching, with flags='invert')"""
    regex = compile_pattern(pattern)
    invert = flags == 'invert'
    return [item for item in values if (regex.search(str(item)) is not None) != invert]


def preg_replace(value: Any, pattern: str, replacement: str = '', limit: int = -1) -> Any:
    if value is None:
        return None
    regex = compile_pattern(pattern)
    count = 0 if limit < 0 else limit
    if isinstance(value, (list, tuple)):
        return [regex.sub(convert_replacement(replacement), str(item), count=count) for item in value]
    return regex.sub(convert_replacement(replacement), str(value), count=count)


def preg_filter(values: Any, pattern: str, replacement: str = '', limit: int = -1) -> Any:
    """Like preg_replace, but only matching items are kept"""
    regex = compile_pattern(pattern)
    if isinstance(values, (list, tuple)):
        matching = [item for item in values if regex.search(str(item))]
        return preg_replace(matching, pattern, replacement, limit)
    if values is None or not regex.search(str(values)):
        return None
    return preg_replace(values, pattern, replacement, limit)


def preg_split(value: Any, pattern: str) -> List[str]:
    if value is None:
        return []
    return compile_pattern(pattern).split(str(value))


class PcreExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'preg_quote': preg_quote,
            'preg_match': preg_match,
            'preg_get': preg_get,
            'preg_get_all': preg_get_all,
            'preg_grep': preg_grep,
            'preg_replace': preg_replace,
            'preg_filter': preg_filter,
            'preg_split': preg_split,
        }
