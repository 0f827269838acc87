"""
Text Extension
Plain text to HTML helpers
"""
import re
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from markupsafe import Markup, escape

from jinjaview.jinja.extension.base import Extension

PAGE_BREAK = '<!-- pagebreak -->'

_URL = re.compile(r'\b((?:https?|ftp)://[^\s<]+[^\s<.,;:!?\)\]\'"])', re.IGNORECASE)
_MAIL = re.compile(r'(?<![\w.+-])([\w.+-]+@[\w-]+(?:\.[\w-]+)+)')


def paragraph(value: Any) -> Markup:
    """
    Blank-line separated blocks wrapped in <p>, single newlines as <br>

    Example:
        {{ post.body|paragraph }}
    """
    if value is None:
        return Markup('')
    text = str(value).replace('\r\n', '\n').strip()
    blocks = [block for block in re.split(r'\n\s*\n', text) if block.strip()]
    rendered = [
        Markup('<p>%s</p>') % Markup('<br>\n').join(escape(row) for row in block.split('\n'))
        for block in blocks
    ]
    return Markup('\n').join(rendered)


def line(value: Any, number: int = 1) -> Optional[str]:
    """The 1-based line of value"""
    if value is None:
        return None
    lines = str(value).splitlines()
    if number < 1 or number > len(lines):
        return None
    return lines[number - 1]


def less(value: Any, replace: str = '...', separator: str = PAGE_BREAK) -> Any:
    """Text before the page break marker, followed by replace"""
    if value is None:
        return None
    text = str(value)
    if separator not in text:
        return value
    return text.split(separator, 1)[0] + replace


def linkify(value: Any, protocols: Sequence[str] = ('http', 'mail'),
            attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """
    Turn URLs (and e-mail addresses with the 'mail' protocol) into links

    Example:
        {{ "see https://cakephp.org"|linkify }}
    """
    if value is None:
        return Markup('')

    extra = ''.join(' %s="%s"' % (escape(name), escape(item)) for name, item in (attributes or {}).items())
    text = str(escape(value))

    if any(protocol in protocols for protocol in ('http', 'https', 'ftp')):
        text = _URL.sub(lambda match: '<a href="%s"%s>%s</a>' % (match.group(1), extra, match.group(1)), text)
    if 'mail' in protocols:
        text = _MAIL.sub(lambda match: '<a href="mailto:%s"%s>%s</a>' % (match.group(1), extra, match.group(1)), text)
    return Markup(text)


class TextExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'paragraph': paragraph,
            'line': line,
            'less': less,
            'linkify': linkify,
        }
