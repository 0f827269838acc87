"""
String Helper Functions
Laravel-style string manipulation utilities
"""
import re
import textwrap
import unicodedata
import uuid as uuid_lib
from typing import Any, Dict, List, Optional, Sequence


class Str:
    """
    String manipulation helper class (Laravel-style)

    Provides static methods for common string operations:
    - case conversion (snake, camel, studly, kebab, title)
    - slug generation
    - truncation (truncate, tail, excerpt)
    - formatting (insert, wrap, to_list, highlight)
    """

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake_case

        Example:
            Str.snake('FrameworkApp')  # 'framework_app'
            Str.snake('frameworkApp')  # 'framework_app'
        """
        if not value:
            return value

        value = value.replace(' ', delimiter)

        # Insert delimiter before uppercase letters
        value = re.sub('(.)([A-Z][a-z]+)', r'\1' + delimiter + r'\2', value)
        value = re.sub('([a-z0-9])([A-Z])', r'\1' + delimiter + r'\2', value)

        value = value.lower()
        value = re.sub(f'{re.escape(delimiter)}+', delimiter, value)

        return value.strip(delimiter)

    @staticmethod
    def camel(value: str) -> str:
        """
        Convert a string to camelCase

        Example:
            Str.camel('framework_app')  # 'frameworkApp'
        """
        if not value:
            return value

        studly = Str.studly(value)
        return studly[0].lower() + studly[1:] if studly else ''

    @staticmethod
    def studly(value: str) -> str:
        """
        Convert a string to StudlyCase (PascalCase)

        Example:
            Str.studly('framework_app')  # 'FrameworkApp'
        """
        if not value:
            return value

        value = value.replace('_', ' ').replace('-', ' ')
        return ''.join(word[0].upper() + word[1:] for word in value.split())

    @staticmethod
    def slug(value: str, separator: str = '-') -> str:
        """
        Generate a URL-friendly slug from a string

        Example:
            Str.slug('Framework App!')  # 'framework-app'
            Str.slug('Hello World', '_')  # 'hello_world'
        """
        if not value:
            return value

        value = Str.ascii(value).lower()
        value = re.sub(r'[^a-z0-9\s_-]', '', value)
        value = re.sub(r'[\s_-]+', separator, value)

        return value.strip(separator)

    @staticmethod
    def kebab(value: str) -> str:
        """
        Convert a string to kebab-case

        Example:
            Str.kebab('FrameworkApp')  # 'framework-app'
        """
        return Str.snake(value, '-')

    @staticmethod
    def title(value: str) -> str:
        """
        Convert a string to Title Case

        Example:
            Str.title('framework_app')  # 'Framework App'
        """
        if not value:
            return value

        value = value.replace('_', ' ').replace('-', ' ')
        return value.title()

    @staticmethod
    def ascii(value: str) -> str:
        """Transliterate to ASCII by dropping combining marks"""
        normalized = unicodedata.normalize('NFKD', value)
        return normalized.encode('ascii', 'ignore').decode('ascii')

    @staticmethod
    def is_multibyte(value: str) -> bool:
        """True if any character is outside the ASCII range"""
        return any(ord(char) > 127 for char in value)

    @staticmethod
    def utf8(value: str) -> List[int]:
        """Code points of each character"""
        return [ord(char) for char in value]

    @staticmethod
    def uuid() -> str:
        """Random RFC 4122 v4 UUID"""
        return str(uuid_lib.uuid4())

    @staticmethod
    def substr(value: str, start: int, length: Optional[int] = None) -> str:
        """Substring starting at start (negative counts from the end)"""
        if length is None:
            return value[start:]
        if length < 0:
            return value[start:length]
        end = start + length
        if start < 0 and end >= 0:
            return value[start:]
        return value[start:end]

    @staticmethod
    def truncate(value: str, length: int = 100, ellipsis: str = '...', exact: bool = True) -> str:
        """
        Truncate to at most length characters, ellipsis included

        Example:
            Str.truncate('The quick brown fox', 12)               # 'The quick...'
            Str.truncate('The quick brown fox', 12, exact=False)  # 'The...'
        """
        if len(value) <= length:
            return value

        keep = max(length - len(ellipsis), 0)
        truncated = value[:keep]
        if not exact and ' ' in truncated:
            truncated = truncated[:truncated.rindex(' ')]
        return truncated.rstrip() + ellipsis

    @staticmethod
    def tail(value: str, length: int = 100, ellipsis: str = '...', exact: bool = True) -> str:
        """
        Keep the last length characters, ellipsis included

        Example:
            Str.tail('The quick brown fox', 10)  # '...own fox'
        """
        if len(value) <= length:
            return value

        keep = max(length - len(ellipsis), 0)
        truncated = value[len(value) - keep:] if keep else ''
        if not exact and ' ' in truncated:
            truncated = truncated[truncated.index(' ') + 1:]
        return ellipsis + truncated

    @staticmethod
    def excerpt(value: str, phrase: str, radius: int = 100, ellipsis: str = '...') -> str:
        """
        Extract the text around the first case-insensitive match of phrase

        Example:
            Str.excerpt('The quick brown fox jumps', 'brown', 4)  # '...ick brown fox...'
        """
        if not value or not phrase:
            return Str.truncate(value, radius * 2, ellipsis)

        position = value.lower().find(phrase.lower())
        if position == -1:
            return Str.truncate(value, radius * 2, ellipsis)

        start = max(position - radius, 0)
        end = min(position + len(phrase) + radius, len(value))
        excerpt = value[start:end]

        if start > 0:
            excerpt = ellipsis + excerpt
        if end < len(value):
            excerpt = excerpt + ellipsis
        return excerpt

    @staticmethod
    def highlight(value: str, phrase: str, format: str = '<span class="highlight">\\1</span>') -> str:
        """Wrap every case-insensitive match of phrase using a regex replacement format"""
        if not phrase:
            return value
        return re.sub(f'({re.escape(phrase)})', format, value, flags=re.IGNORECASE)

    @staticmethod
    def wrap(value: str, width: int = 72, indent: str = '', indent_at: int = 0) -> str:
        """
        Hard-wrap text at width, optionally indenting lines after indent_at

        Example:
            Str.wrap('aaa bbb ccc', 7)  # 'aaa bbb\\nccc'
        """
        lines = textwrap.wrap(value, width=width)
        if indent:
            lines = [
                indent + line if index >= indent_at else line
                for index, line in enumerate(lines)
            ]
        return '\n'.join(lines)

    @staticmethod
    def to_list(items: Sequence[Any], and_word: str = 'and', separator: str = ', ') -> str:
        """
        Format a list as a human sentence

        Example:
            Str.to_list(['a', 'b', 'c'])  # 'a, b and c'
        """
        items = [str(item) for item in items]
        if len(items) > 1:
            return separator.join(items[:-1]) + f' {and_word} ' + items[-1]
        return items[0] if items else ''

    @staticmethod
    def insert(value: str, data: Dict[str, Any], before: str = ':', after: str = '') -> str:
        """
        Replace :name style placeholders with data values

        Longer keys are replaced first so ':username' wins over ':user'.

        Example:
            Str.insert('Hello :name', {'name': 'Ada'})  # 'Hello Ada'
        """
        for key in sorted(data, key=lambda k: len(str(k)), reverse=True):
            value = value.replace(f'{before}{key}{after}', str(data[key]))
        return value

    @staticmethod
    def tokenize(value: str, separator: str = ',', left_bound: str = '(', right_bound: str = ')') -> List[str]:
        """
        Split on separator, ignoring separators inside bound pairs

        Example:
            Str.tokenize('a,(b,c),d')  # ['a', '(b,c)', 'd']
        """
        if not value:
            return []

        tokens = []
        buffer = ''
        depth = 0
        for char in value:
            if char == left_bound:
                depth += 1
            elif char == right_bound and depth:
                depth -= 1

            if char == separator and depth == 0:
                tokens.append(buffer.strip())
                buffer = ''
            else:
                buffer += char

        tokens.append(buffer.strip())
        return tokens
