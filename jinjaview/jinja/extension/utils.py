"""
Utils Extension
Serialization, hashing and encoding filters
"""
import base64
import hashlib
import json
from typing import Any, Callable, Dict

from markupsafe import Markup, escape, soft_str

from jinjaview.jinja.extension.base import Extension


def md5(value: Any) -> str:
    return hashlib.md5(str(value).encode('utf-8')).hexdigest()


def base64_encode(value: Any) -> str:
    return base64.b64encode(str(value).encode('utf-8')).decode('ascii')


def base64_decode(value: str) -> str:
    return base64.b64decode(value).decode('utf-8')


def nl2br(value: Any) -> Markup:
    """Escape text and insert <br /> before each newline"""
    return escape(value).replace('\n', Markup('<br />\n'))


class UtilsExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'serialize': json.dumps,
            'unserialize': json.loads,
            'md5': md5,
            'base64_encode': base64_encode,
            'base64_decode': base64_decode,
            'nl2br': nl2br,
            'string': soft_str,
        }
