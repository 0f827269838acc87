"""
Basic Extension
Debug printing, case and escaping filters
"""
from pprint import pformat
from typing import Any, Callable, Dict

from jinja2 import pass_environment
from markupsafe import Markup, escape

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import EnvHelper


@pass_environment
def debug(environment, value: Any) -> Markup:
    """Pretty-printed value in a <pre> block, only when the environment is in debug mode"""
    if not getattr(environment, 'view_debug', False):
        return Markup('')
    return Markup('<pre class="jinja-debug">%s</pre>') % pformat(value)


def pr(value: Any) -> str:
    return pformat(value)


def env(key: str, default: Any = None) -> Any:
    return EnvHelper.get(key, default)


class BasicExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'debug': debug,
            'pr': pr,
            'low': lambda value: str(value).lower(),
            'up': lambda value: str(value).upper(),
            'env': env,
            'count': len,
            'h': escape,
            'null': lambda *args: '',
        }
