"""
Debug Extension
dump() for inspecting values while debugging
"""
import json
from typing import Any, Callable, Dict

from jinja2 import pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from jinjaview.jinja.extension.base import Extension


@pass_context
def dump(context: Context, *values: Any) -> Markup:
    """
    Dump values (or every non-callable context variable) as JSON

    Renders nothing unless the environment was built in debug mode.

    Example:
        {{ dump(user) }}
        {{ dump() }}
    """
    if not getattr(context.environment, 'view_debug', False):
        return Markup('')

    if not values:
        payload: Any = {
            key: value for key, value in context.get_all().items()
            if not key.startswith('_') and not callable(value)
        }
    elif len(values) == 1:
        payload = values[0]
    else:
        payload = list(values)

    dumped = json.dumps(payload, indent=2, default=str)
    return Markup('<pre class="jinja-dump">%s</pre>') % dumped


class DebugExtension(Extension):

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'dump': dump,
        }
