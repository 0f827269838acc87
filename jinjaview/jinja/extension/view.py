"""
View Extension
Access to the rendering view (cells, elements, blocks, variables)
"""
from typing import Any, Callable, Dict, List, Optional

from jinja2 import pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from jinjaview.exceptions import ViewException
from jinjaview.jinja.extension.base import Extension


def current_view(context: Context) -> Any:
    """The view bound to the render through the _view global"""
    view = context.get('_view')
    if view is None:
        raise ViewException("No view is bound to the template context (missing `_view`).")
    return view


@pass_context
def cell(context: Context, name: str, data: Any = None, options: Optional[Dict[str, Any]] = None):
    return current_view(context).cell(name, data, options)


@pass_context
def element(context: Context, name: str, data: Optional[Dict[str, Any]] = None,
            options: Optional[Dict[str, Any]] = None) -> Markup:
    return Markup(current_view(context).element(name, data, options))


@pass_context
def element_exists(context: Context, name: str) -> bool:
    return current_view(context).element_exists(name)


@pass_context
def fetch(context: Context, name: str, default: str = '') -> Markup:
    return current_view(context).fetch(name, default)


@pass_context
def get_vars(context: Context) -> List[str]:
    return current_view(context).get_vars()


@pass_context
def get(context: Context, name: str, default: Any = None) -> Any:
    return current_view(context).get(name, default)


class ViewExtension(Extension):

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'cell': cell,
            'element': element,
            'element_exists': element_exists,
            'fetch': fetch,
            'get_vars': get_vars,
            'get': get,
        }
