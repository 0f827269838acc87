"""
Array Extension
Aggregates and conversions over sequences and mappings
"""
from functools import reduce
from operator import mul
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from jinja2 import pass_environment
from jinja2.filters import sync_do_sum
from markupsafe import Markup, escape

from jinjaview.jinja.extension.base import Extension


@pass_environment
def sum_values(environment, values: Iterable[Any], attribute: Optional[str] = None, start: Any = 0) -> Any:
    """Jinja's sum, also accepting a mapping (its values are summed)"""
    if isinstance(values, Mapping):
        values = values.values()
    return sync_do_sum(environment, values, attribute, start)


def product(values: Iterable[Any]) -> Any:
    if isinstance(values, Mapping):
        values = values.values()
    return reduce(mul, values, 1)


def values(value: Any) -> List[Any]:
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value)


def as_array(value: Any) -> Any:
    """Objects become a dict of their public attributes"""
    if isinstance(value, (Mapping, list, tuple)):
        return value
    if hasattr(value, '__dict__'):
        return {key: item for key, item in vars(value).items() if not key.startswith('_')}
    return [value]


def html_attr(attributes: Mapping[str, Any]) -> Markup:
    """
    Render a mapping as HTML attributes

    True renders the bare attribute, False and None drop it.

    Example:
        <input{{ {'type': 'checkbox', 'checked': true}|html_attr }}>
    """
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(str(escape(name)))
            continue
        if isinstance(value, (list, tuple)):
            value = ' '.join(str(item) for item in value)
        parts.append('%s="%s"' % (escape(name), escape(value)))

    if not parts:
        return Markup('')
    return Markup(' ' + ' '.join(parts))


class ArrayExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'sum': sum_values,
            'product': product,
            'values': values,
            'as_array': as_array,
            'html_attr': html_attr,
        }
