"""
Arrays Extension
List and dict helpers for templates
"""
from typing import Any, Callable, Dict, Iterable, List, Optional

from jinjaview.jinja.extension.base import Extension


def in_array(needle: Any, haystack: Iterable) -> bool:
    return needle in haystack


def explode(delimiter: str, value: str, limit: Optional[int] = None) -> List[str]:
    if limit is None:
        return value.split(delimiter)
    return value.split(delimiter, max(limit - 1, 0))


def array(value: Any) -> Any:
    """Coerce to a list (dicts are kept as dicts)"""
    if value is None:
        return []
    if isinstance(value, (list, dict)):
        return value
    if isinstance(value, (str, bytes)):
        return [value]
    try:
        return list(value)
    except TypeError:
        return [value]


def array_push(values: Iterable, *items: Any) -> List[Any]:
    return [*values, *items]


def array_add(values: Dict[Any, Any], key: Any, value: Any) -> Dict[Any, Any]:
    return {**values, key: value}


def array_merge(*arrays: Any) -> Any:
    """Merge dicts key by key, or concatenate lists"""
    if arrays and all(isinstance(item, dict) for item in arrays):
        merged: Dict[Any, Any] = {}
        for item in arrays:
            merged.update(item)
        return merged

    merged_list: List[Any] = []
    for item in arrays:
        merged_list.extend(item)
    return merged_list


def array_key_exists(key: Any, values: Dict[Any, Any]) -> bool:
    return key in values


class ArraysExtension(Extension):

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'in_array': in_array,
            'explode': explode,
            'array': array,
            'array_push': array_push,
            'array_add': array_add,
            'array_keys': lambda values: list(values.keys()),
            'array_values': lambda values: list(values.values()),
            'array_merge': array_merge,
            'array_key_exists': array_key_exists,
        }
