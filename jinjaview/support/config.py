"""
Config
Dot-notation access to the config/*.py modules of the application
"""

import copy
import importlib
import threading
from typing import Any, Optional, Dict


_MISSING = object()


class Config:
    """
    Application configuration

    The first key segment names a module under config/ (config/app.py,
    config/view.py); the rest walks its attributes and dict keys. Lookups
    ignore case.

    Example:
        Config.get('app.debug', False)
        Config.get('view.JINJA_VIEW_CONFIG.environment', {})
        Config.set('view.cells', {'Inbox': 'app.view.cell.inbox_cell.InboxCell'})
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Read a value, preferring runtime overrides

        An override set on a parent key answers for its children, so
        Config.set('view.cells', {...}) is visible as 'view.cells.Inbox'.
        """
        parts = key.lower().split('.')

        for index in range(len(parts), 0, -1):
            prefix = '.'.join(parts[:index])
            if prefix in cls._runtime_overrides:
                value = cls._descend(cls._runtime_overrides[prefix], parts[index:])
                return default if value is _MISSING else value

        module = cls.all(parts[0])
        if module is None:
            return default

        value = cls._descend(module, parts[1:])
        return default if value is _MISSING else value

    @staticmethod
    def _descend(value: Any, path) -> Any:
        for part in path:
            if isinstance(value, dict):
                names = value.keys()
            elif hasattr(value, '__dict__'):
                names = dir(value)
            else:
                return _MISSING

            match = next((name for name in names if str(name).lower() == part), _MISSING)
            if match is _MISSING:
                return _MISSING
            value = value[match] if isinstance(value, dict) else getattr(value, match)
        return value

    @classmethod
    def _load_config_file(cls, file_name: str):
        with cls._lock:
            if file_name in cls._loaded:
                return
            try:
                cls._loaded[file_name] = importlib.import_module(f'config.{file_name}')
            except ImportError:
                # No config/<file_name>.py in this application
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """Override a key for the life of the process (config files are untouched)"""
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """The config module for file_name, or None if it does not exist"""
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)
        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """Forget one loaded config module (or all) so the next read imports it again"""
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        cls._runtime_overrides.clear()

    @classmethod
    def flush(cls):
        cls.reload()
        cls.clear_runtime_overrides()

    @staticmethod
    def merge(defaults: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Deep-merge overrides into a copy of defaults

        Nested dicts merge key by key; any other override value replaces the
        default as-is (engine objects are not copied).

        Example:
            Config.merge({'markdown': {'engine': None}}, {'markdown': {'engine': md}})
        """
        merged = copy.deepcopy(defaults)
        for key, value in (overrides or {}).items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = Config.merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    @classmethod
    def as_object(cls, key: str, default: Any = None) -> Any:
        """
        A dict value wrapped for attribute access

        Example:
            Config.as_object('view.JINJA_VIEW_CONFIG').markdown.engine
        """
        value = cls.get(key, default)
        return ConfigObject(**value) if isinstance(value, dict) else value


class ConfigObject:
    """Attribute view over a config dict (nested dicts are wrapped too)"""

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, ConfigObject(**value) if isinstance(value, dict) else value)

    def __repr__(self):
        fields = ', '.join(f'{key}={value!r}' for key, value in vars(self).items())
        return f'ConfigObject({fields})'

    def __getattr__(self, name):
        raise AttributeError(f"Config has no attribute '{name}'")
