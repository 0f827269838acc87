"""
View Helpers
Objects registered on a view and exposed to templates by name
"""
from typing import Any, Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

from jinjaview.defaults import DEFAULT_APP_NAMESPACE
from jinjaview.exceptions import MissingHelperException
from jinjaview.support import ClassLoader, Config, Str

if TYPE_CHECKING:
    from jinjaview.view.view import View


class Helper:
    """
    Base view helper

    Example:
        class GreetingHelper(Helper):
            def hello(self, name):
                return f"Hello {name}"

        view.load_helper('Greeting', GreetingHelper)
        # template: {{ Greeting.hello('Ada') }}
    """

    default_config: Dict[str, Any] = {}

    def __init__(self, view: 'View', config: Optional[Dict[str, Any]] = None):
        self._view = view
        self._config = Config.merge(self.default_config, config)
        self.initialize(self._config)

    def initialize(self, config: Dict[str, Any]):
        """Hook for subclasses"""
        pass

    def get_view(self) -> 'View':
        return self._view

    def get_config(self, key: Optional[str] = None, default: Any = None) -> Any:
        if key is None:
            return self._config
        return self._config.get(key, default)


class HelperRegistry:
    """
    Helpers loaded on one view, keyed by name

    Iterating yields helper names; items() yields (name, helper) pairs.
    """

    def __init__(self, view: 'View'):
        self._view = view
        self._loaded: Dict[str, Helper] = {}

    def load(self, name: str, helper: Any = None, config: Optional[Dict[str, Any]] = None) -> Any:
        """
        Load a helper by name

        Args:
            name: Name exposed to templates
            helper: Helper class, instance, dotted class path, or None to
                    look up app.view.helper.<name>_helper.<Name>Helper
            config: Config passed to the helper constructor
        """
        if helper is None:
            namespace = Config.get('app.namespace', DEFAULT_APP_NAMESPACE)
            class_path = f'{namespace}.view.helper.{Str.snake(name)}_helper.{name}Helper'
            helper = ClassLoader.try_load(class_path)
            if helper is None:
                raise MissingHelperException(f"Helper class `{name}Helper` could not be found.")
        elif isinstance(helper, str):
            helper = ClassLoader.load(helper)

        if isinstance(helper, type):
            helper = helper(self._view, config)

        self._loaded[name] = helper
        return helper

    def get(self, name: str) -> Any:
        if name not in self._loaded:
            raise MissingHelperException(f"Helper `{name}` is not loaded.")
        return self._loaded[name]

    def has(self, name: str) -> bool:
        return name in self._loaded

    def unload(self, name: str):
        self._loaded.pop(name, None)

    def loaded(self) -> List[str]:
        return list(self._loaded)

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._loaded.items())

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._loaded))

    def __len__(self) -> int:
        return len(self._loaded)
