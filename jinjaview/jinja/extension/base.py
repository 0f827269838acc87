"""
Extension base
A bundle of named functions, filters and tests exposed to templates
"""
from typing import Callable, Dict

from jinja2 import Environment


class Extension:
    """
    Base class for template callables providers

    Subclasses declare fixed registration tables; register() copies them
    onto an environment. A later registration replaces same-named entries.

    Example:
        class GreetingExtension(Extension):
            def get_functions(self):
                return {'hello': lambda name: f"Hello {name}"}
    """

    def get_functions(self) -> Dict[str, Callable]:
        return {}

    def get_filters(self) -> Dict[str, Callable]:
        return {}

    def get_tests(self) -> Dict[str, Callable]:
        return {}

    def register(self, environment: Environment):
        environment.globals.update(self.get_functions())
        environment.filters.update(self.get_filters())
        environment.tests.update(self.get_tests())
