"""
Runtime Loaders
Lazy capability providers looked up by identifier from template callables
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

from jinja2 import Environment

from jinjaview.exceptions import RuntimeNotAvailableError


class RuntimeLoader(ABC):
    """
    Provides runtime objects on demand

    load() returns None for identifiers the loader does not know, so
    several loaders can be chained on one environment.
    """

    @abstractmethod
    def load(self, identifier: str) -> Optional[Any]:
        pass


class MarkdownRuntime:
    """Converts markdown through the configured engine"""

    IDENTIFIER = 'markdown'

    def __init__(self, engine: Any):
        self.engine = engine

    def convert(self, body: str) -> str:
        return self.engine.convert(body)


class MarkdownRuntimeLoader(RuntimeLoader):
    """Serves MarkdownRuntime for a markdown engine (any object with convert(text) -> str)"""

    def __init__(self, engine: Any):
        self.engine = engine

    def load(self, identifier: str) -> Optional[MarkdownRuntime]:
        if identifier == MarkdownRuntime.IDENTIFIER:
            return MarkdownRuntime(self.engine)
        return None


class PythonMarkdownEngine:
    """
    Markdown engine backed by the Python-Markdown package

    Example:
        Config.set('view.JINJA_VIEW_CONFIG', {
            'markdown': {'engine': PythonMarkdownEngine(extensions=['tables'])},
        })
    """

    def __init__(self, **options: Any):
        import markdown

        self._markdown = markdown.Markdown(**options)

    def convert(self, text: str) -> str:
        self._markdown.reset()
        return self._markdown.convert(text)


def get_runtime(environment: Environment, identifier: str) -> Any:
    """
    Load (once) the runtime registered under identifier

    Raises:
        RuntimeNotAvailableError: No runtime loader provides identifier
    """
    runtimes = environment.runtimes
    if identifier not in runtimes:
        for loader in environment.runtime_loaders:
            runtime = loader.load(identifier)
            if runtime is not None:
                runtimes[identifier] = runtime
                break
        else:
            raise RuntimeNotAvailableError(f"Unable to load the `{identifier}` runtime.")

    return runtimes[identifier]
