"""
Template Loader
Resolves template names with the framework's path conventions
"""
import os
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from jinja2 import BaseLoader, Environment, TemplateNotFound

from jinjaview.defaults import DEFAULT_ENCODING, DEFAULT_TEMPLATE_EXTENSION, JINJA_TEMPLATE_EXTENSION
from jinjaview.support import Plugin, Storage


class Loader(BaseLoader):
    """
    Jinja loader for framework templates

    A name is resolved as:
    - an existing file path, used as-is (views pass resolved paths);
    - 'Plugin.path/name' inside a loaded plugin's template directory;
    - 'path/name' inside the application template paths.
    Each candidate is tried bare, then with each suffix in order.

    Example:
        {% extends 'layout/base' %}
        {% include 'Blog.element/sidebar.jinja' %}
    """

    def __init__(
        self,
        extensions: Optional[Sequence[str]] = None,
        encoding: str = DEFAULT_ENCODING,
    ):
        self.extensions: List[str] = list(extensions or (JINJA_TEMPLATE_EXTENSION, DEFAULT_TEMPLATE_EXTENSION))
        self.encoding = encoding

    def get_source(self, environment: Environment, template: str) -> Tuple[str, str, Callable[[], bool]]:
        path = self.resolve_file_name(template)
        mtime = os.path.getmtime(path)

        with open(path, 'r', encoding=self.encoding) as f:
            source = f.read()

        def uptodate() -> bool:
            try:
                return os.path.getmtime(path) == mtime
            except OSError:
                return False

        return source, path, uptodate

    def resolve_file_name(self, name: str) -> str:
        """
        Map a template name to a file path

        Raises:
            TemplateNotFound: No candidate file exists
        """
        if os.path.isfile(name):
            return name

        plugin, file_name = Plugin.split(name)
        if plugin and Plugin.is_loaded(plugin):
            paths = [Plugin.template_path(plugin)]
        else:
            paths = Storage.template_paths()
            file_name = name

        for path in paths:
            for suffix in ('', *self.extensions):
                candidate = Path(path) / (file_name + suffix)
                if candidate.is_file():
                    return str(candidate)

        raise TemplateNotFound(name)

    def exists(self, name: str) -> bool:
        try:
            self.resolve_file_name(name)
        except TemplateNotFound:
            return False
        return True
