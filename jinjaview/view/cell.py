"""
View Cells
Small controllers that prepare variables and render their own template
"""
from typing import Any, Dict, List, Optional, Type, TYPE_CHECKING

from jinjaview.defaults import CELL_DIR, DEFAULT_APP_NAMESPACE
from jinjaview.exceptions import MissingCellException, ViewException
from jinjaview.support import ClassLoader, Config, Plugin, Str

if TYPE_CHECKING:
    from jinjaview.view.view import View


class Cell:
    """
    Base cell

    A cell's action sets variables, then the cell renders
    cell/<Name>/<action> through a fresh view of the calling view's class.

    Example:
        class InboxCell(Cell):
            def display(self, limit=5):
                self.set('messages', Message.latest(limit))

        # template: {% cell 'Inbox' {'limit': 3} %}
    """

    # Options accepted from the third cell() argument and set as attributes
    valid_cell_options: List[str] = []

    def __init__(
        self,
        request=None,
        view_class: Optional[Type['View']] = None,
        view_options: Optional[Dict[str, Any]] = None,
        action: str = 'display',
        args: Any = None,
        options: Optional[Dict[str, Any]] = None,
        plugin: Optional[str] = None,
        name: Optional[str] = None,
    ):
        self.request = request
        self.view_class = view_class
        self.view_options = dict(view_options or {})
        self.action = action
        self.args = args if args is not None else {}
        self.plugin = plugin
        class_name = self.__class__.__name__
        if name is None and class_name.endswith('Cell') and class_name != 'Cell':
            name = class_name[:-len('Cell')]
        self.name = name or class_name
        self.template: Optional[str] = None
        self.view_vars: Dict[str, Any] = {}
        self._rendered: Optional[str] = None

        for option, value in (options or {}).items():
            if option in self.valid_cell_options:
                setattr(self, option, value)

        self.initialize()

    def initialize(self):
        """Hook for subclasses"""
        pass

    def set(self, name: Any, value: Any = None) -> 'Cell':
        """Set one variable, or several from a dict"""
        if isinstance(name, dict):
            self.view_vars.update(name)
        else:
            self.view_vars[name] = value
        return self

    def render(self, template: Optional[str] = None) -> str:
        """Run the action and render its template"""
        if self.view_class is None:
            raise ViewException(f"Cell `{self.name}` has no view class to render with.")

        method = getattr(self, self.action, None)
        if not callable(method):
            raise MissingCellException(
                f"Class `{self.__class__.__name__}` does not have a `{self.action}` method."
            )

        if isinstance(self.args, dict):
            method(**self.args)
        else:
            method(*self.args)

        view = self.view_class(
            request=self.request,
            view_vars=self.view_vars,
            template_path=f'{CELL_DIR}/{self.name}',
            template=template or self.template or self.action,
            layout=False,
            plugin=self.plugin,
            **self.view_options
        )
        return view.render()

    def __str__(self) -> str:
        if self._rendered is None:
            self._rendered = self.render()
        return self._rendered

    def __html__(self) -> str:
        return str(self)


def resolve_cell_class(name: str, plugin: Optional[str] = None) -> Type[Cell]:
    """
    Find the class for a cell name

    Lookup order: the view.cells config map ('Name' or 'Plugin.Name' to a
    class or dotted path), then <namespace>.view.cell.<name>_cell.<Name>Cell
    where namespace is the plugin's manifest namespace or app.namespace.
    """
    key = f'{plugin}.{name}' if plugin else name
    cells = Config.get('view.cells', {}) or {}

    target = cells.get(key)
    if isinstance(target, type):
        return target
    if isinstance(target, str):
        return ClassLoader.load(target)

    if plugin:
        namespace = Plugin.get(plugin).data.get('namespace', Str.snake(plugin))
    else:
        namespace = Config.get('app.namespace', DEFAULT_APP_NAMESPACE)

    cell_class = ClassLoader.try_load(f'{namespace}.view.cell.{Str.snake(name)}_cell.{name}Cell')
    if cell_class is None:
        raise MissingCellException(f"Cell class `{key}Cell` could not be found.")
    return cell_class
