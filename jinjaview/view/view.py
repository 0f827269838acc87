"""
View
Base view: variables, blocks, helpers and template/layout/element file resolution

Subclasses provide _render() for their template format.
"""
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from markupsafe import Markup

from jinjaview.defaults import (
    DEFAULT_LAYOUT,
    DEFAULT_TEMPLATE_EXTENSION,
    ELEMENT_DIR,
    LAYOUT_DIR,
    PLUGIN_DIR,
)
from jinjaview.exceptions import (
    MissingElementException,
    MissingLayoutException,
    MissingTemplateException,
    ViewException,
)
from jinjaview.logging import getLogger
from jinjaview.support import Config, Inflector, Plugin, Storage
from jinjaview.view.cell import Cell, resolve_cell_class
from jinjaview.view.helper import HelperRegistry

logger = getLogger(__name__)


class View:
    """
    Base view

    File layout under each template path:
        <TemplatePath>/<template><ext>
        layout/<layout_path>/<layout><ext>
        element/<element><ext>
        cell/<Cell>/<action><ext>
        plugin/<Plugin>/...   (application overrides of plugin templates)

    Example:
        view = MyView(template_path='Articles', template='index', view_vars={'articles': rows})
        html = view.render()
    """

    TYPE_TEMPLATE = 'template'
    TYPE_ELEMENT = 'element'
    TYPE_LAYOUT = 'layout'

    default_config: Dict[str, Any] = {}

    _ext = DEFAULT_TEMPLATE_EXTENSION

    def __init__(
        self,
        request=None,
        view_vars: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
        template_path: Optional[str] = None,
        template: Optional[str] = None,
        layout: Union[str, bool, None] = DEFAULT_LAYOUT,
        layout_path: Optional[str] = None,
        subdir: str = '',
        plugin: Optional[str] = None,
        theme: Optional[str] = None,
        helpers: Optional[Dict[str, Any]] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.request = request
        self.view_vars: Dict[str, Any] = dict(view_vars or {})
        self.name = name
        self.template_path = template_path if template_path is not None else (name or '')
        self.template = template
        self.layout = layout
        self.layout_path = layout_path
        self.subdir = subdir
        self.plugin = plugin
        self.theme = theme
        self.auto_layout = True
        self._config = Config.merge(self.default_config, config)
        self._blocks: Dict[str, str] = {}
        self._current_type: Optional[str] = None
        self._helpers = HelperRegistry(self)

        for helper_name, helper in (helpers or {}).items():
            self._helpers.load(helper_name, helper)

        self.initialize()

    def initialize(self):
        """Hook for subclasses"""
        pass

    # ------------------------------------------------------------------
    # Config, variables, helpers
    # ------------------------------------------------------------------

    def get_config(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Read view config using dot notation ('markdown.engine')"""
        if key is None:
            return self._config

        value: Any = self._config
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def set(self, name: Any, value: Any = None) -> 'View':
        """Set one view variable, or several from a dict"""
        if isinstance(name, dict):
            self.view_vars.update(name)
        else:
            self.view_vars[name] = value
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self.view_vars.get(name, default)

    def get_vars(self) -> List[str]:
        return list(self.view_vars)

    def helpers(self) -> HelperRegistry:
        return self._helpers

    def load_helper(self, name: str, helper: Any = None, config: Optional[Dict[str, Any]] = None) -> Any:
        return self._helpers.load(name, helper, config)

    def get_current_type(self) -> Optional[str]:
        return self._current_type

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def assign(self, name: str, value: Any) -> 'View':
        self._blocks[name] = str(value)
        return self

    def append(self, name: str, value: Any) -> 'View':
        self._blocks[name] = self._blocks.get(name, '') + str(value)
        return self

    def prepend(self, name: str, value: Any) -> 'View':
        self._blocks[name] = str(value) + self._blocks.get(name, '')
        return self

    def fetch(self, name: str, default: str = '') -> Markup:
        """Block content; blocks hold rendered markup so they are not re-escaped"""
        return Markup(self._blocks.get(name, default))

    def exists(self, name: str) -> bool:
        return name in self._blocks

    def reset(self, name: str) -> 'View':
        self._blocks.pop(name, None)
        return self

    def blocks(self) -> List[str]:
        return list(self._blocks)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, template: Optional[str] = None, layout: Union[str, bool, None] = None) -> str:
        """
        Render a template and wrap it in the layout

        Args:
            template: Template name (defaults to self.template)
            layout: Layout name for this render, or False to skip the layout
        """
        layout_name = self.layout if layout is None else layout

        template_file = self._get_template_file_name(template)
        self._current_type = self.TYPE_TEMPLATE
        self.assign('content', self._render(template_file))

        if layout_name and self.auto_layout:
            self.assign('content', self.render_layout('', layout_name))

        return self._blocks['content']

    def render_layout(self, content: str, layout: Optional[str] = None) -> str:
        """Render a layout around content (or around the current content block)"""
        layout_file = self._get_layout_file_name(layout)

        if content:
            self.assign('content', content)

        if not self._blocks.get('title') and self.template_path:
            self.assign('title', Inflector.humanize(self.template_path.replace('/', '_')))

        self._current_type = self.TYPE_LAYOUT
        return self._render(layout_file)

    def element(self, name: str, data: Optional[Dict[str, Any]] = None,
                options: Optional[Dict[str, Any]] = None) -> str:
        """
        Render an element

        Options:
            plugin: False to skip plugin lookup of 'Plugin.name'
            ignore_missing: Return '' instead of raising when not found
        """
        options = dict(options or {})
        plugin_check = options.get('plugin', True) is not False

        element_file = self._get_element_file_name(name, plugin_check)
        if element_file:
            return self._render_element(element_file, dict(data or {}))

        if options.get('ignore_missing'):
            logger.debug("Element %s not found, skipped", name)
            return ''

        plugin, element_name = self._plugin_split(name, plugin_check)
        raise MissingElementException(self._join(ELEMENT_DIR, element_name), self._paths(plugin))

    def element_exists(self, name: str) -> bool:
        return self._get_element_file_name(name) is not False

    def cell(self, cell: str, data: Any = None, options: Optional[Dict[str, Any]] = None) -> Cell:
        """
        Build a cell from 'Name', 'Name::action' or 'Plugin.Name::action'

        The returned Cell renders lazily when converted to a string.
        """
        plugin, name = Plugin.split(cell)
        name, _, action = name.partition('::')

        cell_class = resolve_cell_class(name, plugin)
        return cell_class(
            request=self.request,
            view_class=type(self),
            view_options=self._cell_view_options(),
            action=action or 'display',
            args=data,
            options=options,
            plugin=plugin,
            name=name,
        )

    def _cell_view_options(self) -> Dict[str, Any]:
        """Constructor arguments for views rendered by cells"""
        return {'theme': self.theme}

    def _render_element(self, element_file: str, data: Dict[str, Any]) -> str:
        current_type = self._current_type
        self._current_type = self.TYPE_ELEMENT
        try:
            return self._render(element_file, {**self.view_vars, **data})
        finally:
            self._current_type = current_type

    def _render(self, template_file: str, data: Optional[Dict[str, Any]] = None) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement _render()")

    # ------------------------------------------------------------------
    # File resolution
    # ------------------------------------------------------------------

    def _get_template_file_name(self, name: Optional[str] = None) -> str:
        """
        Resolve a template name to a file path

        Raises:
            MissingTemplateException: No template path holds the file
        """
        template_path = self.template_path or ''
        sub_dir = self.subdir or ''

        if name is None:
            name = self.template
        if not name:
            raise ViewException("Template name not provided")

        plugin, name = self._plugin_split(name)
        name = name.replace('\\', '/')

        if '/' not in name and not name.startswith('.'):
            name = self._join(template_path, sub_dir, self._inflect_template_file_name(name))
        elif name.startswith('/'):
            name = name.strip('/')
        elif not plugin or self.template_path != self.name:
            name = self._join(template_path, sub_dir, name)
        else:
            name = self._join(sub_dir, name)

        file_name = name + self._ext
        paths = self._paths(plugin)
        for path in paths:
            candidate = path / file_name
            if candidate.is_file():
                return self._check_file_path(candidate, path)

        raise MissingTemplateException(name, paths, file=file_name)

    def _get_layout_file_name(self, name: Optional[str] = None) -> str:
        """
        Resolve a layout name to a file path

        Raises:
            MissingLayoutException: No template path holds the layout
        """
        if name is None:
            if not self.layout:
                raise ViewException("View.layout must be a non-empty string to render a layout")
            name = self.layout

        plugin, name = self._plugin_split(name)
        name = self._join(LAYOUT_DIR, self.layout_path or '', name)

        file_name = name + self._ext
        paths = self._paths(plugin)
        for path in paths:
            candidate = path / file_name
            if candidate.is_file():
                return self._check_file_path(candidate, path)

        raise MissingLayoutException(name, paths, file=file_name)

    def _get_element_file_name(self, name: str, plugin_check: bool = True) -> Union[str, bool]:
        """Resolve an element name to a file path, or False when not found"""
        plugin, name = self._plugin_split(name, plugin_check)
        file_name = self._join(ELEMENT_DIR, name) + self._ext

        for path in self._paths(plugin):
            candidate = path / file_name
            if candidate.is_file():
                return self._check_file_path(candidate, path)

        return False

    def _paths(self, plugin: Optional[str] = None) -> List[Path]:
        """
        Ordered template directories to search

        Theme paths come first, then application overrides of the plugin,
        the plugin's own templates, and finally the application paths.
        """
        app_paths = Storage.template_paths()
        paths: List[Path] = []

        if self.theme:
            theme_path = Plugin.template_path(self.theme)
            if plugin:
                paths.append(theme_path / PLUGIN_DIR / plugin)
            paths.append(theme_path)

        if plugin:
            for path in app_paths:
                paths.append(path / PLUGIN_DIR / plugin)
            paths.append(Plugin.template_path(plugin))

        paths.extend(app_paths)

        unique: List[Path] = []
        for path in paths:
            if path not in unique:
                unique.append(path)
        return unique

    def _plugin_split(self, name: str, fallback: bool = True) -> Tuple[Optional[str], str]:
        """Split 'Plugin.name' when Plugin is loaded, else fall back to the view's plugin"""
        plugin, rest = Plugin.split(name)
        if plugin and Plugin.is_loaded(plugin):
            return plugin, rest

        return (self.plugin if fallback else None), name

    def _check_file_path(self, file: Path, path: Path) -> str:
        """Reject '..' segments that escape the template directory"""
        if '..' not in file.parts:
            return str(file)

        absolute = os.path.realpath(file)
        root = os.path.realpath(path)
        if os.path.commonpath([absolute, root]) != root:
            raise ViewException("Cannot use '..' in template paths outside the template directory")
        return absolute

    @staticmethod
    def _inflect_template_file_name(name: str) -> str:
        return Inflector.underscore(name)

    @staticmethod
    def _join(*parts: str) -> str:
        return '/'.join(part.strip('/') for part in parts if part)
