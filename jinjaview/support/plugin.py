"""
Plugin Registry
Tracks loaded plugins and where their templates live
"""
import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple, Union

from jinjaview.exceptions import MissingPluginException
from jinjaview.logging import getLogger
from jinjaview.support.storage import Storage

logger = getLogger(__name__)


class PluginManifest:
    """Represents a plugin manifest (package.json)"""

    def __init__(self, data: Dict[str, Any], plugin_path: Path):
        self.data = data
        self.plugin_path = plugin_path
        self.name = data.get('name', plugin_path.name)
        self.version = data.get('version', '1.0.0')
        self.description = data.get('description', '')
        self.templates = data.get('templates', 'templates')

    @classmethod
    def load(cls, manifest_path: Path, plugin_path: Path) -> 'PluginManifest':
        """Load a plugin manifest from file"""
        with open(manifest_path, 'r') as f:
            data = json.load(f)

        return cls(data, plugin_path)

    def template_path(self) -> Path:
        return self.plugin_path / self.templates


class Plugin:
    """
    Loaded plugin registry

    Example:
        Plugin.load('Blog', '/project/plugins/blog')
        Plugin.is_loaded('Blog')          # True
        Plugin.template_path('Blog')      # /project/plugins/blog/templates
        Plugin.split('Blog.Articles/index')  # ('Blog', 'Articles/index')
    """

    _plugins: Dict[str, PluginManifest] = {}

    @classmethod
    def load(cls, name: str, path: Union[str, Path, None] = None, **manifest: Any) -> PluginManifest:
        """
        Register a plugin by name

        Args:
            name: Plugin name (e.g. 'Blog', 'DebugKit')
            path: Plugin root directory (defaults to plugins/<name>)
            **manifest: Manifest overrides (e.g. templates='views')
        """
        plugin_path = Path(path) if path is not None else Storage.plugins(name)
        plugin = PluginManifest({'name': name, **manifest}, plugin_path)
        cls._plugins[name] = plugin
        logger.debug("Plugin %s loaded from %s", name, plugin_path)
        return plugin

    @classmethod
    def discover(cls, plugins_path: Union[str, Path, None] = None) -> Dict[str, PluginManifest]:
        """Load every plugin directory under plugins/ that carries a package.json"""
        plugins_path = Path(plugins_path) if plugins_path is not None else Storage.plugins()
        if not plugins_path.exists():
            return {}

        discovered = {}
        for plugin_dir in sorted(plugins_path.iterdir()):
            if plugin_dir.is_dir() and not plugin_dir.name.startswith('_'):
                manifest_path = plugin_dir / 'package.json'

                if manifest_path.exists():
                    manifest = PluginManifest.load(manifest_path, plugin_dir)
                    cls._plugins[manifest.name] = manifest
                    discovered[manifest.name] = manifest

        return discovered

    @classmethod
    def is_loaded(cls, name: str) -> bool:
        return name in cls._plugins

    @classmethod
    def loaded(cls) -> List[str]:
        return sorted(cls._plugins)

    @classmethod
    def get(cls, name: str) -> PluginManifest:
        if name not in cls._plugins:
            raise MissingPluginException(f"Plugin `{name}` could not be found.")
        return cls._plugins[name]

    @classmethod
    def path(cls, name: str) -> Path:
        return cls.get(name).plugin_path

    @classmethod
    def template_path(cls, name: str) -> Path:
        return cls.get(name).template_path()

    @classmethod
    def unload(cls, name: Optional[str] = None):
        """Forget one plugin, or all of them"""
        if name is None:
            cls._plugins.clear()
        else:
            cls._plugins.pop(name, None)

    @staticmethod
    def split(name: str, dot_append: bool = False, plugin: Optional[str] = None) -> Tuple[Optional[str], str]:
        """
        Split 'Plugin.name' into (plugin, name)

        Example:
            Plugin.split('Blog.Articles/index')  # ('Blog', 'Articles/index')
            Plugin.split('index')                # (None, 'index')
        """
        if '.' in name:
            prefix, rest = name.split('.', 1)
            if dot_append:
                prefix += '.'
            return prefix, rest

        return plugin, name
