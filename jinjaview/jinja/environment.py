"""
View Environment
Owns the shared Jinja environment used by every JinjaView
"""
from contextlib import nullcontext
from pathlib import Path
from typing import Any, ContextManager, Dict, Optional, Sequence, Tuple, Type

from jinja2 import Environment, FileSystemBytecodeCache, StrictUndefined, Undefined

from jinjaview.defaults import DEFAULT_ENCODING, JINJA_TEMPLATE_EXTENSION, DEFAULT_TEMPLATE_EXTENSION, PROFILER_PLUGIN
from jinjaview.exceptions import ViewException
from jinjaview.jinja.extension import (
    ArrayExtension,
    ArraysExtension,
    BasicExtension,
    ConfigureExtension,
    DateExtension,
    DebugExtension,
    Extension,
    I18nExtension,
    InflectorExtension,
    MarkdownExtension,
    NumberExtension,
    PcreExtension,
    ProfilerExtension,
    StringLoaderExtension,
    StringsExtension,
    TextExtension,
    TimeExtension,
    UtilsExtension,
    ViewExtension,
)
from jinjaview.jinja.loader import Loader
from jinjaview.jinja.profiler import Profile
from jinjaview.jinja.runtime import MarkdownRuntimeLoader, RuntimeLoader
from jinjaview.jinja.token_parser import CellTag, ElementTag
from jinjaview.logging import getLogger
from jinjaview.support import Config, EnvHelper, Plugin, Storage

logger = getLogger(__name__)


class ViewEnvironment:
    """
    Jinja environment wrapper built once at startup

    Config:
        environment: Engine options (charset, debug, cache, strict_variables,
                     auto_reload, plus any jinja2.Environment keyword)
        markdown.engine: Object with convert(text) -> str, enables markdown_to_html

    Example:
        environment = ViewEnvironment({'environment': {'cache': False}})
        view = JinjaView(template_path='Articles', template='index', environment=environment)
    """

    default_config: Dict[str, Any] = {
        'environment': {},
        'markdown': {
            'engine': None,
        },
    }

    TOKEN_PARSERS: Tuple[Type, ...] = (
        ElementTag,
        CellTag,
    )

    # Later providers replace same-named callables of earlier ones
    EXTENSIONS: Tuple[Type[Extension], ...] = (
        StringLoaderExtension,
        DebugExtension,
        ArraysExtension,
        BasicExtension,
        ConfigureExtension,
        I18nExtension,
        InflectorExtension,
        NumberExtension,
        StringsExtension,
        TimeExtension,
        UtilsExtension,
        ViewExtension,
        MarkdownExtension,
        DateExtension,
        ArrayExtension,
        PcreExtension,
        TextExtension,
    )

    def __init__(self, config: Optional[Dict[str, Any]] = None, extensions: Optional[Sequence[str]] = None):
        self.config = Config.merge(self.default_config, config)
        self.options = self.engine_options(self.config.get('environment') or {})
        self.debug = bool(self.options['debug'])
        self.profile: Optional[Profile] = None
        self.profiler: Optional[ProfilerExtension] = None

        self.loader = self.create_loader(extensions)
        self.environment = self.create_environment()

        self.initialize_extensions()
        self.initialize_profiler()

        logger.debug(
            "Jinja environment created (debug=%s, cache=%s)", self.debug, self.options['cache'] or 'off'
        )

    @classmethod
    def create(cls, config: Optional[Dict[str, Any]] = None) -> 'ViewEnvironment':
        return cls(config)

    @staticmethod
    def engine_options(options: Dict[str, Any]) -> Dict[str, Any]:
        """Engine options with framework defaults filled in"""
        debug = Config.get('app.debug', EnvHelper.get_bool('APP_DEBUG', False))
        defaults = {
            'charset': Config.get('app.encoding', DEFAULT_ENCODING),
            'debug': debug,
            'cache': False if debug else str(Storage.cache_jinja()),
        }
        merged = {**defaults, **options}

        if merged['cache'] is True:
            merged['cache'] = str(Storage.cache_jinja())
        return merged

    def create_loader(self, extensions: Optional[Sequence[str]] = None) -> Loader:
        return Loader(
            extensions or (JINJA_TEMPLATE_EXTENSION, DEFAULT_TEMPLATE_EXTENSION),
            encoding=self.options['charset'],
        )

    def create_environment(self) -> Environment:
        options = dict(self.options)
        options.pop('charset')
        debug = options.pop('debug')
        cache = options.pop('cache')
        strict = options.pop('strict_variables', False)

        options.setdefault('auto_reload', debug)
        options.setdefault('autoescape', True)
        options.setdefault('undefined', StrictUndefined if strict else Undefined)

        extensions = list(options.pop('extensions', []))
        extensions.extend(['jinja2.ext.do', 'jinja2.ext.loopcontrols'])
        if debug:
            extensions.append('jinja2.ext.debug')
        extensions.extend(self.TOKEN_PARSERS)

        if cache:
            options['bytecode_cache'] = FileSystemBytecodeCache(str(Storage.ensure_directory(Path(cache))))

        environment = Environment(loader=self.loader, extensions=extensions, **options)
        environment.extend(
            view_debug=debug,
            runtime_loaders=[],
            runtimes={},
        )
        environment.globals['_view'] = None

        logger.debug("Registered token parsers: %s", ', '.join(tag.__name__ for tag in self.TOKEN_PARSERS))
        return environment

    def initialize_extensions(self):
        for extension_class in self.EXTENSIONS:
            self.add_extension(extension_class())

        engine = self.config['markdown'].get('engine')
        if engine is not None:
            if not callable(getattr(engine, 'convert', None)):
                raise ViewException(
                    f"Markdown engine `{type(engine).__name__}` must provide convert(text)."
                )
            self.add_runtime_loader(MarkdownRuntimeLoader(engine))

    def initialize_profiler(self):
        """Attach a Profile when debugging with the debug toolbar plugin loaded"""
        if not self.debug or not Plugin.is_loaded(PROFILER_PLUGIN):
            return

        self.profile = Profile()
        self.profiler = ProfilerExtension(self.profile)
        self.add_extension(self.profiler)
        logger.debug("Render profiler attached")

    def add_extension(self, extension: Extension) -> 'ViewEnvironment':
        extension.register(self.environment)
        logger.debug("Registered %s", type(extension).__name__)
        return self

    def add_runtime_loader(self, loader: RuntimeLoader) -> 'ViewEnvironment':
        self.environment.runtime_loaders.append(loader)
        return self

    def get_environment(self) -> Environment:
        return self.environment

    def get_profile(self) -> Optional[Profile]:
        return self.profile

    def profiling(self, template: str, type: str = Profile.TEMPLATE) -> ContextManager:
        if self.profiler is None:
            return nullcontext()
        return self.profiler.profile_render(template, type)

    def reset_profile(self):
        """Start a fresh root Profile (called once per request)"""
        if self.profiler is not None:
            self.profiler.reset()

    def clear_cache(self):
        """Drop compiled templates from memory and the bytecode cache"""
        if self.environment.cache is not None:
            self.environment.cache.clear()
        if self.environment.bytecode_cache is not None:
            self.environment.bytecode_cache.clear()
        self.environment.runtimes.clear()
        logger.debug("Jinja template cache cleared")
