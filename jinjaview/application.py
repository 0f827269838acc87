"""
Application
Service container, provider lifecycle and the Sanic app
"""
import inspect
import sys
from typing import Any, Dict, List, Optional, Type

from sanic import Sanic

from jinjaview.logging import getLogger

logger = getLogger(__name__)


class Application:
    """
    Service container and provider lifecycle

    Example:
        app = Application(base_path)
        app.register_provider(LoggingServiceProvider)
        app.register_provider(JinjaViewServiceProvider)
        app.boot()

        environment = app.make('view.environment')
    """

    def __init__(self, base_path: Optional[str] = None, name: Optional[str] = None):
        from jinjaview.support import Storage

        if base_path is not None:
            Storage.initialize(base_path)
        self.base_path = str(Storage.base())
        self.name = name
        self.providers: List[Any] = []
        self.booted = False
        self.bindings: Dict[str, Dict[str, Any]] = {}
        self._sanic_app: Optional[Sanic] = None

        # Application modules (cells, helpers) are imported from the base path
        if self.base_path not in sys.path:
            sys.path.insert(0, self.base_path)

    @property
    def sanic_app(self) -> Sanic:
        """Sanic app, created on first access"""
        if self._sanic_app is None:
            from jinjaview.support import Config, Str

            name = self.name or Config.get('app.app_name', 'jinjaview')
            self._sanic_app = Sanic(Str.snake(name))
            self._sanic_app.config.AUTO_EXTEND = False
            self.register_request_context(self._sanic_app)
        return self._sanic_app

    def register_request_context(self, sanic_app: Sanic):
        """Expose the request being handled through Facade.get_current_request()"""
        from jinjaview.support.facades import Facade

        @sanic_app.middleware('request')
        async def bind_request(request):
            Facade.set_current_request(request)
            self.reset_request_state()

        @sanic_app.middleware('response')
        async def release_request(request, response):
            Facade.clear_current_request()

    def reset_request_state(self):
        """Drop per-request view state such as the render profile"""
        from jinjaview.defaults import VIEW_ENVIRONMENT_BINDING

        # An environment that was never built has nothing to reset
        if self.resolved(VIEW_ENVIRONMENT_BINDING):
            self.make(VIEW_ENVIRONMENT_BINDING).reset_profile()

    def singleton(self, key: str, factory_or_instance: Any):
        """
        Register a singleton binding

        A function is called once, lazily, with the application;
        anything else is stored as the instance.
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance}

    def bind(self, key: str, factory: callable):
        """Bind a factory that builds a fresh instance on every make()"""
        self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """Resolve key (KeyError when nothing is bound)"""
        if key not in self.bindings:
            raise KeyError(f"Binding '{key}' not found in container")

        binding = self.bindings[key]
        if binding['type'] == 'singleton':
            if binding['instance'] is None:
                logger.debug("Resolving singleton %s", key)
                binding['instance'] = binding['factory'](self)
            return binding['instance']

        return binding['factory'](self)

    def has(self, key: str) -> bool:
        return key in self.bindings

    def resolved(self, key: str) -> bool:
        """True once a singleton has been instantiated"""
        binding = self.bindings.get(key)
        return binding is not None and binding['type'] == 'singleton' and binding['instance'] is not None

    def forget(self, key: str):
        self.bindings.pop(key, None)

    def register_provider(self, provider_class: Type):
        """Instantiate a provider and run its register() step"""
        provider = provider_class(self)
        register = provider.register()
        if register is not False:
            self.providers.append(provider)
        return provider

    def boot(self):
        """Boot registered providers once, in registration order"""
        if self.booted:
            return

        for provider in self.providers:
            provider.boot()

        self.booted = True

    def run(self, host=None, port=None, **kwargs):
        """Boot, then serve the Sanic app"""
        from jinjaview.defaults import DEFAULT_HOST, DEFAULT_PORT
        host = host or DEFAULT_HOST
        port = port or DEFAULT_PORT
        self.boot()
        self.sanic_app.run(host=host, port=port, **kwargs)
