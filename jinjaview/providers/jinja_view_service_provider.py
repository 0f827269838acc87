"""
Jinja View Service Provider
Builds the shared view environment once per application
"""
from jinjaview.defaults import JINJA_VIEW_CONFIG_KEY, VIEW_ENVIRONMENT_BINDING
from jinjaview.jinja.environment import ViewEnvironment
from jinjaview.logging import getLogger
from jinjaview.service_provider import ServiceProvider
from jinjaview.support import Config, EnvHelper, Plugin

logger = getLogger(__name__)


class JinjaViewServiceProvider(ServiceProvider):
    """Registers 'view.environment' and seeds its globals"""

    def register(self):
        def make_environment(app):
            return ViewEnvironment(Config.get(JINJA_VIEW_CONFIG_KEY, {}) or {})

        self.app.singleton(VIEW_ENVIRONMENT_BINDING, make_environment)

    def boot(self):
        """Discover plugins, then build the environment so the first request does not pay for it"""
        discovered = Plugin.discover()
        if discovered:
            logger.debug("Loaded plugins: %s", ', '.join(discovered))

        view_environment = self.app.make(VIEW_ENVIRONMENT_BINDING)
        view_environment.get_environment().globals.update({
            'app_name': Config.get('app.app_name', EnvHelper.get('APP_NAME', 'Framework')),
            'app_env': EnvHelper.get('APP_ENV', 'production'),
        })
