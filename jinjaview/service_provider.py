"""
Service Provider Base Class
Providers register services in the container and bootstrap them
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jinjaview.application import Application


class ServiceProvider(ABC):
    """
    Base Service Provider class

    register() runs when the provider is added; boot() runs once every
    provider has been registered. Returning False from register() skips
    booting the provider.
    """

    def __init__(self, app: 'Application'):
        self.app = app

    def register(self):
        """
        Register services in the container

        Example:
            self.app.singleton('view.environment', lambda app: ViewEnvironment())
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)

        Example:
            self.app.make('view.environment').get_environment().globals['app_name'] = 'Blog'
        """
        pass
