"""
App Facade
Provides static access to the application container
"""
from jinjaview.support.facades.facade import Facade


class App(Facade):
    """
    Application Facade

    Example:
        environment = App.make('view.environment')

        if App.has('view.environment'):
            ...
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'app'

    @classmethod
    def get_facade_root(cls):
        """Override to return app directly instead of resolving"""
        return cls.get_app()

    @classmethod
    def bound(cls, key: str) -> bool:
        """True if an application is set and has a binding for key"""
        app = cls.get_app()
        return app is not None and app.has(key)
