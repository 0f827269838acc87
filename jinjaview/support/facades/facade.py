"""
Facade System
Static access to container services and the request being handled
"""
from typing import Any, Optional
from contextvars import ContextVar
from sanic.request import Request

_app_instance: Optional[Any] = None

# Per-task request, so views rendered for a request can reach it without arguments
_current_request: ContextVar[Optional[Request]] = ContextVar('current_request', default=None)


class FacadeMeta(type):
    """Forwards unknown class attributes to the facade root"""

    def __getattr__(cls, name: str) -> Any:
        return getattr(cls.get_facade_root(), name)


class Facade(metaclass=FacadeMeta):
    """
    Base facade

    Subclasses name a container binding in get_facade_accessor(); attribute
    access on the class resolves that binding.

    Example:
        class Views(Facade):
            @classmethod
            def get_facade_accessor(cls):
                return 'view.environment'

        Views.get_environment()
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        raise NotImplementedError(f"Facade {cls.__name__} does not implement get_facade_accessor()")

    @classmethod
    def get_facade_root(cls) -> Any:
        app = cls.get_app()
        if not app:
            raise RuntimeError(
                f"Facade {cls.__name__} has no application; call Facade.set_app(app) while bootstrapping."
            )
        return app.make(cls.get_facade_accessor())

    @classmethod
    def get_app(cls):
        return _app_instance

    @classmethod
    def set_app(cls, app):
        """Attach the application (None detaches it)"""
        global _app_instance
        _app_instance = app

    @classmethod
    def get_current_request(cls) -> Optional[Request]:
        return _current_request.get()

    @classmethod
    def set_current_request(cls, request: Request):
        if not isinstance(request, Request):
            raise RuntimeError("No active request context or invalid request type.")
        _current_request.set(request)

    @classmethod
    def clear_current_request(cls):
        _current_request.set(None)
