from jinjaview.providers.logging_service_provider import LoggingServiceProvider
from jinjaview.providers.jinja_view_service_provider import JinjaViewServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'JinjaViewServiceProvider',
]
