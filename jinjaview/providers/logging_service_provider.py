"""
Logging Service Provider
Initializes application-wide structured logging
"""
import logging

from jinjaview.logging.logger_config import LoggerConfig
from jinjaview.service_provider import ServiceProvider
from jinjaview.support import Config


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up structured logging"""

    def register(self):
        self.setup_application_logger()

    def setup_application_logger(self):
        """
        Setup each logger named in app.ALLOWED_LOGGING_HANDLERS

        Example (config/app.py):
            ALLOWED_LOGGING_HANDLERS = {
                'views': {'name': 'jinjaview', 'file_name': 'views'},
            }
        """
        allowed_handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', {}) or {}

        for handler_config in allowed_handlers.values():
            LoggerConfig.setup_logger(
                name=handler_config.get('name'),
                format_type=handler_config.get('format', 'json'),
                file_name=handler_config.get('file_name'),
            )

        # Keep Sanic's console output out of our handlers
        for logger_name in ('sanic.root', 'sanic.error', 'sanic.access', 'sanic.server'):
            logging.getLogger(logger_name).propagate = False
