"""
Logging Configuration
Rotating file loggers for the view layer, in JSON or plain text
"""
import logging
import logging.handlers
import json
from typing import Optional, Tuple
from datetime import datetime


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record

    Render records carry template, render_type and duration_ms (see
    ProfilerExtension); any other `extra` keys are copied as well.
    """

    VIEW_FIELDS: Tuple[str, ...] = ('template', 'render_type', 'duration_ms')

    # LogRecord attributes that never go into the payload as extras
    RECORD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f'{record.module}:{record.funcName}:{record.lineno}',
        }

        view = {field: getattr(record, field) for field in self.VIEW_FIELDS if hasattr(record, field)}
        if view:
            payload['view'] = view

        for key, value in vars(record).items():
            if key not in self.RECORD_ATTRS and key not in self.VIEW_FIELDS:
                payload[key] = value

        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class LoggerConfig:
    """Builds the loggers named in app.ALLOWED_LOGGING_HANDLERS"""

    TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    LEVELS = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.DEBUG,
        'local': logging.DEBUG,
        'testing': logging.ERROR,
    }

    @classmethod
    def setup_logger(
        cls,
        name: Optional[str],
        format_type: str = 'json',
        max_bytes: int = None,
        backup_count: int = None,
        file_name: Optional[str] = None
    ) -> logging.Logger:
        """
        Attach a rotating file handler (plus a console handler in debug)

        Args:
            name: Logger name (None for the root logger)
            format_type: 'json' or 'text'
            max_bytes: Size at which the file rotates
            backup_count: Rotated files to keep
            file_name: Log file name without extension (defaults to name)

        Example:
            LoggerConfig.setup_logger('views', format_type='text')
            # writes storage/logs/views.log
        """
        from jinjaview.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT
        from jinjaview.support import Config, EnvHelper

        app_env = Config.get('app.APP_ENV', EnvHelper.get('APP_ENV', 'production'))
        app_debug = Config.get('app.debug', EnvHelper.get_bool('APP_DEBUG', False))
        formatter = cls.create_formatter(format_type)

        logger = logging.getLogger(name)
        logger.setLevel(cls.get_level_by_environment(app_env))
        logger.handlers.clear()
        logger.addHandler(cls.create_file_handler(
            file_name or name or 'application',
            formatter,
            DEFAULT_LOG_MAX_BYTES if max_bytes is None else max_bytes,
            DEFAULT_LOG_BACKUP_COUNT if backup_count is None else backup_count,
        ))

        if app_debug:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        logger.propagate = False
        return logger

    @classmethod
    def create_formatter(cls, format_type: str) -> logging.Formatter:
        if format_type == 'json':
            return JSONFormatter()
        return logging.Formatter(cls.TEXT_FORMAT)

    @staticmethod
    def create_file_handler(file_name: str, formatter: logging.Formatter,
                            max_bytes: int, backup_count: int) -> logging.Handler:
        from jinjaview.support import Storage

        log_file = Storage.ensure_directory(Storage.logs()) / f'{file_name}.log'
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        handler.setFormatter(formatter)
        return handler

    @classmethod
    def get_level_by_environment(cls, environment: str) -> int:
        """Level for an APP_ENV value (INFO when unknown)"""
        return cls.LEVELS.get(str(environment).lower(), logging.INFO)
