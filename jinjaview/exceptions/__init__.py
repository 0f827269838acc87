"""
Exceptions Package
Framework and view layer exceptions
"""
from jinjaview.exceptions.custom import (
    FrameworkException,
    ViewException,
    MissingFileException,
    MissingTemplateException,
    MissingLayoutException,
    MissingElementException,
    MissingCellException,
    MissingHelperException,
    MissingPluginException,
    EnvironmentNotCreatedError,
    RuntimeNotAvailableError,
)

__all__ = [
    'FrameworkException',
    'ViewException',
    'MissingFileException',
    'MissingTemplateException',
    'MissingLayoutException',
    'MissingElementException',
    'MissingCellException',
    'MissingHelperException',
    'MissingPluginException',
    'EnvironmentNotCreatedError',
    'RuntimeNotAvailableError',
]
