"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Iterable, List, Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ViewException(FrameworkException):
    """
    View layer error

    Raised for malformed template names or rendering preconditions

    Example:
        raise ViewException("Cannot use '..' in template paths")
    """
    message = "View error"


class MissingFileException(ViewException):
    """
    A template-like file could not be located

    Carries the logical name that was requested and every directory that
    was searched, so callers can report the name rather than a file path.
    """
    kind = 'Template'

    def __init__(
        self,
        name: str,
        paths: Optional[Iterable] = None,
        file: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.name = name
        self.file = file or name
        self.paths: List[str] = [str(path) for path in (paths or [])]
        if message is None:
            message = f"{self.kind} file `{name}` could not be found."
            if self.paths:
                message += "\n\nThe following paths were searched:\n\n"
                message += "\n".join(f"- `{path}`" for path in self.paths)
        super().__init__(message)


class MissingTemplateException(MissingFileException):
    """
    Template not found

    Example:
        raise MissingTemplateException('Articles/index', paths)
    """
    kind = 'Template'


class MissingLayoutException(MissingFileException):
    """Layout not found"""
    kind = 'Layout'


class MissingElementException(MissingFileException):
    """Element not found (raised by View.element, not by resolution)"""
    kind = 'Element'


class MissingCellException(ViewException):
    """
    Cell class not found

    Example:
        raise MissingCellException("Cell class `InboxCell` could not be found.")
    """
    message = "Cell class could not be found"


class MissingHelperException(ViewException):
    """Helper class not found"""
    message = "Helper class could not be found"


class MissingPluginException(FrameworkException):
    """Plugin is not loaded"""
    message = "Plugin could not be found"


class EnvironmentNotCreatedError(ViewException):
    """
    Rendering was attempted before the Jinja environment was built

    Example:
        raise EnvironmentNotCreatedError()
    """
    message = "Jinja environment instance not created."


class RuntimeNotAvailableError(ViewException):
    """
    A template asked for a runtime capability that no loader provides

    Example:
        raise RuntimeNotAvailableError("Unable to load the `markdown` runtime.")
    """
    message = "Runtime not available"
