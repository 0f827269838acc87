"""
Helper Functions
Shortcuts for route handlers and application code
"""
import asyncio
from typing import Any, Dict, Optional, Union

from sanic.response import HTTPResponse

from jinjaview.defaults import DEFAULT_LAYOUT


async def view(
    template: str,
    context: Optional[Dict[str, Any]] = None,
    layout: Union[str, bool] = DEFAULT_LAYOUT,
    status: int = 200,
    **view_options: Any
) -> HTTPResponse:
    """
    Render a view off the event loop and return an HTML response

    Args:
        template: Template name, e.g. 'Articles/index'
        context: View variables
        layout: Layout name, or False for no layout
        status: HTTP status code

    Example:
        @app.get('/')
        async def home(request):
            return await view('Pages/home', {'user': user})
    """
    from jinjaview.http.response_helper import ResponseHelper

    return await asyncio.to_thread(
        ResponseHelper.view, template, context, layout, status, **view_options
    )


def render(template: str, context: Optional[Dict[str, Any]] = None,
           layout: Union[str, bool] = DEFAULT_LAYOUT, **view_options: Any) -> str:
    """Render a view to a string"""
    from jinjaview.http.response_helper import ResponseHelper

    return ResponseHelper.render(template, context, layout, **view_options)


def snake_case(value: str) -> str:
    from jinjaview.support import Str
    return Str.snake(value)


def camel_case(value: str) -> str:
    from jinjaview.support import Str
    return Str.camel(value)


def studly_case(value: str) -> str:
    from jinjaview.support import Str
    return Str.studly(value)
