"""
Response Helpers
Render views into Sanic responses
"""
from typing import Any, Dict, Optional, Type, Union

from sanic.response import HTTPResponse, html

from jinjaview.defaults import DEFAULT_LAYOUT
from jinjaview.support.facades import Facade
from jinjaview.view.jinja_view import JinjaView


class ResponseHelper:
    """
    Example:
        @app.get('/articles')
        async def index(request):
            return ResponseHelper.view('Articles/index', {'articles': articles})
    """

    @staticmethod
    def render(
        template: str,
        context: Optional[Dict[str, Any]] = None,
        layout: Union[str, bool] = DEFAULT_LAYOUT,
        view_class: Optional[Type[JinjaView]] = None,
        **view_options: Any
    ) -> str:
        """
        Render a template (and its layout) to a string

        Args:
            template: 'TemplatePath/name' or a bare name with template_path in view_options
            context: View variables
            layout: Layout name, or False for no layout
            view_class: View class to render with (defaults to JinjaView)
            view_options: Extra view constructor arguments (plugin, theme, helpers, environment)
        """
        view_class = view_class or JinjaView
        view_options.setdefault('request', Facade.get_current_request())

        view = view_class(
            view_vars=context,
            template=template,
            layout=layout,
            **view_options
        )
        return view.render()

    @staticmethod
    def view(
        template: str,
        context: Optional[Dict[str, Any]] = None,
        layout: Union[str, bool] = DEFAULT_LAYOUT,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
        view_class: Optional[Type[JinjaView]] = None,
        **view_options: Any
    ) -> HTTPResponse:
        """
        Render a template into an HTML response

        Example:
            return ResponseHelper.view('errors/missing', {'url': request.path}, status=404)
        """
        content = ResponseHelper.render(template, context, layout, view_class, **view_options)
        return html(content, status=status, headers=headers)
