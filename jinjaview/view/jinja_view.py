"""
Jinja View
Renders framework views with the shared Jinja environment
"""
from typing import Any, Dict, List, Optional, Union

from jinja2 import Environment

from jinjaview.defaults import DEFAULT_TEMPLATE_EXTENSION, JINJA_TEMPLATE_EXTENSION, VIEW_ENVIRONMENT_BINDING
from jinjaview.exceptions import EnvironmentNotCreatedError, MissingLayoutException, MissingTemplateException
from jinjaview.jinja.environment import ViewEnvironment
from jinjaview.jinja.profiler import Profile
from jinjaview.logging import getLogger
from jinjaview.support.facades import App
from jinjaview.view.view import View

logger = getLogger(__name__)


class JinjaView(View):
    """
    View rendering '.jinja' templates (falling back to '.html')

    The environment is injected, or taken from the application container
    under 'view.environment'. It is shared by every view, so the current
    view is re-bound to the `_view` global on each render.

    Example:
        view = JinjaView(
            template_path='Articles',
            template='index',
            view_vars={'articles': articles},
            environment=app.make('view.environment'),
        )
        html = view.render()
    """

    EXT = JINJA_TEMPLATE_EXTENSION

    # Tried in order; the first existing file wins
    extensions: List[str] = [JINJA_TEMPLATE_EXTENSION, DEFAULT_TEMPLATE_EXTENSION]

    _ext = JINJA_TEMPLATE_EXTENSION

    def __init__(self, *args: Any, environment: Optional[ViewEnvironment] = None, **kwargs: Any):
        self.view_environment = environment
        super().__init__(*args, **kwargs)

    def initialize(self):
        if self.view_environment is None and App.bound(VIEW_ENVIRONMENT_BINDING):
            self.view_environment = App.make(VIEW_ENVIRONMENT_BINDING)

    def get_view_environment(self) -> ViewEnvironment:
        if self.view_environment is None:
            raise EnvironmentNotCreatedError()
        return self.view_environment

    def get_environment(self) -> Environment:
        """
        The Jinja environment

        Raises:
            EnvironmentNotCreatedError: No environment was injected or bound
        """
        return self.get_view_environment().get_environment()

    def get_profile(self) -> Optional[Profile]:
        if self.view_environment is None:
            return None
        return self.view_environment.get_profile()

    def _cell_view_options(self) -> Dict[str, Any]:
        options = super()._cell_view_options()
        options['environment'] = self.view_environment
        return options

    def _render(self, template_file: str, data: Optional[Dict[str, Any]] = None) -> str:
        view_environment = self.get_view_environment()
        environment = view_environment.get_environment()
        environment.globals['_view'] = self

        context = dict(data) if data else dict(self.view_vars)
        for name, helper in self.helpers().items():
            context[name] = helper
        context['_view'] = self

        template = environment.get_template(template_file)
        with view_environment.profiling(template_file, self._current_type or Profile.TEMPLATE):
            return template.render(context)

    def _get_template_file_name(self, name: Optional[str] = None) -> str:
        missing: Optional[MissingTemplateException] = None
        for extension in self.extensions:
            self._ext = extension
            try:
                return super()._get_template_file_name(name)
            except MissingTemplateException as e:
                logger.debug("Template %s not found with %s", e.name, extension)
                missing = e

        if missing is not None:
            raise missing
        raise MissingTemplateException(name or self.template or '')

    def _get_layout_file_name(self, name: Optional[str] = None) -> str:
        missing: Optional[MissingLayoutException] = None
        for extension in self.extensions:
            self._ext = extension
            try:
                return super()._get_layout_file_name(name)
            except MissingLayoutException as e:
                logger.debug("Layout %s not found with %s", e.name, extension)
                missing = e

        if missing is not None:
            raise missing
        raise MissingLayoutException(name or str(self.layout))

    def _get_element_file_name(self, name: str, plugin_check: bool = True) -> Union[str, bool]:
        for extension in self.extensions:
            self._ext = extension
            element_file = super()._get_element_file_name(name, plugin_check)
            if element_file:
                return element_file
        return False
