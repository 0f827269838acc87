"""
Markdown Extension
markdown_to_html filter served by the markdown runtime
"""
from typing import Callable, Dict

from jinja2 import Environment, pass_environment
from markupsafe import Markup

from jinjaview.jinja.extension.base import Extension
from jinjaview.jinja.runtime import MarkdownRuntime, get_runtime


@pass_environment
def markdown_to_html(environment: Environment, body: str) -> Markup:
    """
    Example:
        {{ post.body|markdown_to_html }}

    Raises:
        RuntimeNotAvailableError: No markdown engine is configured
    """
    runtime = get_runtime(environment, MarkdownRuntime.IDENTIFIER)
    return Markup(runtime.convert(body))


class MarkdownExtension(Extension):

    def get_filters(self) -> Dict[str, Callable]:
        return {
            'markdown_to_html': markdown_to_html,
        }
