"""
String Loader Extension
Compile templates from strings at render time
"""
from typing import Callable, Dict, Optional

from jinja2 import Environment, Template, pass_environment

from jinjaview.jinja.extension.base import Extension


@pass_environment
def template_from_string(environment: Environment, template: str, name: Optional[str] = None) -> Template:
    """
    Example:
        {% include template_from_string('Hello {{ name }}') %}
    """
    compiled = environment.from_string(template)
    if name is not None:
        compiled.name = name
    return compiled


class StringLoaderExtension(Extension):

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'template_from_string': template_from_string,
        }
