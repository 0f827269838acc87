"""
Configure Extension
Read application configuration from templates
"""
from typing import Callable, Dict

from jinjaview.jinja.extension.base import Extension
from jinjaview.support import Config


class ConfigureExtension(Extension):

    def get_functions(self) -> Dict[str, Callable]:
        return {
            'config': Config.get,
            'config_check': Config.has,
        }
