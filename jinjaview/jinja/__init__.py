"""
Jinja Integration
Environment, loader, tags, extensions and runtimes used by JinjaView
"""
from jinjaview.jinja.environment import ViewEnvironment
from jinjaview.jinja.loader import Loader
from jinjaview.jinja.profiler import Profile
from jinjaview.jinja.runtime import MarkdownRuntime, MarkdownRuntimeLoader, PythonMarkdownEngine, RuntimeLoader

__all__ = [
    'ViewEnvironment',
    'Loader',
    'Profile',
    'RuntimeLoader',
    'MarkdownRuntime',
    'MarkdownRuntimeLoader',
    'PythonMarkdownEngine',
]
