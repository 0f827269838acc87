"""
jinjaview
Jinja views for Sanic applications
"""
from jinjaview.helpers import (
    # Response
    view,
    render,
    # String
    snake_case,
    camel_case,
    studly_case,
)

__version__ = '1.0.0'

__all__ = [
    'view',
    'render',
    'snake_case',
    'camel_case',
    'studly_case',
]
