"""
Facades Package
Laravel-style facades for static access to services
"""
from jinjaview.support.facades.facade import Facade
from jinjaview.support.facades.app import App

__all__ = [
    'Facade',
    'App',
]
