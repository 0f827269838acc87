"""
View Package
"""
from jinjaview.view.cell import Cell
from jinjaview.view.helper import Helper, HelperRegistry
from jinjaview.view.view import View
from jinjaview.view.jinja_view import JinjaView

__all__ = [
    'Cell',
    'Helper',
    'HelperRegistry',
    'View',
    'JinjaView',
]
