"""
Template tags for framework views
"""
from jinjaview.jinja.token_parser.cell import CellTag
from jinjaview.jinja.token_parser.element import ElementTag

__all__ = [
    'CellTag',
    'ElementTag',
]
