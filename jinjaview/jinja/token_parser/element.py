"""
Element Tag
{% element 'Name' {data} {options} %}
"""
from typing import Any, Dict, List, Optional

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.runtime import Context
from markupsafe import Markup

from jinjaview.jinja.extension.view import current_view


def parse_arguments(parser: Parser, limit: int) -> List[nodes.Expr]:
    """Up to limit expressions before the block end, commas optional"""
    arguments: List[nodes.Expr] = []
    while not parser.stream.current.test('block_end') and len(arguments) < limit:
        if arguments:
            parser.stream.skip_if('comma')
        arguments.append(parser.parse_expression())

    while len(arguments) < limit:
        arguments.append(nodes.Const(None))
    return arguments


class ElementTag(Extension):
    """
    Render an element of the current view

    Example:
        {% element 'Blog.sidebar' {'posts': posts} {'ignore_missing': true} %}
    """

    tags = {'element'}

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno

        name = parser.parse_expression()
        data, options = parse_arguments(parser, 2)

        call = self.call_method(
            '_render_element',
            [nodes.ContextReference(), name, data, options],
            lineno=lineno,
        )
        return nodes.Output([call], lineno=lineno)

    def _render_element(self, context: Context, name: str, data: Optional[Dict[str, Any]],
                        options: Optional[Dict[str, Any]]) -> Markup:
        return Markup(current_view(context).element(name, data or {}, options or {}))
