"""
Cell Tag
{% cell 'Name::action' {data} {options} %} or {% cell var = 'Name' ... %}
"""
from typing import Any, Dict, Optional

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.runtime import Context

from jinjaview.jinja.extension.view import current_view
from jinjaview.jinja.token_parser.element import parse_arguments


class CellTag(Extension):
    """
    Render a cell, or assign it to a variable

    Example:
        {% cell 'Inbox::expanded' {'user_id': user.id} %}

        {% cell inbox = 'Inbox' %}
        {{ inbox }}
    """

    tags = {'cell'}

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno

        target = None
        if parser.stream.current.test('name') and parser.stream.look().test('assign'):
            target = parser.parse_assign_target(name_only=True)
            parser.stream.expect('assign')

        name = parser.parse_expression()
        data, options = parse_arguments(parser, 2)

        call = self.call_method(
            '_create_cell',
            [nodes.ContextReference(), name, data, options],
            lineno=lineno,
        )
        if target is not None:
            return nodes.Assign(target, call, lineno=lineno)
        return nodes.Output([call], lineno=lineno)

    def _create_cell(self, context: Context, name: str, data: Any,
                     options: Optional[Dict[str, Any]]):
        return current_view(context).cell(name, data, options or {})
