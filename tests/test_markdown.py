import pytest

from jinjaview.exceptions import RuntimeNotAvailableError, ViewException
from jinjaview.jinja.environment import ViewEnvironment
from jinjaview.jinja.runtime import MarkdownRuntime, MarkdownRuntimeLoader, PythonMarkdownEngine, get_runtime


class UpperEngine:

    def __init__(self):
        self.calls = 0

    def convert(self, text):
        self.calls += 1
        return f'<p>{text.upper()}</p>'


def make_environment(engine=None):
    return ViewEnvironment({'environment': {'cache': False}, 'markdown': {'engine': engine}})


def test_markdown_without_engine_raises_runtime_not_available():
    environment = make_environment().get_environment()

    with pytest.raises(RuntimeNotAvailableError) as excinfo:
        environment.from_string('{{ body|markdown_to_html }}').render(body='# Title')

    assert 'markdown' in str(excinfo.value)


def test_markdown_engine_output_is_returned_verbatim():
    environment = make_environment(UpperEngine()).get_environment()

    assert environment.from_string('{{ body|markdown_to_html }}').render(body='hi <b>') == '<p>HI <B></p>'


def test_runtime_is_loaded_once_per_environment():
    engine = UpperEngine()
    environment = make_environment(engine).get_environment()

    first = get_runtime(environment, MarkdownRuntime.IDENTIFIER)
    second = get_runtime(environment, MarkdownRuntime.IDENTIFIER)

    assert first is second
    assert first.engine is engine


def test_runtime_loader_ignores_other_identifiers():
    assert MarkdownRuntimeLoader(UpperEngine()).load('intl') is None


def test_engine_without_convert_is_rejected():
    with pytest.raises(ViewException):
        make_environment(object())


def test_python_markdown_engine():
    pytest.importorskip('markdown')
    environment = make_environment(PythonMarkdownEngine()).get_environment()

    rendered = environment.from_string('{{ body|markdown_to_html }}').render(body='**bold**')

    assert rendered == '<p><strong>bold</strong></p>'
