import asyncio
import json
import logging
import logging.handlers

import pytest

from jinjaview import view
from jinjaview.application import Application
from jinjaview.http import ResponseHelper
from jinjaview.logging import JSONFormatter, getLogger
from jinjaview.providers import JinjaViewServiceProvider, LoggingServiceProvider
from jinjaview.service_provider import ServiceProvider
from jinjaview.support import Config, Plugin, Storage
from jinjaview.support.facades import App, Facade


class Counter:
    created = 0

    def __init__(self):
        Counter.created += 1


@pytest.fixture(autouse=True)
def reset_counter():
    Counter.created = 0


def test_singleton_factory_is_lazy_and_resolved_once():
    app = Application()
    app.singleton('counter', lambda app: Counter())

    assert Counter.created == 0
    assert app.resolved('counter') is False

    first = app.make('counter')

    assert app.make('counter') is first
    assert Counter.created == 1
    assert app.resolved('counter') is True


def test_singleton_instance_is_stored_as_is():
    app = Application()
    counter = Counter()
    app.singleton('counter', counter)

    assert app.make('counter') is counter


def test_bind_creates_a_new_instance_each_time():
    app = Application()
    app.bind('counter', lambda app: Counter())

    assert app.make('counter') is not app.make('counter')
    assert app.resolved('counter') is False


def test_missing_binding_raises_key_error():
    app = Application()

    with pytest.raises(KeyError):
        app.make('nope')

    app.bind('gone', lambda app: None)
    app.forget('gone')
    assert app.has('gone') is False


def test_providers_register_then_boot_once():
    calls = []

    class RecordingProvider(ServiceProvider):

        def register(self):
            calls.append('register')

        def boot(self):
            calls.append('boot')

    class SkippedProvider(ServiceProvider):

        def register(self):
            return False

        def boot(self):
            calls.append('skipped boot')

    app = Application()
    app.register_provider(RecordingProvider)
    app.register_provider(SkippedProvider)
    app.boot()
    app.boot()

    assert calls == ['register', 'boot']
    assert app.booted is True


def test_application_base_path_initializes_storage(tmp_path):
    project = (tmp_path / 'blog').resolve()
    project.mkdir()

    app = Application(project)

    assert app.base_path == str(project)
    assert Storage.views() == project / 'resources' / 'views'


def test_app_facade_reports_bindings():
    assert App.bound('view.environment') is False

    app = Application()
    app.register_provider(JinjaViewServiceProvider)
    Facade.set_app(app)

    assert App.bound('view.environment') is True


def test_sanic_app_is_created_lazily_with_a_snake_case_name():
    app = Application(name='JinjaviewBlogSuite')

    assert app._sanic_app is None
    assert app.sanic_app.name == 'jinjaview_blog_suite'
    assert app.sanic_app is app.sanic_app


def test_current_request_requires_a_sanic_request():
    assert Facade.get_current_request() is None

    with pytest.raises(RuntimeError):
        Facade.set_current_request(object())


class TestLoggingServiceProvider:

    @pytest.fixture()
    def views_logger(self):
        Config.set('app.ALLOWED_LOGGING_HANDLERS', {
            'views': {'name': 'blog_views', 'file_name': 'views', 'format': 'text'},
        })
        yield logging.getLogger('blog_views')

        logger = logging.getLogger('blog_views')
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_configured_logger_writes_to_storage_logs(self, views_logger):
        Application().register_provider(LoggingServiceProvider)

        file_handlers = [
            handler for handler in views_logger.handlers
            if isinstance(handler, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(Storage.logs('views.log'))
        assert views_logger.propagate is False
        assert logging.getLogger('sanic.access').propagate is False

    def test_json_formatter_groups_render_fields(self):
        record = logging.LogRecord('jinjaview.jinja', logging.DEBUG, __file__, 1, 'Rendered %s', ('page',), None)
        record.template = 'Pages/home.jinja'
        record.duration_ms = 1.5
        record.request_id = 'abc'

        payload = json.loads(JSONFormatter().format(record))

        assert payload['message'] == 'Rendered page'
        assert payload['view'] == {'template': 'Pages/home.jinja', 'duration_ms': 1.5}
        assert payload['request_id'] == 'abc'

    def test_get_logger_only_allows_configured_names(self, views_logger):
        assert getLogger('blog_views') is views_logger
        assert getLogger('unconfigured') is logging.getLogger()
        assert getLogger('jinjaview.view').name == 'jinjaview.view'


class TestResponses:

    @pytest.fixture(autouse=True)
    def app(self, views):
        app = Application()
        app.register_provider(JinjaViewServiceProvider)
        Facade.set_app(app)
        app.boot()
        return app

    def test_render_returns_layout_wrapped_html(self, template):
        template('Articles/index.jinja', 'Hello {{ name }}')
        template('layout/default.jinja', '<main>{{ fetch("content") }}</main>')

        assert ResponseHelper.render('Articles/index', {'name': 'Ada'}) == '<main>Hello Ada</main>'

    def test_view_returns_html_response(self, template):
        template('errors/missing.jinja', 'Not found: {{ url }}')

        response = ResponseHelper.view('errors/missing', {'url': '/nope'}, layout=False, status=404)

        assert response.status == 404
        assert response.body == b'Not found: /nope'
        assert response.content_type.startswith('text/html')

    def test_async_view_helper(self, template):
        template('Pages/home.jinja', 'Home')

        response = asyncio.run(view('Pages/home', layout=False, headers={'X-Page': 'home'}))

        assert response.status == 200
        assert response.body == b'Home'
        assert response.headers['X-Page'] == 'home'


class TestRequestState:

    def test_reset_request_state_clears_the_render_profile(self, template, tmp_path):
        Plugin.load('DebugKit', tmp_path / 'plugins' / 'DebugKit')
        app = Application()
        app.register_provider(JinjaViewServiceProvider)
        Facade.set_app(app)
        app.boot()
        template('Pages/home.jinja', 'Home')

        ResponseHelper.render('Pages/home', layout=False)
        ResponseHelper.render('Pages/home', layout=False)
        profile = app.make('view.environment').get_profile()
        assert len(profile) == 2

        app.reset_request_state()

        assert len(profile) == 0

    def test_reset_request_state_leaves_an_unbuilt_environment_alone(self):
        app = Application()
        app.register_provider(JinjaViewServiceProvider)

        app.reset_request_state()

        assert app.resolved('view.environment') is False
