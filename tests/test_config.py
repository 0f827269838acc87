import importlib
import sys

import pytest

from jinjaview.support import Config, ConfigObject, EnvHelper


@pytest.fixture()
def config_package(tmp_path, monkeypatch):
    """A config/ package with app.py and view.py on sys.path."""
    package = tmp_path / 'config'
    package.mkdir()
    (package / '__init__.py').write_text('')
    (package / 'app.py').write_text("DEBUG = False\nENCODING = 'UTF-8'\nPATHS = {'templates': ['/srv/views']}\n")
    (package / 'view.py').write_text("JINJA_VIEW_CONFIG = {'environment': {'strict_variables': True}}\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    for name in ('config', 'config.app', 'config.view'):
        monkeypatch.delitem(sys.modules, name, raising=False)
    importlib.invalidate_caches()
    Config.flush()

    yield package

    for name in ('config', 'config.app', 'config.view'):
        sys.modules.pop(name, None)


def test_reads_config_modules_case_insensitively(config_package):
    assert Config.get('app.encoding') == 'UTF-8'
    assert Config.get('APP.Paths.Templates') == ['/srv/views']
    assert Config.get('view.jinja_view_config.environment.strict_variables') is True


def test_missing_keys_return_default(config_package):
    assert Config.get('app.missing', 'fallback') == 'fallback'
    assert Config.get('nofile.key', 1) == 1
    assert Config.has('app.missing') is False


def test_runtime_overrides_win_and_are_visible_through_parents():
    Config.set('view.cells', {'Inbox': 'app.view.cell.inbox_cell.InboxCell'})

    assert Config.get('view.cells.Inbox') == 'app.view.cell.inbox_cell.InboxCell'
    assert Config.get('view.cells.Other', 'none') == 'none'


def test_clear_runtime_overrides():
    Config.set('blog.title', 'Notes')
    Config.clear_runtime_overrides()

    assert Config.get('blog.title') is None


def test_merge_is_deep_and_does_not_mutate():
    defaults = {'environment': {'debug': False, 'cache': True}, 'markdown': {'engine': None}}

    merged = Config.merge(defaults, {'environment': {'debug': True}})

    assert merged == {'environment': {'debug': True, 'cache': True}, 'markdown': {'engine': None}}
    assert defaults['environment']['debug'] is False


def test_as_object():
    Config.set('view.jinja_view_config', {'markdown': {'engine': None}})

    config = Config.as_object('view.JINJA_VIEW_CONFIG')

    assert isinstance(config, ConfigObject)
    assert config.markdown.engine is None


def test_env_helper_loads_dotenv(tmp_path, monkeypatch):
    monkeypatch.setenv('JINJAVIEW_FLAG', 'no')
    (tmp_path / '.env').write_text('JINJAVIEW_FLAG=yes\n')

    assert EnvHelper.load(tmp_path / '.env', override=True) is True
    assert EnvHelper.get_bool('JINJAVIEW_FLAG') is True


def test_env_helper_without_dotenv_file(tmp_path):
    assert EnvHelper.load(tmp_path / 'missing.env') is False
    assert EnvHelper.get_bool('JINJAVIEW_UNSET_FLAG', True) is True
