"""Pytest configuration and fixtures."""
from pathlib import Path

import pytest

from jinjaview.jinja.environment import ViewEnvironment
from jinjaview.support import Config, EnvHelper, I18n, Plugin, Storage
from jinjaview.support.facades import Facade


def write_template(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path


@pytest.fixture(autouse=True)
def framework(tmp_path, monkeypatch):
    """Point the framework at a scratch project and reset its class-level state."""
    monkeypatch.delenv('APP_DEBUG', raising=False)
    Storage.initialize(tmp_path)
    Config.flush()
    Config.set('app.debug', True)

    yield tmp_path

    Config.flush()
    Plugin.unload()
    I18n.clear()
    EnvHelper.reset()
    Facade.set_app(None)
    Storage.initialize()


@pytest.fixture()
def views(tmp_path):
    """Application template directory (resources/views)."""
    path = Storage.views()
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture()
def template(views):
    """Write a template below resources/views."""
    def write(relative: str, content: str) -> Path:
        return write_template(views, relative, content)
    return write


@pytest.fixture()
def environment():
    return ViewEnvironment({'environment': {'cache': False}})


@pytest.fixture()
def render_string(environment):
    """Render template source with the shared environment and no view bound."""
    def render(source: str, **context) -> str:
        return environment.get_environment().from_string(source).render(**context)
    return render
