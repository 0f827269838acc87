import json

import pytest
from jinja2 import TemplateNotFound

from jinjaview.jinja.loader import Loader
from jinjaview.support import Config, Plugin


def test_resolves_with_suffixes_in_order(template):
    template('Articles/index.html', 'html')
    jinja_file = template('Articles/index.jinja', 'jinja')

    assert Loader().resolve_file_name('Articles/index') == str(jinja_file)


def test_existing_file_is_used_as_is(template):
    path = template('element/card.jinja', 'card')

    assert Loader().resolve_file_name(str(path)) == str(path)


def test_bare_name_is_tried_before_suffixes(template):
    path = template('Articles/index.jinja', 'jinja')

    assert Loader().resolve_file_name('Articles/index.jinja') == str(path)


def test_missing_template_raises_template_not_found(views):
    loader = Loader()

    with pytest.raises(TemplateNotFound):
        loader.resolve_file_name('Articles/missing')
    assert loader.exists('Articles/missing') is False


def test_configured_template_paths_are_searched_in_order(tmp_path):
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    (second / 'Pages').mkdir(parents=True)
    (second / 'Pages' / 'home.jinja').write_text('second')
    first.mkdir()
    Config.set('app.paths.templates', [str(first), str(second)])

    assert Loader().resolve_file_name('Pages/home') == str(second / 'Pages' / 'home.jinja')


def test_plugin_templates_are_resolved_from_the_plugin(tmp_path):
    plugin_path = tmp_path / 'plugins' / 'Blog'
    (plugin_path / 'templates' / 'element').mkdir(parents=True)
    (plugin_path / 'templates' / 'element' / 'sidebar.jinja').write_text('sidebar')
    Plugin.load('Blog', plugin_path)

    resolved = Loader().resolve_file_name('Blog.element/sidebar')

    assert resolved == str(plugin_path / 'templates' / 'element' / 'sidebar.jinja')


def test_discovered_plugin_manifest_sets_template_directory(tmp_path):
    plugin_path = tmp_path / 'plugins' / 'Shop'
    (plugin_path / 'views').mkdir(parents=True)
    (plugin_path / 'views' / 'cart.jinja').write_text('cart')
    (plugin_path / 'package.json').write_text(json.dumps({'name': 'Shop', 'templates': 'views'}))

    assert 'Shop' in Plugin.discover()
    assert Loader().exists('Shop.cart')


def test_source_reports_uptodate(template, environment):
    path = template('Pages/home.jinja', 'home')

    source, filename, uptodate = Loader().get_source(environment.get_environment(), 'Pages/home')

    assert source == 'home'
    assert filename == str(path)
    assert uptodate() is True


def test_includes_use_framework_names(template, render_string):
    template('element/card.jinja', '[{{ title }}]')

    assert render_string("{% include 'element/card' %}", title='x') == '[x]'
