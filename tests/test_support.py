import gettext
import json
from datetime import datetime, timezone

import pytest

from jinjaview import camel_case, snake_case, studly_case
from jinjaview.exceptions import MissingCellException, MissingHelperException, MissingPluginException
from jinjaview.support import ClassLoader, Config, I18n, Inflector, Number, Plugin, Str, Time
from jinjaview.support.i18n import __, __d, __dn
from jinjaview.view import Cell, Helper, HelperRegistry, View
from jinjaview.view.cell import resolve_cell_class


class TestStr:

    def test_case_conversions(self):
        assert Str.snake('BlogPost') == 'blog_post'
        assert Str.camel('blog_post') == 'blogPost'
        assert Str.studly('blog_post') == 'BlogPost'
        assert Str.kebab('BlogPost') == 'blog-post'
        assert Str.slug('Crème Brûlée!') == 'creme-brulee'

    def test_helpers_forward_to_str(self):
        assert snake_case('BlogPost') == 'blog_post'
        assert camel_case('blog_post') == 'blogPost'
        assert studly_case('blog_post') == 'BlogPost'

    def test_truncate_and_tail(self):
        assert Str.truncate('The quick brown fox', 12) == 'The quick...'
        assert Str.truncate('The quick brown fox', 12, exact=False) == 'The...'
        assert Str.truncate('short', 12) == 'short'
        assert Str.tail('The quick brown fox', 10) == '...own fox'

    def test_excerpt(self):
        assert Str.excerpt('The quick brown fox jumps', 'brown', 4) == '...ick brown fox...'

    def test_insert_replaces_longest_keys_first(self):
        assert Str.insert(':user is :username', {'user': 'A', 'username': 'ada'}) == 'A is ada'

    def test_tokenize_respects_bounds(self):
        assert Str.tokenize('a,(b,c),d') == ['a', '(b,c)', 'd']

    def test_wrap_and_list(self):
        assert Str.wrap('aaa bbb ccc', 7) == 'aaa bbb\nccc'
        assert Str.to_list(['a']) == 'a'
        assert Str.to_list(['a', 'b'], 'or') == 'a or b'

    def test_substr(self):
        assert Str.substr('Hello', -3) == 'llo'
        assert Str.substr('Hello', 0, -1) == 'Hell'


class TestNumber:

    def test_readable_sizes(self):
        assert Number.to_readable_size(1) == '1 Byte'
        assert Number.to_readable_size(512) == '512 Bytes'
        assert Number.to_readable_size(1048576) == '1 MB'
        assert Number.from_readable_size('2MB') == 2097152
        assert Number.from_readable_size('lots') is False

    def test_currency(self):
        assert Number.currency(-5, 'GBP') == '-£5.00'
        assert Number.currency(1234.5) == '$1,234.50'

    def test_format_separators(self):
        assert Number.format(1234.5, 2, thousands='.', decimals=',') == '1.234,50'
        assert Number.format_delta(-5) == '-5'
        assert Number.format_delta(0) == '0'


class TestTime:

    def test_parse_treats_naive_values_as_utc(self):
        parsed = Time.parse('2024-03-14T09:30:00')

        assert parsed.tzinfo is not None
        assert parsed.utcoffset().total_seconds() == 0

    def test_parse_converts_to_timezone(self):
        parsed = Time.parse(datetime(2024, 3, 14, 12, tzinfo=timezone.utc), 'Europe/Paris')

        assert parsed.hour == 13

    def test_nice(self):
        assert Time.nice('2024-03-14T09:30:00') == 'Mar 14, 2024, 09:30 AM'

    def test_time_ago_in_words(self):
        now = datetime(2024, 3, 14, tzinfo=timezone.utc)

        assert Time.time_ago_in_words(datetime(2024, 3, 11, tzinfo=timezone.utc), now) == '3 days ago'
        assert Time.time_ago_in_words(datetime(2024, 3, 14, 2, tzinfo=timezone.utc), now) == 'in 2 hours'
        assert Time.time_ago_in_words(now, now) == 'just now'


def test_inflector():
    assert Inflector.pluralize('person') == 'people'
    assert Inflector.tableize('BlogPost') == 'blog_posts'
    assert Inflector.humanize('author_id') == 'Author'


class DictTranslations(gettext.NullTranslations):

    def __init__(self, messages):
        super().__init__()
        self.messages = messages

    def gettext(self, message):
        return self.messages.get(message, message)


def test_untranslated_messages_are_formatted():
    assert __('Hello {0}', 'Ada') == 'Hello Ada'
    assert __('Hello {name}', {'name': 'Ada'}) == 'Hello Ada'
    assert __('{0} and {1}', ['a', 'b']) == 'a and b'
    assert __('') == ''


def test_registered_catalog_is_used():
    I18n.set_locale('fr_FR')
    I18n.set_translator('blog', DictTranslations({'Read more': 'Lire la suite'}))

    assert __d('blog', 'Read more') == 'Lire la suite'
    assert __d('blog', 'Untranslated') == 'Untranslated'
    assert I18n.get_locale() == 'fr_FR'


def test_domain_plurals():
    assert __dn('blog', '{0} comment', '{0} comments', 1, 1) == '1 comment'
    assert __dn('blog', '{0} comment', '{0} comments', 3, 3) == '3 comments'


def test_clear_resets_locale():
    I18n.set_locale('de_DE')
    I18n.clear()

    assert I18n.get_locale() == I18n.DEFAULT_LOCALE


class TestPlugin:

    def test_load_and_lookup(self, tmp_path):
        manifest = Plugin.load('Blog', tmp_path / 'Blog', templates='views')

        assert Plugin.is_loaded('Blog')
        assert Plugin.loaded() == ['Blog']
        assert Plugin.template_path('Blog') == tmp_path / 'Blog' / 'views'
        assert manifest.name == 'Blog'

    def test_missing_plugin_raises(self):
        with pytest.raises(MissingPluginException):
            Plugin.get('Nope')

    def test_split(self):
        assert Plugin.split('Blog.Articles/index') == ('Blog', 'Articles/index')
        assert Plugin.split('Blog.index', dot_append=True) == ('Blog.', 'index')
        assert Plugin.split('index') == (None, 'index')
        assert Plugin.split('index', plugin='Blog') == ('Blog', 'index')

    def test_discover_reads_manifests(self, tmp_path):
        plugin_dir = tmp_path / 'plugins' / 'Shop'
        plugin_dir.mkdir(parents=True)
        (plugin_dir / 'package.json').write_text(json.dumps({'name': 'Shop', 'version': '2.0.0'}))
        (tmp_path / 'plugins' / 'NoManifest').mkdir()

        discovered = Plugin.discover(tmp_path / 'plugins')

        assert list(discovered) == ['Shop']
        assert Plugin.get('Shop').version == '2.0.0'

    def test_unload(self, tmp_path):
        Plugin.load('Blog', tmp_path)
        Plugin.unload('Blog')

        assert not Plugin.is_loaded('Blog')


class TestClassLoader:

    def test_load_dotted_path(self):
        assert ClassLoader.load('jinjaview.support.str.Str') is Str

    def test_try_load_missing_module(self):
        assert ClassLoader.try_load('app_that_does_not_exist.view.helper.html_helper.HtmlHelper') is None

    def test_try_load_missing_attribute(self):
        assert ClassLoader.try_load('jinjaview.support.str.Nope') is None


class CounterHelper(Helper):

    default_config = {'start': 1}

    def initialize(self, config):
        self.value = config['start']


class TestHelperRegistry:

    def test_load_class_instance_and_path(self):
        view = View()
        registry = HelperRegistry(view)

        helper = registry.load('Counter', CounterHelper, {'start': 5})
        registry.load('Text', 'jinjaview.view.helper.Helper')

        assert helper.value == 5
        assert helper.get_view() is view
        assert registry.loaded() == ['Counter', 'Text']
        assert list(registry) == ['Counter', 'Text']
        assert len(registry) == 2

    def test_missing_conventional_helper_raises(self):
        with pytest.raises(MissingHelperException):
            HelperRegistry(View()).load('Nope')

    def test_unload(self):
        registry = HelperRegistry(View())
        registry.load('Counter', CounterHelper)
        registry.unload('Counter')

        assert 'Counter' not in registry


class ArchiveCell(Cell):

    valid_cell_options = ['limit']
    limit = 10

    def display(self):
        self.set('limit', self.limit)


class TestCells:

    def test_configured_cell_class_is_resolved(self):
        Config.set('view.cells', {'Archive': ArchiveCell})

        assert resolve_cell_class('Archive') is ArchiveCell

    def test_configured_dotted_path_is_loaded(self):
        Config.set('view.cells', {'Archive': f'{__name__}.ArchiveCell'})

        assert resolve_cell_class('Archive') is ArchiveCell

    def test_unknown_cell_raises(self):
        with pytest.raises(MissingCellException):
            resolve_cell_class('Nope')

    def test_cell_name_and_options(self):
        cell = ArchiveCell(options={'limit': 3, 'ignored': True})

        assert cell.name == 'Archive'
        assert cell.limit == 3
        assert not hasattr(cell, 'ignored')

    def test_missing_action_raises(self):
        cell = ArchiveCell(view_class=View, action='nope')

        with pytest.raises(MissingCellException):
            cell.render()
