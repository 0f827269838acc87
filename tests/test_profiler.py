import threading
import time

from jinjaview.jinja.environment import ViewEnvironment
from jinjaview.jinja.extension import ProfilerExtension
from jinjaview.jinja.profiler import Profile, find_profile
from jinjaview.support import Config, Plugin
from jinjaview.view import JinjaView


def test_root_duration_is_the_sum_of_children():
    root = Profile()
    child = Profile('a.jinja', Profile.TEMPLATE, 'a.jinja')
    child.starts = {'wt': 1.0}
    child.ends = {'wt': 1.5}
    other = Profile('b.jinja', Profile.ELEMENT, 'b.jinja')
    other.starts = {'wt': 2.0}
    other.ends = {'wt': 2.25}
    root.add_profile(child)
    root.add_profile(other)

    assert root.get_duration() == 0.75
    assert len(root) == 2
    assert root.to_dict()['profiles'][1]['type'] == Profile.ELEMENT


def test_unfinished_entry_has_no_duration():
    assert Profile('a', Profile.TEMPLATE).get_duration() == 0.0


def test_extension_nests_entries():
    profiler = ProfilerExtension(Profile())

    with profiler.profile_render('layout.jinja', Profile.LAYOUT):
        with profiler.profile_render('element.jinja', Profile.ELEMENT):
            pass

    layout = profiler.profile.profiles[0]
    assert layout.type == Profile.LAYOUT
    assert layout.profiles[0].template == 'element.jinja'
    assert find_profile(profiler.profile, 'element.jinja') is layout.profiles[0]
    assert find_profile(profiler.profile, 'missing') is None


def test_profiler_is_attached_only_with_debug_and_toolbar_plugin(tmp_path):
    assert ViewEnvironment({'environment': {'cache': False}}).get_profile() is None

    Plugin.load('DebugKit', tmp_path / 'plugins' / 'DebugKit')
    assert isinstance(ViewEnvironment({'environment': {'cache': False}}).get_profile(), Profile)

    Config.set('app.debug', False)
    assert ViewEnvironment({'environment': {'cache': False}}).get_profile() is None


def test_renders_are_recorded(template, tmp_path):
    Plugin.load('DebugKit', tmp_path / 'plugins' / 'DebugKit')
    environment = ViewEnvironment({'environment': {'cache': False}})
    template('element/card.jinja', 'card')
    page = template('Pages/home.jinja', "{{ element('card') }}")
    layout = template('layout/default.jinja', "{{ fetch('content') }}")

    view = JinjaView(template_path='Pages', template='home', environment=environment)
    view.render()

    profile = view.get_profile()
    assert [entry.template for entry in profile] == [str(page), str(layout)]
    assert profile.profiles[0].profiles[0].type == Profile.ELEMENT
    assert profile.profiles[1].type == Profile.LAYOUT


def test_parallel_renders_nest_under_their_own_parents():
    profiler = ProfilerExtension(Profile())
    both_open = threading.Barrier(2)

    def render(name):
        with profiler.profile_render(f'{name}.jinja', Profile.TEMPLATE):
            both_open.wait(timeout=5)
            with profiler.profile_render(f'{name}-card.jinja', Profile.ELEMENT):
                time.sleep(0.01)

    threads = [threading.Thread(target=render, args=(name,)) for name in ('home', 'about')]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(entry.template for entry in profiler.profile) == ['about.jinja', 'home.jinja']
    for entry in profiler.profile:
        assert [child.template for child in entry] == [entry.template.replace('.jinja', '-card.jinja')]
        assert len(entry.profiles[0]) == 0
    assert profiler.current() is profiler.profile


def test_reset_profile_starts_an_empty_root(template, tmp_path):
    Plugin.load('DebugKit', tmp_path / 'plugins' / 'DebugKit')
    environment = ViewEnvironment({'environment': {'cache': False}})
    template('Pages/home.jinja', 'Home')

    for _ in range(3):
        JinjaView(template_path='Pages', template='home', layout=False, environment=environment).render()
    assert len(environment.get_profile()) == 3

    environment.reset_profile()

    assert len(environment.get_profile()) == 0


def test_reset_profile_without_profiler_is_a_no_op():
    environment = ViewEnvironment({'environment': {'cache': False}})

    environment.reset_profile()

    assert environment.get_profile() is None
