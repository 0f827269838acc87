"""
Render Profile
Tree of timed render entries collected while a debug toolbar is active
"""
import time
from typing import Any, Dict, Iterator, List, Optional


class Profile:
    """
    One timed entry (the root, a template, a layout or an element)

    The root's duration is the sum of its children; every other entry
    measures wall time between enter() and leave().
    """

    ROOT = 'ROOT'
    TEMPLATE = 'template'
    LAYOUT = 'layout'
    ELEMENT = 'element'

    def __init__(self, template: str = 'main', type: str = ROOT, name: str = 'main'):
        self.template = template
        self.type = type
        self.name = name
        self.profiles: List['Profile'] = []
        self.starts: Dict[str, float] = {}
        self.ends: Dict[str, float] = {}
        self.enter()

    def is_root(self) -> bool:
        return self.type == self.ROOT

    def is_template(self) -> bool:
        return self.type == self.TEMPLATE

    def add_profile(self, profile: 'Profile'):
        self.profiles.append(profile)

    def enter(self):
        self.starts = {'wt': time.perf_counter()}

    def leave(self):
        self.ends = {'wt': time.perf_counter()}

    def get_duration(self) -> float:
        """Seconds spent in this entry"""
        if self.is_root() and self.profiles:
            return sum(profile.get_duration() for profile in self.profiles)

        if 'wt' not in self.ends:
            return 0.0
        return self.ends['wt'] - self.starts['wt']

    def reset(self):
        self.profiles = []
        self.starts = {}
        self.ends = {}
        self.enter()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'template': self.template,
            'type': self.type,
            'name': self.name,
            'duration': self.get_duration(),
            'profiles': [profile.to_dict() for profile in self.profiles],
        }

    def __iter__(self) -> Iterator['Profile']:
        return iter(self.profiles)

    def __len__(self) -> int:
        return len(self.profiles)

    def __repr__(self) -> str:
        return f'Profile({self.type}:{self.template}, {len(self.profiles)} children)'


def find_profile(profile: Profile, template: str) -> Optional[Profile]:
    """Depth-first search for the first entry rendering template"""
    for child in profile:
        if child.template == template:
            return child
        found = find_profile(child, template)
        if found is not None:
            return found
    return None
