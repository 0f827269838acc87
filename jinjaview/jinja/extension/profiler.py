"""
Profiler Extension
Times every render into a Profile tree
"""
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Tuple

from jinjaview.jinja.extension.base import Extension
from jinjaview.jinja.profiler import Profile
from jinjaview.logging import getLogger

logger = getLogger(__name__)


class ProfilerExtension(Extension):
    """
    Records nested render timings under a root Profile

    The chain of open entries is kept per context, so renders running in
    parallel worker threads each nest under their own parents. The root is
    shared and is reset at the start of every request.

    Example:
        with profiler.profile_render('/views/Articles/index.jinja', Profile.TEMPLATE):
            template.render(data)
    """

    def __init__(self, profile: Profile):
        self.profile = profile
        self._lock = threading.Lock()
        # Tuples, so a context copied into a worker thread cannot change its parent's chain
        self._open: ContextVar[Tuple[Profile, ...]] = ContextVar(f'open_profiles_{id(self)}', default=())

    def current(self) -> Profile:
        """Innermost open entry of this context (the root when none is open)"""
        open_entries = self._open.get()
        return open_entries[-1] if open_entries else self.profile

    def reset(self):
        with self._lock:
            self.profile.reset()

    @contextmanager
    def profile_render(self, template: str, type: str = Profile.TEMPLATE) -> Iterator[Profile]:
        entry = Profile(template, type, template)
        with self._lock:
            self.current().add_profile(entry)
        token = self._open.set(self._open.get() + (entry,))
        try:
            yield entry
        finally:
            entry.leave()
            self._open.reset(token)
            duration_ms = round(entry.get_duration() * 1000, 2)
            logger.debug(
                "Rendered %s %s in %.2f ms", entry.type, entry.template, duration_ms,
                extra={'template': entry.template, 'render_type': entry.type, 'duration_ms': duration_ms},
            )
