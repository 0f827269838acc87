"""
Storage
Application directory layout
"""

import os
from pathlib import Path
from typing import List, Union


class Storage:
    """
    Paths of a jinjaview application

    /
    ├── config/             # app.py, view.py
    ├── plugins/            # one directory per plugin (package.json + templates/)
    ├── resources/
    │   ├── locales/        # <locale>/LC_MESSAGES/<domain>.mo
    │   └── views/
    │       ├── layout/
    │       ├── element/
    │       ├── cell/
    │       └── plugin/     # app overrides of plugin templates
    └── storage/
        ├── framework/cache/jinja/   # compiled template bytecode
        └── logs/
    """

    _base_path: Path = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path] = None):
        """Set the application root (the working directory when omitted)"""
        cls._base_path = Path(base_path if base_path is not None else os.getcwd()).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Example:
            Storage.base('.env')  # /project/.env
        """
        if cls._base_path is None:
            cls.initialize()
        return cls._base_path.joinpath(*(path.lstrip('/') for path in paths))

    @classmethod
    def resources(cls, *paths: str) -> Path:
        return cls.base('resources', *paths)

    @classmethod
    def views(cls, *paths: str) -> Path:
        return cls.resources('views', *paths)

    @classmethod
    def template_paths(cls) -> List[Path]:
        """Application template directories (app.paths.templates, else resources/views)"""
        from jinjaview.support.config import Config

        paths = Config.get('app.paths.templates') or [cls.views()]
        if isinstance(paths, (str, Path)):
            paths = [paths]
        return [Path(path) for path in paths]

    @classmethod
    def plugins(cls, *paths: str) -> Path:
        return cls.base('plugins', *paths)

    @classmethod
    def storage(cls, *paths: str) -> Path:
        return cls.base('storage', *paths)

    @classmethod
    def cache_jinja(cls, *paths: str) -> Path:
        return cls.storage('framework', 'cache', 'jinja', *paths)

    @classmethod
    def logs(cls, *paths: str) -> Path:
        return cls.storage('logs', *paths)

    @staticmethod
    def ensure_directory(path: Union[str, Path]) -> Path:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path
