"""
EnvHelper
Environment variables, seeded once from the application's .env file
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Example:
        EnvHelper.get('APP_ENV', 'production')
        EnvHelper.get_bool('APP_DEBUG')
    """

    TRUTHY = ('true', '1', 'yes', 'on')

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Read a .env file into os.environ (Storage.base('.env') by default)

        Returns False when the file does not exist. Variables already set
        in the process win unless override is True.
        """
        with cls._lock:
            if env_path is not None:
                cls._env_path = Path(env_path)
            elif cls._env_path is None:
                from jinjaview.support.storage import Storage
                cls._env_path = Storage.base('.env')

            cls._loaded = True
            if not cls._env_path.exists():
                return False

            load_dotenv(cls._env_path, override=override)
            return True

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        if not cls._loaded:
            cls.load()
        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        value = cls.get(key)
        if value is None:
            return default
        return value.lower() in cls.TRUTHY

    @classmethod
    def reset(cls):
        """Forget which file was read so the next access loads again"""
        cls._env_path = None
        cls._loaded = False
