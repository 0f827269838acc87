"""
Framework Support Classes
"""

from jinjaview.support.storage import Storage
from jinjaview.support.env_helper import EnvHelper
from jinjaview.support.config import Config, ConfigObject
from jinjaview.support.class_loader import ClassLoader
from jinjaview.support.str import Str
from jinjaview.support.inflector import Inflector
from jinjaview.support.number import Number
from jinjaview.support.time import Time
from jinjaview.support.i18n import I18n
from jinjaview.support.plugin import Plugin, PluginManifest

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'ConfigObject',
    'ClassLoader',
    'Str',
    'Inflector',
    'Number',
    'Time',
    'I18n',
    'Plugin',
    'PluginManifest',
]
