"""配置管理模組"""

from .settings import Settings, load_settings
from .prefs import MemoryPrefs, JsonPrefs
from . import constants

__all__ = ['Settings', 'load_settings', 'MemoryPrefs', 'JsonPrefs', 'constants']
