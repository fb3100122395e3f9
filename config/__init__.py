"""
Configuration management for the pattern demos.
"""
from .config_manager import (
    Config,
    ConfigManager,
    get_config_manager,
    reset_config_manager,
    get_config,
    set_config
)
from .presets import ConfigPresets

__all__ = [
    'Config',
    'ConfigManager',
    'get_config_manager',
    'reset_config_manager',
    'get_config',
    'set_config',
    'ConfigPresets',
]
