"""
Built-in configuration presets.
"""
from typing import Dict, Any


class ConfigPresets:
    """Collection of predefined configuration presets."""

    @staticmethod
    def default() -> Dict[str, Any]:
        """Quiet logging, every demo enabled."""
        return {
            'logging': {
                'log_level': 'WARNING',
                'log_dir': 'logs',
                'enable_console': True,
                'enable_file': False,
                'enable_structured': False
            },
            'demos': {
                'enabled': ['strategy', 'factory', 'singleton']
            },
            'database': {
                'url': 'mongodb://localhost:8080/project'
            }
        }

    @staticmethod
    def verbose() -> Dict[str, Any]:
        """Default preset with debug logging."""
        config = ConfigPresets.default()
        config['logging']['log_level'] = 'DEBUG'
        return config
