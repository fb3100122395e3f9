"""Tests for configuration management."""
import json
import pytest
import yaml
from config import (
    Config,
    ConfigManager,
    ConfigPresets,
    get_config_manager,
    get_config,
    set_config
)
from utils.exceptions import ConfigurationError


class TestConfig:
    """Tests for the config container."""

    def test_dot_access(self):
        """Test attribute access into nested sections."""
        config = Config({'logging': {'log_level': 'INFO'}})
        assert config.logging.log_level == 'INFO'

    def test_empty_section_is_shared(self):
        """Test writes through an empty nested section reach the parent."""
        config = Config({'database': {}})
        config.database['url'] = 'mongodb://x/db'
        assert config.get('database.url') == 'mongodb://x/db'

    def test_missing_attribute(self):
        """Test missing keys raise AttributeError."""
        with pytest.raises(AttributeError):
            Config().missing

    def test_dotted_get_and_set(self):
        """Test dotted keys create and read nested values."""
        config = Config()
        config.set('database.url', 'mongodb://x/db')
        assert config.get('database.url') == 'mongodb://x/db'
        assert config['database'] == {'url': 'mongodb://x/db'}
        assert config.get('database.port', 27017) == 27017

    def test_deep_update(self):
        """Test nested sections merge instead of being replaced."""
        config = Config({'logging': {'log_level': 'INFO', 'log_dir': 'logs'}})
        config.update({'logging': {'log_level': 'DEBUG'}})
        assert config.to_dict() == {'logging': {'log_level': 'DEBUG', 'log_dir': 'logs'}}


class TestConfigManager:
    """Tests for the config manager."""

    def test_defaults(self):
        """Test a manager seeded with defaults."""
        manager = ConfigManager(ConfigPresets.default())
        assert manager.get('logging.log_level') == 'WARNING'
        assert manager.get('demos.enabled') == ['strategy', 'factory', 'singleton']

    def test_defaults_are_copied(self):
        """Test changing the manager never touches the preset."""
        preset = ConfigPresets.default()
        manager = ConfigManager(preset)
        manager.set('logging.log_level', 'DEBUG')
        assert preset['logging']['log_level'] == 'WARNING'

    def test_verbose_preset(self):
        """Test the verbose preset only raises the log level."""
        verbose = ConfigPresets.verbose()
        assert verbose['logging']['log_level'] == 'DEBUG'
        assert verbose['demos'] == ConfigPresets.default()['demos']

    def test_load_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / 'settings.yaml'
        path.write_text(yaml.safe_dump({'demos': {'enabled': ['factory']}}))

        manager = ConfigManager(ConfigPresets.default())
        manager.load_from_file(str(path))

        assert manager.get('demos.enabled') == ['factory']
        assert manager.get('logging.log_level') == 'WARNING'

    def test_load_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({'database': {'url': 'mongodb://json/db'}}))

        manager = ConfigManager()
        manager.load_from_file(str(path))
        assert manager.get('database.url') == 'mongodb://json/db'

    def test_load_empty_yaml(self, tmp_path):
        """Test an empty file loads as no settings."""
        path = tmp_path / 'empty.yml'
        path.write_text('')

        manager = ConfigManager()
        manager.load_from_file(str(path))
        assert manager.get_config().to_dict() == {}

    def test_missing_file(self, tmp_path):
        """Test a missing file is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager().load_from_file(str(tmp_path / 'nope.yaml'))

        assert 'filepath' in exc_info.value.details

    def test_unsupported_format(self, tmp_path):
        """Test unknown file formats are rejected."""
        path = tmp_path / 'settings.toml'
        path.write_text('a = 1')

        with pytest.raises(ConfigurationError):
            ConfigManager().load_from_file(str(path))

    def test_malformed_file(self, tmp_path):
        """Test a parse failure is a configuration error."""
        path = tmp_path / 'broken.json'
        path.write_text('{not json')

        with pytest.raises(ConfigurationError):
            ConfigManager().load_from_file(str(path))

    def test_non_mapping_file(self, tmp_path):
        """Test a top-level list is rejected."""
        path = tmp_path / 'list.yaml'
        path.write_text('- a\n- b\n')

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager().load_from_file(str(path))

        assert exc_info.value.details['actual_type'] == 'list'

    @pytest.mark.parametrize("fmt, suffix", [('yaml', '.yaml'), ('json', '.json')])
    def test_save_and_reload(self, tmp_path, fmt, suffix):
        """Test saved configuration loads back unchanged."""
        path = tmp_path / 'out' / f'settings{suffix}'
        manager = ConfigManager(ConfigPresets.default())
        manager.save_to_file(str(path), format=fmt)

        reloaded = ConfigManager()
        reloaded.load_from_file(str(path))
        assert reloaded.get_config().to_dict() == ConfigPresets.default()

    def test_save_unsupported_format(self, tmp_path):
        """Test saving to an unknown format is rejected."""
        with pytest.raises(ConfigurationError):
            ConfigManager().save_to_file(str(tmp_path / 'x.ini'), format='ini')

    def test_clear(self):
        """Test clearing drops every value."""
        manager = ConfigManager(ConfigPresets.default())
        manager.clear()
        assert manager.get('logging') is None


class TestGlobalConfig:
    """Tests for the process-wide manager."""

    def test_global_defaults(self):
        """Test the global manager starts from the default preset."""
        assert get_config('database.url') == 'mongodb://localhost:8080/project'

    def test_global_manager_is_shared(self):
        """Test the same manager is returned each time."""
        assert get_config_manager() is get_config_manager()

    def test_set_config(self):
        """Test setting a global value."""
        set_config('logging.log_level', 'DEBUG')
        assert get_config('logging.log_level') == 'DEBUG'
