"""
Tests for configuration loading.
"""

import pytest
from unittest.mock import patch

from puzzlebreak.core.config import AppConfig, ValidationConfig, get_config, set_config, reload_config
from puzzlebreak.core.exceptions import ConfigurationError


class TestAppConfig:
    """Test cases for AppConfig."""

    def test_defaults(self):
        """Test documented defaults."""
        config = AppConfig()

        assert config.validation.fuzzy_threshold == 2
        assert config.validation.synonym_cache_ttl == 86400
        assert config.validation.synonym_lookup_timeout == 3.0
        assert config.synonyms.provider == "datamuse"

    def test_from_yaml(self, temp_dir):
        """Test nested sections and the app block are loaded."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text(
            "app:\n"
            "  name: Test\n"
            "validation:\n"
            "  fuzzy_threshold: 1\n"
            "  synonym_cache_ttl: 600\n"
            "synonyms:\n"
            "  provider: static\n"
            "  static:\n"
            "    round: [circular]\n"
        )

        with patch.dict('os.environ', {}, clear=True):
            config = AppConfig.from_yaml(config_file)

        assert config.name == "Test"
        assert config.validation.fuzzy_threshold == 1
        assert config.validation.synonym_cache_ttl == 600
        assert config.synonyms.static == {"round": ["circular"]}

    def test_empty_yaml_uses_defaults(self, temp_dir):
        """Test an empty file yields the default configuration."""
        config_file = temp_dir / "empty.yaml"
        config_file.write_text("")

        with patch.dict('os.environ', {}, clear=True):
            config = AppConfig.from_yaml(config_file)

        assert config.validation == ValidationConfig()

    def test_env_overrides_are_cast(self):
        """Test environment overrides take the field's type."""
        env = {
            'PUZZLEBREAK_FUZZY_THRESHOLD': '3',
            'PUZZLEBREAK_SYNONYM_TIMEOUT': '0.5',
            'PUZZLEBREAK_SYNONYM_PROVIDER': 'wordnet',
            'DATABASE_URL': 'sqlite:///:memory:',
        }
        with patch.dict('os.environ', env, clear=True):
            config = AppConfig.from_dict({'validation': {'fuzzy_threshold': 1}})

        assert config.validation.fuzzy_threshold == 3
        assert config.validation.synonym_lookup_timeout == 0.5
        assert config.synonyms.provider == "wordnet"
        assert config.database.url == "sqlite:///:memory:"

    def test_bad_env_override(self):
        """Test uncastable overrides raise ConfigurationError."""
        with patch.dict('os.environ', {'PUZZLEBREAK_FUZZY_THRESHOLD': 'two'}, clear=True):
            with pytest.raises(ConfigurationError, match="PUZZLEBREAK_FUZZY_THRESHOLD"):
                AppConfig.from_dict({})

    def test_unknown_section_key(self):
        """Test unknown keys in a section raise ConfigurationError."""
        with patch.dict('os.environ', {}, clear=True):
            with pytest.raises(ConfigurationError, match="validation"):
                AppConfig.from_dict({'validation': {'fuzzy_treshold': 1}})

    def test_global_config(self, temp_dir):
        """Test set/get/reload of the global instance."""
        custom = AppConfig(name="Custom")
        set_config(custom)
        assert get_config() is custom

        with patch.dict('os.environ', {}, clear=True):
            reloaded = reload_config(temp_dir / "missing.yaml")

        assert reloaded.name == "PuzzleBreak"
        set_config(None)


class TestValidationConfig:
    """Test cases for ValidationConfig.validate()."""

    def test_valid(self):
        """Test defaults pass validation."""
        ValidationConfig().validate()

    @pytest.mark.parametrize("kwargs", [
        {"fuzzy_threshold": -1},
        {"fuzzy_threshold": 1.5},
        {"fuzzy_threshold": True},
        {"synonym_cache_ttl": 0},
        {"synonym_lookup_timeout": 0},
        {"synonym_cache_max_size": 0},
    ])
    def test_invalid(self, kwargs):
        """Test out-of-range settings raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ValidationConfig(**kwargs).validate()
