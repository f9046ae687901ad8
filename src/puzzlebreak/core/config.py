"""
Configuration Management

Centralized configuration management with YAML file support and
environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List, Tuple, Callable
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()


@dataclass
class ValidationConfig:
    """Answer validation engine settings."""
    fuzzy_threshold: int = 2
    synonym_cache_ttl: int = 86400  # 24 hours
    synonym_lookup_timeout: float = 3.0
    synonym_cache_max_size: int = 1000
    synonyms_enabled: bool = True

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is out of range."""
        errors: List[str] = []
        if isinstance(self.fuzzy_threshold, bool) or not isinstance(self.fuzzy_threshold, int):
            errors.append("fuzzy_threshold must be an integer")
        elif self.fuzzy_threshold < 0:
            errors.append("fuzzy_threshold must be >= 0")
        if self.synonym_cache_ttl <= 0:
            errors.append("synonym_cache_ttl must be positive")
        if self.synonym_lookup_timeout <= 0:
            errors.append("synonym_lookup_timeout must be positive")
        if self.synonym_cache_max_size <= 0:
            errors.append("synonym_cache_max_size must be positive")

        if errors:
            raise ConfigurationError(
                "Invalid validation configuration",
                {"errors": errors}
            )


@dataclass
class SynonymServiceConfig:
    """Synonym lookup service settings."""
    provider: str = "datamuse"  # Options: datamuse, wordnet, static, none
    base_url: str = "https://api.datamuse.com"
    max_results: int = 100
    static: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class DatabaseConfig:
    """Database configuration settings."""
    url: str = "sqlite:///database/puzzlebreak.db"
    echo: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/puzzlebreak.log"
    max_size: str = "10MB"
    backup_count: int = 5
    json: bool = False


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "PuzzleBreak"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    validation: ValidationConfig = field(default_factory=ValidationConfig)
    synonyms: SynonymServiceConfig = field(default_factory=SynonymServiceConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain dictionary."""
        # Apply environment variable overrides
        config_data = cls._apply_env_overrides(config_data)

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        sections = {
            'validation': ValidationConfig,
            'synonyms': SynonymServiceConfig,
            'database': DatabaseConfig,
            'logging': LoggingConfig,
        }
        for name, section_cls in sections.items():
            if name in config_data and isinstance(config_data[name], dict):
                try:
                    config_data[name] = section_cls(**config_data[name])
                except TypeError as e:
                    raise ConfigurationError(
                        f"Invalid '{name}' configuration section: {str(e)}"
                    ) from e

        config = cls(**config_data)
        config.validation.validate()
        return config

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings: Dict[str, Tuple[List[str], Callable[[str], Any]]] = {
            'DATABASE_URL': (['database', 'url'], str),
            'LOG_LEVEL': (['logging', 'level'], str),
            'ENVIRONMENT': (['environment'], str),
            'PUZZLEBREAK_FUZZY_THRESHOLD': (['validation', 'fuzzy_threshold'], int),
            'PUZZLEBREAK_SYNONYM_CACHE_TTL': (['validation', 'synonym_cache_ttl'], int),
            'PUZZLEBREAK_SYNONYM_TIMEOUT': (['validation', 'synonym_lookup_timeout'], float),
            'PUZZLEBREAK_SYNONYM_PROVIDER': (['synonyms', 'provider'], str),
        }

        for env_var, (config_path, cast) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                try:
                    value = cast(env_value)
                except ValueError as e:
                    raise ConfigurationError(
                        f"Invalid value for {env_var}: {env_value!r}"
                    ) from e
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = value

        return config_data


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig.from_dict({})

    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
