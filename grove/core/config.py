"""Configuration management for Grove.

Settings live in INI files, one per repository (.grove/config) plus an
optional per-user file (~/.groveconfig). Keys are addressed as
section.option, e.g. color.ui or core.loglevel.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict, Tuple

from .errors import ConfigError

DEFAULTS = {
    ('color', 'ui'): 'true',
    ('core', 'loglevel'): 'WARNING',
}

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def split_key(key: str):
    """Split a dotted key into (section, option); bare keys go to 'core'."""
    return tuple(key.split('.', 1)) if '.' in key else ('core', key)


def _read_ini(path: Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path.exists():
        try:
            parser.read(path)
        except configparser.Error as e:
            raise ConfigError(f"Cannot parse config file {path}: {e}", str(path)) from e
    return parser


class Config:
    """
    Layered view over the repository and global config files.

    Lookup order, first hit wins: GROVE_<SECTION>_<KEY> environment
    variable, repository config, global config, caller fallback,
    built-in default.

    A file that fails to parse raises ConfigError when first touched.
    """

    GLOBAL_CONFIG_NAME = '.groveconfig'

    def __init__(self, repo_config_path: Optional[Path] = None, global_config_path: Optional[Path] = None):
        """
        Args:
            repo_config_path: Path to repository config file, if in a repo
            global_config_path: Override for the global config location
        """
        self.repo_config_path = repo_config_path
        self.global_config_path = global_config_path or Path.home() / self.GLOBAL_CONFIG_NAME
        self._global_config = None
        self._repo_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        if self._global_config is None:
            self._global_config = _read_ini(self.global_config_path)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = _read_ini(Path(self.repo_config_path))
        return self._repo_config

    def _layers(self):
        layers = []
        if self.repo_config is not None:
            layers.append(self.repo_config)
        layers.append(self.global_config)
        return layers

    def _target(self, global_config: bool) -> Tuple[configparser.ConfigParser, Path]:
        if global_config:
            return self.global_config, self.global_config_path
        if not self.repo_config_path:
            raise ValueError("No repository config path available")
        return self.repo_config, Path(self.repo_config_path)

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'color', 'core')
            key: Config key (e.g., 'ui', 'loglevel')
            fallback: Returned when no file or env var sets the key

        Returns:
            Configuration value, fallback, or the built-in default

        Raises:
            ConfigError: If a config file cannot be parsed
        """
        env_value = os.environ.get(f"GROVE_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        for parser in self._layers():
            if parser.has_option(section, key):
                return parser.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get((section, key))

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """
        Get a boolean configuration value.

        Accepts true/false, yes/no, on/off and 1/0. Unrecognized values
        yield the fallback.
        """
        value = self.get(section, key)
        if value is None:
            return fallback
        value = value.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        return fallback

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """Write a value to the repository config, or the global one."""
        parser, path = self._target(global_config)
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, key, value)
        self._save(parser, path)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a value, dropping its section once empty.

        Returns:
            True if value was removed, False if it didn't exist
        """
        if not global_config and not self.repo_config_path:
            return False
        parser, path = self._target(global_config)
        if not parser.has_option(section, key):
            return False

        parser.remove_option(section, key)
        if not parser.options(section):
            parser.remove_section(section)
        self._save(parser, path)
        return True

    @staticmethod
    def _save(parser: configparser.ConfigParser, path: Path) -> None:
        with open(path, 'w') as f:
            parser.write(f)

    def list_all(self, global_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        Effective settings from the config files, repository over global.

        Args:
            global_only: Ignore the repository config

        Returns:
            Dict of sections to key-value dicts
        """
        layers = [self.global_config] if global_only else self._layers()
        result: Dict[str, Dict[str, str]] = {}
        for parser in reversed(layers):
            for section in parser.sections():
                result.setdefault(section, {}).update(parser.items(section))
        return result


def get_config(repo=None) -> Config:
    """Config for a repository, or global-only when repo is None."""
    if repo:
        return Config(repo.config_file)
    return Config()
