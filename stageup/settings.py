"""stageup settings module.

Useful items:
    settings: The settings object.
    STAGEUP_DIRECTORY: The directory where stageup looks for its files.
    settings_path: The path to the settings file.
"""

import os
from pathlib import Path

from dynaconf import Dynaconf, Validator
from dynaconf.validator import ValidationError

from stageup.exceptions import ConfigurationError
from stageup.helpers import merge_dicts

STAGEUP_DIRECTORY = Path.home().joinpath(".stageup")

if "STAGEUP_DIRECTORY" in os.environ:
    envar_location = Path(os.environ["STAGEUP_DIRECTORY"])
    if envar_location.is_dir():
        STAGEUP_DIRECTORY = envar_location

settings_path = STAGEUP_DIRECTORY.joinpath("stageup_settings.yaml")

LOG_LEVELS = ["error", "warning", "info", "debug", "trace", "silent"]

BASE_VALIDATORS = [
    Validator("LOGGING", is_type_of=dict, default={}),
    Validator("LOGGING.CONSOLE_LEVEL", is_in=LOG_LEVELS, default="info"),
    Validator("LOGGING.FILE_LEVEL", is_in=LOG_LEVELS, default="debug"),
    Validator("LOGGING.LOG_PATH", default="logs/stageup.log"),
]


def _upper_keys(data):
    """Upper-case the keys of a nested dict, the way dynaconf stores them."""
    if not isinstance(data, dict):
        return data
    return {str(key).upper(): _upper_keys(value) for key, value in data.items()}


def create_settings(config_dict=None, config_file=None):
    """Create a new settings object with custom configuration.

    Args:
        config_dict: Dictionary containing configuration values to overlay onto settings
        config_file: Path to a settings file to use instead of the default

    Returns:
        A dynaconf settings object
    """
    file_path = Path(config_file or settings_path)
    file_exists = file_path.exists()
    new_settings = Dynaconf(
        settings_file=str(file_path) if file_exists else None,
        ENVVAR_PREFIX_FOR_DYNACONF="STAGEUP",
        validators=BASE_VALIDATORS,
    )
    try:
        # Add any configuration values passed in, merging nested dicts
        for key, value in (config_dict or {}).items():
            existing = new_settings.get(key)
            if isinstance(existing, dict) and isinstance(value, dict):
                new_settings[key] = merge_dicts(_upper_keys(existing), _upper_keys(value))
            else:
                new_settings[key] = value
        new_settings.validators.validate()
    except ValidationError as err:
        source = file_path if file_exists else "stageup settings"
        raise ConfigurationError(f"Configuration error in {source}: {err.args[0]}") from err
    return new_settings


class _SettingsProxy:
    """Proxy object that creates settings on first access."""

    def __init__(self):
        self._settings = None

    def _ensure_settings(self):
        if self._settings is None:
            self._settings = create_settings()
        return self._settings

    def __getattr__(self, name):
        return getattr(self._ensure_settings(), name)

    def __getitem__(self, key):
        return self._ensure_settings()[key]

    def __contains__(self, key):
        return key in self._ensure_settings()


# Create the global settings object (deferred)
settings = _SettingsProxy()
