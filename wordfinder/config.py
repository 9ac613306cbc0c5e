"""Settings for Word Finder, loaded from YAML.

The bundled ``inputs/settings.yaml`` is used unless another path is given
directly or through the ``WORDFINDER_CONFIG`` environment variable. CLI
options override whatever the file says.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from wordfinder.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WORDFINDER_CONFIG"

INPUTS_DIR = Path(__file__).parent / "inputs"
DEFAULT_SETTINGS_FILE = INPUTS_DIR / "settings.yaml"
DEFAULT_WORDS_FILE = INPUTS_DIR / "start.txt"


@dataclass(frozen=True)
class DictionarySettings:
    """Which dictionary backend confirms that a word is real."""
    backend: str = "wordfreq"  # "wordfreq" or "wordlist"
    min_zipf: float = 2.0  # wordfreq backend only
    words_file: Optional[str] = None  # wordlist backend only


@dataclass(frozen=True)
class Settings:
    language: str = "en"
    words_file: str = str(DEFAULT_WORDS_FILE)
    log_path: str = "logs/wordfinder"
    dictionary: DictionarySettings = field(default_factory=DictionarySettings)

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a copy with every non-None override applied.

        ``dictionary`` accepts the backend name as a plain string.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        backend = changes.pop("dictionary", None)
        settings = replace(self, **changes)
        if backend is not None:
            settings = replace(settings, dictionary=replace(settings.dictionary, backend=backend))
        return settings


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """Resolve paths in a settings file relative to the file itself."""
    if not value:
        return value
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _get_str(data: Dict[str, Any], key: str, default: Optional[str], section: str = "") -> Optional[str]:
    """Read a string setting. A missing key or YAML null means the default."""
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"{section}{key} must be a string, got {value!r}")
    return value


def _settings_from_dict(data: Dict[str, Any], base_dir: Path) -> Settings:
    defaults = Settings()

    dictionary_data = data.get("dictionary") or {}
    if not isinstance(dictionary_data, dict):
        raise ConfigError("'dictionary' must be a mapping")

    min_zipf = dictionary_data.get("min_zipf")
    if min_zipf is None:
        min_zipf = defaults.dictionary.min_zipf
    elif isinstance(min_zipf, bool) or not isinstance(min_zipf, (int, float)):
        raise ConfigError(f"dictionary.min_zipf must be a number, got {min_zipf!r}")

    dictionary = DictionarySettings(
        backend=_get_str(dictionary_data, "backend", defaults.dictionary.backend, "dictionary."),
        min_zipf=float(min_zipf),
        words_file=_resolve_path(_get_str(dictionary_data, "words_file", None, "dictionary."), base_dir),
    )

    words_file = _get_str(data, "words_file", None)
    return Settings(
        language=_get_str(data, "language", defaults.language),
        words_file=_resolve_path(words_file, base_dir) if words_file else defaults.words_file,
        log_path=_get_str(data, "log_path", defaults.log_path),
        dictionary=dictionary,
    )


def load_settings(settings_file: Optional[str] = None) -> Settings:
    """Load settings from YAML.

    Args:
        settings_file: Explicit path. Falls back to ``$WORDFINDER_CONFIG``,
            then to the bundled settings file.

    Returns:
        Settings. Built-in defaults if the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be read or is not valid
            settings YAML.
    """
    path = Path(settings_file or os.getenv(CONFIG_ENV_VAR) or DEFAULT_SETTINGS_FILE)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning(f"Settings file not found: {path}, using defaults")
        return Settings()
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in settings file {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading settings file {path}: {e}")
        raise ConfigError(f"Could not read settings file {path}: {e}")

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")

    settings = _settings_from_dict(data, path.parent)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings
