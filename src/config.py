"""
Settings for Wordle Filter.

Defaults can be overridden by a JSON file (config/settings.json) and then by
command line flags.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "settings.json"

# Default settings (used if settings.json not found)
DEFAULT_SETTINGS: Dict[str, Any] = {
    "word_length": 5,
    "max_words": 10,        # Matches shown per evaluation
    "common_rank": None,    # Ranks at or above this are greyed out; None = use word list
    "starting_words": ["slate", "carle", "stare", "roate"],
    "words_file": None,     # None = data/words.txt
}

# Accepted JSON types per key; None marks a nullable key
_SETTING_TYPES = {
    "word_length": (int,),
    "max_words": (int,),
    "common_rank": (int, type(None)),
    "starting_words": (list,),
    "words_file": (str, type(None)),
}


def load_settings(config_file: Optional[str | Path] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file merged over the defaults.

    Unknown keys are ignored and values of the wrong type fall back to the
    default with a warning. A missing or unreadable file yields the defaults.

    Args:
        config_file: Path to settings JSON (defaults to config/settings.json)

    Returns:
        Dictionary of settings
    """
    settings = dict(DEFAULT_SETTINGS)
    settings["starting_words"] = list(DEFAULT_SETTINGS["starting_words"])

    config_path = Path(config_file) if config_file is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if config_file is not None:
            log.warning("Settings file not found: %s, using defaults", config_path)
        return settings

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.warning("Failed to load settings from %s: %s, using defaults", config_path, e)
        return settings

    if not isinstance(loaded, dict):
        log.warning("Settings file %s must hold a JSON object, using defaults", config_path)
        return settings

    for key, types in _SETTING_TYPES.items():
        if key not in loaded:
            continue
        value = loaded[key]
        # bool is an int subclass, but never a valid setting
        if isinstance(value, bool) or not isinstance(value, types):
            log.warning("Invalid type for setting '%s': %s. Using default.", key, type(value).__name__)
            continue
        if key == "starting_words" and not all(isinstance(w, str) for w in value):
            log.warning("Setting 'starting_words' must be a list of strings. Using default.")
            continue
        if key in ("word_length", "max_words") and value < 1:
            log.warning("Setting '%s' must be positive, got %d. Using default.", key, value)
            continue
        settings[key] = value

    log.debug("Loaded settings from %s", config_path)
    return settings
