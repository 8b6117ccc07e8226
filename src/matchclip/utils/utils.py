# matchclip/utils/utils.py
"""
matchclip.utils.utils.py
========================

This module provides a collection of core utility functions for matchclip.

Key functionalities include:
- Robust Configuration Loading: Implements a layered strategy that loads a
  hardcoded, built-in default configuration, then recursively merges it with
  user-defined settings from `~/.config/matchclip/config.toml`.
- Relative Timestamps: Formats Unix timestamps as short labels such as
  "5 minutes ago" for list rows.
- Helper Utilities: Includes a function for deep-merging dictionaries.

This architecture ensures the tool is always runnable, even if the user
configuration file is missing or corrupted, by falling back to the embedded
defaults.
"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml

logger = logging.getLogger("matchclip")

# This dictionary is the ultimate fallback, ensuring the tool can ALWAYS start.
DEFAULT_CONFIG: Dict[str, Any] = {
    "truncation": {"ellipsis": "…"},
    "sessions": {
        "min_title_width": 10, "padding": 1, "time_gap": 2,
        "active_label": "Active now",
    },
    "logging": {
        "file_level": "DEBUG", "console_level": "WARNING",
        "log_to_console": True, "separate_error_log": False,
        "log_file": "matchclip.log",
    },
}


# --- Helper Functions ---

def user_config_path() -> Path:
    """Location of the user's configuration file."""
    return Path.home() / ".config" / "matchclip" / "config.toml"


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations, ensuring the tool can always run.

    Args:
        path: Optional explicit config file. Defaults to `user_config_path()`.

    Returns:
        The embedded defaults deep-merged with the user's settings. A missing
        or unparsable user file leaves the defaults untouched.
    """
    final_config = deep_merge({}, DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    config_path = Path(path).expanduser() if path else user_config_path()
    if config_path.is_file():
        try:
            user_config = toml.load(config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {config_path}")
        except (toml.TomlDecodeError, OSError) as e:
            logger.error(f"Could not parse user config '{config_path}': {e}. Using defaults.")

    return final_config


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def format_time_ago(timestamp: int, now: Optional[float] = None) -> str:
    """
    Formats a Unix timestamp (in seconds) as a relative time string.

    Months are counted as 30 days. Anything older than two months is shown as
    an absolute date such as "Jan 2".

    Args:
        timestamp: Seconds since the epoch; 0 means the event never happened.
        now: Reference time in seconds. Defaults to the current time.

    Returns:
        A short label like "just now", "3 hours ago" or "Mar 14".
    """
    if timestamp == 0:
        return "never"

    if now is None:
        now = time.time()
    seconds = int(now - timestamp)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    weeks = days // 7
    months = days // 30

    if seconds < 60:
        return "just now"
    if minutes < 2:
        return "1 minute ago"
    if minutes < 60:
        return f"{minutes} minutes ago"
    if hours < 2:
        return "1 hour ago"
    if hours < 24:
        return f"{hours} hours ago"
    if days < 2:
        return "1 day ago"
    if days < 7:
        return f"{days} days ago"
    if weeks < 2:
        return "1 week ago"
    if weeks < 4:
        return f"{weeks} weeks ago"
    if months < 2:
        return "1 month ago"

    moment = datetime.fromtimestamp(timestamp)
    return f"{moment:%b} {moment.day}"
