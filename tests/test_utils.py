# tests/test_utils.py
"""Unit tests for utility functions in the `matchclip.utils` module.

Covers configuration loading and merging as well as relative timestamps.
"""

from datetime import datetime
from pathlib import Path

import pytest

from matchclip.utils import utils

NOW = 1_700_000_000


def test_deep_merge() -> None:
    """Verify that `deep_merge` correctly merges nested dictionaries.

    This test ensures:
    - Existing values are preserved if not overridden.
    - Nested dictionaries are merged recursively.
    - Conflicting keys are overridden by values from the second dictionary.
    """
    base = {"a": 1, "b": {"x": 10, "y": 20}}
    override = {"b": {"y": 99, "z": 100}, "c": 3}
    result = utils.deep_merge(base, override)
    expected = {"a": 1, "b": {"x": 10, "y": 99, "z": 100}, "c": 3}
    assert result == expected
    assert base == {"a": 1, "b": {"x": 10, "y": 20}}


def test_load_config_without_user_file(isolated_home: Path) -> None:
    """Without a user file the embedded defaults are returned."""
    config = utils.load_config()
    assert config == utils.DEFAULT_CONFIG
    assert config is not utils.DEFAULT_CONFIG


def test_load_config_merges_user_file(isolated_home: Path) -> None:
    """Settings from `~/.config/matchclip/config.toml` override the defaults."""
    config_path = utils.user_config_path()
    config_path.parent.mkdir(parents=True)
    config_path.write_text('[sessions]\nactive_label = "Now"\n', encoding="utf-8")

    config = utils.load_config()
    assert config["sessions"]["active_label"] == "Now"
    assert config["sessions"]["min_title_width"] == 10
    assert config["truncation"]["ellipsis"] == "…"


def test_load_config_explicit_path(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.toml"
    config_path.write_text('[truncation]\nellipsis = "~"\n', encoding="utf-8")

    assert utils.load_config(config_path)["truncation"]["ellipsis"] == "~"


def test_load_config_ignores_broken_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """An unparsable file is logged and the defaults are kept."""
    config_path = tmp_path / "broken.toml"
    config_path.write_text("[sessions\nactive_label = ", encoding="utf-8")

    config = utils.load_config(config_path)
    assert config == utils.DEFAULT_CONFIG
    assert "Could not parse user config" in caplog.text


@pytest.mark.parametrize(
    "age, expected",
    [
        (0, "just now"),
        (59, "just now"),
        (60, "1 minute ago"),
        (119, "1 minute ago"),
        (5 * 60, "5 minutes ago"),
        (3600, "1 hour ago"),
        (5 * 3600, "5 hours ago"),
        (30 * 3600, "1 day ago"),
        (3 * 86400, "3 days ago"),
        (8 * 86400, "1 week ago"),
        (15 * 86400, "2 weeks ago"),
        (29 * 86400, "1 month ago"),
        (45 * 86400, "1 month ago"),
    ],
)
def test_format_time_ago_relative(age: int, expected: str) -> None:
    assert utils.format_time_ago(NOW - age, now=NOW) == expected


def test_format_time_ago_never() -> None:
    assert utils.format_time_ago(0, now=NOW) == "never"


def test_format_time_ago_old_dates_are_absolute() -> None:
    timestamp = int(datetime(2024, 1, 2, 12, 0).timestamp())
    assert utils.format_time_ago(timestamp, now=timestamp + 90 * 86400) == "Jan 2"
