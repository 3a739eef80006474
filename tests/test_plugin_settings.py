from __future__ import annotations

import pytest

from desmos_graph import (
    CacheLocation,
    CacheSettings,
    PluginSettings,
    default_plugin_settings,
    load_plugin_settings,
)


def test_nothing_stored_yields_defaults() -> None:
    settings = load_plugin_settings(None, "0.6.0")
    assert settings == default_plugin_settings("0.6.0")
    assert settings.use_legacy_desmos_api is False
    assert settings.cache == CacheSettings(enabled=True, location=CacheLocation.MEMORY)


def test_old_record_is_migrated_and_stamped() -> None:
    record = {"version": "0.4.0", "cache": {"enabled": False, "location": "Filesystem", "directory": "graphs"}}
    settings = load_plugin_settings(record, "0.6.0")
    assert settings.version == "0.6.0"
    assert settings.use_legacy_desmos_api is False
    assert settings.cache == CacheSettings(enabled=False, location=CacheLocation.FILESYSTEM, directory="graphs")


def test_record_round_trip() -> None:
    settings = PluginSettings(
        version="0.6.0",
        use_legacy_desmos_api=True,
        cache=CacheSettings(location=CacheLocation.FILESYSTEM, directory="cache"),
    )
    record = settings.to_record()
    assert record == {
        "version": "0.6.0",
        "use_legacy_desmos_api": True,
        "cache": {"enabled": True, "location": "Filesystem", "directory": "cache"},
    }
    assert load_plugin_settings(record, "0.6.0") == settings


def test_unknown_cache_location_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown cache location 'Cloud'"):
        load_plugin_settings({"version": "0.6.0", "cache": {"location": "Cloud"}}, "0.6.0")


def test_migration_is_logged(caplog) -> None:
    with caplog.at_level("INFO", logger="desmos_graph.plugin_settings"):
        load_plugin_settings({"version": "0.5.0"}, "0.6.0")
    assert "migrating plugin settings" in caplog.text
