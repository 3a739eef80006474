"""Plugin-level configuration persisted by the host application.

The host stores a plain key-value record; this module turns it into typed
settings with defaults and migrates records written by other plugin versions.
The graph parser never reads this configuration.

Example record::

    {
        "version": "0.6.0",
        "use_legacy_desmos_api": False,
        "cache": {"enabled": True, "location": "Memory"},
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

__all__ = [
    "CacheLocation",
    "CacheSettings",
    "PluginSettings",
    "default_plugin_settings",
    "load_plugin_settings",
]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class CacheLocation(str, Enum):
    MEMORY = "Memory"
    FILESYSTEM = "Filesystem"


@dataclass(frozen=True)
class CacheSettings:
    """Where rendered graphs are cached, keyed by graph content hash.

    ``directory`` is only used with :attr:`CacheLocation.FILESYSTEM`.
    """

    enabled: bool = True
    location: CacheLocation = CacheLocation.MEMORY
    directory: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"enabled": self.enabled, "location": self.location.value}
        if self.directory is not None:
            record["directory"] = self.directory
        return record


@dataclass(frozen=True)
class PluginSettings:
    """Typed view of the persisted plugin record.

    Parameters
    ----------
    version : str
        Plugin version the record was written by.
    use_legacy_desmos_api : bool
        Use the older calculator API, which is required for offline use.
    cache : CacheSettings
        Render cache configuration.
    """

    version: str
    use_legacy_desmos_api: bool = False
    cache: CacheSettings = field(default_factory=CacheSettings)

    def to_record(self) -> Dict[str, Any]:
        """Return the plain record handed to the host's save facility."""
        return {
            "version": self.version,
            "use_legacy_desmos_api": self.use_legacy_desmos_api,
            "cache": self.cache.to_record(),
        }


def default_plugin_settings(version: str) -> PluginSettings:
    return PluginSettings(version=version)


def _cache_from_record(record: Mapping[str, Any]) -> CacheSettings:
    defaults = CacheSettings()
    raw_location = record.get("location", defaults.location.value)
    try:
        location = CacheLocation(raw_location)
    except ValueError:
        accepted = ", ".join(loc.value for loc in CacheLocation)
        raise ValueError(f"Unknown cache location {raw_location!r}; expected one of: {accepted}") from None
    return CacheSettings(
        enabled=bool(record.get("enabled", defaults.enabled)),
        location=location,
        directory=record.get("directory", defaults.directory),
    )


def load_plugin_settings(record: Optional[Mapping[str, Any]], version: str) -> PluginSettings:
    """Build settings from a stored record.

    ``None`` (nothing stored yet) yields the defaults. A record written by a
    different version is migrated: missing keys take their defaults and the
    result is stamped with *version*.

    Raises
    ------
    ValueError
        If the record names an unknown cache location.
    """
    if record is None:
        return default_plugin_settings(version)

    stored_version = record.get("version")
    if stored_version != version:
        logger.info(f"migrating plugin settings from version {stored_version!r} to {version!r}")

    defaults = default_plugin_settings(version)
    return PluginSettings(
        version=version,
        use_legacy_desmos_api=bool(record.get("use_legacy_desmos_api", defaults.use_legacy_desmos_api)),
        cache=_cache_from_record(record.get("cache") or {}),
    )
