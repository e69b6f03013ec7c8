"""Console build gating and logging level resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dbgcmd import _features


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable build-mode gate for the console."""

    debug_build: bool
    force_enabled: bool = False

    @property
    def console_enabled(self) -> bool:
        return self.debug_build or self.force_enabled


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve console log level with package-prefixed override."""
    value = os.getenv("DBGCMD_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper() or default.upper()


def load_build_config() -> BuildConfig:
    """Resolve the build gate from interpreter mode and compiled-in flags."""
    return BuildConfig(
        debug_build=__debug__,
        force_enabled=bool(_features.FORCE_ENABLED),
    )


BUILD_CONFIG: BuildConfig = load_build_config()

DEBUG_BUILD = BuildConfig(debug_build=True)
RELEASE_BUILD = BuildConfig(debug_build=False)
FORCE_ENABLED_RELEASE_BUILD = BuildConfig(debug_build=False, force_enabled=True)


def console_enabled() -> bool:
    return BUILD_CONFIG.console_enabled


__all__ = [
    "BUILD_CONFIG",
    "BuildConfig",
    "DEBUG_BUILD",
    "FORCE_ENABLED_RELEASE_BUILD",
    "RELEASE_BUILD",
    "console_enabled",
    "load_build_config",
    "resolve_log_level_name",
]
