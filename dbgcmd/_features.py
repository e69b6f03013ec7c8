"""Build-time feature flags.

Edit these constants in the source tree before building a distribution.
They are plain module constants so nothing at runtime can flip them.
"""

from __future__ import annotations

from typing import Final

# force-enabled: keep the console working in release (``python -O``) builds.
FORCE_ENABLED: Final[bool] = False

__all__ = ["FORCE_ENABLED"]
