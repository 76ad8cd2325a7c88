"""Protocol-wide defaults and sentinel values."""

from __future__ import annotations

# Blocks past the mined height before a transaction counts as confirmed.
DEFAULT_STALE_TOLERANCE = 10

# ZIP-317 conventional fee, in zatoshi.
DEFAULT_FEE_ZATOSHI = 10_000

# Height sentinel: not mined yet / no expiry / unknown chain tip.
NO_HEIGHT = -1
