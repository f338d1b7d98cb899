"""Common types used across the order list."""

from enum import Enum

# ============================================================================
# Status Enums (these are system states, not business data)
# ============================================================================

class SyncState(str, Enum):
    """Lifecycle of a single sync request."""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCESS = "success"
    FAILED = "failed"


class SyncOperation(str, Enum):
    """Which direction a sync request went."""
    IMPORT = "import"
    EXPORT = "export"


class ExportMode(str, Enum):
    """How much of the table a save sends."""
    ALL = "all"
    WINDOW = "window"
