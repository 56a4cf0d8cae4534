from enum import Enum, auto


class VisibilityState(Enum):
    """States of a visibility latch."""
    NORMAL = auto()         # Visibility follows requests
    SUPPRESSED = auto()     # Permanently hidden


class VisibilityLatch:
    """One-way latch that, once engaged, rejects every request to become visible."""

    def __init__(self) -> None:
        self._state = VisibilityState.NORMAL

    @property
    def state(self) -> VisibilityState:
        """Get the current latch state."""
        return self._state

    def is_suppressed(self) -> bool:
        """Check if the latch has been engaged."""
        return self._state is VisibilityState.SUPPRESSED

    def suppress(self) -> None:
        """Engage the latch.  There is no transition back to NORMAL."""
        self._state = VisibilityState.SUPPRESSED

    def allows(self, visible: bool) -> bool:
        """
        Check whether a visibility request may be applied.

        Args:
            visible: Requested visibility

        Returns:
            True if the request may be applied
        """
        return not visible or self._state is VisibilityState.NORMAL
