"""
One-shot close override.

The frontend arms the latch (AllowCloseOnce) after it has saved in response to
app:save-and-quit, then requests close again. The next before-close check
consumes the latch and lets the window close without prompting.
"""

from enum import Enum


class LatchState(Enum):
    DISARMED = "disarmed"
    ARMED = "armed"


class CloseLatch:
    def __init__(self):
        self.state = LatchState.DISARMED

    @property
    def armed(self) -> bool:
        return self.state is LatchState.ARMED

    def arm(self) -> None:
        self.state = LatchState.ARMED

    def consume(self) -> bool:
        """Return True (and disarm) if armed; False otherwise."""
        if self.state is LatchState.ARMED:
            self.state = LatchState.DISARMED
            return True
        return False
