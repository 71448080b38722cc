"""Exception hierarchy for the analogue clock."""


class AnalogueClockError(Exception):
    """Base exception for all analogue clock errors."""

    pass


class ConfigurationError(AnalogueClockError):
    """Invalid or missing configuration."""

    pass


class DisplayError(AnalogueClockError):
    """Error applying state to a display surface."""

    pass


class HandNotAttachedError(DisplayError):
    """A hand element is missing from its surface, usually mid-teardown."""

    def __init__(self, hand: str) -> None:
        self.hand = hand
        super().__init__(f"Hand '{hand}' is not attached to a display surface")
