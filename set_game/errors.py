"""Exception types for the Set game."""


class SetGameError(Exception):
    """Base error for the Set game."""


class DuplicateCardError(SetGameError, ValueError):
    """Raised when a card identity is already present on the board."""


class DomainExhaustedError(SetGameError, ValueError):
    """Raised when no unused card identity is left to generate."""


class SelectionSizeError(SetGameError, ValueError):
    """Raised when a selection does not hold exactly three cards."""


class SessionStateError(SetGameError, RuntimeError):
    """Raised when an action is not allowed in the current session state."""
