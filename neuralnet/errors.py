class DecodeError(ValueError):
    """Raised when persisted layer bytes cannot be turned back into a layer."""


class PreconditionError(ValueError):
    """Raised when a propagation step runs before the state it reads exists."""
