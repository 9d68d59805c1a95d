"""Error types raised by reactcord."""


class ReactcordError(Exception):
    """Base class for reactcord errors."""

    pass


class ElementConfigurationError(ReactcordError):
    """An element was given an invalid combination of props."""

    def __init__(self, tag: str, message: str):
        self.tag = tag
        super().__init__(f"<{tag}>: {message}")


class InvalidTargetError(ReactcordError, TypeError):
    """A payload was delivered to something that cannot receive it."""

    pass
