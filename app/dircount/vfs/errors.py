"""Errors raised while parsing metric parameters or walking a directory.

All errors derive from DirCountError so that callers at the metric
boundary can report any failure without knowing which stage raised it.
"""

ORDINALS: tuple[str, ...] = (
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
    "eleventh",
)


class DirCountError(Exception):
    """Base exception for directory count errors."""


class TooFewParametersError(DirCountError):
    """Raised when no parameters (or an empty path) are supplied."""

    def __init__(self) -> None:
        super().__init__("Too few parameters.")


class TooManyParametersError(DirCountError):
    """Raised when more parameters are supplied than the metric accepts."""

    def __init__(self) -> None:
        super().__init__("Too many parameters.")


class InvalidParametersError(DirCountError):
    """Raised when a positional parameter fails validation.

    Attributes:
        position: 1-based slot index of the invalid parameter.
        cause: Underlying parse failure, if any.
    """

    def __init__(self, position: int, cause: Exception | None = None) -> None:
        self.position = position
        self.cause = cause
        if cause is None:
            message = f"Invalid {self.ordinal} parameter."
        else:
            message = f"Invalid {self.ordinal} parameter: {cause}"
        super().__init__(message)

    @property
    def ordinal(self) -> str:
        """English ordinal of the slot ("first", "sixth", ...)."""
        if 1 <= self.position <= len(ORDINALS):
            return ORDINALS[self.position - 1]
        return f"#{self.position}"


class TraversalError(DirCountError):
    """Raised when the directory walk hits an unrecoverable filesystem error.

    Attributes:
        path: Path being visited when the failure occurred.
        cause: The original OSError.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot traverse '{path}': {reason}")


class UnsupportedMetricError(DirCountError):
    """Raised when a metric key is not registered."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unsupported metric: {key}")
