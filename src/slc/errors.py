"""Error types raised while parsing filters and slicing input."""


class SliceError(Exception):
    """Base class for every error reported to the user as `error: <message>`."""


class FilterParseError(SliceError, ValueError):
    """A filter expression could not be parsed."""


class IntegerParseError(FilterParseError):
    """The start or end token of a filter is not a valid non-negative integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        if token == "":
            reason = "cannot parse integer from empty string"
        else:
            reason = "invalid digit found in string"
        super().__init__(f"failed to parse filter: {reason}")


class InvalidFilterError(FilterParseError):
    """The filter parsed, but describes an impossible selection (e.g. an inverted range)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid filter: {reason}")


class SourceOpenError(SliceError):
    """The input path could not be opened."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to open file {path}: {cause}")


class SliceFailedError(SliceError):
    """A read or write failed part way through a run."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"slice operation failed: {cause}")


class ConfigurationError(SliceError):
    """The run options are invalid for a reason other than a bad filter."""
