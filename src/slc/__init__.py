"""Package level __init__."""

from importlib.metadata import version

__version__ = version("slc")

from slc.errors import (
    ConfigurationError,
    FilterParseError,
    IntegerParseError,
    InvalidFilterError,
    SliceError,
    SliceFailedError,
    SourceOpenError,
)
from slc.filter import Filter, FilterKind, parse_filter
from slc.filterset import FilterSet

__all__ = [
    "ConfigurationError",
    "Filter",
    "FilterKind",
    "FilterParseError",
    "FilterSet",
    "IntegerParseError",
    "InvalidFilterError",
    "SliceError",
    "SliceFailedError",
    "SourceOpenError",
    "parse_filter",
]
