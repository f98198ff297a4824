"""Validated options for a single slicing run."""

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from slc.errors import ConfigurationError, SliceError
from slc.filterset import FilterSet

STDIN_PATH = "-"


class SliceMode(str, Enum):
    """What the filter positions index into."""

    ROWS = "rows"
    COLUMNS = "columns"


class SliceConfig(BaseModel):
    """Configuration for one run of a slicer."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    mode: SliceMode
    source: str = STDIN_PATH
    filters: FilterSet = FilterSet.unfiltered()
    verbose: bool = False

    @field_validator("source", mode="before")
    @classmethod
    def default_source(cls, value: object) -> object:
        """An absent path reads from standard input."""
        if value is None or value == "":
            return STDIN_PATH
        return str(value)

    @field_validator("filters", mode="before")
    @classmethod
    def parse_filters(cls, value: object) -> object:
        """Accept filter expressions as strings and parse them into a FilterSet."""
        if value is None:
            return FilterSet.unfiltered()
        if isinstance(value, FilterSet):
            return value
        if isinstance(value, str):
            return FilterSet.parse([value])
        if isinstance(value, Sequence):
            return FilterSet.parse(value)
        msg = f"filters must be a sequence of filter expressions, got {type(value).__name__}"
        raise ConfigurationError(msg)

    @property
    def reads_stdin(self) -> bool:
        return self.source == STDIN_PATH

    @classmethod
    def load(
        cls,
        mode: SliceMode | str,
        source: str | None = None,
        filters: Sequence[str] | None = None,
        *,
        verbose: bool = False,
    ) -> "SliceConfig":
        """Build a config, re-raising the underlying filter error instead of a pydantic one."""
        try:
            return cls(mode=mode, source=source, filters=filters, verbose=verbose)
        except ValidationError as exc:
            for detail in exc.errors():
                cause = detail.get("ctx", {}).get("error")
                if isinstance(cause, SliceError):
                    raise cause from None
            msg = f"invalid options: {exc}"
            raise ConfigurationError(msg) from exc
