from dataclasses import dataclass

@dataclass(frozen=True)
class Outcome:
    """Base class for the terminal result of one font inventory run."""

@dataclass(frozen=True)
class Success(Outcome):
    """
    A summary table was written.

    Attributes:
        pages_analyzed: Number of pages visited
        rows_written: Rows of the materialized table, header included
    """
    pages_analyzed: int
    rows_written: int

@dataclass(frozen=True)
class Empty(Outcome):
    """No fonts were found in the analyzed pages; nothing was written."""
    pages_analyzed: int

@dataclass(frozen=True)
class Failure(Outcome):
    """The run stopped on a pipeline-level error."""
    reason: str
