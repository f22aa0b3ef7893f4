"""
Error types raised by ingestion and analytics.

Every error is fatal for a run. ``kind`` is the title shown to the user.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for all errors of a linear ordering run."""

    kind = "ERROR"


class ExistenceError(AnalysisError, FileNotFoundError):
    """A required input file cannot be opened."""

    kind = "EXISTENCE ERROR"


class DuplicateFileError(AnalysisError, ValueError):
    """The same file was given for two different roles."""

    kind = "DUPLICATE FILE ERROR"


class EmptyFileError(AnalysisError, ValueError):
    """A required input file has no content."""

    kind = "EMPTY FILE ERROR"


class DataCountMismatchError(AnalysisError, ValueError):
    """observations * variables does not match the number of data values."""

    kind = "DATA ERROR"

    def __init__(
        self, observation_count: int, variable_count: int, data_count: int
    ) -> None:
        self.observation_count = observation_count
        self.variable_count = variable_count
        self.data_count = data_count
        super().__init__(
            "Incorrect data - Number of observations*variables does not match "
            "number of data\n"
            f"Number of observations: {observation_count}\n"
            f"Number of variables: {variable_count}\n"
            f"Number of data: {data_count}"
        )


class DataFormatError(AnalysisError, ValueError):
    """A value expected to be numeric could not be parsed."""

    kind = "DATA FORMAT ERROR"


class RangeError(AnalysisError, ValueError):
    """The coefficient of variation threshold is negative."""

    kind = "RANGE ERROR"


class DegenerateArithmeticError(AnalysisError, ZeroDivisionError):
    """A statistic would divide by zero (zero mean, zero sd or flat ranking)."""

    kind = "DEGENERATE ARITHMETIC ERROR"


class MatrixPhaseError(AnalysisError, RuntimeError):
    """A component was called on a matrix in the wrong phase."""

    kind = "PHASE ERROR"
