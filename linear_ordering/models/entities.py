"""
Domain entities and data transfer objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np
import pandas as pd

from linear_ordering.config import DATA_LAYOUTS
from linear_ordering.errors import DataCountMismatchError, MatrixPhaseError


class MatrixPhase(Enum):
    """Phase of a DataMatrix: raw input values or z-scores."""

    RAW = "raw"
    STANDARDIZED = "standardized"


class DataMatrix:
    """
    Observations x variables matrix backed by a float64 DataFrame.

    Rows are observations, columns are variables. Cells are always addressed
    by position, so repeated labels are allowed. The matrix starts RAW and is
    overwritten in place with z-scores by the standardizer, which moves it to
    STANDARDIZED.
    """

    def __init__(self, frame: pd.DataFrame) -> None:
        if frame.shape[0] < 1 or frame.shape[1] < 1:
            raise ValueError("A data matrix needs at least one row and one column.")
        self._frame = frame.astype("float64")
        self._phase = MatrixPhase.RAW

    @classmethod
    def from_values(
        cls,
        values: Sequence[float],
        observation_labels: Sequence[str],
        variable_labels: Sequence[str],
        layout: str = "by_variable",
    ) -> "DataMatrix":
        """
        Build a RAW matrix from a flat buffer of values.

        Args:
            values: observation_count * variable_count numbers.
            observation_labels: one label per row.
            variable_labels: one label per column.
            layout: "by_variable" when the buffer lists every observation of
                the first variable, then of the second one, and so on;
                "by_observation" when it is row-major.
        """
        n_obs, n_var = len(observation_labels), len(variable_labels)
        if n_obs * n_var != len(values):
            raise DataCountMismatchError(n_obs, n_var, len(values))

        flat = np.asarray(values, dtype="float64")
        if layout == "by_variable":
            grid = flat.reshape(n_var, n_obs).T
        elif layout == "by_observation":
            grid = flat.reshape(n_obs, n_var)
        else:
            raise ValueError(f"Unknown layout: {layout}. Use one of {DATA_LAYOUTS}.")

        frame = pd.DataFrame(
            grid,
            index=pd.Index(list(observation_labels), name="observation"),
            columns=pd.Index(list(variable_labels), name="variable"),
        )
        return cls(frame)

    @property
    def phase(self) -> MatrixPhase:
        return self._phase

    @property
    def frame(self) -> pd.DataFrame:
        """Underlying DataFrame (shared, not a copy)."""
        return self._frame

    @property
    def observation_count(self) -> int:
        return self._frame.shape[0]

    @property
    def variable_count(self) -> int:
        return self._frame.shape[1]

    @property
    def observation_labels(self) -> list[str]:
        return [str(label) for label in self._frame.index]

    @property
    def variable_labels(self) -> list[str]:
        return [str(label) for label in self._frame.columns]

    def column(self, j: int) -> pd.Series:
        return self._frame.iloc[:, j]

    def row(self, i: int) -> pd.Series:
        return self._frame.iloc[i, :]

    def require_phase(self, expected: MatrixPhase) -> None:
        if self._phase is not expected:
            raise MatrixPhaseError(
                f"Matrix is {self._phase.value}, expected {expected.value}."
            )

    def overwrite_column(self, j: int, values: pd.Series) -> None:
        """Replace column j in place. Only valid while the matrix is RAW."""
        self.require_phase(MatrixPhase.RAW)
        self._frame.iloc[:, j] = values.to_numpy(dtype="float64")

    def mark_standardized(self) -> None:
        self.require_phase(MatrixPhase.RAW)
        self._phase = MatrixPhase.STANDARDIZED


@dataclass(frozen=True)
class VariableStats:
    """Descriptive statistics of one variable column."""

    minimum: float
    maximum: float
    mean: float
    median: float
    standard_deviation: float
    variance: float
    coefficient_of_variation: float


@dataclass(frozen=True)
class VariableReport:
    """Statistics of a variable plus its low-variation flag."""

    label: str
    stats: VariableStats
    below_threshold: bool


@dataclass(frozen=True)
class ObservationScore:
    """Row mean of standardized values and its min-max ranking index."""

    label: str
    raw_mean: float
    ranking_index: float


@dataclass(frozen=True)
class RankingEntry:
    """One line of the final ranking, 1-based position."""

    position: int
    ranking_index: float
    label: str


@dataclass
class Dataset:
    """Validated input of one run."""

    observation_labels: list[str]
    variable_labels: list[str]
    matrix: DataMatrix


@dataclass
class AnalysisResult:
    """Everything the report needs."""

    variables: list[VariableReport]
    scores: list[ObservationScore]
    ranking: list[RankingEntry]
    min_coefficient: float = 0.0
