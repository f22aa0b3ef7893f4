"""
Z-score standardization of a data matrix.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import pandas as pd

from linear_ordering.errors import DegenerateArithmeticError
from linear_ordering.models import DataMatrix, MatrixPhase, VariableStats

logger = logging.getLogger(__name__)


def scale(
    value: Union[float, pd.Series], mean: float, sd: float
) -> Union[float, pd.Series]:
    """(value - mean) / sd, for a single value or a whole column."""
    if sd == 0:
        raise DegenerateArithmeticError(
            "Cannot standardize with a standard deviation of 0."
        )
    return (value - mean) / sd


def is_constant(stats: VariableStats) -> bool:
    """True when every observation holds the same value."""
    return stats.minimum == stats.maximum or stats.standard_deviation == 0


class ZScoreCalculator:
    """
    Overwrites every cell of a RAW matrix with its z-score, using the
    mean and standard deviation of its own variable.
    """

    def compute(
        self, matrix: DataMatrix, stats: Sequence[VariableStats]
    ) -> DataMatrix:
        """
        Standardize ``matrix`` in place and return it in STANDARDIZED phase.

        Every column is checked before any cell is rewritten, so a constant
        column leaves the matrix untouched. Constancy is judged on the
        extremes, as a computed sd can be a rounding residue instead of 0.
        """
        matrix.require_phase(MatrixPhase.RAW)
        if len(stats) != matrix.variable_count:
            raise ValueError(
                f"Expected {matrix.variable_count} statistics, got {len(stats)}."
            )

        labels = matrix.variable_labels
        for label, s in zip(labels, stats):
            if is_constant(s):
                raise DegenerateArithmeticError(
                    f"Variable '{label}' has a standard deviation of 0 "
                    "(all observations share the same value); it cannot be standardized."
                )

        for j, s in enumerate(stats):
            matrix.overwrite_column(j, scale(matrix.column(j), s.mean, s.standard_deviation))

        matrix.mark_standardized()
        logger.info("Standardized %d variables", matrix.variable_count)
        return matrix
