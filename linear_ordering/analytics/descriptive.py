"""
Descriptive statistics of a single variable column.

All functions are pure: they read the column and never modify it.
"""

from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd

from linear_ordering.errors import DegenerateArithmeticError
from linear_ordering.models import DataMatrix, MatrixPhase, VariableStats

logger = logging.getLogger(__name__)


def _require_values(column: pd.Series) -> None:
    if len(column) == 0:
        raise ValueError("Column must contain at least one value.")


def minimum(column: pd.Series) -> float:
    _require_values(column)
    result = column.iloc[0]
    for value in column.iloc[1:]:
        if value < result:
            result = value
    return float(result)


def maximum(column: pd.Series) -> float:
    _require_values(column)
    result = column.iloc[0]
    for value in column.iloc[1:]:
        if value > result:
            result = value
    return float(result)


def mean(column: pd.Series) -> float:
    _require_values(column)
    return float(column.sum() / len(column))


def median(column: pd.Series) -> float:
    """
    Median of the column.

    Sorts a copy in descending order; with an even count the two central
    elements (n/2 - 1 and n/2) are averaged, otherwise element n/2 is taken.
    """
    _require_values(column)
    ordered = np.sort(column.to_numpy(dtype="float64", copy=True))[::-1]
    n = len(ordered)
    middle = n // 2
    if n % 2 == 0:
        return float((ordered[middle] + ordered[middle - 1]) / 2)
    return float(ordered[middle])


def standard_deviation(column: pd.Series, column_mean: float) -> float:
    """Population standard deviation (divisor n, not n - 1)."""
    _require_values(column)
    squared = ((column - column_mean) ** 2).sum()
    return math.sqrt(squared / len(column))


def variance(sd: float) -> float:
    return sd ** 2


def coefficient_of_variation(
    column_mean: float, sd: float, variable: str = ""
) -> float:
    """|sd / mean| * 100. Raises DegenerateArithmeticError when mean is 0."""
    if column_mean == 0:
        name = f" '{variable}'" if variable else ""
        raise DegenerateArithmeticError(
            f"Coefficient of variation of variable{name} is undefined: mean is 0."
        )
    return abs(sd / column_mean * 100)


def describe(column: pd.Series, variable: str = "") -> VariableStats:
    """Compute every statistic of one column."""
    column_mean = mean(column)
    sd = standard_deviation(column, column_mean)
    return VariableStats(
        minimum=minimum(column),
        maximum=maximum(column),
        mean=column_mean,
        median=median(column),
        standard_deviation=sd,
        variance=variance(sd),
        coefficient_of_variation=coefficient_of_variation(column_mean, sd, variable),
    )


class DescriptiveStats:
    """Computes VariableStats for every column of a RAW matrix."""

    def compute(self, matrix: DataMatrix) -> list[VariableStats]:
        matrix.require_phase(MatrixPhase.RAW)
        labels = matrix.variable_labels
        results = []
        for j, label in enumerate(labels):
            stats = describe(matrix.column(j), label)
            logger.debug("Statistics for %s: %s", label, stats)
            results.append(stats)
        logger.info("Computed descriptive statistics for %d variables", len(results))
        return results
