"""
Ranking computation: row means of z-scores, min-max index and ordering.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from linear_ordering.errors import DegenerateArithmeticError
from linear_ordering.models import (
    DataMatrix,
    MatrixPhase,
    ObservationScore,
    RankingEntry,
)

logger = logging.getLogger(__name__)


class RankingEngine:
    """
    Collapses each observation of a STANDARDIZED matrix into a ranking
    index in [0, 1] and orders observations by it.
    """

    def compute(self, matrix: DataMatrix) -> list[ObservationScore]:
        """
        Score every observation, in input order.

        raw_mean is the mean of the row; ranking_index is
        (raw_mean - min) / (max - min) across all observations.
        """
        matrix.require_phase(MatrixPhase.STANDARDIZED)

        raw_means = self._row_means(matrix)
        low, high = self._extremes(raw_means)
        if np.isclose(high, low, rtol=1e-9, atol=1e-12):
            raise DegenerateArithmeticError(
                "All observations have the same mean of standardized values "
                f"({low}); the ranking index cannot be normalized."
            )

        span = high - low
        scores = [
            ObservationScore(
                label=label,
                raw_mean=float(m),
                ranking_index=float((m - low) / span),
            )
            for label, m in zip(matrix.observation_labels, raw_means)
        ]
        logger.info(
            "Scored %d observations (min mean %.6f, max mean %.6f)",
            len(scores), low, high,
        )
        return scores

    def sort(self, scores: Sequence[ObservationScore]) -> list[RankingEntry]:
        """
        Order scores by descending ranking_index.

        The sort is stable: equal indices keep their input order.
        """
        df = pd.DataFrame(
            {
                "label": [s.label for s in scores],
                "ranking_index": [s.ranking_index for s in scores],
            }
        )
        df_ranked = df.sort_values("ranking_index", ascending=False, kind="mergesort")
        return [
            RankingEntry(position=pos, ranking_index=float(row.ranking_index), label=row.label)
            for pos, row in enumerate(df_ranked.itertuples(index=False), start=1)
        ]

    @staticmethod
    def _row_means(matrix: DataMatrix) -> list[float]:
        n_var = matrix.variable_count
        return [
            float(matrix.row(i).sum() / n_var)
            for i in range(matrix.observation_count)
        ]

    @staticmethod
    def _extremes(values: Sequence[float]) -> tuple[float, float]:
        low = high = values[0]
        for v in values[1:]:
            if v < low:
                low = v
            if v > high:
                high = v
        return low, high
