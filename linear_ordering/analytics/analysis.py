"""
Standardized sum method: statistics -> z-scores -> row means -> ranking.
"""

from __future__ import annotations

import logging
from typing import Optional

from linear_ordering.analytics.descriptive import DescriptiveStats
from linear_ordering.analytics.ranking import RankingEngine
from linear_ordering.analytics.zscore import ZScoreCalculator
from linear_ordering.errors import RangeError
from linear_ordering.models import AnalysisResult, Dataset, VariableReport

logger = logging.getLogger(__name__)


class LinearOrderingAnalysis:
    """
    Runs the whole pipeline over a validated Dataset.
    The dataset's matrix is standardized in place.
    """

    def __init__(
        self,
        stats: Optional[DescriptiveStats] = None,
        calculator: Optional[ZScoreCalculator] = None,
        engine: Optional[RankingEngine] = None,
    ) -> None:
        self._stats = stats or DescriptiveStats()
        self._calculator = calculator or ZScoreCalculator()
        self._engine = engine or RankingEngine()

    def run(self, dataset: Dataset, min_coefficient: float = 0.0) -> AnalysisResult:
        if min_coefficient < 0:
            raise RangeError("Coefficient cannot be lower than 0")

        matrix = dataset.matrix
        logger.info(
            "Running analysis: %d observations x %d variables, min coefficient %s",
            matrix.observation_count, matrix.variable_count, min_coefficient,
        )

        all_stats = self._stats.compute(matrix)
        variables = []
        for label, s in zip(dataset.variable_labels, all_stats):
            below = s.coefficient_of_variation < min_coefficient
            if below:
                logger.warning(
                    "Variable %s has a low coefficient of variation (%.6f < %s)",
                    label, s.coefficient_of_variation, min_coefficient,
                )
            variables.append(VariableReport(label=label, stats=s, below_threshold=below))

        self._calculator.compute(matrix, all_stats)
        scores = self._engine.compute(matrix)
        ranking = self._engine.sort(scores)

        return AnalysisResult(
            variables=variables,
            scores=scores,
            ranking=ranking,
            min_coefficient=min_coefficient,
        )
