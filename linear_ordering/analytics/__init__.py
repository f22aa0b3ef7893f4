"""Analytics: descriptive statistics, z-scores and rankings."""

from linear_ordering.analytics.analysis import LinearOrderingAnalysis
from linear_ordering.analytics.descriptive import DescriptiveStats
from linear_ordering.analytics.ranking import RankingEngine
from linear_ordering.analytics.zscore import ZScoreCalculator

__all__ = [
    "DescriptiveStats",
    "LinearOrderingAnalysis",
    "RankingEngine",
    "ZScoreCalculator",
]
