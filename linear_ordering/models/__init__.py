"""Domain models and data transfer objects."""

from linear_ordering.models.entities import (
    AnalysisResult,
    DataMatrix,
    Dataset,
    MatrixPhase,
    ObservationScore,
    RankingEntry,
    VariableReport,
    VariableStats,
)

__all__ = [
    "AnalysisResult",
    "DataMatrix",
    "Dataset",
    "MatrixPhase",
    "ObservationScore",
    "RankingEntry",
    "VariableReport",
    "VariableStats",
]
