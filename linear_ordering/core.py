"""
One import surface for a complete run: files in, report out.
"""

from __future__ import annotations

from typing import Optional

from linear_ordering.analytics import LinearOrderingAnalysis
from linear_ordering.config import DATA_LAYOUT
from linear_ordering.ingestion import DataImporter
from linear_ordering.models import AnalysisResult
from linear_ordering.report import ReportWriter


def analyze_files(
    observations_path: str,
    variables_path: str,
    data_path: str,
    min_coefficient: float,
    results_path: Optional[str] = None,
    layout: str = DATA_LAYOUT,
) -> AnalysisResult:
    """
    Load the three input files, rank the observations and, when
    ``results_path`` is given, write the report there.
    """
    dataset = DataImporter().load(
        observations_path, variables_path, data_path, layout=layout
    )
    result = LinearOrderingAnalysis().run(dataset, min_coefficient)
    if results_path:
        ReportWriter().write(result, results_path)
    return result
