"""
Plain-text report of descriptive statistics and the final ranking.
"""

from __future__ import annotations

import logging

from linear_ordering.config import DECIMAL_PLACES, ENCODING
from linear_ordering.errors import ExistenceError
from linear_ordering.models import AnalysisResult, VariableReport

logger = logging.getLogger(__name__)


class ReportWriter:
    """Renders an AnalysisResult and writes it to a file."""

    def __init__(self, decimal_places: int = DECIMAL_PLACES, encoding: str = ENCODING) -> None:
        self.decimal_places = decimal_places
        self.encoding = encoding

    def _fmt(self, value: float) -> str:
        return f"{value:.{self.decimal_places}f}"

    def render_variable(self, variable: VariableReport) -> str:
        s = variable.stats
        lines = [f"Variable: {variable.label}"]
        if variable.below_threshold:
            lines.append(
                f"NOTE: Required to remove variable {variable.label} "
                "due to low level of coefficient of variation"
            )
        lines += [
            f"Minimum: {self._fmt(s.minimum)}",
            f"Maximum: {self._fmt(s.maximum)}",
            f"Mean: {self._fmt(s.mean)}",
            f"Median: {self._fmt(s.median)}",
            f"Standard deviation: {self._fmt(s.standard_deviation)}",
            f"Variance: {self._fmt(s.variance)}",
            f"Coefficient of variation (%): {self._fmt(s.coefficient_of_variation)}",
        ]
        return "\n".join(lines) + "\n\n"

    def render(self, result: AnalysisResult) -> str:
        parts = [self.render_variable(v) for v in result.variables]
        parts.append("\nRANKING\n")
        parts += [
            f"{entry.position}. {self._fmt(entry.ranking_index)} - {entry.label}\n"
            for entry in result.ranking
        ]
        return "".join(parts)

    def write(self, result: AnalysisResult, filepath: str) -> None:
        """Nothing is written if rendering fails."""
        text = self.render(result)
        try:
            with open(filepath, "w", encoding=self.encoding) as f:
                f.write(text)
        except OSError as e:
            raise ExistenceError(f"{filepath}: {e.strerror or e}") from e
        logger.info("Report written to %s", filepath)
