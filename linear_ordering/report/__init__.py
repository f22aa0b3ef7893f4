"""Text report output."""

from linear_ordering.report.writer import ReportWriter

__all__ = ["ReportWriter"]
