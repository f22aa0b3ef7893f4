"""
Linear ordering of multidimensional observations with the standardized
sum method.
"""

from linear_ordering.core import analyze_files
from linear_ordering.errors import AnalysisError

__version__ = "1.0.0"

__all__ = ["AnalysisError", "analyze_files", "__version__"]
