#!/usr/bin/env python
"""
Entry point for the standardized sum ranking.
Usage: python run_ranking.py [observations variables data min_coefficient results]
"""

import sys

from linear_ordering.analytics.cli import main

if __name__ == "__main__":
    sys.exit(main())
