"""
Statistical verification tools for solojack.
"""

from solojack.verification.statistics import (
    ConfidenceInterval,
    ShuffleValidator,
    house_edge_estimate,
)

__all__ = ["ConfidenceInterval", "ShuffleValidator", "house_edge_estimate"]
