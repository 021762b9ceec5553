"""
Statistical validation for the deck engine and for played rounds.

This module provides tools for checking that shuffles are unbiased and for
summarising the results of many rounds.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import numpy as np
import scipy.stats as stats

from solojack.common.deck import Deck, shuffle, standard_cards
from solojack.common.random_source import DefaultRandomSource, RandomSource


@dataclass
class ConfidenceInterval:
    """
    Represents a confidence interval with lower and upper bounds.

    Attributes:
        lower: The lower bound of the confidence interval
        upper: The upper bound of the confidence interval
        confidence: The confidence level (e.g., 0.95 for 95% confidence)
    """

    lower: float
    upper: float
    confidence: float

    def contains(self, value: float) -> bool:
        """Check if the interval contains a value."""
        return self.lower <= value <= self.upper

    def to_dict(self) -> Dict[str, float]:
        """Convert to a dictionary."""
        return {"lower": self.lower, "upper": self.upper, "confidence": self.confidence}


class ShuffleValidator:
    """
    Checks that a shuffle places every card in every position equally often.

    Each trial shuffles the canonical deck and records where each card ended
    up. For an unbiased shuffle the resulting card-by-position counts are
    uniform, which is tested with a chi-square goodness-of-fit test.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        """
        Initialize the validator.

        Args:
            rng: Random source to shuffle with; seeded for reproducible checks
        """
        self.rng = rng or DefaultRandomSource()
        self._cards = standard_cards()
        self._index = {card: i for i, card in enumerate(self._cards)}

    def position_counts(self, trials: int) -> np.ndarray:
        """
        Count how often each card lands in each position.

        Args:
            trials: Number of shuffles to run

        Returns:
            A ``(cards, positions)`` integer matrix of counts
        """
        if trials <= 0:
            raise ValueError(f"Number of trials must be positive, got {trials}")

        size = len(self._cards)
        counts = np.zeros((size, size), dtype=np.int64)
        deck = Deck(self._cards)
        positions = np.arange(size)
        for _ in range(trials):
            shuffled = shuffle(deck, self.rng)
            card_indices = [self._index[card] for card in shuffled]
            counts[card_indices, positions] += 1
        return counts

    def chi_square_uniformity(self, trials: int) -> Dict[str, Any]:
        """
        Run the chi-square test over the card-by-position counts.

        Args:
            trials: Number of shuffles to run

        Returns:
            A dictionary with the statistic, p-value and degrees of freedom
        """
        counts = self.position_counts(trials).ravel()
        result = stats.chisquare(counts)
        return {
            "statistic": float(result.statistic),
            "p_value": float(result.pvalue),
            "degrees_of_freedom": counts.size - 1,
            "trials": trials,
        }

    def is_uniform(self, trials: int, alpha: float = 0.001) -> bool:
        """True unless the chi-square test rejects uniformity at ``alpha``."""
        return self.chi_square_uniformity(trials)["p_value"] >= alpha


def house_edge_estimate(
    net_results: Iterable[float], confidence: float = 0.95
) -> Dict[str, Any]:
    """
    Summarise per-round net results (chips won or lost per chip staked).

    Args:
        net_results: One value per round, e.g. +1 for a win, 0 for a push,
                     -1 for a loss
        confidence: Confidence level for the interval around the mean

    Returns:
        A dictionary with the mean, its confidence interval and sample size
    """
    values = np.asarray(list(net_results), dtype=float)
    if values.size == 0:
        return {
            "expected_value": 0.0,
            "confidence_interval": ConfidenceInterval(0.0, 0.0, confidence).to_dict(),
            "sample_size": 0,
        }

    mean = float(np.mean(values))
    if values.size > 1:
        std_err = float(np.std(values, ddof=1)) / math.sqrt(values.size)
    else:
        std_err = 0.0
    z = float(stats.norm.ppf(0.5 + confidence / 2))
    interval = ConfidenceInterval(mean - z * std_err, mean + z * std_err, confidence)

    return {
        "expected_value": mean,
        "confidence_interval": interval.to_dict(),
        "sample_size": int(values.size),
    }
