"""
Statistical checks of the shuffle and of round summaries.
"""

import numpy as np
import pytest

from solojack.common.random_source import DefaultRandomSource, RandomSource
from solojack.verification import ConfidenceInterval, ShuffleValidator, house_edge_estimate


class AlwaysZeroRandomSource(RandomSource):
    def randbelow(self, n):
        return 0


def test_position_counts_shape_and_totals():
    validator = ShuffleValidator(DefaultRandomSource(7))
    counts = validator.position_counts(100)

    assert counts.shape == (52, 52)
    # Every shuffle puts each card somewhere and fills every position once
    assert np.all(counts.sum(axis=0) == 100)
    assert np.all(counts.sum(axis=1) == 100)


def test_position_counts_rejects_bad_trials():
    with pytest.raises(ValueError):
        ShuffleValidator().position_counts(0)


def test_fisher_yates_is_uniform():
    validator = ShuffleValidator(DefaultRandomSource(2024))
    result = validator.chi_square_uniformity(520)

    assert result["degrees_of_freedom"] == 52 * 52 - 1
    assert result["trials"] == 520
    assert result["p_value"] > 0.001


def test_biased_source_is_detected():
    validator = ShuffleValidator(AlwaysZeroRandomSource())
    assert not validator.is_uniform(520)


def test_house_edge_estimate():
    summary = house_edge_estimate([1, -1, 0, -1, 1, -1])

    assert summary["sample_size"] == 6
    assert summary["expected_value"] == pytest.approx(-1 / 6)
    interval = summary["confidence_interval"]
    assert interval["lower"] < summary["expected_value"] < interval["upper"]
    assert interval["confidence"] == 0.95


def test_house_edge_estimate_edge_cases():
    empty = house_edge_estimate([])
    assert empty["sample_size"] == 0
    assert empty["expected_value"] == 0.0

    single = house_edge_estimate([1.0])
    assert single["confidence_interval"]["lower"] == 1.0
    assert single["confidence_interval"]["upper"] == 1.0


def test_confidence_interval_contains():
    interval = ConfidenceInterval(-0.1, 0.1, 0.95)
    assert interval.contains(0.0)
    assert not interval.contains(0.2)
    assert interval.to_dict() == {"lower": -0.1, "upper": 0.1, "confidence": 0.95}
