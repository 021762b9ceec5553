#!/usr/bin/env python3
"""
Example script demonstrating the statistical checks.

Runs the positional chi-square test on the shuffle and estimates the
player's expected return for a simple "hit below 17" strategy.
"""

import logging

from solojack import DefaultRandomSource, RoundOutcome, hit, new_round, place_bet, stand
from solojack.verification import ShuffleValidator, house_edge_estimate

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

NET = {
    RoundOutcome.PLAYER_WIN: 1,
    RoundOutcome.PUSH: 0,
    RoundOutcome.DEALER_WIN: -1,
    RoundOutcome.PLAYER_BUST: -1,
}


def play_simple_strategy(rounds, rng):
    results = []
    for _ in range(rounds):
        state = place_bet(new_round(chips=10, rng=rng), 1)
        while state.phase.name == "PLAYING" and state.player_score < 17:
            state = hit(state)
        state = stand(state)
        results.append(NET[state.outcome])
    return results


def main():
    validator = ShuffleValidator(DefaultRandomSource(1))
    result = validator.chi_square_uniformity(1000)
    logger.info(
        "Shuffle chi-square: statistic=%.1f dof=%d p=%.4f",
        result["statistic"],
        result["degrees_of_freedom"],
        result["p_value"],
    )

    summary = house_edge_estimate(play_simple_strategy(20000, DefaultRandomSource(2)))
    interval = summary["confidence_interval"]
    logger.info(
        "Expected return per chip: %.4f (95%% CI %.4f .. %.4f, n=%d)",
        summary["expected_value"],
        interval["lower"],
        interval["upper"],
        summary["sample_size"],
    )


if __name__ == "__main__":
    main()
