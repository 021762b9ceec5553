#!/usr/bin/env python3
"""
Example demonstrating the immutable round state and its transitions.

Each call returns a new RoundState; the earlier snapshots stay valid and can
be compared or printed after the fact.
"""

import sys

from solojack import DefaultRandomSource, new_round, place_bet, hit, stand, reset


def describe(label, state):
    print(f"{label}:")
    print(f"  phase:   {state.phase.name}")
    print(f"  message: {state.message}")
    print(f"  chips:   {state.chips}  bet: {state.current_bet}")
    if state.player_hand.cards:
        dealer = ", ".join(str(card) for card in state.dealer_visible_cards)
        print(f"  dealer:  {dealer} ({state.dealer_display_score})")
        print(f"  player:  {state.player_hand} ({state.player_score})")
    print()


def main(seed=7):
    rng = DefaultRandomSource(seed)

    start = new_round(chips=1000, rng=rng)
    describe("New round", start)

    betting = place_bet(start, 100)
    describe("After betting 100", betting)

    # Hit on anything below 17, then stand
    state = betting
    while state.phase.name == "PLAYING" and state.player_score < 17:
        state = hit(state)
        describe("After hit", state)
    final = stand(state)
    describe("Final", final)

    # Snapshots are never modified
    print(f"The opening snapshot still holds {start.chips} chips.")
    print(f"Requests outside the playing phase are ignored: {hit(final) is final}")
    print()

    describe("Next round", reset(final, rng=rng))


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 7)
