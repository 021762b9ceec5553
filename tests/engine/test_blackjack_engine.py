"""
Tests for the BlackjackEngine class.

This module contains tests for the BlackjackEngine class to ensure it owns
the round state, publishes events for every applied change, and drives the
adapter through a full round.
"""

import pytest
from unittest.mock import patch

from solojack.adapters import DummyAdapter
from solojack.blackjack.action import Action
from solojack.common.errors import EmptyDeckError, InvalidPhaseActionError
from solojack.common.random_source import RandomSource
from solojack.engine import BlackjackEngine
from solojack.events import EngineEventType, EventBus, EventEmitter
from solojack.state import GamePhase, RoundOutcome
from solojack.state.transitions import new_round


class UnshuffledRandomSource(RandomSource):
    """Never swaps, so decks keep canonical order and deal K♦, Q♦, J♦, 10♦, ..."""

    def randbelow(self, n):
        return n - 1


@pytest.fixture
def adapter():
    return DummyAdapter()


@pytest.fixture
def engine(adapter):
    return BlackjackEngine(
        adapter, {"initial_chips": 1000, "rng": UnshuffledRandomSource()}
    )


def event_names(adapter):
    return [name for name, _ in adapter.events]


def test_initialization(engine):
    assert engine.adapter is not None
    assert engine.event_bus is EventBus.get_instance()
    assert engine.state is None
    assert engine.initial_chips == 1000
    assert engine.bet_options == (10, 25, 50, 100)
    assert engine.strict is False


def test_seed_config_builds_seeded_source(adapter):
    engine = BlackjackEngine(adapter, {"seed": 11})
    assert engine.rng.seed == 11


@pytest.mark.asyncio
@patch.object(EventEmitter, "emit")
async def test_initialize(mock_emit, engine, adapter):
    await engine.initialize()

    assert adapter.initialized
    args = mock_emit.call_args[0]
    assert args[0] == EngineEventType.ENGINE_INIT


@pytest.mark.asyncio
@patch.object(EventEmitter, "emit")
async def test_shutdown(mock_emit, engine, adapter):
    await engine.shutdown()

    assert adapter.shut_down
    args = mock_emit.call_args[0]
    assert args[0] == EngineEventType.ENGINE_SHUTDOWN


@pytest.mark.asyncio
async def test_start_game(engine, adapter):
    state = await engine.start_game()

    assert engine.state is state
    assert state.phase is GamePhase.BETTING
    assert state.chips == 1000
    assert event_names(adapter) == ["ROUND_STARTED"]
    assert adapter.rendered_states[-1]["phase"] == "BETTING"


@pytest.mark.asyncio
async def test_operations_require_a_game(engine):
    with pytest.raises(RuntimeError):
        await engine.hit()


@pytest.mark.asyncio
async def test_place_bet_deals_and_emits(engine, adapter):
    await engine.start_game()
    adapter.clear()

    state = await engine.place_bet(100)

    assert state.chips == 900
    assert state.phase is GamePhase.PLAYING
    assert [c.rank.value for c in state.player_hand] == ["K", "Q"]
    assert [c.rank.value for c in state.dealer_hand] == ["J", "10"]
    assert event_names(adapter) == [
        "PLAYER_BET",
        "CARD_DEALT",
        "CARD_DEALT",
        "CARD_DEALT",
        "CARD_DEALT",
    ]
    hole = adapter.get_events_by_type(EngineEventType.CARD_DEALT)[-1]
    assert hole["is_hole_card"] is True
    assert hole["card"] is None
    assert adapter.rendered_states[-1]["dealer"]["hide_second_card"] is True


@pytest.mark.asyncio
async def test_rejected_bet_is_silent(engine, adapter):
    await engine.start_game(chips=50)
    before = engine.state
    adapter.clear()

    after = await engine.place_bet(100)

    assert after is before
    assert adapter.events == []
    assert adapter.rendered_states == []


@pytest.mark.asyncio
async def test_strict_engine_raises(adapter):
    engine = BlackjackEngine(adapter, {"strict": True, "rng": UnshuffledRandomSource()})
    await engine.start_game()
    with pytest.raises(InvalidPhaseActionError):
        await engine.stand()


@pytest.mark.asyncio
async def test_stand_settles_round(engine, adapter):
    await engine.start_game()
    await engine.place_bet(100)
    adapter.clear()

    state = await engine.stand()

    # K+Q against J+10 is a push
    assert state.outcome is RoundOutcome.PUSH
    assert state.chips == 1000
    assert event_names(adapter) == [
        "PLAYER_ACTION",
        "DEALER_ACTION",
        "HAND_RESULT",
        "MONEY_PAYOUT",
        "ROUND_ENDED",
    ]
    payout = adapter.get_events_by_type("MONEY_PAYOUT")[0]
    assert payout == {
        "bet": 100,
        "payout": 100,
        "chips": 1000,
        "timestamp": payout["timestamp"],
    }


@pytest.mark.asyncio
async def test_dealer_draw_events(engine, adapter, stacked_deck):
    await engine.start_game()
    engine.state = new_round(1000, deck=stacked_deck("10", "9", "6", "Q", "5"))
    await engine.place_bet(100)
    adapter.clear()

    state = await engine.stand()

    assert state.message == "Dealer wins!"
    assert state.chips == 900
    dealer_actions = adapter.get_events_by_type("DEALER_ACTION")
    assert [(e["action"], e["score"]) for e in dealer_actions] == [
        ("hits", 16),
        ("stands", 21),
    ]
    dealt = adapter.get_events_by_type("CARD_DEALT")
    assert len(dealt) == 1 and dealt[0]["is_dealer"]


@pytest.mark.asyncio
async def test_hit_bust_events(engine, adapter, stacked_deck):
    await engine.start_game()
    engine.state = new_round(1000, deck=stacked_deck("10", "9", "6", "Q", "5"))
    await engine.place_bet(100)
    adapter.clear()

    state = await engine.hit()

    assert state.message == "Bust! Dealer wins!"
    assert state.chips == 900
    assert event_names(adapter) == [
        "PLAYER_ACTION",
        "CARD_DEALT",
        "HAND_BUSTED",
        "HAND_RESULT",
        "MONEY_PAYOUT",
        "ROUND_ENDED",
    ]
    assert adapter.get_events_by_type("MONEY_PAYOUT")[0]["payout"] == 0


@pytest.mark.asyncio
async def test_noop_actions_emit_nothing(engine, adapter):
    await engine.start_game()
    before = engine.state
    adapter.clear()

    assert await engine.hit() is before
    assert await engine.stand() is before
    assert adapter.events == []


@pytest.mark.asyncio
async def test_empty_deck_emits_error_and_raises(engine, adapter, stacked_deck):
    await engine.start_game()
    engine.state = new_round(1000, deck=stacked_deck("2", "2", "2", "2"))
    await engine.place_bet(10)
    before = engine.state
    adapter.clear()

    with pytest.raises(EmptyDeckError):
        await engine.hit()

    assert engine.state is before
    assert event_names(adapter) == ["ERROR"]


@pytest.mark.asyncio
async def test_events_reach_the_bus(engine):
    received = []
    engine.event_bus.on(EngineEventType.PLAYER_BET, received.append)

    await engine.start_game()
    await engine.place_bet(25)

    assert len(received) == 1
    assert received[0]["amount"] == 25


@pytest.mark.asyncio
async def test_valid_actions(engine):
    assert engine.valid_actions() == []
    await engine.start_game()
    assert engine.valid_actions() == []
    await engine.place_bet(10)
    assert engine.valid_actions() == [Action.HIT, Action.STAND]


@pytest.mark.asyncio
async def test_reset_keeps_chips(engine):
    await engine.start_game()
    await engine.place_bet(100)
    await engine.hit()  # K+Q+9 busts
    assert engine.state.chips == 900

    state = await engine.reset()
    assert state.phase is GamePhase.BETTING
    assert state.chips == 900
    assert state.round_number == 2


@pytest.mark.asyncio
async def test_play_round_with_scripted_adapter():
    adapter = DummyAdapter(bets=[50], actions=[Action.STAND])
    engine = BlackjackEngine(adapter, {"rng": UnshuffledRandomSource()})

    state = await engine.play_round()

    assert state.phase is GamePhase.GAME_OVER
    assert state.outcome is RoundOutcome.PUSH
    assert state.current_bet == 50


@pytest.mark.asyncio
async def test_play_round_player_leaves():
    adapter = DummyAdapter(bets=[None])
    engine = BlackjackEngine(adapter, {"rng": UnshuffledRandomSource()})

    assert await engine.play_round() is None


@pytest.mark.asyncio
async def test_play_round_without_affordable_bet(adapter):
    engine = BlackjackEngine(
        adapter, {"initial_chips": 5, "rng": UnshuffledRandomSource()}
    )
    assert await engine.play_round() is None


@pytest.mark.asyncio
async def test_run_plays_requested_rounds():
    adapter = DummyAdapter(
        bets=[10, 10, 10],
        actions=[Action.HIT, Action.STAND, Action.STAND],
        new_rounds=[True, True],
    )
    engine = BlackjackEngine(adapter, {"rng": UnshuffledRandomSource()})

    state = await engine.run(max_rounds=3)

    names = event_names(adapter)
    assert names[0] == "ENGINE_INIT"
    assert names[-1] == "ENGINE_SHUTDOWN"
    assert names.count("ROUND_ENDED") == 3
    # First round: hit busts K+Q; the next two push
    assert state.chips == 990
    assert adapter.initialized and adapter.shut_down


@pytest.mark.asyncio
async def test_run_stops_when_player_declines():
    adapter = DummyAdapter(bets=[10], new_rounds=[False])
    engine = BlackjackEngine(adapter, {"rng": UnshuffledRandomSource()})

    await engine.run()

    assert event_names(adapter).count("ROUND_ENDED") == 1


@pytest.mark.asyncio
async def test_every_published_payload_has_its_fields():
    adapter = DummyAdapter(
        bets=[10, 10], actions=[Action.HIT, Action.STAND], new_rounds=[True]
    )
    engine = BlackjackEngine(adapter, {"seed": 3})
    received = []
    for event_type in EngineEventType:
        engine.event_bus.on(
            event_type, lambda data, t=event_type: received.append((t, data))
        )

    await engine.run(max_rounds=2)

    assert received
    assert [t.name for t, _ in received] == event_names(adapter)
    for event_type, data in received:
        assert event_type.fields <= data.keys()
