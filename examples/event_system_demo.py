#!/usr/bin/env python3
"""
Example demonstrating the event system.

A scripted DummyAdapter plays a few rounds while listeners on the global
event bus print cards and payouts as they happen.
"""

import asyncio
import logging

from solojack.adapters import DummyAdapter
from solojack.blackjack.action import Action
from solojack.engine import BlackjackEngine
from solojack.events import EngineEventType, EventBus

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def on_card_dealt(data):
    who = "Dealer" if data["is_dealer"] else "Player"
    print(f"  {who} <- {data['card'] or 'face-down card'}")


def on_payout(data):
    print(f"  bet {data['bet']}, returned {data['payout']}, chips now {data['chips']}")


async def main():
    bus = EventBus.get_instance()
    bus.on(EngineEventType.CARD_DEALT, on_card_dealt)
    bus.on(EngineEventType.MONEY_PAYOUT, on_payout)
    bus.on(
        EngineEventType.ROUND_STARTED,
        lambda data: print(f"Round {data['round_number']}"),
    )

    adapter = DummyAdapter(
        bets=[25, 50, 100],
        actions=[Action.HIT, Action.STAND, Action.STAND, Action.STAND],
        new_rounds=[True, True],
    )
    engine = BlackjackEngine(adapter, {"seed": 42})

    state = await engine.run(max_rounds=3)
    logger.info("Finished with %d chips after %d events", state.chips, len(adapter.events))


if __name__ == "__main__":
    asyncio.run(main())
