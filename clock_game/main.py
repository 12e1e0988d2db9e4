"""Runs a headless ability/evolution simulation and prints what happened each round."""

import argparse
import random
from typing import List, Optional

from .rule_engine.engine import AbilityEngine
from .rule_engine.game_initializer import _get_game_settings, initialize_game_state
from .rule_engine.game_state import GameState
from clock_game.utils.logger import setup_logger

logger = setup_logger(__name__)


def deal_round(state: GameState, rng: random.Random):
    """Stand-in for the turn loop: tops up mana, moves units and hands out hour cards."""
    for player in state.active_players():
        player.mana += rng.randint(0, 2)
        player.current_clock_position = rng.randint(1, 12)
        if player.is_juvenile and state.hour_deck:
            player.hour_cards.append(state.hour_deck.pop())


def display_game_state(state: GameState):
    print(f"\n--- Round {state.game_round} (marker {state.round_marker}) ---")
    for player in state.players:
        cards = " ".join(str(c) for c in player.hour_cards) or "-"
        print(f"  {player.name:<16} mana={player.mana:<2} pos={player.current_clock_position} cards={cards}")
    print(f"  hour deck: {len(state.hour_deck)} cards, targeting: {state.targeting_mode}")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Simulate Clock game ability resolution.")
    parser.add_argument("--rounds", type=int, default=6, help="Number of rounds to simulate.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a replayable run.")
    parser.add_argument("--settings", default=None, help="Path to a YAML settings file.")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    settings = _get_game_settings(args.settings)
    state = initialize_game_state(settings, rng=rng)
    engine = AbilityEngine(state, rng)

    for game_round in range(1, args.rounds + 1):
        state.game_round = game_round
        engine.begin_tick()
        deal_round(state, rng)
        for result in engine.resolve_pre_round() + engine.resolve_abilities():
            if result:
                print(f"  {result!r} {'; '.join(result.effects)}")
        for player_id in engine.resolve_evolutions():
            print(f"  {player_id} evolved into {state.get_player(player_id).role_card}")
        display_game_state(state)
    logger.info(f"Simulation finished after {args.rounds} rounds.")


if __name__ == "__main__":
    main()
