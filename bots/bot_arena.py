"""Simple bot arena for Klondike."""

from __future__ import annotations

import argparse
import logging
from random import Random
from typing import Dict, Hashable, Iterable, Optional

from klondike.config import EngineConfig, configure_logging, load_config
from klondike.game import KlondikeGame
from klondike.state import GameState

from .base import BotStrategy, apply_action
from .baseline_greedy import GreedyBot
from .hint_bot import HintBot
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "hint": HintBot,
    "greedy": GreedyBot,
    "random": RandomBot,
}


def build_bot(name: str, seed: Optional[int] = None) -> BotStrategy:
    """Instantiate a registered bot; bots that roll dice are seeded with ``seed``."""
    bot_cls = BOT_REGISTRY[name]
    if bot_cls is RandomBot:
        return RandomBot(seed=seed)
    return bot_cls()


def position_key(state: GameState) -> Hashable:
    return (
        tuple(card.id for card in state.stock),
        tuple(card.id for card in state.waste),
        tuple(tuple(card.id for card in pile) for pile in state.foundations),
        tuple(tuple((card.id, card.face_up) for card in pile) for pile in state.tableau),
    )


def play_game(game: KlondikeGame, bot: BotStrategy, *, max_actions: int = 1000) -> dict:
    """Let ``bot`` play the current deal until it wins, gives up or stalls.

    A deal is stalled once the piles return to a position already seen, which
    covers both a full pass over the stock with nothing played and a run
    shuffled back and forth between two columns.
    """
    bot.on_game_start(game)
    seen = {position_key(game.state)}
    actions = 0
    while actions < max_actions and not game.is_won():
        action = bot.choose_action(game)
        if action is None:
            break
        apply_action(game, action)
        actions += 1
        position = position_key(game.state)
        if position in seen:
            logger.debug("Position repeated after %d actions", actions)
            break
        seen.add(position)
    return {
        "won": game.is_won(),
        "actions": actions,
        "foundation_cards": game.state.foundation_total(),
    }


def run_games(
    bot: BotStrategy,
    *,
    n_games: int = 10,
    seed: int | None = None,
    max_actions: int = 1000,
    config: Optional[EngineConfig] = None,
) -> dict:
    game = KlondikeGame(config=config or EngineConfig(), rng=Random(seed))
    history = []
    for idx in range(n_games):
        if idx:
            game.new_game()
        result = play_game(game, bot, max_actions=max_actions)
        logger.debug("Game %d: %s", idx, result)
        history.append(result)
    wins = sum(1 for entry in history if entry["won"])
    return {"wins": wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Let a bot play a batch of Klondike deals.")
    parser.add_argument("--bot", default="greedy", choices=BOT_REGISTRY.keys())
    parser.add_argument("--games", type=int, default=10, help="Number of deals to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--max-actions", type=int, default=1000, help="Safety cap on actions per deal.")
    parser.add_argument("--log-level", default=None, help="Overrides the level from the config file.")
    parser.add_argument("--config", default=None, help="JSON engine config; defaults to $KLONDIKE_CONFIG.")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.log_level:
        config = EngineConfig(**{**config.model_dump(), "log_level": args.log_level})
    configure_logging(config)
    bot = build_bot(args.bot, seed=args.seed)
    results = run_games(
        bot,
        n_games=args.games,
        seed=args.seed,
        max_actions=args.max_actions,
        config=config,
    )

    print(f"Wins: {results['wins']}/{args.games}")
    cleared = [entry["foundation_cards"] for entry in results["history"]]
    print(f"Cards on foundations per deal: {cleared}")


if __name__ == "__main__":
    main()
