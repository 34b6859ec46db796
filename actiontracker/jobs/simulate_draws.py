"""
Simulate draws from a weapon deck.

Run this job to see how difficulty weighting and reshuffles play out over a
session using the sample pool. Every drawn card is discarded straight away,
so the deck cycles through its discard pile.
"""

import argparse
import logging
import random
from collections import Counter

from actiontracker.config import settings
from actiontracker.models.weapon import DeckType, DifficultyMode
from actiontracker.services.deck_collection import DeckCollection
from actiontracker.services.sample_pool import get_sample_pool

logger = logging.getLogger(__name__)

DEFAULT_DRAWS = 50


def run_simulation(
    deck_type: DeckType,
    difficulty: DifficultyMode,
    draws: int = DEFAULT_DRAWS,
    seed: int | None = None,
) -> Counter[str]:
    """
    Draw and discard `draws` times from one deck.

    Args:
        deck_type: Deck to draw from
        difficulty: Difficulty the decks are built at
        draws: Number of cards to draw
        seed: Seed for a reproducible run

    Returns:
        How many times each card name was drawn
    """
    collection = DeckCollection(get_sample_pool(), difficulty, rng=random.Random(seed))
    deck = collection.get_deck(deck_type)
    logger.info(
        "Simulating %d draws from %s deck (%d cards, %s)",
        draws,
        deck_type.value,
        deck.remaining_count,
        difficulty.value,
    )

    drawn: Counter[str] = Counter()
    for _ in range(draws):
        card = deck.draw()
        if card is None:
            logger.warning("%s deck has no cards", deck_type.value)
            break
        drawn[card.name] += 1
        deck.discard(card)

    for name, times in drawn.most_common():
        logger.info("%-20s %d", name, times)
    logger.info(
        "Simulation complete: %d remaining, %d discarded",
        deck.remaining_count,
        deck.discard_count,
    )
    return drawn


def _log_level() -> int:
    """Logging level for the CLI. Debug mode forces per-card DEBUG output."""
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def main() -> None:
    """CLI entry point for running a draw simulation."""
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--deck",
        choices=[deck_type.value for deck_type in DeckType],
        default=DeckType.REGULAR.value,
    )
    parser.add_argument(
        "--difficulty",
        choices=[mode.value for mode in DifficultyMode],
        default=settings.default_difficulty.value,
    )
    parser.add_argument("--draws", type=int, default=DEFAULT_DRAWS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_simulation(DeckType(args.deck), DifficultyMode(args.difficulty), args.draws, args.seed)


if __name__ == "__main__":
    main()
