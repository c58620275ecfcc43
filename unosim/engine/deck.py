"""Deck creation, shuffling and the initial deal."""

import random
from typing import List, Optional

from unosim.engine.card import Card, CardVariant, Color, SUIT_COLORS
from unosim.engine.game_state import GameState

CARDS_PER_DECK = 108


class ConfigError(ValueError):
    """Raised when the game parameters cannot produce a playable deal."""


def deck_size(num_decks: int) -> int:
    """Number of cards built for `num_decks`.

    The canonical deck is doubled `num_decks - 1` times, so growth is
    exponential: 1 -> 108, 2 -> 216, 3 -> 432.
    """
    return CARDS_PER_DECK * 2 ** (num_decks - 1)


def validate_setup(players: int, num_decks: int, hand_size: int) -> None:
    """Raise ConfigError unless the parameters leave a deck to draw from."""
    if players < 2:
        raise ConfigError(f"Must play with at least two players, got {players}")
    if num_decks < 1:
        raise ConfigError(f"Must play with at least one deck, got {num_decks}")
    if hand_size < 0:
        raise ConfigError(f"Hand size cannot be negative, got {hand_size}")
    size = deck_size(num_decks)
    if hand_size * players >= size - 1:
        raise ConfigError(
            f"{players} hands of {hand_size} cards need more than the "
            f"{size} cards available with {num_decks} deck(s)"
        )


def _canonical_deck() -> List[Card]:
    cards: List[Card] = []

    for value in range(1, 10):
        for _ in range(2):
            for color in SUIT_COLORS:
                cards.append(Card(value=value, color=color, variant=CardVariant.VALUE))

    for color in SUIT_COLORS:
        cards.append(Card(value=0, color=color, variant=CardVariant.VALUE))

    for _ in range(2):
        for color in SUIT_COLORS:
            cards.append(Card(value=0, color=color, variant=CardVariant.REVERSE))
            cards.append(Card(value=0, color=color, variant=CardVariant.CANCEL))
            cards.append(Card(value=0, color=color, variant=CardVariant.DRAW_TWO))

    for _ in range(4):
        cards.append(Card(value=0, color=Color.WILD, variant=CardVariant.DRAW_FOUR))
        cards.append(Card(value=0, color=Color.WILD, variant=CardVariant.WILD))

    return cards


def create_deck(num_decks: int = 1, seed: Optional[int] = None) -> List[Card]:
    """Create the (possibly multiplied) UNO deck.

    - 4 colors x (1-9 twice, 0 once): 76 value cards
    - 4 colors x (Reverse, Skip, Draw Two) twice: 24 cards
    - 4 Wild, 4 Draw Four: 8 cards
    - Total: 108 cards, then doubled `num_decks - 1` times

    With a seed, the deck is shuffled by `random.Random(seed)`; the same
    seed always yields the same order.
    """
    cards = _canonical_deck()
    for _ in range(num_decks - 1):
        cards.extend(list(cards))

    if seed is not None:
        rng = random.Random(seed)
        rng.shuffle(cards)

    return cards


def init_game(players: int, num_decks: int, hand_size: int, seed: int) -> GameState:
    """Build, shuffle and deal a new game.

    The top of the shuffled deck seeds the field, then each player in turn
    takes `hand_size` cards. The returned state carries `seed + 1` for the
    next reshuffle.
    """
    validate_setup(players, num_decks, hand_size)

    deck = create_deck(num_decks, seed=seed)
    field = [deck.pop()]
    hands = []
    for _ in range(players):
        hands.append(tuple(deck.pop() for _ in range(hand_size)))

    return GameState(
        deck=tuple(deck),
        field=tuple(field),
        hands=tuple(hands),
        players=players,
        turn=0,
        direction=False,
        seed=seed + 1,
        chainable=False,
        accum=0,
    )
