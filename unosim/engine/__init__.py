"""Deterministic rule engine for UNO."""

from unosim.engine.card import Card, CardVariant, Color
from unosim.engine.deck import (
    CARDS_PER_DECK,
    ConfigError,
    create_deck,
    deck_size,
    init_game,
    validate_setup,
)
from unosim.engine.game_state import GameState, PlayerView
from unosim.engine.rules import (
    DeckExhaustedError,
    Move,
    MoveVariant,
    apply_move,
    get_legal_moves,
    playable,
)

__all__ = [
    "Card",
    "CardVariant",
    "Color",
    "CARDS_PER_DECK",
    "ConfigError",
    "create_deck",
    "deck_size",
    "init_game",
    "validate_setup",
    "GameState",
    "PlayerView",
    "DeckExhaustedError",
    "Move",
    "MoveVariant",
    "apply_move",
    "get_legal_moves",
    "playable",
]
