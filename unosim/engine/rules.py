"""UNO rules: legal moves and state transitions."""

import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Optional, Tuple

from unosim.engine.card import Card, CardVariant, Color, DECLARABLE_COLORS, DRAW_VARIANTS
from unosim.engine.game_state import GameState


class DeckExhaustedError(RuntimeError):
    """Raised when a draw is owed but neither deck nor field can supply a card."""


class MoveVariant(IntEnum):
    """Kinds of move, ordered by how eagerly they are played."""

    DRAW_DECK = 0
    PLAY = 1
    REVERSE = 2
    SKIP = 3
    DRAW_TWO = 4
    DRAW_FOUR = 5


_CARD_TO_MOVE = {
    CardVariant.DRAW_TWO: MoveVariant.DRAW_TWO,
    CardVariant.DRAW_FOUR: MoveVariant.DRAW_FOUR,
    CardVariant.REVERSE: MoveVariant.REVERSE,
    CardVariant.CANCEL: MoveVariant.SKIP,
    CardVariant.WILD: MoveVariant.PLAY,
}

_PENALTY = {
    MoveVariant.DRAW_TWO: 2,
    MoveVariant.DRAW_FOUR: 4,
}


@dataclass(frozen=True)
class Move:
    """A move for `player_idx`.

    `hand_idx` is ignored for DRAW_DECK. `as_color` is the color the card is
    played as, which is how wild cards get their declared color.
    """

    hand_idx: int
    player_idx: int
    variant: MoveVariant
    as_color: Color

    def __str__(self) -> str:
        c = self.as_color.letter
        if self.variant is MoveVariant.PLAY:
            return f"H{self.hand_idx}{c}"
        if self.variant is MoveVariant.SKIP:
            return f"S{c}"
        if self.variant is MoveVariant.DRAW_DECK:
            return "D"
        if self.variant is MoveVariant.DRAW_FOUR:
            return f"D4->{c}"
        if self.variant is MoveVariant.DRAW_TWO:
            return "D2"
        return "R"


def playable(
    top: Card,
    card: Card,
    hand_idx: int,
    player_idx: int,
    chainable: bool,
) -> Optional[Move]:
    """Return the move playing `card` onto `top`, or None if it cannot be played."""
    # An open draw chain can only be extended with the same draw variant.
    if chainable and top.variant is not card.variant and top.variant in DRAW_VARIANTS:
        return None

    if card.variant is CardVariant.VALUE:
        if top.color is card.color or (
            top.variant is card.variant and top.value == card.value
        ):
            return Move(hand_idx, player_idx, MoveVariant.PLAY, card.color)
        return None

    if card.color is Color.WILD or card.color is top.color:
        return Move(hand_idx, player_idx, _CARD_TO_MOVE[card.variant], card.color)
    return None


def get_legal_moves(state: GameState) -> List[Move]:
    """Return all legal moves for the player whose turn it is.

    Wild cards expand into one move per declarable color. A non-empty hand
    with nothing to play gets a single DRAW_DECK move; an empty hand gets
    no moves at all.
    """
    hand = state.hands[state.turn]
    top = state.top_of_field()

    moves: List[Move] = []
    for idx, card in enumerate(hand):
        move = playable(top, card, idx, state.turn, state.chainable)
        if move is None:
            continue
        if move.as_color is Color.WILD:
            moves.extend(replace(move, as_color=color) for color in DECLARABLE_COLORS)
        else:
            moves.append(move)

    if not moves and hand:
        moves.append(Move(0, state.turn, MoveVariant.DRAW_DECK, Color.WILD))
    return moves


def _reshuffle(field: List[Card], seed: int) -> Tuple[List[Card], List[Card], int]:
    """Shuffle all but the top of the field into a new deck.

    Returns (deck, field, next_seed).
    """
    top = field.pop()
    deck = field
    random.Random(seed).shuffle(deck)
    return deck, [top], seed + 1


def apply_move(state: GameState, move: Move) -> GameState:
    """Apply a move from `get_legal_moves(state)` and return the new state."""
    hands = [list(hand) for hand in state.hands]
    deck = list(state.deck)
    field = list(state.field)
    seed = state.seed
    accum = state.accum
    chainable = state.chainable

    direction = state.direction ^ (move.variant is MoveVariant.REVERSE)
    step = 2 if move.variant is MoveVariant.SKIP else 1
    sign = -1 if direction else 1
    turn = (state.turn + step * sign) % state.players

    if move.variant is MoveVariant.DRAW_DECK:
        # Either a plain draw or the resolution of a draw chain.
        for _ in range(max(accum, 1)):
            if not deck:
                if len(field) < 2:
                    raise DeckExhaustedError(
                        f"Player {move.player_idx} must draw but no cards are left"
                    )
                deck, field, seed = _reshuffle(field, seed)
            hands[move.player_idx].append(deck.pop())
        chainable = False
        accum = 0
    else:
        if move.variant in _PENALTY:
            accum += _PENALTY[move.variant]
            chainable = True
        card = hands[move.player_idx].pop(move.hand_idx)
        field.append(replace(card, color=move.as_color))

    if not deck:
        deck, field, seed = _reshuffle(field, seed)

    return GameState(
        deck=tuple(deck),
        field=tuple(field),
        hands=tuple(tuple(hand) for hand in hands),
        players=state.players,
        turn=turn,
        direction=direction,
        seed=seed,
        chainable=chainable,
        accum=accum,
    )
