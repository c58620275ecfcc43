"""Game state for UNO."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from unosim.engine.card import Card


@dataclass(frozen=True)
class GameState:
    """Immutable UNO game state.

    Every container is a tuple; transitions build a new state instead of
    editing this one.
    """

    deck: Tuple[Card, ...]  # draw pile, top is last
    field: Tuple[Card, ...]  # discard pile, top is last
    hands: Tuple[Tuple[Card, ...], ...]  # one hand per player index
    players: int
    turn: int
    direction: bool  # False = ascending turn order, True = descending
    seed: int  # seed for the next reshuffle
    chainable: bool  # a Draw Two/Four penalty is waiting to be stacked or drawn
    accum: int  # cards owed by whoever resolves the chain

    def top_of_field(self) -> Card:
        """Return the card new plays must match."""
        return self.field[-1]

    def hand_sizes(self) -> List[int]:
        return [len(hand) for hand in self.hands]

    def total_cards(self) -> int:
        """Cards across deck, field and hands; constant for a game."""
        return len(self.deck) + len(self.field) + sum(self.hand_sizes())

    @property
    def winner(self) -> Optional[int]:
        """Index of the first player with an empty hand, if any."""
        for idx, hand in enumerate(self.hands):
            if not hand:
                return idx
        return None


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player_idx: int
    my_hand: List[Card]
    top_of_field: Card
    deck_count: int
    field_count: int
    turn: int
    direction: bool
    chainable: bool
    accum: int
    num_cards_per_player: Dict[int, int]  # player index -> hand size

    @classmethod
    def from_state(cls, state: GameState, player_idx: int) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        return cls(
            player_idx=player_idx,
            my_hand=list(state.hands[player_idx]),
            top_of_field=state.top_of_field(),
            deck_count=len(state.deck),
            field_count=len(state.field),
            turn=state.turn,
            direction=state.direction,
            chainable=state.chainable,
            accum=state.accum,
            num_cards_per_player=dict(enumerate(state.hand_sizes())),
        )
