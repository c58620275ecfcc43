"""Conservative agent - ranks moves by variant priority."""

from typing import Sequence

from unosim.engine import Move, PlayerView


class ConservativeAgent:
    """Agent that plays the move with the highest MoveVariant.

    Draw Four outranks Draw Two, then Skip, Reverse, a plain play and finally
    drawing from the deck. Ties go to the earliest move in the list.
    """

    def __init__(self, name: str = "conservative"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_move(
        self,
        player_view: PlayerView,
        moves: Sequence[Move],
        player_idx: int,
    ) -> int:
        ranked = sorted(enumerate(moves), key=lambda pair: pair[1].variant, reverse=True)
        return ranked[0][0]
