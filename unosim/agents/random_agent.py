"""Random agent - uniform choice over legal moves."""

import random
from typing import Optional, Sequence

from unosim.engine import Move, PlayerView


class RandomAgent:
    """Agent that picks any legal move with equal probability."""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def choose_move(
        self,
        player_view: PlayerView,
        moves: Sequence[Move],
        player_idx: int,
    ) -> int:
        return self._rng.randrange(len(moves))
