"""Human agent - reads moves from terminal."""

from typing import Sequence

from unosim.engine import Move, PlayerView


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
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
        print(f"\n--- Your turn (Hand #{player_idx}) ---")
        print("Your hand:", ", ".join(str(c) for c in player_view.my_hand))
        print("Field top:", player_view.top_of_field)
        if player_view.accum > 1:
            print("Cards to draw:", player_view.accum)
        print("\nLegal moves:")
        print(", ".join(f"{i}: {m}" for i, m in enumerate(moves)))

        while True:
            try:
                raw = input(f"Input a valid move from 0 - {len(moves) - 1}: ").strip()
                idx = int(raw)
                if 0 <= idx < len(moves):
                    return idx
            except ValueError:
                pass
            print(f"Value must be between 0 - {len(moves) - 1}")
