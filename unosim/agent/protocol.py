"""Agent protocol - interface that bots and human players implement."""

from typing import Protocol, Sequence

from unosim.engine import Move, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_move(
        self,
        player_view: PlayerView,
        moves: Sequence[Move],
        player_idx: int,
    ) -> int:
        """Choose a move given the player view and legal moves.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            moves: Legal moves to choose from. Must not be modified.
            player_idx: This agent's seat.

        Returns:
            Zero-based index into `moves`.
        """
        ...
