"""Single game runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from unosim.config import GameConfig
from unosim.engine import (
    DeckExhaustedError,
    GameState,
    Move,
    PlayerView,
    apply_move,
    get_legal_moves,
    init_game,
)

if TYPE_CHECKING:
    from unosim.agent.protocol import AgentProtocol


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]
    num_turns: int
    seed: int
    agent_names: tuple[str, ...]

    @property
    def winner_name(self) -> Optional[str]:
        if self.winner is None:
            return None
        return self.agent_names[self.winner]


def _print_status(state: GameState, moves: Sequence[Move]) -> None:
    print(f"--- Playing as Hand #{state.turn} ---")
    print(f"Field Top: {state.top_of_field()}")
    print(f"Cards in Deck: {len(state.deck)}")
    print(f"Cards in Field: {len(state.field)}")
    if state.accum > 1:
        print(f"Cards to Draw: {state.accum}")
    print()
    for idx, hand in enumerate(state.hands):
        print(f"Hand #{idx}: {', '.join(str(c) for c in hand)}")
    print()
    print(", ".join(f"{i}: {m}" for i, m in enumerate(moves)))
    print()


class GameRunner:
    """Runs a single UNO game to completion.

    `agents[i]` plays seat `i`; there must be one agent per player.
    """

    def __init__(
        self,
        agents: Sequence["AgentProtocol"],
        config: GameConfig,
        max_turns: int = 1000,
        verbose: bool = False,
    ):
        if len(agents) != config.players:
            raise ValueError(
                f"Expected {config.players} agents, got {len(agents)}"
            )
        self._agents = list(agents)
        self._config = config
        self._max_turns = max_turns
        self._verbose = verbose
        self.final_state: Optional[GameState] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        cfg = self._config
        state = init_game(cfg.players, cfg.num_decks, cfg.hand_size, cfg.seed)
        num_turns = 0

        while state.winner is None and num_turns < self._max_turns:
            moves = get_legal_moves(state)
            if self._verbose:
                _print_status(state, moves)

            pid = state.turn
            view = PlayerView.from_state(state, pid)
            idx = self._agents[pid].choose_move(view, moves, pid)
            if not 0 <= idx < len(moves):
                raise ValueError(
                    f"{self._agents[pid].name} picked move {idx}, "
                    f"expected 0 - {len(moves) - 1}"
                )
            if self._verbose:
                print(f"{self._agents[pid].name} has picked move: {idx}")
                print()

            try:
                state = apply_move(state, moves[idx])
            except DeckExhaustedError as e:
                if self._verbose:
                    print(f"Game stopped: {e}")
                break
            num_turns += 1

        self.final_state = state
        if self._verbose and state.winner is not None:
            print(f"Player {state.winner} has won the game!")

        return GameResult(
            winner=state.winner,
            num_turns=num_turns,
            seed=cfg.seed,
            agent_names=tuple(a.name for a in self._agents),
        )
