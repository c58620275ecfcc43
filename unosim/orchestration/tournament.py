"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Sequence

from unosim.config import GameConfig
from unosim.orchestration.game_runner import GameRunner


def run_tournament(
    agents: Sequence[Any],
    config: GameConfig,
    num_games: int = 100,
    seed: int | None = None,
) -> dict[str, int]:
    """Run `num_games` games between the same agents.

    Seat order rotates by one every game so nobody always moves first, and
    each game gets its own deal seed drawn from `seed`.

    Returns:
        Dict mapping agent name to number of wins.

    Raises:
        ValueError: if two agents share a name, since wins are keyed by name.
    """
    agents = list(agents)
    names = [a.name for a in agents]
    if len(set(names)) != len(names):
        raise ValueError(f"Agent names must be unique, got {names}")
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        shift = g % len(agents)
        seated = agents[shift:] + agents[:shift]
        game_config = config.with_seed(rng.randint(0, 2**31 - 1))
        result = GameRunner(seated, game_config).run()
        if result.winner_name is not None:
            wins[result.winner_name] += 1

    return dict(wins)
