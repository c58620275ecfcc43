"""Game orchestration."""

from unosim.orchestration.game_runner import GameResult, GameRunner
from unosim.orchestration.tournament import run_tournament

__all__ = ["GameResult", "GameRunner", "run_tournament"]
