"""Game parameters shared by the CLI and the orchestration layer."""

from dataclasses import dataclass, replace

from unosim.engine.deck import CARDS_PER_DECK, validate_setup


@dataclass(frozen=True)
class GameConfig:
    """Parameters for `init_game`."""

    players: int = 2
    num_decks: int = 1
    hand_size: int = 7
    seed: int = 0

    def validate(self) -> None:
        """Raise ConfigError if these parameters cannot be dealt."""
        validate_setup(self.players, self.num_decks, self.hand_size)

    def autoscaled(self) -> "GameConfig":
        """Return a copy with enough decks for every hand.

        Only the deck count is touched, and only when `num_decks` full decks
        could not cover the hands.
        """
        if self.num_decks < 1 or self.players < 2:
            return self
        needed = self.players * self.hand_size
        if self.num_decks * CARDS_PER_DECK > needed:
            return self
        num_decks = needed // CARDS_PER_DECK + 1
        print(
            f"Number of players exceed number of cards available if each player "
            f"has {self.hand_size} cards per hand."
        )
        print(f"Auto scaling num of decks to {num_decks} for {self.players} players.")
        return replace(self, num_decks=num_decks)

    def with_seed(self, seed: int) -> "GameConfig":
        return replace(self, seed=seed)
