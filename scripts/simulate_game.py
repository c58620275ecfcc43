"""Simulate a game between a random and a conservative bot."""

from unosim.agents import ConservativeAgent, RandomAgent
from unosim.config import GameConfig
from unosim.orchestration.game_runner import GameRunner


def main():
    agents = [
        RandomAgent("Bot0", seed=7),
        ConservativeAgent("Bot1"),
        RandomAgent("Bot2", seed=11),
    ]
    config = GameConfig(players=len(agents), num_decks=1, hand_size=7, seed=42)

    runner = GameRunner(agents, config, verbose=True)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner_name}")
    print(f"Turns: {result.num_turns}")

    state = runner.final_state
    print(f"Cards left in deck: {len(state.deck)}, on field: {len(state.field)}")


if __name__ == "__main__":
    main()
