"""CLI entry point."""

from __future__ import annotations

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Deterministic UNO simulator with bot, LLM and human players")

BOT_TYPES = ("random", "conservative", "llm")


def _make_bot(
    kind: str, seat: int, seed: int, llm_provider: str, llm_model: str
) -> "AgentProtocol":
    """Build the bot for `seat`; names are unique per seat and random bots replay with `seed`."""
    from unosim.agents import ConservativeAgent, LLMAgent, RandomAgent

    if kind == "random":
        return RandomAgent(name=f"random_{seat}", seed=seed + seat)
    if kind == "conservative":
        return ConservativeAgent(name=f"conservative_{seat}")
    if kind == "llm":
        return LLMAgent(provider=llm_provider, model=llm_model, name=f"llm_{seat}")
    raise typer.BadParameter(f"Unknown bot type: {kind}. Use one of {', '.join(BOT_TYPES)}.")


def _build_config(players: int, num_decks: int, hand_size: int, seed: int) -> "GameConfig":
    from unosim.config import GameConfig
    from unosim.engine import ConfigError

    config = GameConfig(
        players=players, num_decks=num_decks, hand_size=hand_size, seed=seed
    ).autoscaled()
    try:
        config.validate()
    except ConfigError as e:
        raise typer.BadParameter(str(e)) from e
    return config


@app.command()
def play(
    players: int = typer.Option(2, "--players", "-p", help="Number of players."),
    num_decks: int = typer.Option(
        1,
        "--num-decks",
        "-n",
        help="Number of uno decks to play with, there are 108 cards per deck.",
    ),
    hand_size: int = typer.Option(7, "--hand-size", "-x", help="Hand size during the game."),
    seed: int = typer.Option(0, "--seed", "-s", help="Seed to play the game."),
    play_as: int = typer.Option(
        -1,
        "--play-as",
        help="Select a player to play as, otherwise the game is simulated.",
    ),
    bot: str = typer.Option("random", "--bot", "-b", help="Bot type: random, conservative or llm"),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option("openai/gpt-4o-mini", "--llm-model", help="Model name"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the result."),
) -> None:
    """Run a single UNO game."""
    from unosim.agents import HumanAgent
    from unosim.orchestration.game_runner import GameRunner

    config = _build_config(players, num_decks, hand_size, seed)
    agents = [
        HumanAgent(name=f"human_{seat}")
        if seat == play_as
        else _make_bot(bot, seat, config.seed, llm_provider, llm_model)
        for seat in range(config.players)
    ]
    result = GameRunner(agents, config, verbose=not quiet).run()
    if result.winner is None:
        typer.echo(f"No winner after {result.num_turns} turns.")
    else:
        typer.echo(f"Player {result.winner} has won the game!")
        typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    bots: str = typer.Option(
        "random,conservative",
        "--bots",
        "-a",
        help="Comma-separated bot types, one per seat (e.g. random,conservative,llm)",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    num_decks: int = typer.Option(1, "--num-decks", "-n", help="Number of uno decks per game."),
    hand_size: int = typer.Option(7, "--hand-size", "-x", help="Hand size during the game."),
    llm_provider: str = typer.Option("openrouter", "--llm-provider", help="LLM provider"),
    llm_model: str = typer.Option("openai/gpt-4o-mini", "--llm-model", help="Model name"),
    seed: int = typer.Option(0, "--seed", "-s", help="Tournament seed"),
) -> None:
    """Run a tournament."""
    from unosim.orchestration.tournament import run_tournament

    kinds = [s.strip().lower() for s in bots.split(",") if s.strip()]
    config = _build_config(len(kinds), num_decks, hand_size, seed)
    agents = [_make_bot(kind, seat, seed, llm_provider, llm_model) for seat, kind in enumerate(kinds)]
    wins = run_tournament(agents, config, num_games=games, seed=seed)
    typer.echo("Tournament results:")
    for name in sorted((a.name for a in agents), key=lambda n: -wins.get(n, 0)):
        typer.echo(f"  {name}: {wins.get(name, 0)} wins")


if __name__ == "__main__":
    app()
