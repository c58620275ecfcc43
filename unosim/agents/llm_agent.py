"""LLM agent using OpenAI library with OpenRouter, Groq, Ollama or HuggingFace."""

import json
import os
import re
import time
from typing import Optional, Sequence

from openai import OpenAI

from unosim.engine import Move, MoveVariant, PlayerView

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"

MAX_ATTEMPTS = 3


def _format_player_view(pv: PlayerView) -> str:
    """Format player view as text for the LLM."""
    lines = [
        "=== Your hand ===",
        ", ".join(str(c) for c in pv.my_hand),
        "",
        "=== Top card on field ===",
        str(pv.top_of_field),
        "",
        "=== Other players' card counts ===",
    ]
    for idx, count in pv.num_cards_per_player.items():
        if idx != pv.player_idx:
            lines.append(f"  Hand #{idx}: {count} cards")
    lines.extend([
        "",
        "=== Direction ===",
        "descending" if pv.direction else "ascending",
        "",
        "=== Cards in deck / field ===",
        f"{pv.deck_count} / {pv.field_count}",
        "",
        "=== Pending draw chain ===",
        f"{pv.accum} cards" if pv.chainable else "none",
    ])
    return "\n".join(lines)


def _describe_move(move: Move) -> str:
    if move.variant is MoveVariant.DRAW_DECK:
        return "DRAW from deck"
    return (
        f"{move.variant.name} hand card {move.hand_idx} "
        f"as {move.as_color.value.upper()}"
    )


def _format_moves(moves: Sequence[Move]) -> str:
    """Format legal moves as text."""
    return "\n".join(f"{i}: {_describe_move(m)}" for i, m in enumerate(moves))


def _in_range(idx: int, moves: Sequence[Move]) -> bool:
    if 0 <= idx < len(moves):
        return True
    print(f"[_parse_move_response] Index {idx} out of range (0-{len(moves) - 1})")
    return False


def _parse_move_response(response: str, moves: Sequence[Move]) -> Optional[int]:
    """Parse LLM response into an index into `moves`."""
    # 1. A JSON object, possibly written with single quotes
    json_match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
        for candidate in (json_str, json_str.replace("'", '"')):
            try:
                data = json.loads(candidate)
            except json.JSONDecodeError:
                continue
            if isinstance(data, dict) and isinstance(data.get("move_index"), int):
                idx = data["move_index"]
                if _in_range(idx, moves):
                    return idx
            break

    # 2. "move_index": N with any quoting
    match = re.search(r"[\"']?move_index[\"']?\s*:\s*(\d+)", response, re.IGNORECASE)
    if match:
        idx = int(match.group(1))
        if _in_range(idx, moves):
            return idx

    # 3. Asked to draw
    if "DRAW" in response.upper():
        for i, m in enumerate(moves):
            if m.variant is MoveVariant.DRAW_DECK:
                return i

    # 4. Any standalone number
    cleaned = re.sub(r"[{}\[\]\"'.,:]", " ", response)
    for word in cleaned.split():
        if word.isdigit():
            idx = int(word)
            if 0 <= idx < len(moves):
                return idx

    return None


# provider -> (default base url, env var holding the key, env var overriding the url)
PROVIDERS = {
    "openrouter": (OPENROUTER_BASE, "OPENROUTER_API_KEY", None),
    "groq": (GROQ_BASE, "GROQ_API_KEY", None),
    "ollama": (OLLAMA_BASE, None, "OLLAMA_BASE_URL"),
    "huggingface": (HUGGINGFACE_BASE, "HUGGINGFACE_API_KEY", None),
}


class LLMAgent:
    """Agent that asks an OpenAI-compatible chat endpoint which move to make.

    Keys are read from the environment (or a `.env` file loaded by the CLI);
    a local Ollama server needs none.
    """

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        name: Optional[str] = None,
        timeout: float = 30.0,
    ):
        if provider not in PROVIDERS:
            raise ValueError(f"Unknown provider: {provider}. Use one of {', '.join(PROVIDERS)}.")
        base_url, key_var, url_var = PROVIDERS[provider]
        if url_var:
            base_url = os.environ.get(url_var, base_url)
        key = os.environ.get(key_var) if key_var else provider
        if not key:
            raise ValueError(f"API key required for {provider}. Set {key_var}.")

        self._client = OpenAI(api_key=key, base_url=base_url)
        self._model = model
        self._name = name or f"llm-{model}"
        self._timeout = timeout
        self._provider = provider

        print(f"[{self.name}] Using {provider} at {base_url} (timeout={timeout}s)")

    @property
    def name(self) -> str:
        return self._name

    def _build_prompt(self, player_view: PlayerView, moves: Sequence[Move]) -> str:
        return f"""You are playing UNO.
Objective: empty your hand first. Match the top card on the field by color (Red, Blue, Green, Yellow) or by number. Wild cards can be played on anything.
While a Draw Two/Four chain is pending you may only stack the same draw card or draw the penalty.

{_format_player_view(player_view)}

=== Legal moves ===
{_format_moves(moves)}

INSTRUCTIONS:
Select the best move to win the game.
Respond with a JSON object containing the index of your chosen move.
Example: {{"move_index": 2}}
"""

    def choose_move(
        self,
        player_view: PlayerView,
        moves: Sequence[Move],
        player_idx: int,
    ) -> int:
        if len(moves) == 1:
            return 0

        prompt = self._build_prompt(player_view, moves)

        kwargs = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "timeout": self._timeout,
        }
        if "gpt-4" in self._model or "gpt-3.5" in self._model or self._provider == "groq":
            kwargs["response_format"] = {"type": "json_object"}

        for attempt in range(1, MAX_ATTEMPTS + 1):
            start_time = time.time()
            try:
                resp = self._client.chat.completions.create(**kwargs)
            except Exception as e:
                duration = time.time() - start_time
                print(f"[{self.name}] Error on attempt {attempt} after {duration:.2f}s: {type(e).__name__}: {e}")
                continue

            content = resp.choices[0].message.content or ""
            print(f"[{self.name}] Attempt {attempt}: response in {time.time() - start_time:.2f}s")
            idx = _parse_move_response(content, moves)
            if idx is not None:
                return idx
            print(f"[{self.name}] Could not parse a move from: {content!r}")

        print(f"[{self.name}] All {MAX_ATTEMPTS} attempts failed. Defaulting to first move.")
        return 0
