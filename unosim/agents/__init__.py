"""Built-in agents."""

from unosim.agents.conservative_agent import ConservativeAgent
from unosim.agents.human_agent import HumanAgent
from unosim.agents.llm_agent import LLMAgent
from unosim.agents.random_agent import RandomAgent

__all__ = ["ConservativeAgent", "HumanAgent", "LLMAgent", "RandomAgent"]
