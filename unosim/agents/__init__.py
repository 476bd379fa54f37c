"""Built-in decision makers."""

from unosim.agents.human_agent import HumanAgent

__all__ = ["HumanAgent"]
