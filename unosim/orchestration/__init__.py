"""Game orchestration."""

from unosim.orchestration.console import attach_console_reporter
from unosim.orchestration.game_runner import EventRecorder, GameResult, GameRunner

__all__ = ["attach_console_reporter", "EventRecorder", "GameResult", "GameRunner"]
