"""Single game runner."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from unosim.engine import Card, GameController, Player

if TYPE_CHECKING:
    from unosim.agent.protocol import DecisionMaker


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]
    hand_sizes: Dict[str, int]
    history: List[str] = field(default_factory=list)


class EventRecorder:
    """Subscribes to every controller notification and keeps a text log."""

    def __init__(self, controller: GameController):
        self.history: List[str] = []
        controller.on_player_turn_changed.subscribe(self._turn_changed)
        controller.on_card_played.subscribe(self._card_played)
        controller.on_uno_violation.subscribe(self._uno_violation)
        controller.on_game_ended.subscribe(self._game_ended)

    def _turn_changed(self, player: Player) -> None:
        self.history.append(f"turn {player.name}")

    def _card_played(self, player: Player, card: Card) -> None:
        self.history.append(f"{player.name} played {card}")

    def _uno_violation(self, player: Player) -> None:
        self.history.append(f"{player.name} failed to call UNO")

    def _game_ended(self, winner: Optional[Player]) -> None:
        self.history.append(f"{winner.name if winner else 'nobody'} won")


class GameRunner:
    """Runs a single UNO game to completion."""

    def __init__(
        self,
        player_names: List[str],
        decisions: Optional["DecisionMaker"] = None,
        seed: Optional[int] = None,
        max_turns: Optional[int] = 1000,
    ):
        self._player_names = list(player_names)
        self.decisions = decisions
        self._max_turns = max_turns
        self.controller = GameController(rng=random.Random(seed))
        self.recorder = EventRecorder(self.controller)

    def run(self) -> GameResult:
        """Run the game and return the result."""
        controller = self.controller
        for name in self._player_names:
            controller.add_player(Player(name))
        if self.decisions is not None:
            controller.use_decisions(self.decisions)

        controller.start_game()
        winner = controller.game_loop(max_turns=self._max_turns)

        return GameResult(
            winner=winner.name if winner else None,
            num_turns=controller.turns_played,
            player_names=tuple(self._player_names),
            hand_sizes={p.name: controller.get_player_hand_size(p) for p in controller.players},
            history=list(self.recorder.history),
        )
