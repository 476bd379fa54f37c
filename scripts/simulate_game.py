"""Simulate a game with random decisions."""

import random
from typing import List, Optional

from unosim.engine import Card, Color, Player
from unosim.orchestration.game_runner import GameRunner


class RandomDecisions:
    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def choose_card(self, player: Player, top_card: Optional[Card], playable_cards: List[Card]) -> Optional[Card]:
        return self._rng.choice(playable_cards)

    def choose_wild_color(self) -> Color:
        return self._rng.choice(list(Color))

    def call_uno(self, player: Player) -> bool:
        # Forget to call UNO now and then
        return self._rng.random() < 0.8


def main():
    runner = GameRunner(["Bot1", "Bot2", "Bot3", "Bot4"], decisions=RandomDecisions(seed=7), seed=42)
    result = runner.run()

    for event in result.history:
        print(f"> {event}")

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(f"Hand sizes: {result.hand_sizes}")


if __name__ == "__main__":
    main()
