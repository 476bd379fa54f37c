"""Human agent - reads decisions from terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

import typer

from unosim.engine import Card, Color, Player

if TYPE_CHECKING:
    from unosim.engine import GameController


class HumanAgent:
    """Decision maker that prompts the human for input via terminal.

    The table itself is rendered by the console reporter on each turn; this
    agent only prints the questions it asks.
    """

    def __init__(
        self,
        controller: "GameController",
        input_fn: Callable[[str], str] = input,
    ):
        self._controller = controller
        self._input = input_fn
        self._drew_this_turn = False
        controller.on_player_turn_changed.subscribe(self._turn_started)
        controller.on_forced_draw.subscribe(self._forced_draw)

    def _turn_started(self, player: Player) -> None:
        self._drew_this_turn = False

    def _forced_draw(self, player: Player, card: Optional[Card]) -> None:
        self._drew_this_turn = True

    def _ask_number(self, prompt: str, low: int, high: int) -> int:
        while True:
            try:
                raw = self._input(prompt).strip()
            except EOFError:
                raise typer.Abort()
            try:
                choice = int(raw)
                if low <= choice <= high:
                    return choice
            except ValueError:
                pass
            print(f"Please enter a number between {low}-{high}.")

    def choose_card(
        self,
        player: Player,
        top_card: Optional[Card],
        playable_cards: List[Card],
    ) -> Optional[Card]:
        if self._drew_this_turn:
            print("You can now play a card!")
        print(f"\n{player.name}, choose a card to play:")
        for i, card in enumerate(playable_cards, start=1):
            print(f"  {i}. {card}")

        # Passing is only honored after a forced draw
        last = len(playable_cards)
        if self._drew_this_turn:
            last += 1
            print(f"  {last}. Keep the drawn card and pass")

        choice = self._ask_number("Enter your choice: ", 1, last)
        if choice > len(playable_cards):
            return None
        return playable_cards[choice - 1]

    def choose_wild_color(self) -> Color:
        colors = list(Color)
        print("\nChoose a color for the wild card:")
        for i, color in enumerate(colors, start=1):
            print(f"  {i}. {color.value}")
        choice = self._ask_number(f"Enter your choice (1-{len(colors)}): ", 1, len(colors))
        return colors[choice - 1]

    def call_uno(self, player: Player) -> bool:
        print(f"\n{player.name}, you have 1 card left!")
        print("Do you want to call UNO?")
        print("  1. Yes - Call UNO!")
        print("  2. No - Skip (you'll be penalized!)")
        called = self._ask_number("Enter your choice (1-2): ", 1, 2) == 1
        if called:
            print(f"{player.name} called UNO!")
        return called
