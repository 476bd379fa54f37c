"""Decision protocol - interface the presentation layer implements."""

from typing import List, Optional, Protocol

from unosim.engine import Card, Color, Player


class DecisionMaker(Protocol):
    """Answers the three questions the turn engine asks during play."""

    def choose_card(
        self,
        player: Player,
        top_card: Optional[Card],
        playable_cards: List[Card],
    ) -> Optional[Card]:
        """Choose a card to play.

        Args:
            player: The player whose turn it is.
            top_card: Top of the discard pile, or None if the pile is empty.
            playable_cards: Cards from the player's hand that are legal to play.

        Returns:
            One of playable_cards, or None to pass (only honored after the
            player has drawn).
        """
        ...

    def choose_wild_color(self) -> Color:
        """Pick the color a wild card is played as."""
        ...

    def call_uno(self, player: Player) -> bool:
        """Return True if the player calls UNO on their last card."""
        ...


class DefaultDecisions:
    """Headless decisions: first playable card, red, never call UNO."""

    def choose_card(
        self,
        player: Player,
        top_card: Optional[Card],
        playable_cards: List[Card],
    ) -> Optional[Card]:
        return playable_cards[0] if playable_cards else None

    def choose_wild_color(self) -> Color:
        return Color.RED

    def call_uno(self, player: Player) -> bool:
        return False
