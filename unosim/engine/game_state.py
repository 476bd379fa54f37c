"""Read-only snapshots of the table for presentation code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from unosim.engine.card import Card, Color
from unosim.engine.player import Player

if TYPE_CHECKING:
    from unosim.engine.controller import GameController


@dataclass
class PlayerView:
    """Table state visible to a single player.

    Contains only that player's hand and public info.
    """

    player_name: str
    my_hand: List[Card]
    playable: List[Card]
    top_discard: Optional[Card]
    current_player: str
    is_clockwise: bool
    wild_color: Optional[Color]
    deck_size: int
    num_cards_per_player: Dict[str, int]  # other players only

    @classmethod
    def from_controller(cls, controller: "GameController", player: Player) -> "PlayerView":
        """Create a player view from the controller, hiding other players' hands."""
        top = controller.get_top_discard_card()
        others = {
            p.name: controller.get_player_hand_size(p)
            for p in controller.players
            if p is not player
        }
        return cls(
            player_name=player.name,
            my_hand=list(controller.get_player_hand(player)),
            playable=controller.get_playable_cards_from_player(player, top),
            top_discard=top,
            current_player=controller.get_current_player().name,
            is_clockwise=controller.is_clockwise,
            wild_color=controller.current_wild_color,
            deck_size=controller.get_deck_card_count(),
            num_cards_per_player=others,
        )

    def describe(self) -> str:
        """Multi-line text rendering of the view."""
        lines = [
            f"Top card on pile: {self.top_discard if self.top_discard else 'None'}",
        ]
        if self.wild_color is not None:
            lines.append(f"Wild color in play: {self.wild_color.value}")
        lines.append(f"Direction: {'clockwise' if self.is_clockwise else 'counter-clockwise'}")
        lines.append("")
        lines.append("Other players:")
        for name, count in self.num_cards_per_player.items():
            lines.append(f"  {name}: {count} cards")
        lines.append("")
        lines.append(f"Your hand ({len(self.my_hand)} cards):")
        for i, card in enumerate(self.my_hand, start=1):
            lines.append(f"  {i}. {card}")
        lines.append("")
        if self.playable:
            lines.append(f"You have {len(self.playable)} playable card(s)!")
        else:
            lines.append("No playable cards! You must draw a card.")
        return "\n".join(lines)
