"""Draw pile, discard pile and the standard deck composition."""

from typing import Iterator, List, Optional

from unosim.engine.card import NUMBERS, ActionType, Card, Color, WildType


class CardPile:
    """Ordered list of cards. Index and bounds checks are left to the caller."""

    def __init__(self, cards: Optional[List[Card]] = None):
        self._cards: List[Card] = cards if cards is not None else []

    @property
    def cards(self) -> List[Card]:
        return self._cards

    @cards.setter
    def cards(self, cards: List[Card]) -> None:
        self._cards = cards

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __setitem__(self, index: int, card: Card) -> None:
        self._cards[index] = card

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._cards)} cards)"


class Deck(CardPile):
    """Draw pile. Cards are taken from the end of the list."""


class DiscardPile(CardPile):
    """Play history. The last card is the top of the pile."""


def build_deck() -> List[Card]:
    """Create the standard 108-card UNO deck, unshuffled.

    - 4 colors × (one 0, two each of 1-9): 76 number cards
    - 4 colors × two each of Skip, Reverse, Draw Two: 24 action cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards
    """
    cards: List[Card] = []

    for color in Color:
        for number in NUMBERS:
            cards.append(Card.number_card(color, number))
            # Second copy of every number except zero
            if number != 0:
                cards.append(Card.number_card(color, number))

        for action in ActionType:
            for _ in range(2):
                cards.append(Card.action_card(color, action))

    for wild_type in WildType:
        for _ in range(4):
            cards.append(Card.wild_card(wild_type))

    return cards
