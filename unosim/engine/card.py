"""Card and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"


class CardType(str, Enum):
    NUMBER = "number"
    ACTION = "action"
    WILD = "wild"


class ActionType(str, Enum):
    SKIP = "Skip"
    REVERSE = "Reverse"
    DRAW_TWO = "DrawTwo"


class WildType(str, Enum):
    WILD = "Wild"
    WILD_DRAW_FOUR = "WildDrawFour"


NUMBERS = tuple(range(10))


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Number cards carry color and number, action cards carry color and
    action_type, wild cards carry wild_type only. The color a wild card is
    played as is tracked by the controller, not stored on the card.
    """

    card_type: CardType
    color: Optional[Color] = None
    number: Optional[int] = None
    action_type: Optional[ActionType] = None
    wild_type: Optional[WildType] = None

    def __post_init__(self) -> None:
        if self.card_type == CardType.NUMBER:
            if self.color is None or self.number not in NUMBERS:
                raise ValueError(f"Number cards need a color and a number 0-9, got {self!r}")
            if self.action_type is not None or self.wild_type is not None:
                raise ValueError("Number cards cannot carry an action or wild type")
        elif self.card_type == CardType.ACTION:
            if self.color is None or self.action_type is None:
                raise ValueError(f"Action cards need a color and an action type, got {self!r}")
            if self.number is not None or self.wild_type is not None:
                raise ValueError("Action cards cannot carry a number or wild type")
        elif self.card_type == CardType.WILD:
            if self.wild_type is None:
                raise ValueError("Wild cards need a wild type")
            if self.color is not None or self.number is not None or self.action_type is not None:
                raise ValueError("Wild cards must have color=None and no number or action")
        else:
            raise ValueError(f"Invalid card type: {self.card_type}")

    @classmethod
    def number_card(cls, color: Color, number: int) -> "Card":
        return cls(card_type=CardType.NUMBER, color=color, number=number)

    @classmethod
    def action_card(cls, color: Color, action_type: ActionType) -> "Card":
        return cls(card_type=CardType.ACTION, color=color, action_type=action_type)

    @classmethod
    def wild_card(cls, wild_type: WildType = WildType.WILD) -> "Card":
        return cls(card_type=CardType.WILD, wild_type=wild_type)

    def is_wild(self) -> bool:
        return self.card_type == CardType.WILD

    def __str__(self) -> str:
        if self.card_type == CardType.NUMBER:
            return f"{self.color.value} {self.number}"
        if self.card_type == CardType.ACTION:
            return f"{self.color.value} {self.action_type.value}"
        return self.wild_type.value
