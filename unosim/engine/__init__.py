"""Game engine for UNO."""

from unosim.engine.card import ActionType, Card, CardType, Color, WildType
from unosim.engine.controller import (
    HAND_SIZE,
    MAX_PLAYERS,
    MIN_PLAYERS,
    GameController,
)
from unosim.engine.deck import Deck, DiscardPile, build_deck
from unosim.engine.events import GameEvent
from unosim.engine.game_state import PlayerView
from unosim.engine.player import Player

__all__ = [
    "ActionType",
    "Card",
    "CardType",
    "Color",
    "WildType",
    "HAND_SIZE",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "GameController",
    "Deck",
    "DiscardPile",
    "build_deck",
    "GameEvent",
    "PlayerView",
    "Player",
]
