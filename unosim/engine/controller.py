"""UNO turn engine: dealing, legality, card effects and turn order."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from unosim.engine.card import ActionType, Card, CardType, Color, WildType
from unosim.engine.deck import Deck, DiscardPile, build_deck
from unosim.engine.events import GameEvent
from unosim.engine.player import Player

if TYPE_CHECKING:
    from unosim.agent.protocol import DecisionMaker

logger = logging.getLogger(__name__)

HAND_SIZE = 7
MIN_PLAYERS = 2
MAX_PLAYERS = 4
UNO_PENALTY = 2

CardChooser = Callable[[Player, Optional[Card], List[Card]], Optional[Card]]
WildColorChooser = Callable[[], Color]
UnoCallChecker = Callable[[Player], bool]


class GameController:
    """Owns the deck, discard pile and hands, and runs the turn loop.

    Decisions are delegated to three optional callbacks (``card_chooser``,
    ``wild_color_chooser``, ``uno_call_checker``). When a callback is unset
    the controller plays the first legal card, picks red and never calls UNO.

    Notifications are published on :class:`GameEvent` hooks:
    ``on_player_turn_changed(player)``, ``on_card_played(player, card)``,
    ``on_uno_violation(player)``, ``on_game_ended(winner)`` and
    ``on_forced_draw(player, card)`` (card is None when nothing could be drawn).
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self._players: List[Player] = []
        self._player_hands: Dict[Player, List[Card]] = {}
        self._deck = Deck()
        self._discard_pile = DiscardPile()
        self._rng = rng if rng is not None else random.Random(seed)

        self.current_player_index = 0
        self.is_clockwise = True
        self.current_wild_color: Optional[Color] = None
        self.turns_played = 0

        self.on_player_turn_changed = GameEvent("player_turn_changed")
        self.on_card_played = GameEvent("card_played")
        self.on_uno_violation = GameEvent("uno_violation")
        self.on_game_ended = GameEvent("game_ended")
        self.on_forced_draw = GameEvent("forced_draw")

        self.card_chooser: Optional[CardChooser] = None
        self.wild_color_chooser: Optional[WildColorChooser] = None
        self.uno_call_checker: Optional[UnoCallChecker] = None

    def use_decisions(self, decisions: "DecisionMaker") -> None:
        """Route all three decision callbacks to one decision maker."""
        self.card_chooser = decisions.choose_card
        self.wild_color_chooser = decisions.choose_wild_color
        self.uno_call_checker = decisions.call_uno

    # Game flow

    def add_player(self, player: Player) -> None:
        self._players.append(player)
        self._player_hands[player] = []

    def start_game(self) -> None:
        """Build and shuffle the deck, deal hands and flip the opening card.

        The opening card has no effect, even if it is an action or wild card.
        """
        if not MIN_PLAYERS <= len(self._players) <= MAX_PLAYERS:
            raise ValueError(
                f"UNO needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(self._players)}"
            )
        self.initialize_deck()
        self.shuffle_deck()
        self.deal_cards_to_players()

        first_card = self._take_from_deck()
        if first_card is not None:
            self.add_card_to_discard_pile(first_card)
        logger.info(
            "Game started with %d players, opening card %s",
            len(self._players),
            first_card,
        )

    def game_loop(self, max_turns: Optional[int] = None) -> Optional[Player]:
        """Play turns until a hand is empty, then announce the winner.

        With ``max_turns`` set, stops early once that many turns have been
        played; the game is then left unfinished and None is returned.
        """
        while not self.is_game_over():
            if max_turns is not None and self.turns_played >= max_turns:
                logger.warning("Stopping after %d turns without a winner", self.turns_played)
                return None
            self.play_turn()

        winner = self.get_winner()
        logger.info("Game over after %d turns, winner %s", self.turns_played, winner)
        self.on_game_ended.fire(winner)
        return winner

    def play_turn(self) -> None:
        """Run one full turn for the current player and pass to the next."""
        current_player = self.get_current_player()
        self.on_player_turn_changed.fire(current_player)

        top_card = self.get_top_discard_card()
        playable_cards = self.get_playable_cards_from_player(current_player, top_card)

        if playable_cards:
            chosen_card = self.choose_card(current_player, top_card, playable_cards)
            if chosen_card is not None:
                self._play_and_check_uno(current_player, chosen_card)
        else:
            drawn = self.draw_card(current_player)
            logger.debug("%s has no playable card and drew %s", current_player, drawn)
            self.on_forced_draw.fire(current_player, drawn)

            # Legality is re-evaluated against the top card seen at turn start
            playable_cards = self.get_playable_cards_from_player(current_player, top_card)
            if playable_cards:
                chosen_card = self.choose_card(
                    current_player, top_card, playable_cards, allow_decline=True
                )
                if chosen_card is not None:
                    self._play_and_check_uno(current_player, chosen_card)
                else:
                    logger.debug("%s passed after drawing", current_player)

        self.check_all_players_for_uno_violations()
        self.next_player()
        self.turns_played += 1

    def _play_and_check_uno(self, player: Player, card: Card) -> None:
        if not self.play_card(player, card):
            logger.warning("%s chose %s, which cannot be played; turn passes", player, card)
            return
        if self.get_player_hand_size(player) == 1:
            self.enforce_uno_call(player)

    def next_player(self) -> None:
        count = len(self._players)
        if self.is_clockwise:
            self.current_player_index = (self.current_player_index + 1) % count
        else:
            self.current_player_index = (self.current_player_index - 1 + count) % count

    def reverse_direction(self) -> None:
        self.is_clockwise = not self.is_clockwise

    def is_game_over(self) -> bool:
        return any(self.get_player_hand_size(p) == 0 for p in self._players)

    def get_winner(self) -> Optional[Player]:
        """First player in seating order with an empty hand, or None."""
        return next((p for p in self._players if self.get_player_hand_size(p) == 0), None)

    # Hands

    def add_card_to_player(self, player: Player, card: Card) -> None:
        self._player_hands[player].append(card)

    def remove_card_from_player(self, player: Player, card: Card) -> bool:
        hand = self._player_hands[player]
        if card not in hand:
            return False
        hand.remove(card)
        return True

    def get_player_hand_size(self, player: Player) -> int:
        return len(self._player_hands[player])

    def player_has_card(self, player: Player, card: Card) -> bool:
        return card in self._player_hands[player]

    def get_player_hand(self, player: Player) -> List[Card]:
        """The player's live hand list."""
        return self._player_hands[player]

    def clear_player_hand(self, player: Player) -> None:
        self._player_hands[player].clear()

    # Cards

    def play_card(self, player: Player, card: Card) -> bool:
        """Play a card from the player's hand.

        Returns False without touching any pile when the card is not in the
        hand or not legal on the current top card.
        """
        if not self.player_has_card(player, card):
            return False
        if not self.can_play_card(card, self.get_top_discard_card()):
            return False

        self.remove_card_from_player(player, card)
        self.add_card_to_discard_pile(card)
        self.execute_card_effect(card)
        self.on_card_played.fire(player, card)
        return True

    def draw_card(self, player: Player) -> Optional[Card]:
        """Move one card from the deck to the player's hand.

        Returns None, leaving the hand unchanged, when nothing can be drawn.
        """
        card = self._take_from_deck()
        if card is not None:
            self.add_card_to_player(player, card)
        return card

    def _take_from_deck(self) -> Optional[Card]:
        if self.is_deck_empty():
            self.recycle_discard_pile()

        cards = self._deck.cards
        if not cards:
            logger.debug("Deck and discard pile exhausted, nothing to draw")
            return None
        return cards.pop()

    def add_card_to_deck(self, card: Card) -> None:
        self._deck.cards.append(card)

    def get_deck_card_count(self) -> int:
        return len(self._deck)

    def is_deck_empty(self) -> bool:
        return self.get_deck_card_count() == 0

    def shuffle_deck(self) -> None:
        """Fisher-Yates shuffle of the deck in place."""
        cards = self._deck.cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def add_card_to_discard_pile(self, card: Card) -> None:
        self._discard_pile.cards.append(card)

    def get_top_discard_card(self) -> Optional[Card]:
        cards = self._discard_pile.cards
        return cards[-1] if cards else None

    def get_discard_pile_card_count(self) -> int:
        return len(self._discard_pile)

    def is_discard_pile_empty(self) -> bool:
        return self.get_discard_pile_card_count() == 0

    def get_playable_cards_from_player(
        self, player: Player, top_card: Optional[Card]
    ) -> List[Card]:
        return [card for card in self.get_player_hand(player) if self.can_play_card(card, top_card)]

    def choose_card(
        self,
        player: Player,
        top_card: Optional[Card],
        playable_cards: List[Card],
        allow_decline: bool = False,
    ) -> Optional[Card]:
        """Ask the card chooser which card to play.

        A None answer means "pass" only when ``allow_decline`` is set (after a
        forced draw); otherwise it falls back to the first playable card.
        """
        if self.card_chooser is None:
            return playable_cards[0]
        chosen = self.card_chooser(player, top_card, playable_cards)
        if chosen is None and not allow_decline:
            return playable_cards[0]
        return chosen

    def execute_card_effect(self, card: Card) -> None:
        if card.card_type == CardType.ACTION:
            if card.action_type == ActionType.SKIP:
                self.next_player()
            elif card.action_type == ActionType.REVERSE:
                self.reverse_direction()
            elif card.action_type == ActionType.DRAW_TWO:
                self.next_player()
                victim = self.get_current_player()
                for _ in range(2):
                    self.draw_card(victim)
        elif card.card_type == CardType.WILD:
            self.current_wild_color = self.choose_wild_color()
            logger.debug("Wild color set to %s", self.current_wild_color)
            if card.wild_type == WildType.WILD_DRAW_FOUR:
                self.next_player()
                victim = self.get_current_player()
                for _ in range(4):
                    self.draw_card(victim)

    # Rule enforcement

    def call_uno(self, player: Player) -> bool:
        return self.get_player_hand_size(player) == 1

    def check_uno_violation(self, player: Player) -> bool:
        return self.get_player_hand_size(player) == 1

    def enforce_uno_call(self, player: Player) -> bool:
        """Ask the player to call UNO; penalize them if they don't.

        Returns True when the call was made.
        """
        called = bool(self.uno_call_checker(player)) if self.uno_call_checker else False
        if called:
            logger.info("%s called UNO!", player)
            return True

        logger.info("%s forgot to call UNO! Drawing %d penalty cards.", player, UNO_PENALTY)
        self.penalize_player(player)
        self.on_uno_violation.fire(player)
        return False

    def penalize_player(self, player: Player) -> None:
        for _ in range(UNO_PENALTY):
            self.draw_card(player)

    def check_all_players_for_uno_violations(self) -> None:
        # Hook for UNO challenges; a player on one card is only noted for now.
        for player in self._players:
            if self.check_uno_violation(player):
                logger.debug("%s is down to one card", player)

    def validate_card(self, card: Optional[Card]) -> bool:
        return card is not None

    def can_play_card(self, card: Card, top_card: Optional[Card]) -> bool:
        if top_card is None:
            return True
        if card.is_wild():
            return True

        # An active wild color overrides the top card until the next wild
        if self.current_wild_color is not None:
            return card.color == self.current_wild_color

        return (
            card.color == top_card.color
            or (card.number is not None and card.number == top_card.number)
            or (card.action_type is not None and card.action_type == top_card.action_type)
        )

    # Setup

    def initialize_deck(self) -> None:
        self._deck.cards = build_deck()

    def deal_cards_to_players(self) -> None:
        for player in self._players:
            for _ in range(HAND_SIZE):
                self.draw_card(player)

    def choose_wild_color(self) -> Color:
        if self.wild_color_chooser is None:
            return Color.RED
        return self.wild_color_chooser() or Color.RED

    def recycle_discard_pile(self) -> None:
        """Shuffle all but the top discard back into the deck."""
        cards = self._discard_pile.cards
        if len(cards) <= 1:
            return

        top_card = cards.pop()
        self._deck.cards = cards
        self._discard_pile.cards = [top_card]
        self.shuffle_deck()
        logger.debug("Recycled %d discarded cards into the deck", len(self._deck))

    # Queries

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def discard_pile(self) -> DiscardPile:
        return self._discard_pile

    def get_current_player(self) -> Player:
        return self._players[self.current_player_index]

    def get_valid_colors(self) -> List[Color]:
        return list(Color)

    def get_player_by_name(self, name: str) -> Optional[Player]:
        return next((p for p in self._players if p.name == name), None)

    def get_player_hand_sizes(self) -> List[int]:
        return [self.get_player_hand_size(p) for p in self._players]

    def get_all_players(self) -> List[Player]:
        return list(self._players)
