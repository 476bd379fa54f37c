"""Unit tests for cards, the deck and game setup."""

from collections import Counter

import pytest
from unosim.engine import (
    ActionType,
    Card,
    CardType,
    Color,
    GameController,
    Player,
    WildType,
    build_deck,
)


def _controller_with_players(n: int, seed: int = 1) -> GameController:
    controller = GameController(seed=seed)
    for i in range(n):
        controller.add_player(Player(f"p{i + 1}"))
    return controller


def test_build_deck_size() -> None:
    deck = build_deck()
    assert len(deck) == 108


def test_build_deck_composition() -> None:
    deck = build_deck()
    per_color = Counter(c.color for c in deck if not c.is_wild())
    assert per_color == {color: 25 for color in Color}

    for color in Color:
        numbers = [c for c in deck if c.color == color and c.card_type == CardType.NUMBER]
        actions = [c for c in deck if c.color == color and c.card_type == CardType.ACTION]
        assert len(numbers) == 19
        assert len(actions) == 6
        assert sum(1 for c in numbers if c.number == 0) == 1

    wilds = Counter(c.wild_type for c in deck if c.is_wild())
    assert wilds == {WildType.WILD: 4, WildType.WILD_DRAW_FOUR: 4}


def test_card_str() -> None:
    assert str(Card.number_card(Color.RED, 5)) == "Red 5"
    assert str(Card.action_card(Color.BLUE, ActionType.DRAW_TWO)) == "Blue DrawTwo"
    assert str(Card.wild_card(WildType.WILD_DRAW_FOUR)) == "WildDrawFour"


def test_card_validation() -> None:
    with pytest.raises(ValueError):
        Card(card_type=CardType.NUMBER, color=Color.RED)
    with pytest.raises(ValueError):
        Card(card_type=CardType.NUMBER, color=Color.RED, number=10)
    with pytest.raises(ValueError):
        Card(card_type=CardType.ACTION, number=3, color=Color.RED, action_type=ActionType.SKIP)
    with pytest.raises(ValueError):
        Card(card_type=CardType.WILD, wild_type=WildType.WILD, color=Color.GREEN)


def test_shuffle_reproducible() -> None:
    c1 = _controller_with_players(2, seed=123)
    c2 = _controller_with_players(2, seed=123)
    for c in (c1, c2):
        c.initialize_deck()
        c.shuffle_deck()
    assert [str(card) for card in c1.deck] == [str(card) for card in c2.deck]
    assert Counter(c1.deck.cards) == Counter(build_deck())


@pytest.mark.parametrize("num_players", [2, 3, 4])
def test_start_game(num_players: int) -> None:
    controller = _controller_with_players(num_players)
    controller.start_game()
    for player in controller.players:
        assert controller.get_player_hand_size(player) == 7
    assert controller.get_deck_card_count() == 108 - 7 * num_players - 1
    assert controller.get_discard_pile_card_count() == 1
    assert controller.get_current_player() is controller.players[0]
    assert controller.is_clockwise
    assert controller.current_wild_color is None
    assert controller.get_winner() is None


def test_start_game_deals_consecutive_draws_per_player() -> None:
    controller = _controller_with_players(2, seed=9)
    controller.initialize_deck()
    controller.shuffle_deck()
    expected = list(controller.deck.cards)

    # Re-seed so start_game produces the same shuffle
    controller = _controller_with_players(2, seed=9)
    controller.start_game()
    p1, p2 = controller.players
    assert controller.get_player_hand(p1) == list(reversed(expected[-7:]))
    assert controller.get_player_hand(p2) == list(reversed(expected[-14:-7]))
    assert controller.get_top_discard_card() == expected[-15]


@pytest.mark.parametrize("num_players", [0, 1, 5])
def test_start_game_rejects_bad_player_count(num_players: int) -> None:
    controller = _controller_with_players(num_players)
    with pytest.raises(ValueError):
        controller.start_game()


def test_players_keyed_by_identity() -> None:
    controller = GameController(seed=0)
    a, b = Player("Sam"), Player("Sam")
    controller.add_player(a)
    controller.add_player(b)
    controller.add_card_to_player(a, Card.number_card(Color.RED, 1))
    assert controller.get_player_hand_sizes() == [1, 0]
    assert controller.get_player_by_name("Sam") is a


def test_deck_and_discard_index_access() -> None:
    controller = _controller_with_players(2)
    controller.initialize_deck()
    first = controller.deck[0]
    replacement = Card.wild_card()
    controller.deck[0] = replacement
    assert controller.deck[0] is replacement
    assert first != replacement
    with pytest.raises(IndexError):
        controller.discard_pile[0]


def test_valid_colors() -> None:
    controller = GameController()
    assert controller.get_valid_colors() == [Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW]
    assert not controller.validate_card(None)
    assert controller.validate_card(Card.wild_card())
