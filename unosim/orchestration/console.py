"""Console output for controller notifications."""

from typing import Callable, Optional

from unosim.engine import Card, GameController, Player, PlayerView


def attach_console_reporter(controller: GameController, echo: Callable[[str], None] = print) -> None:
    """Print the table at every turn and every notification the controller fires."""

    @controller.on_player_turn_changed.subscribe
    def _turn_changed(player: Player) -> None:
        echo(f"\n--- {player.name}'s turn ---")
        echo(PlayerView.from_controller(controller, player).describe())

    @controller.on_forced_draw.subscribe
    def _forced_draw(player: Player, card: Optional[Card]) -> None:
        if card is None:
            echo(f"{player.name} could not draw a card: the deck is empty.")
            return
        echo(f"{player.name} drew a card.")
        if not controller.get_playable_cards_from_player(player, controller.get_top_discard_card()):
            echo(f"{player.name} cannot play and passes the turn.")

    @controller.on_card_played.subscribe
    def _card_played(player: Player, card: Card) -> None:
        echo(f"\n{player.name} played: {card}")

    @controller.on_uno_violation.subscribe
    def _uno_violation(player: Player) -> None:
        echo(f"{player.name} forgot to call UNO! Drawing 2 penalty cards.")

    @controller.on_game_ended.subscribe
    def _game_ended(winner: Optional[Player]) -> None:
        echo("\nGAME OVER!")
        if winner is not None:
            echo(f"{winner.name} WINS!")
        echo("\nFinal hand sizes:")
        for player in controller.players:
            echo(f"  {player.name}: {controller.get_player_hand_size(player)} cards")
