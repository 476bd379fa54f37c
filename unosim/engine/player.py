"""Player identity."""

from dataclasses import dataclass


@dataclass(eq=False)
class Player:
    """A seat at the table.

    Players compare and hash by identity, so two players may share a name.
    Hands are owned by the GameController, not by the player.
    """

    name: str

    def __str__(self) -> str:
        return self.name
