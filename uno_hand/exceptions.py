"""Exceptions raised by the UNO hand core."""

from typing import Optional


class UnoHandError(Exception):
    """Base exception for all hand errors."""


class InvalidPlayerCountError(UnoHandError):
    """Raised when a hand is created with too few or too many players."""

    def __init__(self, player_count: int, min_players: int, max_players: int):
        self.player_count = player_count
        self.min_players = min_players
        self.max_players = max_players
        if player_count < min_players:
            reason = "Not enough players"
        else:
            reason = "Too many players"
        super().__init__(
            f"{reason}: got {player_count}, need between {min_players} and {max_players}."
        )


class OutOfRangeError(UnoHandError, IndexError):
    """Raised when an accessor is given an index outside [0, count)."""

    def __init__(self, what: str, index: int, count: int):
        self.what = what
        self.index = index
        self.count = count
        super().__init__(f"{what} index {index} out of range [0, {count}).")


class IllegalMoveError(UnoHandError):
    """Raised when a card that cannot be played is played."""

    def __init__(self, player: int, card_index: int, message: Optional[str] = None):
        self.player = player
        self.card_index = card_index
        super().__init__(message or f"Player {player} cannot play card at index {card_index}.")


class InvalidColorError(IllegalMoveError):
    """Raised when a Wild card is played without declaring a suit color."""

    def __init__(self, player: int, card_index: int, color):
        self.color = color
        super().__init__(
            player,
            card_index,
            f"Player {player} must declare a color for the wild card at index {card_index}, got {color!r}.",
        )


class DealError(UnoHandError):
    """Raised when no usable starter card could be flipped."""


__all__ = [
    "DealError",
    "IllegalMoveError",
    "InvalidColorError",
    "InvalidPlayerCountError",
    "OutOfRangeError",
    "UnoHandError",
]
