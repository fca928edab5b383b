from typing import Optional
from uno_hand.config.enums import CardColor, CardType

WILD_TYPES = (CardType.WILD, CardType.WILD_DRAW)
ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW)

class Card:
    """Immutable UNO card value."""

    __slots__ = ("_card_type", "_color", "_number")

    def __init__(self, card_type: CardType, color: Optional[CardColor] = None, number: Optional[int] = None):
        """
        Initialize a card.

        Args:
            card_type: The type of the card (Numbered, Skip, etc.).
            color: The suit color. None for Wild and Wild Draw cards.
            number: The value for Numbered cards (0-9). None for every other type.

        Raises:
            ValueError: If the color/number combination does not fit the card type.
        """
        if card_type in WILD_TYPES:
            if color is not None or number is not None:
                raise ValueError(f"{card_type.value} cards take no color or number")
        else:
            if not isinstance(color, CardColor):
                raise ValueError(f"{card_type.value} cards need a suit color, got {color!r}")
            if card_type == CardType.NUMBERED:
                if not isinstance(number, int) or not 0 <= number <= 9:
                    raise ValueError(f"Numbered cards need a number from 0 to 9, got {number!r}")
            elif number is not None:
                raise ValueError(f"{card_type.value} cards take no number")

        object.__setattr__(self, "_card_type", card_type)
        object.__setattr__(self, "_color", color)
        object.__setattr__(self, "_number", number)

    @property
    def card_type(self) -> CardType:
        return self._card_type

    @property
    def color(self) -> Optional[CardColor]:
        return self._color

    @property
    def number(self) -> Optional[int]:
        return self._number

    @property
    def is_wild(self) -> bool:
        return self._card_type in WILD_TYPES

    def __setattr__(self, name, value):
        raise AttributeError(f"Card is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Card is immutable, cannot delete {name!r}")

    def __str__(self) -> str:
        if self._card_type == CardType.NUMBERED:
            return f"{self._color.value} {self._number}"
        if self.is_wild:
            return self._card_type.value
        return f"{self._color.value} {self._card_type.value}"

    def __repr__(self) -> str:
        return f"Card(card_type={self._card_type}, color={self._color}, number={self._number})"

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return (
            self._card_type == other._card_type
            and self._color == other._color
            and self._number == other._number
        )

    def __hash__(self):
        return hash((self._card_type, self._color, self._number))
