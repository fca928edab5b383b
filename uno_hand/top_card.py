"""State of the top of the discard pile.

A card flipped or played normally is a ``PlainTop``. A Wild-family card that
was played with a declared color is a ``DeclaredTop``: it matches on the
declared color only and has no number.
"""

from typing import Optional, Union
from uno_hand.card import Card
from uno_hand.config.enums import CardColor

class PlainTop:
    __slots__ = ("card",)

    def __init__(self, card: Card):
        self.card = card

    @property
    def effective_color(self) -> Optional[CardColor]:
        return self.card.color

    @property
    def effective_number(self) -> Optional[int]:
        return self.card.number

    def __eq__(self, other):
        return isinstance(other, PlainTop) and self.card == other.card

    def __repr__(self) -> str:
        return f"PlainTop({self.card!r})"

class DeclaredTop:
    __slots__ = ("card", "color")

    def __init__(self, card: Card, color: CardColor):
        self.card = card
        self.color = color

    @property
    def effective_color(self) -> CardColor:
        return self.color

    @property
    def effective_number(self) -> Optional[int]:
        return None

    def __eq__(self, other):
        return isinstance(other, DeclaredTop) and self.card == other.card and self.color == other.color

    def __repr__(self) -> str:
        return f"DeclaredTop({self.card!r}, {self.color})"

TopOfDiscard = Union[PlainTop, DeclaredTop]
