import random
from collections import Counter
from typing import Callable, Iterator, List, Optional, Sequence
from uno_hand.card import Card
from uno_hand.config.enums import CardType
from uno_hand.config.settings import SUIT_COLORS, ACTION_TYPES, ACTION_CARD_COPIES, WILD_CARD_COPIES
from uno_hand.utils.logger import game_logger

Shuffler = Callable[[Sequence[Card]], Sequence[Card]]

def standard_shuffler(cards: Sequence[Card]) -> List[Card]:
    """Return a uniformly shuffled copy of the cards."""
    shuffled = list(cards)
    random.shuffle(shuffled)
    return shuffled

def apply_shuffler(shuffler: Shuffler, cards: Sequence[Card]) -> List[Card]:
    """
    Run a shuffler and make sure it returned a permutation of its input.

    Raises:
        ValueError: If the result gained, lost or altered cards.
    """
    shuffled = list(shuffler(list(cards)))
    if len(shuffled) != len(cards) or Counter(shuffled) != Counter(cards):
        raise ValueError("Shuffler must return a permutation of the cards it was given")
    return shuffled

class Deck:
    """Ordered pile of cards. The last card of the list is the top of the pile."""

    def __init__(self, cards: Optional[Sequence[Card]] = None):
        self.cards: List[Card] = list(cards) if cards else []

    def deal(self) -> Optional[Card]:
        """Remove and return the top card, or None if the pile is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def push(self, card: Card):
        """Put a card on top of the pile."""
        self.cards.append(card)

    def shuffle(self, shuffler: Shuffler = standard_shuffler):
        self.cards = apply_shuffler(shuffler, self.cards)
        game_logger.debug(f"Deck of {len(self.cards)} cards shuffled.")

    def top(self) -> Optional[Card]:
        """Look at the top card without removing it."""
        if self.cards:
            return self.cards[-1]
        return None

    @property
    def size(self) -> int:
        return len(self.cards)

    def to_list(self) -> List[Card]:
        return list(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Deck(size={len(self.cards)}, top={self.top()!r})"

def create_initial_deck() -> Deck:
    """Create the standard 108 UNO cards, in a fixed order."""
    cards: List[Card] = []

    for color in SUIT_COLORS:
        # 1 zero card per color
        cards.append(Card(CardType.NUMBERED, color, 0))

        # 2 of each number 1-9
        for i in range(1, 10):
            cards.append(Card(CardType.NUMBERED, color, i))
            cards.append(Card(CardType.NUMBERED, color, i))

        # 2 of each action card
        for action_type in ACTION_TYPES:
            for _ in range(ACTION_CARD_COPIES):
                cards.append(Card(action_type, color))

    # Wild cards
    for _ in range(WILD_CARD_COPIES):
        cards.append(Card(CardType.WILD))
        cards.append(Card(CardType.WILD_DRAW))

    game_logger.debug(f"Deck initialized with {len(cards)} cards.")
    return Deck(cards)
