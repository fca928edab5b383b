from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple
from uno_hand.card import Card
from uno_hand.deck import Deck, Shuffler, apply_shuffler, create_initial_deck, standard_shuffler
from uno_hand.exceptions import DealError, IllegalMoveError, InvalidColorError, InvalidPlayerCountError, OutOfRangeError
from uno_hand.top_card import DeclaredTop, PlainTop, TopOfDiscard
from uno_hand.config.enums import CardColor, CardType, Direction
from uno_hand.config.settings import (
    DRAW_TWO_PENALTY_CARDS,
    INITIAL_HAND_SIZE,
    MAX_PLAYERS,
    MAX_STARTER_REDRAWS,
    MIN_PLAYERS,
)
from uno_hand.utils.logger import game_logger

class Hand:
    """
    One dealt round of UNO for a fixed set of players.

    The full deck lives in an immutable arena. The draw pile, the discard pile
    and every player's hand only hold handles (indexes into the arena), and
    all of them are changed through ``_move_card`` so that each card sits in
    exactly one container.
    """

    def __init__(
        self,
        players: Sequence[str],
        dealer: int,
        shuffler: Optional[Shuffler] = None,
        cards_per_player: int = INITIAL_HAND_SIZE,
    ):
        """
        Deal a new hand.

        Args:
            players: Player names, between 2 and 10 of them.
            dealer: Index of the dealing player.
            shuffler: Permutation function used for every shuffle. Defaults to standard_shuffler.
            cards_per_player: Cards dealt to each player.

        Raises:
            InvalidPlayerCountError: If the number of players is out of bounds.
            OutOfRangeError: If the dealer is not one of the players.
            DealError: If the shuffler keeps turning up wild starter cards.
        """
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise InvalidPlayerCountError(len(players), MIN_PLAYERS, MAX_PLAYERS)
        self._players: Tuple[str, ...] = tuple(players)
        if not 0 <= dealer < len(self._players):
            raise OutOfRangeError("Dealer", dealer, len(self._players))

        self._dealer = dealer
        self._cards_per_player = cards_per_player
        self._shuffler: Shuffler = shuffler or standard_shuffler

        self._arena: Tuple[Card, ...] = tuple(create_initial_deck())
        self._draw_pile: List[int] = list(range(len(self._arena)))
        self._discard_pile: List[int] = []
        self._player_hands: List[List[int]] = [[] for _ in self._players]
        self._top: Optional[TopOfDiscard] = None

        self._shuffle_draw_pile()

        self._player_in_turn = dealer
        self._direction = Direction.CLOCKWISE

        game_logger.info(f"New hand: players={list(self._players)}, dealer={self._players[dealer]}")
        self._initial_deal()
        self._flip_starter_card()
        self.next_player()
        game_logger.info(f"First turn: {self._players[self._player_in_turn]}")

    # Accessors

    def player(self, index: int) -> str:
        self._check_player_index(index)
        return self._players[index]

    def player_hand(self, index: int) -> List[Card]:
        """Return a copy of the cards held by a player, in hand order."""
        self._check_player_index(index)
        return [self._arena[handle] for handle in self._player_hands[index]]

    def discard_pile(self) -> Deck:
        """Snapshot of the discard pile, top card last."""
        return Deck([self._arena[handle] for handle in self._discard_pile])

    def draw_pile(self) -> Deck:
        """Snapshot of the draw pile, top card last."""
        return Deck([self._arena[handle] for handle in self._draw_pile])

    def player_in_turn(self) -> int:
        return self._player_in_turn

    def top_of_discard(self) -> Optional[TopOfDiscard]:
        return self._top

    @property
    def players(self) -> Tuple[str, ...]:
        return self._players

    @property
    def dealer(self) -> int:
        return self._dealer

    @property
    def cards_per_player(self) -> int:
        return self._cards_per_player

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def is_reverse(self) -> bool:
        return self._direction == Direction.COUNTER_CLOCKWISE

    @property
    def selected_color(self) -> Optional[CardColor]:
        """Color declared for the wild card on top of the discard pile, if any."""
        if isinstance(self._top, DeclaredTop):
            return self._top.color
        return None

    # Turn order

    def next_player(self):
        """Move the turn one seat in the current direction."""
        self._player_in_turn = (self._player_in_turn + self._direction.value) % len(self._players)

    # Play

    def can_play(self, card_index: int) -> bool:
        """Check if the player in turn may play the card at card_index."""
        hand = self._player_hands[self._player_in_turn]
        if not 0 <= card_index < len(hand) or self._top is None:
            return False

        card = self._arena[hand[card_index]]
        top_color = self._top.effective_color

        # A Wild Draw Four is only allowed when the player cannot follow color
        if card.card_type == CardType.WILD_DRAW:
            return not any(self._arena[handle].color == top_color for handle in hand)

        if card.card_type == CardType.WILD:
            return True

        if card.color == top_color:
            return True

        if card.card_type == CardType.NUMBERED:
            top_number = self._top.effective_number
            return top_number is not None and card.number == top_number

        # Skip, Reverse and Draw match on type
        return card.card_type == self._top.card.card_type

    def playable_cards(self) -> List[int]:
        """Indexes of every card the player in turn may play."""
        hand = self._player_hands[self._player_in_turn]
        return [index for index in range(len(hand)) if self.can_play(index)]

    def play(self, card_index: int, next_color: Optional[CardColor] = None) -> Card:
        """
        Play a card for the player in turn and pass the turn on.

        Args:
            card_index: Position of the card in the player's hand.
            next_color: Color declared when the card is a Wild or Wild Draw Four. Ignored otherwise.

        Returns:
            The card that was played.

        Raises:
            IllegalMoveError: If the card cannot be played. The hand is left unchanged.
            InvalidColorError: If a wild card is played without a suit color.
        """
        player = self._player_in_turn
        if not self.can_play(card_index):
            game_logger.warning(
                f"Illegal move by {self._players[player]}: card index {card_index} on {self._describe_top()}"
            )
            raise IllegalMoveError(player, card_index)

        hand = self._player_hands[player]
        card = self._arena[hand[card_index]]
        if card.is_wild and not isinstance(next_color, CardColor):
            game_logger.warning(f"{self._players[player]} played {card} without declaring a color: {next_color!r}")
            raise InvalidColorError(player, card_index, next_color)

        # Landing on the discard pile resets any declared color
        self._move_card(hand, self._discard_pile, index=card_index)
        game_logger.info(f"{self._players[player]} played {card}.")

        if card.is_wild:
            self._top = DeclaredTop(card, next_color)
            game_logger.info(f"Color changed to {next_color.value}")

        self.next_player()
        return card

    # Internals

    def _check_player_index(self, index: int):
        if not 0 <= index < len(self._players):
            raise OutOfRangeError("Player", index, len(self._players))

    def _move_card(self, source: List[int], target: List[int], index: int = -1, position: Optional[int] = None) -> int:
        """
        Move one card handle between containers.

        Takes the handle at ``index`` of source (the top by default) and puts it
        on top of target, or at ``position`` when given. Keeps the top-of-discard
        state in step with the discard pile.
        """
        handle = source.pop(index)
        if position is None:
            target.append(handle)
        else:
            target.insert(position, handle)

        if target is self._discard_pile or source is self._discard_pile:
            if self._discard_pile:
                self._top = PlainTop(self._arena[self._discard_pile[-1]])
            else:
                self._top = None
        return handle

    def _deal_to(self, player: int, count: int):
        """Deal up to count cards to a player; stops quietly when the draw pile runs out."""
        hand = self._player_hands[player]
        for _ in range(count):
            if not self._draw_pile:
                game_logger.warning(f"Draw pile exhausted while dealing to {self._players[player]}.")
                return
            self._move_card(self._draw_pile, hand)

    def _shuffle_draw_pile(self):
        cards = [self._arena[handle] for handle in self._draw_pile]
        shuffled = apply_shuffler(self._shuffler, cards)

        # Cards with the same value are interchangeable, so any spare handle will do
        spare: Dict[Card, List[int]] = defaultdict(list)
        for handle in self._draw_pile:
            spare[self._arena[handle]].append(handle)
        self._draw_pile[:] = [spare[card].pop() for card in shuffled]
        game_logger.debug(f"Draw pile shuffled ({len(self._draw_pile)} cards).")

    def _initial_deal(self):
        # Deal in turn order, starting with the player after the dealer
        for _ in range(len(self._players)):
            self.next_player()
            self._deal_to(self._player_in_turn, self._cards_per_player)
        game_logger.info(f"Dealt {self._cards_per_player} cards to each of {len(self._players)} players.")

    def _flip_starter_card(self):
        starter = None
        for _ in range(MAX_STARTER_REDRAWS + 1):
            if not self._draw_pile:
                game_logger.warning("Draw pile exhausted before a starter card could be flipped.")
                return
            self._move_card(self._draw_pile, self._discard_pile)
            starter = self._top.card
            if not starter.is_wild:
                break
            game_logger.info(f"Starter card {starter} is wild; returning it to the draw pile.")
            # Goes under the pile rather than on top (unlike Deck.push), so a
            # shuffler that keeps the order does not flip the same card again.
            self._move_card(self._discard_pile, self._draw_pile, position=0)
            self._shuffle_draw_pile()
        else:
            raise DealError(f"No non-wild starter card after {MAX_STARTER_REDRAWS} redraws")

        game_logger.info(f"Start card is: {starter}")
        self._apply_starter_effect(starter)

    def _apply_starter_effect(self, starter: Card):
        if starter.card_type == CardType.REVERSE:
            self._direction = Direction.COUNTER_CLOCKWISE
            game_logger.info("Direction reversed!")
        elif starter.card_type == CardType.SKIP:
            self.next_player()
            game_logger.info("First player skipped!")
        elif starter.card_type == CardType.DRAW:
            # The seat after the player in turn, whatever the direction
            victim = (self._player_in_turn + 1) % len(self._players)
            self._deal_to(victim, DRAW_TWO_PENALTY_CARDS)
            game_logger.info(f"{self._players[victim]} must draw {DRAW_TWO_PENALTY_CARDS} cards due to start card!")
            self.next_player()

    def _describe_top(self) -> str:
        if self._top is None:
            return "an empty discard pile"
        if isinstance(self._top, DeclaredTop):
            return f"{self._top.card} (active color: {self._top.color.value})"
        return str(self._top.card)

    def __repr__(self) -> str:
        return (
            f"Hand(players={list(self._players)}, dealer={self._dealer}, "
            f"player_in_turn={self._player_in_turn}, is_reverse={self.is_reverse}, top={self._top!r})"
        )

def create_hand(
    players: Sequence[str],
    dealer: int,
    shuffler: Optional[Shuffler] = None,
    cards_per_player: int = INITIAL_HAND_SIZE,
) -> Hand:
    return Hand(players, dealer, shuffler, cards_per_player)
