import sys
import os
import unittest

# Add parent directory to path to import modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(os.path.dirname(__file__))

from uno_hand.hand import Hand
from uno_hand.exceptions import IllegalMoveError, InvalidColorError
from uno_hand.top_card import DeclaredTop, PlainTop
from uno_hand.config.enums import CardColor, CardType
from shufflers import WILD, WILD_DRAW, action, num, pinned_shuffler

RED, YELLOW, GREEN, BLUE = CardColor.RED, CardColor.YELLOW, CardColor.GREEN, CardColor.BLUE

def two_player_hand(first_hand, starter, second_hand=()):
    """Dealer is seat 0, so seat 1 plays first with first_hand."""
    shuffler = pinned_shuffler(2, 0, hands={1: first_hand, 0: second_hand}, starter=starter)
    return Hand(["Alice", "Bob"], 0, shuffler)

def snapshot(hand):
    return (
        [hand.player_hand(i) for i in range(hand.player_count)],
        hand.discard_pile().to_list(),
        hand.draw_pile().to_list(),
        hand.player_in_turn(),
        hand.top_of_discard(),
    )

class TestCanPlay(unittest.TestCase):
    def test_index_out_of_bounds_is_not_playable(self):
        hand = two_player_hand([num(RED, 1)], num(RED, 5))
        self.assertTrue(hand.can_play(0))
        self.assertFalse(hand.can_play(7))
        self.assertFalse(hand.can_play(100))
        self.assertFalse(hand.can_play(-1))

    def test_color_match(self):
        hand = two_player_hand([num(RED, 1), action(CardType.SKIP, RED)], num(RED, 5))
        self.assertTrue(hand.can_play(0))
        self.assertTrue(hand.can_play(1))

    def test_number_match(self):
        hand = two_player_hand([num(BLUE, 5), num(BLUE, 6)], num(RED, 5))
        self.assertTrue(hand.can_play(0))
        self.assertFalse(hand.can_play(1))

    def test_skip_matches_skip(self):
        # A skip starter hands the first turn back to the dealer in a two-player hand
        hand = two_player_hand(
            [], action(CardType.SKIP, BLUE),
            second_hand=[action(CardType.SKIP, RED), action(CardType.REVERSE, RED), action(CardType.DRAW, GREEN)],
        )
        self.assertEqual(hand.player_in_turn(), 0)
        self.assertTrue(hand.can_play(0))
        self.assertFalse(hand.can_play(1))
        self.assertFalse(hand.can_play(2))

    def test_reverse_matches_reverse(self):
        cards = [action(CardType.REVERSE, RED), action(CardType.SKIP, GREEN), action(CardType.DRAW, YELLOW)]
        hand = Hand(
            ["Alice", "Bob", "Carol"], 0,
            pinned_shuffler(3, 0, hands={2: cards}, starter=action(CardType.REVERSE, BLUE)),
        )
        self.assertEqual(hand.player_in_turn(), 2)
        self.assertTrue(hand.can_play(0))
        self.assertFalse(hand.can_play(1))
        self.assertFalse(hand.can_play(2))

    def test_draw_matches_draw(self):
        # The draw starter makes seat 1 draw and skips it, so the dealer plays first
        hand = two_player_hand(
            [], action(CardType.DRAW, BLUE),
            second_hand=[action(CardType.DRAW, GREEN), action(CardType.SKIP, RED), action(CardType.REVERSE, YELLOW)],
        )
        self.assertEqual(hand.player_in_turn(), 0)
        self.assertEqual(len(hand.player_hand(1)), 9)
        self.assertTrue(hand.can_play(0))
        self.assertFalse(hand.can_play(1))
        self.assertFalse(hand.can_play(2))

    def test_numbered_card_does_not_match_action_card(self):
        hand = two_player_hand([], action(CardType.DRAW, YELLOW), second_hand=[num(GREEN, 2)])
        self.assertEqual(hand.player_in_turn(), 0)
        self.assertFalse(hand.can_play(0))

    def test_wild_is_always_playable(self):
        hand = two_player_hand([WILD, num(RED, 1)], num(RED, 5))
        self.assertTrue(hand.can_play(0))

    def test_wild_draw_illegal_when_holding_top_color(self):
        hand = two_player_hand([WILD_DRAW, num(RED, 9)], num(RED, 5))
        self.assertFalse(hand.can_play(0))

    def test_wild_draw_legal_without_top_color(self):
        cards = [WILD_DRAW, num(BLUE, 1), num(GREEN, 2), num(YELLOW, 3),
                 action(CardType.SKIP, BLUE), num(BLUE, 7), WILD]
        hand = two_player_hand(cards, num(RED, 5))
        self.assertTrue(hand.can_play(0))

    def test_wild_draw_ignores_number_matches(self):
        cards = [WILD_DRAW, num(BLUE, 5), num(GREEN, 5), num(YELLOW, 5),
                 num(BLUE, 2), num(GREEN, 3), num(YELLOW, 4)]
        hand = two_player_hand(cards, num(RED, 5))
        self.assertTrue(hand.can_play(0))

    def test_playable_cards(self):
        cards = [num(BLUE, 1), num(RED, 2), num(GREEN, 5), action(CardType.SKIP, YELLOW),
                 WILD, num(YELLOW, 8), num(BLUE, 9)]
        hand = two_player_hand(cards, num(RED, 5))
        self.assertEqual(hand.playable_cards(), [1, 2, 4])

    def test_can_play_does_not_mutate(self):
        hand = two_player_hand([num(RED, 1)], num(RED, 5))
        before = snapshot(hand)
        for index in range(-1, 9):
            hand.can_play(index)
        self.assertEqual(snapshot(hand), before)

class TestPlay(unittest.TestCase):
    def test_play_moves_card_and_passes_turn(self):
        red_1 = num(RED, 1)
        hand = two_player_hand([num(BLUE, 9), red_1], num(RED, 5))
        played = hand.play(1)
        self.assertEqual(played, red_1)
        self.assertEqual(len(hand.player_hand(1)), 6)
        self.assertEqual(hand.player_hand(1)[0], num(BLUE, 9))
        self.assertEqual(hand.discard_pile().top(), red_1)
        self.assertEqual(len(hand.discard_pile()), 2)
        self.assertEqual(hand.top_of_discard(), PlainTop(red_1))
        self.assertEqual(hand.player_in_turn(), 0)

    def test_illegal_play_leaves_hand_untouched(self):
        hand = two_player_hand([num(BLUE, 9), WILD_DRAW, num(RED, 1)], num(RED, 5))
        before = snapshot(hand)
        for index in (0, 1, 7, -1):
            with self.assertRaises(IllegalMoveError) as ctx:
                hand.play(index)
            self.assertEqual(ctx.exception.player, 1)
            self.assertEqual(ctx.exception.card_index, index)
            self.assertEqual(snapshot(hand), before)

    def test_action_cards_only_pass_the_turn(self):
        hand = Hand(
            ["Alice", "Bob", "Carol"], 0,
            pinned_shuffler(3, 0, hands={1: [action(CardType.SKIP, RED)]}, starter=num(RED, 5)),
        )
        self.assertEqual(hand.player_in_turn(), 1)
        hand.play(0)
        self.assertEqual(hand.player_in_turn(), 2)
        self.assertFalse(hand.is_reverse)

    def test_wild_declares_color(self):
        hand = two_player_hand(
            [WILD], num(RED, 5),
            second_hand=[num(RED, 5), num(BLUE, 2), action(CardType.SKIP, GREEN), WILD_DRAW,
                         num(YELLOW, 5), num(RED, 7), num(GREEN, 1)],
        )
        hand.play(0, BLUE)
        self.assertEqual(hand.selected_color, BLUE)
        self.assertEqual(hand.top_of_discard(), DeclaredTop(WILD, BLUE))
        self.assertEqual(hand.player_in_turn(), 0)

        # The declared color counts, not the red 5 underneath
        self.assertFalse(hand.can_play(0))
        self.assertTrue(hand.can_play(1))
        self.assertFalse(hand.can_play(2))
        self.assertFalse(hand.can_play(4))
        # Holding a blue card rules out the Wild Draw Four
        self.assertFalse(hand.can_play(3))

        hand.play(1)
        self.assertIsNone(hand.selected_color)
        self.assertEqual(hand.top_of_discard(), PlainTop(num(BLUE, 2)))

    def test_wild_draw_declares_color(self):
        cards = [WILD_DRAW, num(BLUE, 1), num(GREEN, 2), num(YELLOW, 3),
                 num(BLUE, 4), num(GREEN, 6), num(YELLOW, 7)]
        hand = two_player_hand(cards, num(RED, 5), second_hand=[num(YELLOW, 9), num(RED, 9)])
        hand.play(0, YELLOW)
        self.assertEqual(hand.selected_color, YELLOW)
        self.assertEqual(hand.discard_pile().top(), WILD_DRAW)
        self.assertTrue(hand.can_play(0))
        self.assertFalse(hand.can_play(1))

    def test_wild_draw_on_declared_color(self):
        hand = two_player_hand(
            [WILD, num(RED, 1)], num(RED, 5),
            second_hand=[WILD_DRAW, num(RED, 2), num(BLUE, 3), num(BLUE, 4),
                         num(RED, 6), num(RED, 7), num(RED, 8)],
        )
        hand.play(0, GREEN)
        self.assertTrue(hand.can_play(0))
        hand.play(0, RED)
        self.assertEqual(hand.selected_color, RED)
        self.assertEqual(hand.top_of_discard(), DeclaredTop(WILD_DRAW, RED))
        # Seat 1 still holds a red card
        self.assertTrue(hand.can_play(0))

    def test_wild_needs_a_color(self):
        hand = two_player_hand([WILD, WILD_DRAW], num(RED, 5))
        before = snapshot(hand)
        for color in (None, "Blue"):
            with self.assertRaises(InvalidColorError) as ctx:
                hand.play(0, color)
            self.assertEqual(ctx.exception.color, color)
            self.assertEqual(snapshot(hand), before)

    def test_invalid_color_is_an_illegal_move(self):
        hand = two_player_hand([WILD], num(RED, 5))
        with self.assertRaises(IllegalMoveError):
            hand.play(0)

    def test_color_ignored_for_plain_cards(self):
        hand = two_player_hand([num(RED, 1)], num(RED, 5))
        hand.play(0, BLUE)
        self.assertIsNone(hand.selected_color)
        self.assertEqual(hand.top_of_discard(), PlainTop(num(RED, 1)))

if __name__ == "__main__":
    unittest.main()
