import argparse
import random
from collections import Counter
from typing import List, Optional, Sequence
from tqdm import tqdm
from uno_hand.card import Card
from uno_hand.deck import Shuffler
from uno_hand.hand import Hand
from uno_hand.config.enums import CardColor
from uno_hand.config.settings import DECK_SIZE, SUIT_COLORS
from uno_hand.utils.logger import game_logger

DEFAULT_MAX_TURNS = 500

def choose_color(cards: List[Card]) -> CardColor:
    """Declare the suit the player holds most of (Red when holding no suit cards)."""
    counts = Counter(card.color for card in cards if card.color is not None)
    if not counts:
        return CardColor.RED
    return max(SUIT_COLORS, key=lambda color: counts[color])

def count_cards(hand: Hand) -> int:
    total = len(hand.draw_pile()) + len(hand.discard_pile())
    for index in range(hand.player_count):
        total += len(hand.player_hand(index))
    return total

def run_hand(players: Sequence[str], dealer: int, shuffler: Optional[Shuffler] = None,
             max_turns: int = DEFAULT_MAX_TURNS) -> dict:
    """
    Play one hand with a first-legal-card policy.

    Drawing is not part of the hand core, so the hand stalls as soon as the
    player in turn has nothing to play.
    """
    hand = Hand(players, dealer, shuffler)
    turns = 0
    winner = None
    stalled = False

    while turns < max_turns:
        playable = hand.playable_cards()
        if not playable:
            stalled = True
            break

        actor = hand.player_in_turn()
        cards = hand.player_hand(actor)
        card = cards[playable[0]]
        color = choose_color(cards) if card.is_wild else None
        hand.play(playable[0], color)
        turns += 1

        total = count_cards(hand)
        if total != DECK_SIZE:
            raise AssertionError(f"Card count drifted to {total} after turn {turns}")

        if not hand.player_hand(actor):
            winner = hand.player(actor)
            break

    return {
        "turns": turns,
        "finished": winner is not None,
        "winner": winner,
        "stalled": stalled,
    }

def main(argv: Optional[List[str]] = None) -> dict:
    parser = argparse.ArgumentParser(description="Play random UNO hands and check the card invariants.")
    parser.add_argument("--hands", type=int, default=1000, help="number of hands to play")
    parser.add_argument("--players", type=int, default=4, help="players per hand")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--quiet", action="store_true", help="hide the progress bar")
    args = parser.parse_args(argv)

    if args.seed is not None:
        random.seed(args.seed)

    names = [f"Player_{i + 1}" for i in range(args.players)]
    finished = 0
    stalled = 0
    total_turns = 0

    print(f"Running {args.hands} hands with {args.players} players...")
    for i in tqdm(range(args.hands), disable=args.quiet):
        result = run_hand(names, i % args.players)
        total_turns += result["turns"]
        if result["finished"]:
            finished += 1
        if result["stalled"]:
            stalled += 1

    summary = {
        "hands": args.hands,
        "finished": finished,
        "stalled": stalled,
        "average_turns": total_turns / args.hands if args.hands else 0.0,
    }
    game_logger.info(f"Simulation summary: {summary}")
    print(f"Finished: {finished}, stalled: {stalled}, average turns: {summary['average_turns']:.2f}")
    return summary

if __name__ == "__main__":
    main()
