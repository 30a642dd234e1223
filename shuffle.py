"""
This script deals out the first few shuffles of a deck of cards from a lazy traversal of all of its orderings, and
can optionally check that random traversals start at a uniformly chosen permutation.
"""

import argparse
import itertools
import random
import time

import lazyperm
from lazyperm import cards, stats

parser = argparse.ArgumentParser('Deal shuffles of a deck of cards')
parser.add_argument('--count', type=int, default=3, help='Number of shuffles to print')
parser.add_argument('--order', choices=lazyperm.ORDERS, default='random', help='Order to traverse the shuffles in')
parser.add_argument('--deck-size', type=int, default=52, help='Number of cards in the deck')
parser.add_argument('--seed', type=int, default=None, help='Random seed (default: unseeded)')
parser.add_argument('--tally', type=int, default=0, help='Also start this many traversals of S_3 and tally their first index')


# Utility to time blocks of code.
class elapsed:
    def __enter__(self):
        self.time = time.perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        self.time = time.perf_counter() - self.time


def main(args: argparse.Namespace):
    assert args.count >= 0
    rand = random.Random(args.seed)

    deck = cards.deck(args.deck_size)
    print(f"Deck of {len(deck)} cards: about 2^{lazyperm.log2_factorial(len(deck)):.1f} orderings.")

    with elapsed() as t:
        for i, shuffle in enumerate(itertools.islice(lazyperm.permute(deck, args.order, rand), args.count)):
            print(f"{i:>4}: {cards.render_hand(shuffle)}")
    print(f"Dealt {args.count} shuffles in {t.time:.4f} seconds")

    if args.tally > 0:
        print()
        print(f"Tallying the first index of {args.tally} {args.order} traversals of S_3...")
        tally = stats.first_index_tally(3, args.tally, order=args.order, rand=rand)
        print(tally)
        print(f"Chi-square statistic: {stats.chi_square(tally):.3f} (5 degrees of freedom)")


if __name__ == '__main__':
    main(parser.parse_args())
