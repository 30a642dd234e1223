"""
Playing cards, for shuffling demonstrations.
"""
from __future__ import annotations

import dataclasses
from typing import Iterable

VALUES = 13
SUITS = 4

# Spades, hearts, diamonds, clubs.
SUIT_SYMBOLS = ('♠', '♥', '♦', '♣')

# Asks terminals to draw the suit symbol as an emoji.
EMOJI_PRESENTATION = '\ufe0f'

FACES = {0: 'A', 10: 'J', 11: 'Q', 12: 'K'}


@dataclasses.dataclass(frozen=True)
class Card:
    value: int      # 0 is the ace, 10, 11, 12 are the jack, queen and king.
    suit: int       # Index into SUIT_SYMBOLS.

    def __post_init__(self):
        assert 0 <= self.value < VALUES, f"Card value {self.value} is out of range."
        assert 0 <= self.suit < SUITS, f"Card suit {self.suit} is out of range."

    def __str__(self):
        return render_card(self)


def deck(size: int = VALUES * SUITS) -> list[Card]:
    """
    The first `size` cards of a fresh deck, ordered by suit and then by value.

    >>> render_hand(deck(3)).replace(EMOJI_PRESENTATION, '')
    'A♠ 2♠ 3♠'
    """
    if not 0 <= size <= VALUES * SUITS:
        raise ValueError(f"A deck holds between 0 and {VALUES * SUITS} cards, not {size}")

    return [Card(value=i % VALUES, suit=i // VALUES) for i in range(size)]


def render_card(card: Card) -> str:
    rank = FACES.get(card.value, str(card.value + 1))
    return rank + SUIT_SYMBOLS[card.suit] + EMOJI_PRESENTATION


def render_hand(cards: Iterable[Card]) -> str:
    return ' '.join(render_card(card) for card in cards)
