"""Playing cards, suits and hand ranks for Texas Hold'em."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Card suits, ordered as the deck lays them out (spades first)."""

    DIAMOND = 1
    CLUB = 2
    HEART = 3
    SPADE = 4


class HandRank(IntEnum):
    """Strength of a five-card hand; a larger value is a stronger hand."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 9
    STRAIGHT_FLUSH = 10
    ROYAL_FLUSH = 11


_SUIT_SYMBOLS = {
    Suit.SPADE: "\u2660\ufe0f",
    Suit.HEART: "\u2665\ufe0f",
    Suit.CLUB: "\u2663\ufe0f",
    Suit.DIAMOND: "\u2666\ufe0f",
}

_FACE_NAMES = {11: " J", 12: " Q", 13: " K", 14: " A"}

_VALUES = range(2, 15)
_DECK_SUITS = (Suit.SPADE, Suit.HEART, Suit.CLUB, Suit.DIAMOND)


@dataclass(frozen=True)
class Card:
    """A single card: a suit and a value from 2 to 14 (ace high)."""

    suit: int
    value: int

    def __str__(self) -> str:
        face = _FACE_NAMES.get(self.value, f"{self.value:2d}")
        try:
            symbol = _SUIT_SYMBOLS[Suit(self.suit)]
        except ValueError:
            symbol = ""
        return face + symbol


_DECK = tuple(Card(suit, value) for suit in _DECK_SUITS for value in _VALUES)
_DECK_CODES = tuple((card.suit << 4) | card.value for card in _DECK)
_CARDS_BY_CODE = dict(zip(_DECK_CODES, _DECK))


def card_from_code(code: int) -> Card:
    """Decode a card code: the high nibble is the suit, the low nibble the value."""
    try:
        return _CARDS_BY_CODE[code]
    except KeyError:
        raise ValueError(f"invalid card code: {code:#x}") from None


def full_deck_codes() -> list[int]:
    """Return the 52 card codes in deck order."""
    return list(_DECK_CODES)


def full_deck() -> list[Card]:
    """Return the 52 cards in deck order."""
    return list(_DECK)