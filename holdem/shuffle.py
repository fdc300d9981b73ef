"""Shuffling decks with a cryptographically secure random source."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

from holdem.cards import Card, full_deck, full_deck_codes

T = TypeVar("T")

_random = random.SystemRandom()


def shuffle(cards: MutableSequence[T]) -> None:
    """Shuffle the sequence in place."""
    _random.shuffle(cards)


def full_cards_with_shuffle() -> list[int]:
    """Return a freshly shuffled deck of 52 card codes."""
    cards = full_deck_codes()
    shuffle(cards)
    return cards


def cards_with_shuffle() -> list[Card]:
    """Return a freshly shuffled deck of 52 cards."""
    cards = full_deck()
    shuffle(cards)
    return cards