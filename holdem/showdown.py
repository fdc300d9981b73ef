"""Showdown: picking the best five-card hand from hole and board cards."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from holdem.board import Board
from holdem.cards import Card, card_from_code

_HOLE_SIZE = 2
_BOARD_SIZE = 5
_HAND_SIZE = 5


@dataclass
class BestCard:
    """A player's hole cards, the shared board, and the best hand found so far.

    ``value`` is the rank of the best hand (0 before any showdown) and
    ``cards`` holds that hand ordered by ascending value.
    """

    hole_cards: tuple[Card, ...]
    board_cards: Board
    value: int = 0
    cards: Board | None = None

    def __post_init__(self) -> None:
        hole = tuple(self.hole_cards)
        if len(hole) != _HOLE_SIZE:
            raise ValueError(f"hole cards hold exactly {_HOLE_SIZE} cards, got {len(hole)}")
        self.hole_cards = hole
        if not isinstance(self.board_cards, Board):
            self.board_cards = Board(tuple(self.board_cards))

    def showdown(self) -> None:
        """Rank every five-card hand from the seven cards and keep the best one."""
        seven = sorted((*self.hole_cards, *self.board_cards), key=lambda card: card.value)
        for hand in combinations(seven, _HAND_SIZE):
            candidate = Board(hand)
            value = candidate.rank(self.value)
            if value > self.value:
                self.value = value
                self.cards = candidate
            elif value == self.value and self.cards is not None:
                if self.cards.compare(candidate, value) > 0:
                    self.cards = candidate


def new_best_card(hole_cards: Sequence[int], board_cards: Sequence[int]) -> BestCard:
    """Build a BestCard from two hole-card codes and five board-card codes."""
    hole_codes = list(hole_cards)
    board_codes = list(board_cards)
    if len(hole_codes) < _HOLE_SIZE:
        raise ValueError(f"need {_HOLE_SIZE} hole card codes, got {len(hole_codes)}")
    if len(board_codes) < _BOARD_SIZE:
        raise ValueError(f"need {_BOARD_SIZE} board card codes, got {len(board_codes)}")
    hole = tuple(card_from_code(code) for code in hole_codes[:_HOLE_SIZE])
    board = Board(tuple(card_from_code(code) for code in board_codes[:_BOARD_SIZE]))
    return BestCard(hole_cards=hole, board_cards=board)