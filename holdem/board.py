"""Five-card boards: hand classification, ranking and comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from holdem.cards import Card, HandRank, card_from_code

_ACE = 14
_TEN = 10

# Floors that are checked against a threshold; any other floor means "rank fully".
_THRESHOLD_FLOORS = frozenset(rank for rank in HandRank if rank is not HandRank.HIGH_CARD)


def _compare_keys(mine: Sequence[int], theirs: Sequence[int]) -> int:
    """Compare key values in order: -1 when mine is higher, 1 when theirs is, else 0."""
    for own, other in zip(mine, theirs):
        if own > other:
            return -1
        if own < other:
            return 1
    return 0


@dataclass(frozen=True)
class Board:
    """Five cards, expected to be ordered by ascending value."""

    cards: tuple[Card, ...]

    def __post_init__(self) -> None:
        cards = tuple(self.cards)
        if len(cards) != 5:
            raise ValueError(f"a board holds exactly 5 cards, got {len(cards)}")
        object.__setattr__(self, "cards", cards)

    def __str__(self) -> str:
        return "".join(f" {str(card):>3} |" for card in self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    @property
    def _values(self) -> tuple[int, ...]:
        return tuple(card.value for card in self.cards)

    def is_flush(self) -> bool:
        """All five cards share a suit."""
        first = self.cards[0].suit
        return all(card.suit == first for card in self.cards)

    def is_royal_straight(self) -> bool:
        """Ten to ace, ignoring suits."""
        return self._values == (10, 11, 12, 13, 14)

    def is_four_of_a_kind(self) -> bool:
        return self._four_indexes() is not None

    def is_full_house(self) -> bool:
        return self._full_house_indexes() is not None

    def is_straight(self) -> bool:
        """Five consecutive values, ignoring suits; A-2-3-4-5 counts."""
        v = self._values
        if v == (2, 3, 4, 5, _ACE):
            return True
        return all(low + 1 == high for low, high in zip(v, v[1:]))

    def is_three_of_a_kind(self) -> bool:
        v0, v1, v2, v3, v4 = self._values
        if v0 == v1 == v2 and v0 != v3 and v0 != v4 and v3 != v4:
            return True
        if v1 == v2 == v3 and v1 != v0 and v1 != v4 and v0 != v4:
            return True
        if v2 == v3 == v4 and v2 != v0 and v2 != v1 and v0 != v1:
            return True
        return False

    def is_two_pair(self) -> bool:
        return self._two_pair_indexes() is not None

    def is_one_pair(self) -> bool:
        return self._one_pair_indexes() is not None

    def _full_rank(self) -> HandRank:
        if self.is_flush():
            if self.is_royal_straight():
                return HandRank.ROYAL_FLUSH
            if self.is_straight():
                return HandRank.STRAIGHT_FLUSH
            return HandRank.FLUSH
        if self.is_four_of_a_kind():
            return HandRank.FOUR_OF_A_KIND
        if self.is_full_house():
            return HandRank.FULL_HOUSE
        if self.is_royal_straight() or self.is_straight():
            return HandRank.STRAIGHT
        if self.is_three_of_a_kind():
            return HandRank.THREE_OF_A_KIND
        if self.is_two_pair():
            return HandRank.TWO_PAIR
        if self.is_one_pair():
            return HandRank.ONE_PAIR
        return HandRank.HIGH_CARD

    def rank(self, floor: int) -> int:
        """Return the hand's rank if it reaches ``floor``, otherwise 0.

        A floor of royal flush always yields 0, since nothing can beat it.
        A floor of high card, 0 or any value that is not a rank ranks the
        hand without a threshold.
        """
        if floor == HandRank.ROYAL_FLUSH:
            return 0
        full = self._full_rank()
        if floor in _THRESHOLD_FLOORS and full < floor:
            return 0
        return full

    def compare(self, other: Board, rank: int) -> int:
        """Compare two boards of the same rank.

        Returns 0 when they tie, 1 when ``other`` is the better hand and -1
        when this board is.
        """
        if rank == HandRank.HIGH_CARD or rank == HandRank.FLUSH:
            return self._compare_values(other)
        if rank == HandRank.ROYAL_FLUSH:
            return 1
        if rank == HandRank.STRAIGHT_FLUSH or rank == HandRank.STRAIGHT:
            return self._compare_straight(other)
        if rank == HandRank.FOUR_OF_A_KIND:
            return self._compare_grouped(other, Board._four_indexes)
        if rank == HandRank.FULL_HOUSE:
            return self._compare_grouped(other, Board._full_house_indexes)
        if rank == HandRank.THREE_OF_A_KIND:
            return self._compare_grouped(other, Board._three_indexes)
        if rank == HandRank.TWO_PAIR:
            return self._compare_grouped(other, Board._two_pair_indexes)
        if rank == HandRank.ONE_PAIR:
            indexes = self._one_pair_indexes()
            other_indexes = other._one_pair_indexes()
            if indexes is None or other_indexes is None:
                return 0
            return self._compare_at(other, indexes, other_indexes) or 1
        return -1

    def _compare_values(self, other: Board) -> int:
        mine, theirs = self._values, other._values
        if mine == theirs:
            return 0
        if any(t > m for m, t in zip(reversed(mine), reversed(theirs))):
            return 1
        return -1

    def _compare_straight(self, other: Board) -> int:
        mine, theirs = self._values, other._values
        if mine == theirs:
            return 0
        if mine[0] == 2 and mine[4] == _ACE:
            return 1
        if theirs[0] == 2 and theirs[4] == _ACE:
            return -1
        if mine[4] > theirs[4]:
            return -1
        return 1

    def _compare_at(
        self, other: Board, indexes: Sequence[int], other_indexes: Sequence[int]
    ) -> int:
        mine = [self.cards[i].value for i in indexes]
        theirs = [other.cards[i].value for i in other_indexes]
        return _compare_keys(mine, theirs)

    def _compare_grouped(self, other: Board, locate) -> int:
        indexes = locate(self)
        other_indexes = locate(other)
        if indexes is None or other_indexes is None:
            return 0
        return self._compare_at(other, indexes, other_indexes)

    def _four_indexes(self) -> tuple[int, ...] | None:
        v0, v1, v2, v3, v4 = self._values
        if v0 == v1 == v2 == v3 and v4 != v0:
            return (0, 4)
        if v0 != v1 and v1 == v2 == v3 == v4:
            return (1, 0)
        return None

    def _full_house_indexes(self) -> tuple[int, ...] | None:
        v0, v1, v2, v3, v4 = self._values
        if v0 == v1 == v2 and v0 != v3 and v3 == v4:
            return (0, 3)
        if v0 == v1 and v0 != v2 and v2 == v3 == v4:
            return (2, 0)
        return None

    def _three_indexes(self) -> tuple[int, ...] | None:
        v0, v1, v2, v3, v4 = self._values
        if v0 == v1 == v2 and v0 != v3 and v0 != v4 and v3 != v4:
            return (0, 4, 3)
        if v0 != v1 and v1 == v2 == v3 and v1 != v4 and v0 != v4:
            return (1, 4, 0)
        if v0 != v2 and v1 != v2 and v0 != v1 and v2 == v3 == v4:
            return (2, 1, 0)
        return None

    def _two_pair_indexes(self) -> tuple[int, ...] | None:
        v0, v1, v2, v3, v4 = self._values
        if v0 == v1 and v2 == v3 and v0 != v2 and v0 != v4 and v2 != v4:
            return (2, 0, 4)
        if v0 == v1 and v4 == v3 and v0 != v4 and v0 != v2 and v2 != v4:
            return (3, 0, 2)
        if v1 == v2 and v4 == v3 and v0 != v4 and v0 != v2 and v2 != v4:
            return (3, 1, 0)
        return None

    def _one_pair_indexes(self) -> tuple[int, ...] | None:
        v0, v1, v2, v3, v4 = self._values
        if v0 == v1 and len({v0, v2, v3, v4}) == 4:
            return (0, 4, 3, 2)
        if v1 == v2 and len({v1, v0, v3, v4}) == 4:
            return (1, 4, 3, 0)
        if v2 == v3 and len({v2, v0, v1, v4}) == 4:
            return (2, 4, 1, 0)
        if v3 == v4 and len({v3, v0, v1, v2}) == 4:
            return (3, 2, 1, 0)
        return None


def board_from_codes(codes: Iterable[int]) -> Board:
    """Build a board from five card codes."""
    return Board(tuple(card_from_code(code) for code in codes))