# holdem

Texas hold'em hand evaluation in pure Python, with no runtime dependencies.

- `holdem.cards`: `Card` (a frozen `suit`/`value` pair, values 2 to 14 with
  ace high), `Suit`, `HandRank`, and the 52-card deck. Cards come either as
  `Card` objects or as integer codes of the form `0x<suit><value>`. For
  example, `0x4e` is the ace of spades and `0x1a` is the ten of diamonds.
- `holdem.shuffle`: in-place shuffling backed by `random.SystemRandom`, the
  operating system's cryptographic random source.
- `holdem.board`: `Board`, a five-card hand. It has category checks, ranking,
  and comparison of two hands of the same rank.
- `holdem.showdown`: `BestCard`, which picks the best five cards out of two
  hole cards and five community cards.

## Installation

```
pip install .
```

Requires Python 3.10 or later.

## Cards and decks

```python
from holdem.cards import Card, Suit, card_from_code, full_deck, full_deck_codes

card_from_code(0x4e)          # Card(suit=4, value=14)
str(Card(Suit.HEART, 12))     # ' Q♥️'
full_deck()                   # 52 Cards: spades, hearts, clubs, diamonds, each 2..A
full_deck_codes()             # the same deck as integer codes
```

`card_from_code` raises `ValueError` for a code that is not one of the 52 cards.

## Shuffling

```python
from holdem.shuffle import cards_with_shuffle, full_cards_with_shuffle, shuffle

deck = cards_with_shuffle()        # a new shuffled list of 52 Card objects
codes = full_cards_with_shuffle()  # a new shuffled list of 52 integer codes
shuffle(deck)                      # shuffle any mutable sequence in place
```

## Ranking a five-card hand

A `Board` holds exactly five cards. Its checks expect those cards to be
ordered by ascending value. `board_from_codes` builds one from codes.

```python
from holdem.board import board_from_codes
from holdem.cards import HandRank

board = board_from_codes([0x12, 0x22, 0x32, 0x44, 0x14])
board.is_full_house()   # True
board.rank(0)           # HandRank.FULL_HOUSE
```

Each category has its own check: `is_flush`, `is_royal_straight`,
`is_straight`, `is_four_of_a_kind`, `is_full_house`, `is_three_of_a_kind`,
`is_two_pair` and `is_one_pair`. A-2-3-4-5 counts as a straight.

`rank(floor)` behaves as follows:

- It returns the hand's `HandRank` when the hand reaches `floor`, and `0` when
  it falls short.
- A floor of `HandRank.ROYAL_FLUSH` always gives `0`.
- A floor of `HandRank.HIGH_CARD`, of `0`, or of any value that is not a rank
  ranks the hand with no threshold.

`compare(other, rank)` compares two boards of the same rank. It returns:

- `0` for a tie
- `1` when `other` is the better hand
- `-1` when this board is the better hand

Hand ranks, lowest to highest:

1. high card
2. one pair
3. two pair
4. three of a kind
5. straight
6. flush
7. full house
8. four of a kind
9. straight flush
10. royal flush

## Showdown

```python
from holdem.cards import HandRank
from holdem.showdown import new_best_card

best = new_best_card([0x1a, 0x1b], [0x12, 0x13, 0x1c, 0x1d, 0x1e])
best.showdown()

assert best.value == HandRank.ROYAL_FLUSH
print(best.cards)   # the five cards of the best hand, in ascending value
```

`new_best_card` takes two hole-card codes and five board-card codes. It raises
`ValueError` when it gets too few; any codes beyond those are ignored. A
`BestCard` can also be built directly from `Card` objects:

```python
BestCard(hole_cards=(...), board_cards=(...))
```

`showdown()` tries every five-card combination of the seven cards. It stores
the best rank in `value`, which is `0` before any showdown, and the best hand
in `cards`.

## What it does not do

This package evaluates hands and shuffles decks; it does not run a game. There
is no dealing of rounds, no betting, no pot handling, no comparison of hands
between several players at a table, and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```