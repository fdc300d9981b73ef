import pytest

from holdem.board import Board, board_from_codes
from holdem.cards import Card, HandRank, Suit

R = HandRank

HANDS = [
    ((0x1A, 0x1B, 0x1C, 0x1D, 0x1E), R.ROYAL_FLUSH),
    ((0x12, 0x13, 0x14, 0x15, 0x16), R.STRAIGHT_FLUSH),
    ((0x22, 0x23, 0x24, 0x25, 0x2E), R.STRAIGHT_FLUSH),
    ((0x1A, 0x2A, 0x3A, 0x4A, 0x1E), R.FOUR_OF_A_KIND),
    ((0x1A, 0x2E, 0x3E, 0x4E, 0x1E), R.FOUR_OF_A_KIND),
    ((0x12, 0x22, 0x32, 0x44, 0x14), R.FULL_HOUSE),
    ((0x12, 0x22, 0x35, 0x45, 0x15), R.FULL_HOUSE),
    ((0x12, 0x13, 0x14, 0x15, 0x17), R.FLUSH),
    ((0x22, 0x23, 0x24, 0x25, 0x27), R.FLUSH),
    ((0x32, 0x33, 0x34, 0x35, 0x37), R.FLUSH),
    ((0x42, 0x43, 0x44, 0x45, 0x47), R.FLUSH),
    ((0x12, 0x23, 0x34, 0x45, 0x16), R.STRAIGHT),
    ((0x12, 0x23, 0x34, 0x45, 0x1E), R.STRAIGHT),
    ((0x12, 0x22, 0x32, 0x45, 0x1E), R.THREE_OF_A_KIND),
    ((0x13, 0x24, 0x34, 0x44, 0x1E), R.THREE_OF_A_KIND),
    ((0x13, 0x24, 0x35, 0x45, 0x15), R.THREE_OF_A_KIND),
    ((0x1A, 0x2A, 0x3B, 0x4E, 0x1E), R.TWO_PAIR),
    ((0x1A, 0x2A, 0x3B, 0x4B, 0x1E), R.TWO_PAIR),
    ((0x1A, 0x2B, 0x3B, 0x4E, 0x1E), R.TWO_PAIR),
    ((0x12, 0x22, 0x33, 0x45, 0x16), R.ONE_PAIR),
    ((0x12, 0x23, 0x33, 0x44, 0x15), R.ONE_PAIR),
    ((0x12, 0x23, 0x3B, 0x4B, 0x1E), R.ONE_PAIR),
    ((0x12, 0x23, 0x34, 0x4E, 0x1E), R.ONE_PAIR),
    ((0x12, 0x23, 0x3B, 0x4D, 0x1E), R.HIGH_CARD),
]

PREDICATES = {
    "is_flush": {R.ROYAL_FLUSH, R.STRAIGHT_FLUSH, R.FLUSH},
    "is_royal_straight": {R.ROYAL_FLUSH},
    "is_four_of_a_kind": {R.FOUR_OF_A_KIND},
    "is_full_house": {R.FULL_HOUSE},
    "is_straight": {R.ROYAL_FLUSH, R.STRAIGHT_FLUSH, R.STRAIGHT},
    "is_three_of_a_kind": {R.THREE_OF_A_KIND},
    "is_two_pair": {R.TWO_PAIR},
    "is_one_pair": {R.ONE_PAIR},
}


def test_is_flush_with_cards():
    flush = Board(tuple(Card(Suit.SPADE, v) for v in range(2, 7)))
    mixed = Board(
        (
            Card(Suit.SPADE, 2),
            Card(Suit.DIAMOND, 3),
            Card(Suit.SPADE, 4),
            Card(Suit.SPADE, 5),
            Card(Suit.SPADE, 6),
        )
    )
    assert flush.is_flush() is True
    assert mixed.is_flush() is False


@pytest.mark.parametrize("name", sorted(PREDICATES))
@pytest.mark.parametrize("codes,rank", HANDS)
def test_predicates(name, codes, rank):
    board = board_from_codes(codes)
    assert getattr(board, name)() is (rank in PREDICATES[name])


@pytest.mark.parametrize("codes,rank", HANDS)
def test_rank_without_floor(codes, rank):
    assert board_from_codes(codes).rank(0) == rank


def test_rank_floor_royal_flush_is_always_zero():
    assert board_from_codes((0x1A, 0x1B, 0x1C, 0x1D, 0x1E)).rank(R.ROYAL_FLUSH) == 0


def test_rank_below_floor_is_zero():
    flush = board_from_codes((0x12, 0x13, 0x14, 0x15, 0x17))
    straight = board_from_codes((0x12, 0x23, 0x34, 0x45, 0x16))
    assert flush.rank(R.STRAIGHT_FLUSH) == 0
    assert flush.rank(R.FLUSH) == R.FLUSH
    assert straight.rank(R.FULL_HOUSE) == 0
    assert straight.rank(R.STRAIGHT) == R.STRAIGHT
    assert straight.rank(R.ONE_PAIR) == R.STRAIGHT


def test_rank_high_card_floor_ranks_fully():
    high = board_from_codes((0x12, 0x23, 0x3B, 0x4D, 0x1E))
    assert high.rank(R.HIGH_CARD) == R.HIGH_CARD


def test_compare_high_card():
    lower = board_from_codes((0x12, 0x23, 0x35, 0x49, 0x1D))
    higher = board_from_codes((0x22, 0x33, 0x45, 0x19, 0x2E))
    assert lower.compare(higher, R.HIGH_CARD) == 1
    assert higher.compare(lower, R.HIGH_CARD) == -1
    assert lower.compare(lower, R.HIGH_CARD) == 0


def test_compare_straight_wheel_is_lowest():
    wheel = board_from_codes((0x12, 0x23, 0x34, 0x45, 0x1E))
    six_high = board_from_codes((0x12, 0x23, 0x34, 0x45, 0x16))
    assert wheel.compare(six_high, R.STRAIGHT) == 1
    assert six_high.compare(wheel, R.STRAIGHT) == -1


def test_compare_straight_by_top_card():
    six_high = board_from_codes((0x12, 0x23, 0x34, 0x45, 0x16))
    seven_high = board_from_codes((0x13, 0x24, 0x35, 0x46, 0x17))
    assert six_high.compare(seven_high, R.STRAIGHT) == 1
    assert seven_high.compare(six_high, R.STRAIGHT) == -1


def test_compare_four_of_a_kind():
    tens = board_from_codes((0x1A, 0x2A, 0x3A, 0x4A, 0x1E))
    aces = board_from_codes((0x1A, 0x2E, 0x3E, 0x4E, 0x1E))
    assert tens.compare(aces, R.FOUR_OF_A_KIND) == 1
    assert aces.compare(tens, R.FOUR_OF_A_KIND) == -1
    assert tens.compare(tens, R.FOUR_OF_A_KIND) == 0


def test_compare_full_house():
    twos_full = board_from_codes((0x12, 0x22, 0x32, 0x44, 0x14))
    fives_full = board_from_codes((0x12, 0x22, 0x35, 0x45, 0x15))
    assert twos_full.compare(fives_full, R.FULL_HOUSE) == 1
    assert fives_full.compare(twos_full, R.FULL_HOUSE) == -1


def test_compare_two_pair():
    tens_and_aces = board_from_codes((0x1A, 0x2A, 0x3B, 0x4E, 0x1E))
    tens_and_jacks = board_from_codes((0x1A, 0x2A, 0x3B, 0x4B, 0x1E))
    assert tens_and_jacks.compare(tens_and_aces, R.TWO_PAIR) == 1
    assert tens_and_aces.compare(tens_and_jacks, R.TWO_PAIR) == -1
    assert tens_and_aces.compare(tens_and_aces, R.TWO_PAIR) == 0


def test_compare_one_pair_and_tie():
    pair_twos = board_from_codes((0x12, 0x22, 0x33, 0x45, 0x16))
    pair_jacks = board_from_codes((0x12, 0x23, 0x3B, 0x4B, 0x1E))
    assert pair_twos.compare(pair_jacks, R.ONE_PAIR) == 1
    assert pair_jacks.compare(pair_twos, R.ONE_PAIR) == -1
    assert pair_twos.compare(pair_twos, R.ONE_PAIR) == 1


def test_compare_royal_flush_and_unknown_rank():
    royal = board_from_codes((0x1A, 0x1B, 0x1C, 0x1D, 0x1E))
    assert royal.compare(royal, R.ROYAL_FLUSH) == 1
    assert royal.compare(royal, 8) == -1


def test_str():
    board = board_from_codes((0x12, 0x1A, 0x3B, 0x4D, 0x2E))
    expected = (
        "  2\u2666\ufe0f |"
        " 10\u2666\ufe0f |"
        "  J\u2665\ufe0f |"
        "  K\u2660\ufe0f |"
        "  A\u2663\ufe0f |"
    )
    assert str(board) == expected


def test_board_from_codes_decodes_cards():
    board = board_from_codes((0x13, 0x14, 0x15, 0x16, 0x17))
    assert list(board) == [Card(Suit.DIAMOND, v) for v in range(3, 8)]
    assert board[4] == Card(Suit.DIAMOND, 7)
    assert len(board) == 5


def test_board_requires_five_cards():
    with pytest.raises(ValueError):
        board_from_codes((0x12, 0x13, 0x14))


def test_board_from_codes_rejects_bad_code():
    with pytest.raises(ValueError):
        board_from_codes((0x12, 0x13, 0x14, 0x15, 0x51))