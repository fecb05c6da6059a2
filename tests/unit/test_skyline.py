"""Unit tests for the skyline codec."""

import numpy as np
import pytest

from chompbot.engine.skyline import (
    TABLE_SIZE,
    Skyline,
    all_skylines,
    board_from_bitmasks,
    board_to_bitmasks,
    decode,
    encode,
    skyline_to_board,
    to_skyline,
)
from chompbot.errors import MalformedBoard


class TestSkyline:
    """Test Skyline construction."""

    def test_full_and_glass_only(self):
        assert Skyline.full().rows == (8, 8, 8, 8, 8)
        assert Skyline.glass_only().rows == (0, 0, 0, 0, 1)
        assert Skyline.full().cell_count == 40
        assert not Skyline.glass_only().is_empty
        assert Skyline((0, 0, 0, 0, 0)).is_empty

    def test_rows_are_normalized_to_ints(self):
        skyline = Skyline([np.int64(2), 3, 3, 4, 8])
        assert skyline.rows == (2, 3, 3, 4, 8)
        assert all(type(v) is int for v in skyline.rows)

    @pytest.mark.parametrize("rows", [
        (8, 8, 8, 8),          # too few rows
        (8, 8, 8, 8, 8, 8),    # too many rows
        (0, 0, 0, 0, 9),       # out of bounds
        (-1, 0, 0, 0, 1),
        (3, 2, 2, 2, 2),       # more cells above than below
        (0, 0, 0, 5, 4),
    ])
    def test_invalid_rows_rejected(self, rows):
        with pytest.raises(MalformedBoard):
            Skyline(rows)

    @pytest.mark.parametrize("rows", [
        (0, 0, 0, 0, 2.5),
        (0, 0, 0, 0, 1.0),
        (0, 0, 0, 0, "1"),
        (False, False, False, False, True),
    ])
    def test_non_integer_counts_rejected(self, rows):
        with pytest.raises(MalformedBoard):
            Skyline(rows)

    def test_immutable(self):
        skyline = Skyline.full()
        with pytest.raises(Exception):
            skyline.rows = (0, 0, 0, 0, 1)


class TestIndexPacking:
    """Test encode/decode."""

    def test_round_trip_every_shape(self):
        for skyline in all_skylines():
            assert decode(encode(skyline)) == skyline

    def test_indices_are_distinct_and_in_range(self):
        indices = [encode(s) for s in all_skylines()]
        assert len(set(indices)) == len(indices)
        assert all(0 <= idx < TABLE_SIZE for idx in indices)

    def test_shape_count(self):
        # Lattice paths through a 5x8 grid: C(13, 5)
        assert len(list(all_skylines())) == 1287

    def test_field_layout(self):
        assert encode(Skyline((0, 0, 0, 0, 1))) == 1 << 16
        assert encode(Skyline((1, 1, 1, 1, 1))) == 0x11111
        assert encode(Skyline.full()) == 0x88888
        assert Skyline((2, 3, 4, 5, 6)).encode() == 0x65432

    def test_encode_is_deterministic(self):
        skyline = Skyline((0, 2, 2, 5, 7))
        assert encode(skyline) == encode(Skyline((0, 2, 2, 5, 7)))


class TestBoardConversion:
    """Test raw board <-> skyline conversion."""

    def test_full_board(self, full_board):
        assert to_skyline(full_board) == Skyline.full()

    def test_glass_only_board(self, glass_only_board):
        assert glass_only_board.sum() == 1
        assert glass_only_board[4, 7] == 1
        assert to_skyline(glass_only_board) == Skyline.glass_only()

    def test_accepts_nested_lists_and_bools(self):
        board = [[False] * 8 for _ in range(5)]
        board[4][6] = board[4][7] = True
        board[3][7] = True
        assert to_skyline(board) == Skyline((0, 0, 0, 1, 2))

    def test_skyline_to_board_inverse(self):
        for skyline in all_skylines():
            assert to_skyline(skyline_to_board(skyline)) == skyline

    def test_wrong_shape_rejected(self):
        with pytest.raises(MalformedBoard):
            to_skyline(np.ones((8, 5)))

    def test_gap_in_row_rejected(self, full_board):
        board = full_board.copy()
        board[2, 5] = 0
        with pytest.raises(MalformedBoard):
            to_skyline(board)

    def test_non_monotonic_rejected(self, full_board):
        # Top row keeps more cells than the row below it
        board = full_board.copy()
        board[1, :4] = 0
        with pytest.raises(MalformedBoard):
            to_skyline(board)

    def test_string_cells_rejected(self):
        board = [["0"] * 8] * 4 + [["0"] * 7 + ["1"]]
        with pytest.raises(MalformedBoard):
            to_skyline(board)
        with pytest.raises(MalformedBoard):
            to_skyline([["x"] * 8] * 5)

    def test_float_cells_rejected(self):
        with pytest.raises(MalformedBoard):
            to_skyline(np.ones((5, 8)))

    def test_values_outside_zero_one_rejected(self, full_board):
        board = full_board.copy()
        board[4, 7] = 2
        with pytest.raises(MalformedBoard):
            to_skyline(board)
        board[4, 7] = -1
        with pytest.raises(MalformedBoard):
            to_skyline(board)

    def test_bitmasks_reject_bad_cells(self, full_board):
        board = full_board.copy()
        board[0, 0] = 3
        with pytest.raises(MalformedBoard):
            board_to_bitmasks(board)

    def test_board_not_mutated(self, full_board):
        board = full_board.copy()
        to_skyline(board)
        np.testing.assert_array_equal(board, full_board)


class TestBitmasks:
    """Test wire mask conversion."""

    def test_no_bits_is_full_board(self, full_board):
        np.testing.assert_array_equal(board_from_bitmasks([0] * 5), full_board)

    def test_glass_only_masks(self):
        board = board_from_bitmasks([0xFF, 0xFF, 0xFF, 0xFF, 0xFE])
        assert to_skyline(board) == Skyline.glass_only()

    def test_msb_is_first_column(self):
        board = board_from_bitmasks([0x80, 0, 0, 0, 0])
        assert board[0, 0] == 0
        assert board[0, 1:].all()

    def test_to_bitmasks_inverse(self):
        masks = (0xFF, 0xFE, 0xF8, 0xC0, 0x00)
        assert board_to_bitmasks(board_from_bitmasks(masks)) == masks

    @pytest.mark.parametrize("masks", [
        [0, 0, 0, 0],
        [0, 0, 0, 0, 256],
        [0, 0, -1, 0, 0],
    ])
    def test_bad_masks_rejected(self, masks):
        with pytest.raises(MalformedBoard):
            board_from_bitmasks(masks)
