"""Tests for Board."""

import pytest

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceKind, PieceType
from chesscore.core.errors import CellOutOfBoundsError, LayoutError, OccupiedCellError
from chesscore.core.layout import STANDARD_LAYOUT, layout_from_rows
from chesscore.core.piece import Piece
from chesscore.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
)


class TestBoardInitial:
    def test_white_king_position(self, board: Board) -> None:
        assert board.kind_at(E1) == PieceKind.WHITE_KING

    def test_black_king_position(self, board: Board) -> None:
        assert board.kind_at(E8) == PieceKind.BLACK_KING

    def test_white_back_rank(self, board: Board) -> None:
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for cell, pt in expected:
            assert board.kind_at(cell) == PieceKind.of(Color.WHITE, pt), f"Mismatch at {cell}"

    def test_black_back_rank(self, board: Board) -> None:
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for cell, pt in expected:
            assert board.kind_at(cell) == PieceKind.of(Color.BLACK, pt), f"Mismatch at {cell}"

    def test_white_pawns(self, board: Board) -> None:
        pawns = board.pieces(Color.WHITE, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(rank == 1 for _, rank in pawns)

    def test_black_pawns(self, board: Board) -> None:
        pawns = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(rank == 6 for _, rank in pawns)

    def test_empty_middle(self, board: Board) -> None:
        for rank in range(2, 6):
            for file in range(8):
                assert board[(file, rank)] is None

    def test_piece_count(self, board: Board) -> None:
        assert len(board) == 32

    def test_kinds_mirror_layout(self, board: Board) -> None:
        assert board.kinds() == STANDARD_LAYOUT

    def test_every_piece_is_distinct(self, board: Board) -> None:
        pieces = [piece for _, piece in board.occupied()]
        assert len({id(p) for p in pieces}) == len(pieces)

    def test_pawns_start_unmoved(self, board: Board) -> None:
        for cell in board.pieces(Color.WHITE, PieceType.PAWN):
            piece = board[cell]
            assert piece is not None and not piece.has_moved


class TestInitializeLayouts:
    def test_orientation_maps_first_row_to_top_rank(self) -> None:
        layout = layout_from_rows(["k..", "...", "..K"])
        board = Board.initialize(layout, 3)
        assert board.kind_at((0, 2)) == PieceKind.BLACK_KING
        assert board.kind_at((2, 0)) == PieceKind.WHITE_KING
        assert len(board) == 2

    def test_empty_entries_leave_cells_unoccupied(self) -> None:
        board = Board.initialize(layout_from_rows(["..", ".."]), 2)
        assert len(board) == 0
        assert all(board.is_empty((f, r)) for f in range(2) for r in range(2))

    def test_too_few_rows(self) -> None:
        with pytest.raises(LayoutError):
            Board.initialize(STANDARD_LAYOUT[:7], 8)

    def test_ragged_row(self) -> None:
        layout = list(STANDARD_LAYOUT)
        layout[3] = layout[3][:5]
        with pytest.raises(LayoutError):
            Board.initialize(layout, 8)

    def test_size_mismatch(self) -> None:
        with pytest.raises(LayoutError):
            Board.initialize(STANDARD_LAYOUT, 10)

    def test_non_positive_size(self) -> None:
        with pytest.raises(LayoutError):
            Board(0)


class TestBoardOperations:
    def test_place_and_get(self, empty_board: Board) -> None:
        piece = Piece(PieceKind.WHITE_PAWN)
        empty_board.place(piece, E4)
        assert empty_board[E4] is piece
        assert empty_board.is_empty(E2)
        assert empty_board.location_of(piece) == E4

    def test_place_on_occupied_cell_fails(self, board: Board) -> None:
        before = board[E2]
        with pytest.raises(OccupiedCellError):
            board.place(Piece(PieceKind.BLACK_QUEEN), E2)
        assert board[E2] is before

    def test_remove_returns_occupant(self, board: Board) -> None:
        piece = board[E2]
        assert board.remove(E2) is piece
        assert board[E2] is None
        assert piece not in board
        assert len(board) == 31

    def test_remove_empty_cell_is_noop(self, board: Board) -> None:
        before = board.kinds()
        assert board.remove(E4) is None
        assert board.remove(E4) is None
        assert board.kinds() == before
        assert len(board) == 32

    def test_transient_double_reference(self, board: Board) -> None:
        piece = board[E2]
        assert piece is not None
        board.place(piece, E4)
        assert board[E2] is piece and board[E4] is piece
        assert board.remove(E2) is piece
        assert piece in board
        assert board.location_of(piece) == E4
        assert len(board) == 32

    def test_stale_slot_cleared_when_piece_leaves(self, empty_board: Board) -> None:
        piece = Piece(PieceKind.WHITE_ROOK)
        empty_board.place(piece, A1)
        empty_board.place(piece, A2)
        assert empty_board.remove(A2) is piece
        assert empty_board[A1] is None
        assert empty_board.is_empty(A1)
        assert list(empty_board.occupied()) == []
        assert len(empty_board) == 0
        assert piece not in empty_board

    def test_stale_slot_does_not_leak_into_new_piece(self, empty_board: Board) -> None:
        piece = Piece(PieceKind.BLACK_BISHOP)
        empty_board.place(piece, A1)
        empty_board.place(piece, A2)
        empty_board.remove(A2)
        newcomer = Piece(PieceKind.WHITE_KNIGHT)
        empty_board.place(newcomer, A1)
        assert empty_board[A1] is newcomer
        assert len(empty_board) == 1

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (8, 0), (0, 8), (99, 99)])
    def test_out_of_bounds_access(self, board: Board, cell: tuple[int, int]) -> None:
        with pytest.raises(CellOutOfBoundsError):
            board[cell]
        with pytest.raises(CellOutOfBoundsError):
            board.remove(cell)
        with pytest.raises(CellOutOfBoundsError):
            board.place(Piece(PieceKind.WHITE_ROOK), cell)

    def test_pieces_by_color(self, board: Board) -> None:
        assert len(board.pieces(Color.WHITE)) == 16
        assert board.pieces(Color.BLACK, PieceType.KING) == [E8]

    def test_location_of_foreign_piece(self, board: Board) -> None:
        assert board.location_of(Piece(PieceKind.WHITE_KING)) is None


class TestBounds:
    @pytest.mark.parametrize("file,rank", [(0, 0), (7, 7), (3, 4), (0, 7)])
    def test_inside(self, file: int, rank: int) -> None:
        assert Board.is_in_bounds(file, rank)

    @pytest.mark.parametrize("file,rank", [(-1, 0), (0, -1), (8, 0), (0, 8), (-5, 12)])
    def test_outside(self, file: int, rank: int) -> None:
        assert not Board.is_in_bounds(file, rank)

    def test_custom_size(self) -> None:
        assert Board.is_in_bounds(9, 9, size=10)
        assert not Board.is_in_bounds(10, 0, size=10)

    def test_contains_uses_board_size(self) -> None:
        small = Board(4)
        assert small.contains((3, 3))
        assert not small.contains((4, 0))


class TestRepr:
    def test_initial_diagram(self, board: Board) -> None:
        lines = repr(board).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"

    def test_wide_board_file_labels(self) -> None:
        lines = repr(Board(28)).splitlines()
        assert lines[-1].split()[-3:] == ["z", "aa", "ab"]
