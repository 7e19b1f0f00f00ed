"""Tests for FEN, move names and movetext."""

import pytest

from chessline.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessline.core.move import Move
from chessline.core.move_generator import MoveGenerator
from chessline.core.notation import (
    STARTING_FEN,
    FenError,
    find_move,
    move_name,
    move_to_san,
    movetext_from_names,
    names_from_movetext,
    position_from_fen,
    position_to_fen,
)
from chessline.core.pieces import King, Knight, Pawn, Queen, Rook
from chessline.core.types import (
    A8, C1, D5, D6, D8, E1, E2, E4, E5, E8, F3, G1, H4,
)


class TestFenParsing:
    def test_starting_fields(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.player == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.last_move is None
        assert pos.move_no == 1
        assert pos.king_pos == (E1, E8)
        assert pos.fallen_pieces == ()

    def test_top_row_is_rank_eight(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board[A8] == Rook(Color.BLACK)
        assert pos.board[D8] == Queen(Color.BLACK)

    def test_partial_castling(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert pos.castling == CastlingRights.WHITE_SHORT | CastlingRights.BLACK_LONG

    def test_en_passant_becomes_last_move(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        pos = position_from_fen(fen)
        assert pos.player == Color.BLACK
        assert pos.last_move == (E2, E4)

    def test_clocks_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 b - -")
        assert pos.move_no == 1
        assert pos.player == Color.BLACK

    @pytest.mark.parametrize(
        "fen",
        [
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w KQkq - 0 1",
            "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KKkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e4 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e6 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - x 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQ1BNR w kq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBKKBNR w kq - 0 1",
        ],
    )
    def test_malformed_fen_raises(self, fen: str) -> None:
        with pytest.raises(FenError):
            position_from_fen(fen)

    def test_fen_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            position_from_fen("not a fen")


class TestFenSerialisation:
    def test_starting_position(self) -> None:
        assert position_to_fen(position_from_fen(STARTING_FEN)) == STARTING_FEN

    def test_after_double_step(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        pos = pos.make_move(MoveGenerator(pos).classify(E2, E4))
        assert position_to_fen(pos) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )

    def test_no_rights(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 12"
        assert position_to_fen(position_from_fen(fen)) == fen


class TestMoveName:
    def test_pawn_push(self) -> None:
        assert move_name(Pawn(Color.WHITE), False, None, False, E2, E4) == "e4"

    def test_pawn_capture_names_source_file(self) -> None:
        assert move_name(Pawn(Color.WHITE), True, None, False, E4, D5) == "exd5"

    def test_piece_move_uses_uppercase_letter(self) -> None:
        assert move_name(Knight(Color.BLACK), False, None, False, G1, F3) == "Nf3"

    def test_capture_and_check(self) -> None:
        assert move_name(Queen(Color.WHITE), True, None, True, D8, H4) == "Qxh4+"

    def test_castles(self) -> None:
        king = King(Color.WHITE)
        assert move_name(king, False, MoveFlag.CASTLE_SHORT, False, E1, G1) == "O-O"
        assert move_name(king, False, MoveFlag.CASTLE_LONG, True, E1, C1) == "O-O-O+"

    def test_promotion(self) -> None:
        pawn = Pawn(Color.WHITE)
        assert move_name(pawn, False, None, True, A8 + 8, A8, PieceType.QUEEN) == "a8=Q+"

    def test_deterministic(self) -> None:
        args = (Rook(Color.WHITE), True, None, False, A8 + 8, A8)
        assert move_name(*args) == move_name(*args)


class TestMoveToSan:
    def test_opening_moves(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert move_to_san(pos, Move(E2, E4, MoveFlag.DOUBLE_PAWN)) == "e4"
        assert move_to_san(pos, Move(G1, F3)) == "Nf3"

    def test_check_suffix(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq g3 0 2"
        )
        move = MoveGenerator(pos).classify(D8, H4)
        assert move is not None
        assert move_to_san(pos, move) == "Qh4+"

    def test_en_passant_is_a_capture(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        move = MoveGenerator(pos).classify(E5, D6)
        assert move_to_san(pos, move) == "exd6"

    def test_castle_name(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        move = MoveGenerator(pos).classify(E8, E8 + 2)
        assert move_to_san(pos, move) == "O-O"

    def test_promotion_with_check(self) -> None:
        pos = position_from_fen("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        move = MoveGenerator(pos).classify(A8 + 8, A8)
        assert move_to_san(pos, move) == "a8=Q+"

    def test_empty_source(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        with pytest.raises(ValueError):
            move_to_san(pos, Move(E4, E5))


class TestFindMove:
    def test_finds_named_move(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert find_move(pos, "Nf3") == Move(G1, F3)
        assert find_move(pos, "e4") == Move(E2, E4, MoveFlag.DOUBLE_PAWN)

    def test_unknown_name(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert find_move(pos, "e5") is None
        assert find_move(pos, "Qh5") is None


class TestMovetext:
    def test_numbered(self) -> None:
        assert movetext_from_names(["e4", "e5", "Nf3"]) == "1. e4 e5 2. Nf3"

    def test_starting_with_black(self) -> None:
        assert movetext_from_names(["e5", "Nf3"], first_ply=1) == "1... e5 2. Nf3"

    def test_parse_skips_numbers_comments_and_result(self) -> None:
        text = "1. e4 e5 2. Nf3 {main line} Nc6 (2... d6) 3.Bb5 a6! 1-0"
        assert names_from_movetext(text) == ["e4", "e5", "Nf3", "Nc6", "Bb5", "a6"]

    def test_parse_black_continuation(self) -> None:
        assert names_from_movetext("5... Qh4+ 6. g3") == ["Qh4+", "g3"]
