"""Move legality and check detection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from chessline.core.enums import Color, MoveFlag, PieceType
from chessline.core.move import Move
from chessline.core.pieces import Piece, Rook
from chessline.core.position import CASTLES
from chessline.core.types import Square, col_of, is_valid_square, row_of

if TYPE_CHECKING:
    from chessline.core.board import Board
    from chessline.core.position import Position

_CASTLE_FLAGS: tuple[MoveFlag, MoveFlag] = (MoveFlag.CASTLE_SHORT, MoveFlag.CASTLE_LONG)


def is_path_clear(board: Board, path: Iterable[Square]) -> bool:
    """Whether every square on *path* is empty."""
    return all(board[sq] is None for sq in path)


def is_check(board: Board, king_sq: Square, color: Color) -> bool:
    """Whether the *color* king on *king_sq* is attacked.

    Scans every enemy piece on the board; there are no incremental attack
    maps, which keeps the routine usable on scratch boards.
    """
    for sq, piece in board:
        if piece.color == color:
            continue
        if piece.is_move_possible(sq, king_sq, True) and is_path_clear(
            board, piece.src_to_dest_path(sq, king_sq)
        ):
            return True
    return False


class MoveGenerator:
    """Validates candidate moves for the side to move in *position*.

    ``classify`` is the single decision point: a move is legal when the piece
    geometry allows it (or it is en passant / castling), the path is empty,
    and the mover's king is not left in check.
    """

    __slots__ = ("_position", "_promotion_type")

    def __init__(
        self, position: Position, promotion_type: PieceType = PieceType.QUEEN
    ) -> None:
        self._position = position
        self._promotion_type = promotion_type

    # ── Public API ───────────────────────────────────────────────────────

    def classify(self, src: Square, dest: Square) -> Move | None:
        """Return the :class:`Move` for *src* → *dest*, or ``None`` if illegal."""
        if not (is_valid_square(src) and is_valid_square(dest)) or src == dest:
            return None

        pos = self._position
        board = pos.board
        piece = board[src]
        if piece is None or piece.color != pos.player:
            return None
        target = board[dest]
        if target is not None and target.color == piece.color:
            return None

        possible = piece.is_move_possible(src, dest, target is not None)
        path = piece.src_to_dest_path(src, dest)
        en_passant = self.is_en_passant(piece, src, dest)
        castle = self.castle_flag(piece, src, dest)
        if castle is not None:
            geometry = CASTLES[(piece.color, castle)]
            low, high = sorted((geometry.king_from, geometry.rook_from))
            path = tuple(range(low + 1, high))

        if not (possible or en_passant or castle is not None):
            return None
        if not is_path_clear(board, path):
            return None

        move = self._build_move(piece, src, dest, en_passant, castle)
        if self._leaves_king_in_check(move, piece.color):
            return None
        return move

    def legal_destinations(self, src: Square) -> list[Square]:
        """Squares the piece on *src* may legally move to."""
        return [dest for dest in range(64) if self.classify(src, dest) is not None]

    def generate_legal_moves(self) -> list[Move]:
        moves: list[Move] = []
        for src in self._position.board.all_pieces(self._position.player):
            for dest in range(64):
                move = self.classify(src, dest)
                if move is not None:
                    moves.append(move)
        return moves

    def is_in_check(self, color: Color) -> bool:
        pos = self._position
        return is_check(pos.board, pos.king_square(color), color)

    # ── Special moves ────────────────────────────────────────────────────

    def is_en_passant(self, piece: Piece, src: Square, dest: Square) -> bool:
        """Pawn capture onto the empty square behind a pawn that just double-stepped."""
        pos = self._position
        if piece.piece_type != PieceType.PAWN or pos.last_move is None:
            return False

        last_src, last_dest = pos.last_move
        victim = pos.board[last_dest]
        if (
            victim is None
            or victim.piece_type != PieceType.PAWN
            or victim.color == piece.color
            or abs(last_dest - last_src) != 16
        ):
            return False

        return (
            pos.board[dest] is None
            and row_of(src) == row_of(last_dest)
            and abs(col_of(src) - col_of(last_dest)) == 1
            and dest == last_dest - 8 * piece.color.direction
        )

    def castle_flag(self, piece: Piece, src: Square, dest: Square) -> MoveFlag | None:
        """Castling flag when a king on its home square steps two files toward
        a rook that still holds its castling right."""
        if piece.piece_type != PieceType.KING:
            return None

        pos = self._position
        for flag in _CASTLE_FLAGS:
            geometry = CASTLES[(piece.color, flag)]
            if (
                src == geometry.king_from
                and dest == geometry.king_to
                and pos.castling & geometry.right
                and pos.board[geometry.rook_from] == Rook(piece.color)
            ):
                return flag
        return None

    # ── Internal ─────────────────────────────────────────────────────────

    def _build_move(
        self,
        piece: Piece,
        src: Square,
        dest: Square,
        en_passant: bool,
        castle: MoveFlag | None,
    ) -> Move:
        if castle is not None:
            return Move(src, dest, castle)
        if piece.piece_type != PieceType.PAWN:
            return Move(src, dest)
        if en_passant:
            return Move(src, dest, MoveFlag.EN_PASSANT)
        if abs(dest - src) == 16:
            return Move(src, dest, MoveFlag.DOUBLE_PAWN)
        if row_of(dest) in (0, 7):
            return Move(src, dest, MoveFlag.PROMOTION, self._promotion_type)
        return Move(src, dest)

    def _leaves_king_in_check(self, move: Move, color: Color) -> bool:
        after = self._position.make_move(move)
        return is_check(after.board, after.king_square(color), color)
