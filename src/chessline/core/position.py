"""Position: one immutable game-state snapshot per ply, plus the move executor."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import NamedTuple

from chessline.core.board import Board
from chessline.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessline.core.move import Move
from chessline.core.pieces import Piece
from chessline.core.types import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
)


class CastleGeometry(NamedTuple):
    right: CastlingRights
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square


CASTLES: dict[tuple[Color, MoveFlag], CastleGeometry] = {
    (Color.WHITE, MoveFlag.CASTLE_LONG): CastleGeometry(
        CastlingRights.WHITE_LONG, E1, C1, A1, D1
    ),
    (Color.WHITE, MoveFlag.CASTLE_SHORT): CastleGeometry(
        CastlingRights.WHITE_SHORT, E1, G1, H1, F1
    ),
    (Color.BLACK, MoveFlag.CASTLE_LONG): CastleGeometry(
        CastlingRights.BLACK_LONG, E8, C8, A8, D8
    ),
    (Color.BLACK, MoveFlag.CASTLE_SHORT): CastleGeometry(
        CastlingRights.BLACK_SHORT, E8, G8, H8, F8
    ),
}

# A move from or onto one of these squares revokes the matching right.
ROOK_CORNERS: dict[Square, CastlingRights] = {
    geometry.rook_from: geometry.right for geometry in CASTLES.values()
}


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess state for one ply: board + side to move + bookkeeping.

    ``source_selection`` and ``status`` belong to the interaction layer (the
    selected square and a human-readable message) but travel with the state
    so a view can render a position on its own.
    """

    board: Board = field(default_factory=Board.initial)
    player: Color = Color.WHITE
    king_pos: tuple[Square, Square] = (E1, E8)
    source_selection: Square | None = None
    status: str = ""
    last_move: tuple[Square, Square] | None = None
    castling: CastlingRights = CastlingRights.ALL
    move_no: int = 1
    fallen_pieces: tuple[str, ...] = ()

    @classmethod
    def from_board(cls, board: Board, **kwargs: object) -> Position:
        """Build a position whose ``king_pos`` is read off *board*."""
        king_pos = (board.king_square(Color.WHITE), board.king_square(Color.BLACK))
        return cls(board=board, king_pos=king_pos, **kwargs)  # type: ignore[arg-type]

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_white_turn(self) -> bool:
        return self.player == Color.WHITE

    def king_square(self, color: Color) -> Square:
        return self.king_pos[int(color)]

    def evolve(self, **changes: object) -> Position:
        """Copy with *changes*; the receiver is left untouched."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    # ── Move execution ───────────────────────────────────────────────────

    def make_move(self, move: Move) -> Position:
        """Return the position after *move*.

        *move* must come from ``MoveGenerator.classify`` on this position;
        no legality checking happens here.
        """
        board = self.board
        piece = board[move.src]
        if piece is None:
            raise ValueError(f"No piece on {move.src}")

        captured_sq = move.dest
        if move.flag == MoveFlag.EN_PASSANT:
            # The captured pawn sits one row behind the destination
            captured_sq = move.dest + 8 * piece.color.direction
        captured = board[captured_sq]

        placed: Piece = piece
        if move.flag == MoveFlag.PROMOTION and move.promotion is not None:
            placed = Piece.create(piece.color, move.promotion)

        changes: dict[Square, Piece | None] = {move.src: None}
        if captured_sq != move.dest:
            changes[captured_sq] = None
        changes[move.dest] = placed

        if move.is_castle:
            geometry = CASTLES[(piece.color, move.flag)]
            changes[geometry.rook_from] = None
            changes[geometry.rook_to] = board[geometry.rook_from]

        king_pos = self.king_pos
        if piece.piece_type == PieceType.KING:
            king_pos = (
                (move.dest, king_pos[1])
                if piece.color == Color.WHITE
                else (king_pos[0], move.dest)
            )

        fallen = self.fallen_pieces
        if captured is not None:
            fallen = fallen + (captured.name,)

        return Position(
            board=board.with_changes(changes),
            player=self.player.opposite,
            king_pos=king_pos,
            source_selection=None,
            status="",
            last_move=(move.src, move.dest),
            castling=self._castling_after(move, piece),
            move_no=self.move_no + 1 if self.player == Color.BLACK else self.move_no,
            fallen_pieces=fallen,
        )

    def _castling_after(self, move: Move, piece: Piece) -> CastlingRights:
        rights = self.castling
        if piece.piece_type == PieceType.KING:
            rights &= ~CastlingRights.both(piece.color)
        for sq in (move.src, move.dest):
            if sq in ROOK_CORNERS:
                rights &= ~ROOK_CORNERS[sq]
        return rights
