"""Move names in standard algebraic style.

Grammar::

    name      := castle check? | piece? from_file? capture? square promotion? check?
    castle    := "O-O" | "O-O-O"
    piece     := "N" | "B" | "R" | "Q" | "K"        (omitted for pawns)
    from_file := "a".."h"                            (pawn captures only)
    capture   := "x"
    square    := "a".."h" "1".."8"
    promotion := "=" ("N" | "B" | "R" | "Q")
    check     := "+"

Names carry no disambiguation, so a name depends only on the move itself and
never on where the other pieces stand.
"""

from __future__ import annotations

from chessline.core.enums import MoveFlag, PieceType
from chessline.core.move import Move
from chessline.core.move_generator import MoveGenerator, is_check
from chessline.core.pieces import Piece
from chessline.core.position import Position
from chessline.core.types import Square, col_of, square_name

_CASTLE_NAMES: dict[MoveFlag, str] = {
    MoveFlag.CASTLE_SHORT: "O-O",
    MoveFlag.CASTLE_LONG: "O-O-O",
}
_PROMO_LETTERS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
}


def move_name(
    piece: Piece,
    captured: bool,
    castle: MoveFlag | None,
    check: bool,
    src: Square,
    dest: Square,
    promotion: PieceType | None = None,
) -> str:
    """Name a move from its ingredients; deterministic and side-effect free."""
    suffix = "+" if check else ""
    if castle is not None:
        return _CASTLE_NAMES[castle] + suffix

    name = ""
    if piece.piece_type == PieceType.PAWN:
        if captured:
            name += chr(ord("a") + col_of(src))
    else:
        name += piece.name.upper()

    if captured:
        name += "x"
    name += square_name(dest)

    if promotion is not None:
        name += "=" + _PROMO_LETTERS[promotion]
    return name + suffix


def move_to_san(position: Position, move: Move) -> str:
    """Name a legal *move* given the *position* before the move."""
    piece = position.board[move.src]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.src)}")

    captured = (
        position.board[move.dest] is not None or move.flag == MoveFlag.EN_PASSANT
    )
    after = position.make_move(move)
    opponent = piece.color.opposite
    check = is_check(after.board, after.king_square(opponent), opponent)

    return move_name(
        piece,
        captured,
        move.flag if move.is_castle else None,
        check,
        move.src,
        move.dest,
        move.promotion,
    )


def find_move(
    position: Position, name: str, promotion_type: PieceType = PieceType.QUEEN
) -> Move | None:
    """The legal move in *position* whose name is *name*, if any.

    Without disambiguation two moves may share a name; the first one in
    square order wins.
    """
    for move in MoveGenerator(position, promotion_type).generate_legal_moves():
        if move_to_san(position, move) == name:
            return move
    return None
