"""FEN parsing and serialization."""

from __future__ import annotations

from chessline.core.board import Board
from chessline.core.enums import CastlingRights, Color, PieceType
from chessline.core.pieces import Piece
from chessline.core.position import Position
from chessline.core.types import Square, make_square, parse_square, row_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_SHORT,
    "Q": CastlingRights.WHITE_LONG,
    "k": CastlingRights.BLACK_SHORT,
    "q": CastlingRights.BLACK_LONG,
}


class FenError(ValueError):
    """Malformed FEN; no position is produced."""


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The en passant field, when present, is turned back into ``last_move``
    (the double step that created it) so en passant stays playable.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise FenError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement (first rank in the string is the top row)
    rows = placement.split("/")
    if len(rows) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    squares: dict[Square, Piece | None] = {}
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    squares[make_square(col, row)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FenError(f"{exc}: {fen!r}") from None
                col += 1
            if col > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")
    board = Board(squares)

    for color in Color:
        kings = board.pieces(color, PieceType.KING)
        if len(kings) != 1:
            raise FenError(
                f"Invalid FEN: expected one {color} king, found {len(kings)}: {fen!r}"
            )

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise FenError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    last_move: tuple[Square, Square] | None = None
    if ep_part != "-":
        last_move = _double_step_from_target(board, side, ep_part)

    # 5–6. Clocks (optional); the halfmove clock is validated but not tracked
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise FenError(f"Invalid FEN clock field: {fen!r}") from None
    if halfmove < 0:
        raise FenError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    if fullmove < 1:
        raise FenError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return Position.from_board(
        board,
        player=side,
        last_move=last_move,
        castling=castling,
        move_no=fullmove,
    )


def _double_step_from_target(
    board: Board, side: Color, ep_part: str
) -> tuple[Square, Square]:
    try:
        target = parse_square(ep_part)
    except ValueError:
        raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from None

    # White to move: black just stepped to rank 5, target on rank 6 (row 2)
    mover = side.opposite
    expected_row = 2 if side == Color.WHITE else 5
    if row_of(target) != expected_row:
        raise FenError(f"Invalid FEN en-passant square for side-to-move: {ep_part!r}")

    src = target + 8 * mover.direction
    dest = target - 8 * mover.direction
    pawn = board[dest]
    if pawn is None or pawn.piece_type != PieceType.PAWN or pawn.color != mover:
        raise FenError(f"Invalid FEN en-passant square (no pawn): {ep_part!r}")
    return src, dest


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN (halfmove clock is always 0)."""
    # 1. Board
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board[make_square(col, row)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.name
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.player == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-"
    if pos.last_move is not None:
        src, dest = pos.last_move
        moved = pos.board[dest]
        if (
            moved is not None
            and moved.piece_type == PieceType.PAWN
            and abs(dest - src) == 16
        ):
            ep_str = square_name((src + dest) // 2)

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 {pos.move_no}"
