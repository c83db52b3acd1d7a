from __future__ import annotations
from pathlib import Path
from typing import List, Union

from src.domains.board import Board, MalformedInput


def _ints(tokens: List[str]) -> List[int]:
    out = []
    for tok in tokens:
        try:
            out.append(int(tok))
        except ValueError:
            raise MalformedInput(f"token {tok!r} is not an integer") from None
    return out


def parse_board(text: str) -> Board:
    """Parse 'N' followed by N*N whitespace-separated tiles, row-major."""
    tokens = text.split()
    if not tokens:
        raise MalformedInput("empty puzzle description")
    n = _ints(tokens[:1])[0]
    if n < 2:
        raise MalformedInput(f"dimension must be at least 2, got {n}")
    tiles = _ints(tokens[1:])
    if len(tiles) != n * n:
        raise MalformedInput(f"expected {n * n} tiles for a {n}x{n} board, got {len(tiles)}")
    return Board(tiles)


def read_board(path: Union[str, Path]) -> Board:
    return parse_board(Path(path).read_text())


def format_solution(board_path: List[Board], moves: int) -> str:
    """Console report: move count, then every board of the path."""
    if moves < 0:
        return "No solution possible"
    parts = [f"Minimum number of moves = {moves}"]
    parts.extend(f"{b}\n" for b in board_path)
    return "\n".join(parts)
