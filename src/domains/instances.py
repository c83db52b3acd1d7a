from __future__ import annotations
from typing import Sequence
import random

from src.domains.board import Board


def goal_board(n: int) -> Board:
    return Board(list(range(1, n * n)) + [0])


def scramble(n: int, depth: int, seed: int) -> Board:
    """Random walk of 'depth' blank moves from the goal, no immediate backtracks."""
    rng = random.Random(seed)
    b = goal_board(n)
    for _ in range(depth):
        # neighbors() already drops the move that undoes the previous one
        b = rng.choice(list(b.neighbors()))
    # drop the parent chain so the walk can be freed
    return Board(b.tiles)


def inversions(tiles: Sequence[int]) -> int:
    arr = [x for x in tiles if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def parity_solvable(board: Board) -> bool:
    """Solvability rules:
       - N odd: inversions must be even
       - N even: (inversions + blank_row_from_bottom) must be ODD
         (row count is 1-based from the bottom)
    """
    n = board.dimension()
    inv = inversions(board.tiles)
    if n % 2 == 1:
        return (inv % 2) == 0
    blank_row_from_bottom = n - board.blank_index // n
    return ((inv + blank_row_from_bottom) % 2) == 1


def unsolvable_variant(board: Board) -> Board:
    """Opposite-parity copy of a board (its twin)."""
    return board.twin()
