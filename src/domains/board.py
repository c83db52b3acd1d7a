from __future__ import annotations
from typing import Iterator, Optional, Sequence, Tuple
import math

import numpy as np

Tiles = Tuple[int, ...]  # row-major, 0 is blank


class MalformedInput(ValueError):
    """Tile data is not an N×N permutation of 0..N²-1."""


class DimensionMismatch(ValueError):
    """Two boards of different N were compared."""


def _validate(tiles: Sequence[int]) -> Tiles:
    out = []
    for t in tiles:
        # bool is an int subclass but never a tile
        if isinstance(t, bool) or not isinstance(t, (int, np.integer)):
            raise MalformedInput(f"tile {t!r} is not an integer")
        out.append(int(t))
    size = len(out)
    n = math.isqrt(size)
    if n < 2 or n * n != size:
        raise MalformedInput(f"{size} tiles do not form an N×N board (N >= 2)")
    if sorted(out) != list(range(size)):
        missing = sorted(set(range(size)) - set(out))
        raise MalformedInput(f"tiles are not a permutation of 0..{size - 1} (missing {missing})")
    return tuple(out)


class Board:
    """
    Immutable N×N sliding-tile configuration.

    Boards made by neighbors() remember the board they came from. That link only
    points backwards: it lets manhattan() update the parent's sum in O(1) and lets
    neighbors() skip the move that would undo the last one.
    """
    __slots__ = ("_tiles", "_n", "_blank", "_parent", "_hamming", "_manhattan")

    def __init__(self, tiles: Sequence[int]):
        self._init(_validate(tiles), None)

    def _init(self, tiles: Tiles, parent: Optional[Board]) -> None:
        self._tiles = tiles
        self._n = math.isqrt(len(tiles))
        self._blank = tiles.index(0)
        self._parent = parent
        self._hamming = -1
        self._manhattan = -1

    @classmethod
    def _derive(cls, tiles: Tiles, parent: Optional[Board]) -> Board:
        # tiles come from an already valid board, skip validation
        b = cls.__new__(cls)
        b._init(tiles, parent)
        return b

    @classmethod
    def from_grid(cls, blocks) -> Board:
        """Build a board from an N×N grid or a flat sequence of N² tiles."""
        try:
            arr = np.asarray(blocks)
        except ValueError as e:  # ragged nested lists
            raise MalformedInput(f"grid is not rectangular: {e}") from e
        if arr.dtype == object:
            raise MalformedInput("grid is not rectangular")
        if arr.ndim == 2:
            if arr.shape[0] != arr.shape[1]:
                raise MalformedInput(f"grid is {arr.shape[0]}x{arr.shape[1]}, expected a square")
        elif arr.ndim != 1:
            raise MalformedInput(f"expected a 1-D or 2-D grid, got {arr.ndim} dimensions")
        if arr.size and not np.issubdtype(arr.dtype, np.integer):
            raise MalformedInput(f"tiles must be integers, got dtype {arr.dtype}")
        return cls(arr.ravel().tolist())

    # ---------- accessors ----------
    @property
    def tiles(self) -> Tiles:
        return self._tiles

    @property
    def blank_index(self) -> int:
        return self._blank

    @property
    def parent(self) -> Optional[Board]:
        return self._parent

    def dimension(self) -> int:
        return self._n

    def rows(self) -> Tuple[Tiles, ...]:
        n = self._n
        return tuple(self._tiles[r * n:(r + 1) * n] for r in range(n))

    # ---------- heuristics ----------
    def hamming(self) -> int:
        """Number of tiles (blank excluded) out of place."""
        if self._hamming < 0:
            last = len(self._tiles) - 1
            self._hamming = sum(
                1 for i, t in enumerate(self._tiles)
                if t != 0 and t != (0 if i == last else i + 1)
            )
        return self._hamming

    def _distance(self, idx: int, goal_idx: int) -> int:
        r1, c1 = divmod(idx, self._n)
        r2, c2 = divmod(goal_idx, self._n)
        return abs(r1 - r2) + abs(c1 - c2)

    def manhattan(self) -> int:
        """Sum of Manhattan distances to goal positions (blank ignored)."""
        if self._manhattan >= 0:
            return self._manhattan
        if self._parent is not None:
            # One tile moved from our blank cell into the parent's blank cell.
            before = self._blank
            after = self._parent._blank
            goal_idx = self._tiles[after] - 1
            delta = self._distance(after, goal_idx) - self._distance(before, goal_idx)
            self._manhattan = self._parent.manhattan() + delta
        else:
            dist = 0
            for idx, tile in enumerate(self._tiles):
                if tile == 0:
                    continue
                dist += self._distance(idx, tile - 1)
            self._manhattan = dist
        return self._manhattan

    def is_goal(self) -> bool:
        return self.hamming() == 0

    # ---------- derived boards ----------
    def twin(self) -> Board:
        """Swap the first two tiles of a row without the blank. Flips permutation parity."""
        n = self._n
        blank_row = self._blank // n
        row = blank_row + 1
        if row >= n:
            row = blank_row - 1
        i, j = row * n, row * n + 1
        lst = list(self._tiles)
        lst[i], lst[j] = lst[j], lst[i]
        return Board._derive(tuple(lst), None)

    def neighbors(self) -> Iterator[Board]:
        """Yield boards one slide away (north, south, west, east), never the parent."""
        n = self._n
        z = self._blank
        candidates = []
        if z >= n:            candidates.append(z - n)
        if z + n < n * n:     candidates.append(z + n)
        if z % n != 0:        candidates.append(z - 1)
        if (z + 1) % n != 0:  candidates.append(z + 1)
        for j in candidates:
            lst = list(self._tiles)
            lst[z], lst[j] = lst[j], lst[z]
            tiles = tuple(lst)
            if self._parent is not None and tiles == self._parent._tiles:
                continue
            yield Board._derive(tiles, self)

    # ---------- equality ----------
    def equals(self, other: Board) -> bool:
        if self is other:
            return True
        if self._n != other._n:
            raise DimensionMismatch(f"cannot compare {self._n}x{self._n} with {other._n}x{other._n}")
        return self._tiles == other._tiles

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._tiles)

    def __str__(self) -> str:
        n = self._n
        lines = [str(n)]
        for r in self.rows():
            lines.append("".join(f"{t:2d} " for t in r))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({list(self._tiles)!r})"
