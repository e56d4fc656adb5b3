"""Enumerate every simple path through a grid maze by depth-first search with a stack."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

Cell = tuple[int, int]

# up, right, down, left
_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _is_open(maze: Sequence[Sequence[int]], cell: Cell) -> bool:
    i, j = cell
    return 0 <= i < len(maze) and 0 <= j < len(maze[i]) and maze[i][j] == 0


def _walk(maze: Sequence[Sequence[int]], start: Cell, end: Cell) -> Iterator[list[Cell]]:
    stack: list[list] = [[start, -1]]
    on_path = {start}
    while stack:
        frame = stack[-1]
        cell = frame[0]
        if cell == end:
            yield [entry[0] for entry in stack]
            on_path.discard(cell)
            stack.pop()
            continue
        for direction in range(frame[1] + 1, len(_MOVES)):
            di, dj = _MOVES[direction]
            nxt = (cell[0] + di, cell[1] + dj)
            if _is_open(maze, nxt) and nxt not in on_path:
                frame[1] = direction
                stack.append([nxt, -1])
                on_path.add(nxt)
                break
        else:
            on_path.discard(cell)
            stack.pop()


def all_paths(
    maze: Sequence[Sequence[int]], start: Cell, end: Cell
) -> list[list[Cell]]:
    """Return every simple path from ``start`` to ``end``.

    Cells holding 0 are open, anything else is a wall. Neighbours are tried
    in the order up, right, down, left, which fixes the order of the paths.
    """
    return list(_walk(maze, tuple(start), tuple(end)))


def shortest_path(
    maze: Sequence[Sequence[int]], start: Cell, end: Cell
) -> Optional[list[Cell]]:
    """Return the first shortest path found, or None when the exit is unreachable."""
    return min(_walk(maze, tuple(start), tuple(end)), key=len, default=None)