"""The n-queens problem, solved with an explicit stack and by recursion."""

from __future__ import annotations

MAX_QUEENS = 20


def _check(n: int) -> None:
    if n > MAX_QUEENS:
        raise ValueError(f"n must not exceed {MAX_QUEENS}")


def _safe(columns: list[int], col: int) -> bool:
    """Whether a queen in the next row at ``col`` is clear of the queens placed so far."""
    row = len(columns)
    return all(c != col and abs(c - col) != row - i for i, c in enumerate(columns))


def solve_with_stack(n: int) -> list[tuple[int, ...]]:
    """Return all solutions; each gives the 1-based column of the queen in rows 1..n."""
    _check(n)
    if n < 1:
        return []
    solutions = []
    stack = [0]
    while stack:
        placed = stack[:-1]
        col = next((j for j in range(stack[-1] + 1, n + 1) if _safe(placed, j)), None)
        if col is None:
            stack.pop()
            continue
        stack[-1] = col
        if len(stack) == n:
            solutions.append(tuple(stack))
        else:
            stack.append(0)
    return solutions


def solve_recursive(n: int) -> list[tuple[int, ...]]:
    """Return all solutions, found by recursive backtracking, in the same order."""
    _check(n)
    if n < 1:
        return []
    solutions: list[tuple[int, ...]] = []
    columns: list[int] = []

    def place() -> None:
        if len(columns) == n:
            solutions.append(tuple(columns))
            return
        for col in range(1, n + 1):
            if _safe(columns, col):
                columns.append(col)
                place()
                columns.pop()

    place()
    return solutions