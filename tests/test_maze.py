from dstructs.maze import all_paths, shortest_path

MAZE = [
    [1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1, 1],
    [1, 0, 1, 0, 0, 1],
    [1, 0, 0, 0, 1, 1],
    [1, 1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1],
]


def _adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_paths_are_valid_simple_walks():
    paths = all_paths(MAZE, (1, 1), (4, 4))
    assert paths
    for path in paths:
        assert path[0] == (1, 1)
        assert path[-1] == (4, 4)
        assert len(set(path)) == len(path)
        assert all(MAZE[i][j] == 0 for i, j in path)
        assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))


def test_paths_are_distinct():
    paths = all_paths(MAZE, (1, 1), (4, 4))
    assert len({tuple(p) for p in paths}) == len(paths)


def test_shortest_is_first_minimal_path():
    paths = all_paths(MAZE, (1, 1), (4, 4))
    best = shortest_path(MAZE, (1, 1), (4, 4))
    minimal = min(len(p) for p in paths)
    assert len(best) == minimal
    assert best == next(p for p in paths if len(p) == minimal)


def test_input_maze_is_not_modified():
    snapshot = [row[:] for row in MAZE]
    all_paths(MAZE, (1, 1), (4, 4))
    assert MAZE == snapshot


def test_single_corridor():
    maze = [[1, 1, 1], [1, 0, 1], [1, 0, 1], [1, 1, 1]]
    assert all_paths(maze, (1, 1), (2, 1)) == [[(1, 1), (2, 1)]]


def test_direction_order_fixes_path_order():
    maze = [[1, 1, 1, 1], [1, 0, 0, 1], [1, 0, 0, 1], [1, 1, 1, 1]]
    assert all_paths(maze, (1, 1), (2, 2)) == [
        [(1, 1), (1, 2), (2, 2)],
        [(1, 1), (2, 1), (2, 2)],
    ]


def test_unreachable_exit():
    maze = [[1, 1, 1, 1], [1, 0, 1, 1], [1, 1, 0, 1], [1, 1, 1, 1]]
    assert all_paths(maze, (1, 1), (2, 2)) == []
    assert shortest_path(maze, (1, 1), (2, 2)) is None


def test_start_equals_end():
    assert all_paths(MAZE, (2, 3), (2, 3)) == [[(2, 3)]]