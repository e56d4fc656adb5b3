from dstructs.benchmark import (
    SORTS,
    compare_sorts,
    is_sorted,
    main,
    random_keys,
    time_sort,
)


def test_random_keys_range_and_length():
    keys = random_keys(500, seed=1)
    assert len(keys) == 500
    assert all(1 <= k <= 99 for k in keys)


def test_random_keys_reproducible():
    first = random_keys(50, seed=7)
    second = random_keys(50, seed=7)
    other = random_keys(50, seed=8)
    assert len(first) == 50
    assert second == first
    assert other != first


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3])
    assert not is_sorted([2, 1])
    assert is_sorted([])


def test_time_sort_correct_and_input_untouched():
    data = [3, 1, 2]
    timing = time_sort(sorted, data)
    assert timing.correct is True
    assert timing.seconds >= 0
    assert data == [3, 1, 2]


def test_time_sort_detects_wrong_result():
    assert time_sort(lambda items: items, [3, 1, 2]).correct is False


def test_time_sort_accepts_in_place_sort():
    assert time_sort(lambda items: items.sort(), [5, 4, 3]).correct is True


def test_compare_sorts_all_correct():
    results = compare_sorts(200, seed=3)
    assert [name for name, _ in results] == [name for name, _ in SORTS]
    assert all(timing.correct for _, timing in results)


def test_main_prints_table(capsys):
    assert main(["--size", "100", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "wrong" not in out
    assert out.count("correct") == len(SORTS)