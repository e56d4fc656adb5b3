import random

import pytest

from dstructs.sorting import (
    binary_insert_sort,
    bubble_sort,
    heap_repr,
    heap_sort,
    insert_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    select_sort,
    shell_sort,
    sort_spans,
)

DESCENDING = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
MIXED = [6, 8, 7, 9, 0, 1, 3, 2, 4, 5]
MERGE_DATA = [18, 2, 20, 34, 12, 32, 6, 16, 5, 8, 1]


@pytest.mark.parametrize("data", [DESCENDING, MIXED, MERGE_DATA, [], [7], [3, 3, 1, 3]])
def test_sorts_source_data(data):
    original = list(data)
    expected = sorted(original)
    assert insert_sort(data) == expected
    assert binary_insert_sort(data) == expected
    assert shell_sort(data) == expected
    assert bubble_sort(data) == expected
    assert quick_sort(data) == expected
    assert select_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert data == original


@pytest.mark.parametrize("seed", range(5))
def test_sorts_random(seed):
    rng = random.Random(seed)
    data = [rng.randint(1, 99) for _ in range(rng.randint(0, 60))]
    expected = sorted(data)
    assert insert_sort(data) == expected
    assert binary_insert_sort(data) == expected
    assert shell_sort(data) == expected
    assert bubble_sort(data) == expected
    assert quick_sort(data) == expected
    assert select_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected


def test_trace_does_not_change_result():
    expected = sorted(MIXED)
    traces = [[] for _ in range(8)]
    assert insert_sort(MIXED, traces[0].append) == expected
    assert binary_insert_sort(MIXED, traces[1].append) == expected
    assert shell_sort(MIXED, traces[2].append) == expected
    assert bubble_sort(MIXED, traces[3].append) == expected
    assert quick_sort(MIXED, traces[4].append) == expected
    assert select_sort(MIXED, traces[5].append) == expected
    assert heap_sort(MIXED, traces[6].append) == expected
    assert merge_sort(MIXED, traces[7].append) == expected
    for lines in traces:
        assert lines
        assert all(isinstance(line, str) for line in lines)


def test_insert_sort_trace_one_line_per_element():
    lines = []
    insert_sort(DESCENDING, lines.append)
    assert len(lines) == len(DESCENDING) - 1
    assert lines[-1].endswith(" ".join(str(k) for k in sorted(DESCENDING)))


def test_shell_sort_trace_gaps_halve():
    lines = []
    shell_sort(DESCENDING, lines.append)
    gaps = [int(line.split("=")[1].split(":")[0]) for line in lines]
    assert gaps[0] == len(DESCENDING) // 2
    assert all(b == a // 2 for a, b in zip(gaps, gaps[1:]))
    assert gaps[-1] == 1


def test_bubble_sort_stops_early():
    lines = []
    bubble_sort(sorted(MIXED), lines.append)
    assert len(lines) == 1


def test_quick_sort_trace_at_most_n_partitions():
    lines = []
    quick_sort(MIXED, lines.append)
    assert 1 <= len(lines) <= len(MIXED)
    assert lines[0].startswith("partition 1:")


def test_heap_sort_trace_starts_with_max_heap():
    lines = []
    heap_sort(MIXED, lines.append)
    assert lines[0] == "initial heap: " + lines[0].split(": ", 1)[1]
    assert lines[0].split(": ", 1)[1].startswith(str(max(MIXED)))
    assert len(lines) == 1 + 2 * (len(MIXED) - 1)


def test_merge_sort_trace_pass_count():
    lines = []
    merge_sort(MERGE_DATA, lines.append)
    passes = (len(MERGE_DATA) - 1).bit_length()
    assert len(lines) == 2 * passes
    assert lines[-1].endswith(" ".join(str(k) for k in sorted(MERGE_DATA)))


def test_heap_repr_format():
    assert heap_repr([1, 2, 3]) == "1(2,3)"
    assert heap_repr([1, 2]) == "1(2,)"
    assert heap_repr([]) == ""


def test_heap_repr_contains_every_key():
    heap = [9, 8, 7, 6, 5, 4, 3]
    text = heap_repr(heap)
    assert text.startswith("9(")
    for key in heap:
        assert str(key) in text


def test_radix_sort_source_data():
    data = [75, 223, 98, 44, 157, 2, 29, 164, 38, 82]
    lines = []
    assert radix_sort(data, 10, 3, lines.append) == sorted(data)
    assert len(lines) == 3


def test_radix_sort_other_radix():
    rng = random.Random(7)
    data = [rng.randint(0, 255) for _ in range(40)]
    assert radix_sort(data, 2, 8) == sorted(data)


def test_radix_sort_rejects_negative_keys():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_rejects_bad_radix():
    with pytest.raises(ValueError):
        radix_sort([3, 1], radix=1)


def test_sort_spans_source_example():
    text = "whileifif-elsedo-whileforcase"
    spans = [(0, 5), (5, 2), (7, 7), (14, 8), (22, 3), (25, 4)]
    words = [text[s : s + n] for s, n in spans]
    result = sort_spans(text, spans)
    assert [text[s : s + n] for s, n in result] == sorted(words)
    assert sorted(result) == sorted(spans)


def test_sort_spans_rejects_bad_span():
    with pytest.raises(IndexError):
        sort_spans("abc", [(1, 5)])