# dstructs

A compact collection of the classic data structures and algorithms, written
as plain Python with no third-party dependencies: sequential and linked
lists, stacks and queues, sequential and linked strings, pattern matching,
recursive and backtracking problems, the usual family of internal sorts, and
the building blocks of external sorting.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dstructs.seqlist` | `SeqList`, a fixed-capacity sequential list with 1-based positions; `demo()` |
| `dstructs.linkedlist` | `Node`, `LinkedList` (tail insertion, or `from_head_insertion`); `demo()` |
| `dstructs.dlinkedlist` | `DNode`, `DoublyLinkedList`; `demo()` |
| `dstructs.circular` | `CircularLinkedList`, `CircularDoublyLinkedList`; `demo_singly()`, `demo_doubly()` |
| `dstructs.basics` | `sum_by_loop`, `sum_by_formula`, `timed`, `growth_table`, `format_growth_table`, `is_prime_naive`, `is_prime_sqrt`, `count_primes`, `factorial_sum`, `two_sum` |
| `dstructs.listops` | `split_around_first`, `split_around_first_stable`, `interleave`, `sort_list`, sorted-set `union`/`intersection`/`difference`, `digits_of`, `add_digits`, `middle` |
| `dstructs.polynomial` | `Term`, `Polynomial` with `sorted`, `+`, `*`, `multiply_raw`, `combined`, `without_zeros` |
| `dstructs.employees` | `Employee`, `EmployeeRegistry`, fixed-size binary record `load`/`save` |
| `dstructs.stacks` | `ArrayStack`, `LinkedStack`, `sort_stack` |
| `dstructs.queues` | `CircularQueue`, `LinearQueue`, `LinkedQueue` |
| `dstructs.maze` | `all_paths`, `shortest_path` through a 0/1 grid maze |
| `dstructs.queens` | n-queens with an explicit stack (`solve_with_stack`) and recursively (`solve_recursive`) |
| `dstructs.clinic` | `Clinic`, a waiting-room queue simulation |
| `dstructs.parking` | `ParkingLot`, a stack-plus-queue parking simulation |
| `dstructs.sqstring` | `SeqString`, an immutable string of at most 100 characters |
| `dstructs.linkstring` | `LinkedString`, an immutable string kept as a chain of nodes |
| `dstructs.matching` | brute force and KMP search, `next_table`/`nextval_table`, occurrence counting, longest repeated substring |
| `dstructs.cipher` | substitution `encrypt`/`decrypt` over lower-case letters |
| `dstructs.recursion` | Hanoi (recursive and with a stack), grid paths, IP address restoration, fast power, list reversal, k-th from end, 0/1 knapsack |
| `dstructs.sorting` | insertion, binary insertion, Shell, bubble, quick, selection, heap, merge and radix sorts, each with an optional `trace` callback; `sort_spans` |
| `dstructs.radix` | radix sorting of padded words and of `Student` records |
| `dstructs.benchmark` | timing and checking every sort on the same random keys |
| `dstructs.external` | `LoserTree`, `build_trace`, top-k `select_smallest`, `replacement_selection`, `k_way_merge` |

Positions passed to the list and string classes are 1-based; an invalid
position raises `IndexError`, a missing element `ValueError`, and a full
bounded structure `OverflowError`.

## Examples

```python
from dstructs.linkedlist import LinkedList

lst = LinkedList("abcde")
lst.insert(4, "f")
lst.delete(3)
print(lst, len(lst), lst.locate("a"))   # a b f d e 5 1
```

```python
from dstructs.matching import kmp_index, count_occurrences, count_overlapping

kmp_index("abcabcdabcdeabcdefabcdefg", "abcdeabcdefab")   # 7
count_occurrences("aaaaa", "aa")                          # 2
count_overlapping("aaaaa", "aa")                          # 4
```

```python
from dstructs.stacks import ArrayStack, sort_stack

stack = ArrayStack(100)
for ch in "1342":
    stack.push(ch)
sort_stack(stack)
stack.pop()   # '1'
```

```python
from dstructs.sorting import quick_sort

quick_sort([6, 8, 7, 9, 0, 1, 3, 2, 4, 5], trace=print)
```

```python
from dstructs.external import k_way_merge

k_way_merge([[17, 21], [5, 44], [10, 12], [29, 32], [15, 56]])
```

## Command-line programs

Several modules come with small interactive programs:

```
dstructs-employees [--file emp.dat]        # keep an employee file: add, list, sort, delete
dstructs-clinic                            # simulate patients queueing to see a doctor
dstructs-parking                           # simulate a parking lot with a waiting lane
dstructs-cipher [TEXT]                     # encrypt and decrypt a line of text
dstructs-benchmark [--size N] [--seed S]   # time every sorting method on random data
```

The interactive programs read their choices from standard input and stop at
end of input. The benchmark defaults to 50000 keys, which takes a while for
the quadratic sorts; pass a smaller `--size` for a quick run.