# dynprog

A small collection of classic dynamic-programming and sequence problems,
written as plain functions over Python integers and sequences.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dynprog.sequences`

Several ways to compute Fibonacci numbers, plus the Tribonacci sequence
(T(0)=0, T(1)=T(2)=1).

```python
from dynprog.sequences import (
    fib_recursive, fib_golden_ratio, fib_iterative, fib_memoized, tribonacci,
)

fib_iterative(10)     # 55, linear time, constant space
fib_memoized(10)      # 55, recursion with a memo table
fib_golden_ratio(10)  # 55, from Binet's closed form
fib_recursive(10)     # 55, exponential time
tribonacci(4)         # 4
```

`fib_golden_ratio` works in floating point, so it is only exact up to about
n = 70. The other Fibonacci functions use Python integers and have no such
limit (the recursive ones are bounded by the recursion limit instead).

### `dynprog.stairs`

```python
from dynprog.stairs import (
    climb_stairs, min_cost_climbing_stairs, min_cost_climbing_stairs_table,
)

climb_stairs(3)                                  # 3 ways with steps of 1 or 2
min_cost_climbing_stairs([10, 15, 20])           # 15, constant space
min_cost_climbing_stairs_table([10, 15, 20])     # 15, keeping a full table
```

Both cost functions raise `ValueError` when given fewer than two steps.

### `dynprog.robbery`

```python
from dynprog.robbery import rob, delete_and_earn

rob([2, 7, 9, 3, 1])                 # 12: no two adjacent values taken
rob([])                              # 0
delete_and_earn([2, 2, 3, 3, 3, 4])  # 9
```

`delete_and_earn` raises `ValueError` for an empty list or one holding
negative numbers.

### `dynprog.grids`

```python
from dynprog.grids import unique_paths, min_path_sum

unique_paths(3, 7)                               # 28
min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]])  # 7
```

`unique_paths` raises `ValueError` for a dimension below 1; `min_path_sum`
raises `ValueError` for an empty grid or rows of differing lengths.

### `dynprog.progression`

Checks whether a sequence can be rearranged into an arithmetic progression.

```python
from dynprog.progression import (
    merge_sort, can_make_arithmetic_progression, can_make_arithmetic_progression_sorted,
)

merge_sort([3, 1, 2])                              # [1, 2, 3], a new list
can_make_arithmetic_progression([3, 5, 1])         # True, in linear time
can_make_arithmetic_progression_sorted([1, 2, 4])  # False, by sorting first
```

Sequences of two or fewer values always count as progressions.

## What it does not do

The package is a library only: it installs no command-line program, and
reads no input files. Call the functions from your own code.