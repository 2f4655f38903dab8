# algokit

Classic algorithms as plain Python functions: dynamic programming, recursion,
digit-string sequences and searching. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `algokit.dp`: dynamic programming

- `knapsack(capacity, weights, values)`: the best total value for the 0-1 knapsack problem. Each item can be used once. A capacity of zero or less gives 0. It raises `ValueError` if the weights and values differ in length or if a weight is negative.
- `coin_combinations(coins, target)`: the number of *ordered* ways to make `target` from the coins, modulo `MOD` (1 000 000 007). It raises `ValueError` for a negative target or a coin that is not positive.
- `rob(nums)`: the largest sum of elements with no two adjacent.
- `rob_circular(nums)`: the same as `rob`, but the first and last elements count as adjacent.
- `trap(heights)`: the units of rain water that an elevation map holds.
- `unique_paths(rows, cols)`: the number of right/down paths through a grid. It raises `ValueError` if either dimension is less than 1.
- `fizz_buzz(start, stop)`: the FizzBuzz words for `start` to `stop` inclusive, each followed by a space.

```python
from algokit.dp import knapsack, trap, fizz_buzz

knapsack(50, [10, 20, 30], [60, 100, 120])   # 220
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
fizz_buzz(1, 5)                              # '1 2 Fizz 4 Buzz '
```

## `algokit.searching`: searching

The five searches take `(items, target)`. Each returns an index of `target`, or `NOT_FOUND` (`-1`) if the target is absent.

- `binary_search`, `exponential_search`, `interpolation_search` and `jump_search` expect `items` to be sorted in ascending order.
- `linear_search` works on any sequence and returns the first match.

`search_matrix(matrix, target)` scans the rows in order. It returns the `(row, column)` of the first cell equal to `target`, or `None` if there is none.

```python
from algokit.searching import jump_search, search_matrix

jump_search([0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89], 55)   # 10
search_matrix([[10, 20], [15, 25]], 15)                       # (1, 0)
```

## `algokit.recursion`: recursive classics

- `keypad_words(number)`: every letter string that a number spells on a phone keypad (`KEYPAD`). The digits 0 and 1 have no letters, so a number that contains them spells nothing. The number `0` spells the empty word.
- `is_prime(n)`: whether `n` is prime.
- `reverse_stack(stack)`: the stack as a list, in reverse order. The top of the stack is the last element.
- `sort_stack(stack)`: the stack sorted with its largest element on top, at the end of the list.
- `tower_of_hanoi(n, source="A", target="C", auxiliary="B")`: yields the `Move` records that solve the puzzle. `str(move)` reads `Move disk 1 from rod A to rod C`.
- `factorial(n)`: `n!`. It raises `ValueError` for a negative `n`.
- `sum_triangle(values)`: the rows of the sum triangle, apex first. Each row holds the sums of adjacent pairs in the row below it.

```python
from algokit.recursion import tower_of_hanoi, sum_triangle

for move in tower_of_hanoi(2):
    print(move)
# Move disk 1 from rod A to rod B
# Move disk 2 from rod A to rod C
# Move disk 1 from rod B to rod C

sum_triangle([1, 2, 3])   # [[8], [3, 5], [1, 2, 3]]
```

## `algokit.sequences`: digit strings and subsequences

- `add_strings(a, b)`: adds two non-negative decimal numbers given as digit strings.
- `additive_sequence(digits)`: splits a digit string into numbers where each is the sum of the two before it. Leading zeros are not allowed. It returns the first split found, or an empty list if there is none.
- `digit_groupings(digits)`: yields every way to cut a string into consecutive groups, as tuples. The all-separate grouping comes first and the whole string last.
- `lcs_length(first, second)`: the length of the longest common subsequence.
- `all_lcs(first, second)`: every distinct longest common subsequence, in lexicographic order.

`add_strings` and `additive_sequence` raise `ValueError` for input that is not decimal digits.

```python
from algokit.sequences import additive_sequence, digit_groupings

additive_sequence("199100199")   # ['1', '99', '100', '199']
list(digit_groupings("12"))      # [('1', '2'), ('12',)]
```

## What this package does not do

algokit is a library only. It installs no command-line programs. To read input or print results, call the functions from your own code.