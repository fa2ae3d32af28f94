# algodrills

This package holds small practice drills that you can read, run and test:

- **`algodrills.patterns`**: nineteen star, number and letter patterns, each drawn from a size `n`.
- **`algodrills.recursion`**: Fibonacci numbers, palindromes, subsequences, subset sums, combination sums and permutations.
- **`algodrills.sorting`**: bubble, insertion, selection, merge and quick sort.
- **`algodrills.toolkit`**: pair ordering, permutation stepping, bit counts and digit counts.

The package has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Drawing patterns

The `algodrills-patterns` command prints one pattern. It takes the pattern number, from 1 to 19, and the size:

```
algodrills-patterns 1 3
```

```
***
***
***
```

If you leave out the size, the command reads it from standard input:

```
echo 4 | algodrills-patterns 6
```

From Python:

```python
from algodrills.patterns import pattern_2, render

pattern_2(3)        # ['*', '**', '***']
print(render(14, 3), end="")
```

Each `pattern_<k>(n)` function returns the rows as a list of strings. `render(number, n)` looks up a pattern by its number and returns it as one string, with a newline after each row. An unknown pattern number raises `ValueError`. The `PATTERNS` dictionary maps each pattern number to its function.

## Recursion drills

```python
from algodrills.recursion import (
    fib, is_palindrome, combination_sum, combination_sum_unique,
    subsequences, subsequences_with_sum, first_subsequence_with_sum,
    count_subsequences_with_sum, count_subsets_with_sum,
    subset_sums, permutations, reverse_array,
)

fib(10)                                            # 55
is_palindrome("NAMAN")                             # True
combination_sum([2, 3, 6, 7], 7)                   # [[2, 2, 3], [7]]
combination_sum_unique([10, 1, 2, 7, 6, 1, 5], 8)  # [[1, 1, 6], [1, 2, 5], [1, 7], [2, 6]]
list(subsequences([3, 1, 2]))                      # full sequence first, empty one last
list(subsequences_with_sum([1, 2, 3, 4], 5))       # [[1, 4], [2, 3]]
first_subsequence_with_sum([1, 2, 3, 4], 5)        # [1, 4]; None when nothing matches
count_subsequences_with_sum([1, 2, 3, 4], 5)       # 2
count_subsets_with_sum([1, 2, 1], 3)               # 2
subset_sums([1, 2, 3])                             # sums of all subsets, ascending
permutations([1, 2, 3])                            # every ordering, as lists
reverse_array([1, 2, 3])                           # [3, 2, 1], a new list
```

Behaviour worth knowing:

- `fib` raises `ValueError` for a negative index.
- `combination_sum` raises `ValueError` unless every candidate is positive.
- `count_subsequences_with_sum` drops a branch once its running sum goes past the target, so it is only correct for non-negative values. `count_subsets_with_sum` works with any integers.
- `subsequences` and `subsequences_with_sum` are generators.

## Sorting

Each sort accepts any iterable of comparable items. It returns a new sorted list and leaves the input unchanged:

```python
from algodrills.sorting import bubble_sort, insertion_sort, selection_sort, merge_sort, quick_sort

merge_sort([1, 3, 4, 2, 8885, 8, 6, 7])   # [1, 2, 3, 4, 6, 7, 8, 8885]
quick_sort([1, 3, 5, 2, 4, 7, 6, 9, 8])   # [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

## Toolkit

```python
from algodrills.toolkit import (
    pair_demo, pair_precedes, sort_pairs,
    permutations_after, previous_permutation, popcount, digit_count,
)

sort_pairs([(1, 2), (2, 2), (1, 3)])   # [(2, 2), (1, 2), (1, 3)]
pair_precedes((2, 2), (1, 2))          # True
permutations_after("123")              # ['132', '213', '231', '312', '321']
previous_permutation("132")            # '123'; the smallest wraps to the largest
popcount(7)                            # 3
digit_count(1000)                      # 4
print(pair_demo(), end="")             # a short walk through pairs and nested pairs
```

`sort_pairs` puts pairs in ascending order of their second item. Pairs with the same second item are put in descending order of their first item.

`popcount` raises `ValueError` for a negative number. `digit_count` raises `ValueError` for a number that is not positive.