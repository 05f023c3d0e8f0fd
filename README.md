# algopuzzles

A small library of solutions to classic algorithmic puzzles, grouped by
theme into four modules. Every function is plain Python with no
dependencies beyond the standard library.

## Installation

```
pip install algopuzzles
```

For running the test suite:

```
pip install "algopuzzles[test]"
pytest
```

## Modules

### `algopuzzles.strings`

- `smallest_equivalent_string(s1, s2, base)`: treats each pair
  `s1[i] ~ s2[i]` as an equivalence and rewrites `base` with the smallest
  equivalent character for each of its characters. Raises `ValueError` if
  `s1` and `s2` differ in length.
- `robot_with_string(s)`: the lexicographically smallest string a robot can
  write when it moves characters of `s` through a stack.
- `clear_stars(s)`: each `*` removes the smallest character to its left (the
  rightmost one on ties); returns what is left. Raises `ValueError` for a
  star with nothing left to remove.
- `answer_string(word, num_friends)`: the lexicographically largest piece of
  `word` over all splits into `num_friends` non-empty parts. Raises
  `ValueError` unless `num_friends` is between 1 and `len(word)`.
- `minimum_deletions(word, k)`: the fewest deletions that bring every pair of
  character frequencies within `k` of each other.
- `max_parity_frequency_difference(s)`: the largest odd character frequency
  minus the smallest even (non-zero) frequency.
- `max_manhattan_distance(moves, k)`: the farthest Manhattan distance from
  the origin reached along a path of `N`/`S`/`E`/`W` moves when up to `k`
  moves may be changed.

### `algopuzzles.digits`

- `max_diff(num)`: the largest difference between two numbers each made by
  remapping every occurrence of one digit of `num`, with no leading zero and
  no zero result. Raises `ValueError` for `num < 1`.
- `min_max_difference(num)`: the largest value minus the smallest value
  reachable by remapping one digit of `num`.
- `lexical_order(n)`: the numbers `1..n` in lexicographic order of their
  decimal form.
- `find_kth_number(n, k)`: the `k`-th (1-based) number of `1..n` in
  lexicographic order. Raises `ValueError` unless `1 <= k <= n`.

### `algopuzzles.arrays`

- `candy(ratings)`: the fewest candies such that every child gets at least
  one and a higher-rated child gets more than each lower-rated neighbour.
- `maximum_difference(nums)`: the largest `nums[j] - nums[i]` with `i < j`
  and `nums[i] < nums[j]`, or `-1` if there is none.
- `partition_array(nums, k)`: the fewest groups in which max minus min is at
  most `k`.
- `minimize_max(nums, p)`: the smallest achievable maximum difference over
  `p` disjoint index pairs. Raises `ValueError` for negative `p` or more
  pairs than the list can hold.
- `divide_array(nums, k)`: splits `nums` into sorted triples with spread at
  most `k`, or returns an empty list if that is impossible. Raises
  `ValueError` if the length is not a multiple of three.
- `max_adjacent_distance(nums)`: the largest absolute difference between
  neighbours in a circular list. Raises `ValueError` for an empty list.

### `algopuzzles.counting`

- `distribute_candies(n, limit)`: the number of ways to give `n` candies to
  three children with at most `limit` each.
- `count_good_arrays(n, m, k)`: arrays of length `n` over `1..m` with exactly
  `k` equal adjacent pairs, modulo 1 000 000 007 (also available as
  `MOD`).
- `max_candies(status, candies, keys, contained_boxes, initial_boxes)`: the
  total candy collected by opening boxes, using the keys and the boxes found
  inside them; collection stops once every remaining box is closed.

## Example

```python
from algopuzzles.strings import clear_stars
from algopuzzles.digits import lexical_order
from algopuzzles.arrays import candy
from algopuzzles.counting import distribute_candies

clear_stars("aaba*")        # "aab"
lexical_order(13)           # [1, 10, 11, 12, 13, 2, 3, 4, 5, 6, 7, 8, 9]
candy([1, 0, 2])            # 5
distribute_candies(5, 2)    # 3
```

## What it does not do

The package is a library of functions only: it has no command-line tool and
reads no input files. Call the functions from your own code.