# algolab

A collection of classic algorithms and small programming exercises written as
plain Python functions and classes. Nothing outside the standard library is
needed.

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

| Module                 | Contents |
|------------------------|----------|
| `algolab.sorting`      | `bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort`, `randomized_quick_sort`, `randomized_quick_sort_passes`, `heap_sort`, `merge_sort`, `bucket_sort`, `counting_sort` |
| `algolab.searching`    | `binary_search`, `linear_search` |
| `algolab.containers`   | `LinkedStack`, `BoundedStack`, `StackEmptyError`, `StackFullError` |
| `algolab.numbertheory` | `fibonacci`, `fibonacci_series`, `factorial`, `gcd`, `hcf`, `is_prime`, `is_armstrong`, `is_leap_year`, `atkin_primes`, `is_odd`, `is_positive`, `chinese_remainder` |
| `algolab.arithmetic`   | `add`, `subtract`, `multiply`, `divide`, `swap`, `evaluate_polynomial`, `quadratic_roots` |
| `algolab.puzzles`      | `egg_drop`, `knapsack`, `min_jumps`, `hanoi_moves` |
| `algolab.shapes`       | `circle_area`, `rectangle_area`, `triangle_area`, `square_area`, `rhombus_area`, `trapezium_area`, `pentagon_area`, `hexagon_area`, `heptagon_area`, `octagon_area`, `incircle` (returns an `Incircle` with `center`, `radius` and `area`) |
| `algolab.lines`        | `Point`, `Line`, `Relation`, `slopes_equal`, `intercepts_equal`, `classify_pair`, `count_relations` |
| `algolab.dates`        | `validate_date`, `weekday_number`, `weekday_name`, `month_calendar`, `format_month` |
| `algolab.matrix`       | `multiply_matrices`, `square_and_sum` |
| `algolab.text`         | `alphabet_pattern`, `number_pyramid`, `precedence`, `infix_to_postfix`, `ascii_code` |
| `algolab.trees`        | `Node`, `preorder`, `inorder`, `postorder` |
| `algolab.game`         | rock, paper, scissors: `Choice`, `greater`, `score_round`, `Game`, `main` |

The sorting functions take any iterable and return a new list; the input is
left alone. `bucket_sort` and `counting_sort` accept only non-negative
integers and raise `ValueError` otherwise. The searches return an index, or
`None` when the key is absent.

## Examples

```python
from algolab.sorting import merge_sort
from algolab.searching import binary_search
from algolab.numbertheory import gcd, atkin_primes
from algolab.puzzles import knapsack, hanoi_moves
from algolab.containers import LinkedStack
from algolab.text import infix_to_postfix
from algolab.dates import weekday_name

ordered = merge_sort([32, 45, 67, 2, 7, 9, 1, 69, 81, 4])
position = binary_search(ordered, 45)

gcd(12, 18)                                     # 6
knapsack(50, [10, 20, 30], [60, 100, 120])      # 220
primes = atkin_primes(100)                      # primes below 100
infix_to_postfix("a+b*c")                       # "abc*+"

for move in hanoi_moves(3, "X", "Y", "Z"):
    print(move)                                 # ("X", "Z"), ...

stack = LinkedStack()
stack.push(10)
stack.push(20)
stack.push(30)
stack.pop()       # 30
stack.peek()      # 20
len(stack)        # 2
```

Popping or peeking an empty stack raises `StackEmptyError`; pushing onto a
full `BoundedStack` raises `StackFullError`.

`weekday_name` accepts dates with years from 1800 to 2999 and raises
`ValueError` for anything else. `month_calendar` and `format_month` lay out
the months of the year 2021 only, in weeks starting on Sunday.

## Rock, paper, scissors

A three-round game against the computer is available from the command line:

```
algolab-rps
algolab-rps --seed 42
```

Choose 1 for rock, 2 for paper and 3 for scissors at each prompt; the scores
are shown after every round and the winner at the end. `--seed` makes the
computer's hands repeatable. Scoring follows `greater`: a tie gives both
sides a point, and the computer wins a round only with rock against
scissors.

## What the package does not do

Apart from `algolab-rps`, there are no commands: every other algorithm is a
library function to be called from Python, with no prompts or menus. Nothing
draws on screen, and there is no calendar for years other than 2021.