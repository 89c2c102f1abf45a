# beginnerkit

This is a collection of classic first programs, written as small, tested Python functions and classes.
It covers number puzzles, sequence exercises, everyday conversions, matrix multiplication and linked lists.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `beginnerkit.numbers` provides `factorial`, `power`, `is_armstrong`, `is_palindrome_number`,
  `to_binary`, `fibonacci`, `divisor_sum`, `is_friendly_pair`, `is_prime`, `is_prime_trial`,
  `primes_in_range`, `is_leap_year` and `multiplication_table`.
  - `is_prime` tests only divisors of the form 6k ± 1.
  - `is_prime_trial` tries every divisor from 2 to n // 2.
  - `primes_in_range` examines odd candidates only. As a result it never reports 2, and it
    does report 1.
  - `fibonacci` always returns at least the two terms 0 and 1.
- `beginnerkit.sequences` provides `bubble_sort`, `reverse_string`, `pyramid` and
  `hanoi_moves`. `hanoi_moves` is a generator of `(disk, from_peg, to_peg)` tuples. Its pegs
  default to `"S"`, `"H"` and `"D"`.
- `beginnerkit.charges` covers three areas:
  - parcel charges: `parcel_charge`, a flat 32.50 up to 2 kg and then 10.50 per kilogram;
  - simple-interest formulas in integer arithmetic: `principal`, `rate`, `time_period` and
    `interest`;
  - conversions: `fahrenheit_to_celsius`, `celsius_to_fahrenheit`, `convert_currency` with the
    `Currency` enum (`EURO`, `JPY`, `RMB`, or their names as strings), `ounces_to_pounds` and
    `grams_to_pounds`.
- `beginnerkit.matrix` provides `multiply` and `format_matrix`. `format_matrix` writes each
  value followed by a tab, one row per line. `multiply` raises `DimensionError` when two
  matrices cannot be multiplied.
- `beginnerkit.linked_lists` provides two classes:
  - `DoublyLinkedList`, with 1-based positions and the methods `push_front`, `push_back`,
    `insert_after`, `pop_front`, `pop_back` and `remove_at`. It supports `len()` and iteration.
  - `SinglyLinkedList`, with the methods `append`, `prepend` and `render`, and iteration.

  An operation that needs a node on an empty list raises `EmptyListError`.

## Examples

```python
from beginnerkit.numbers import factorial, is_leap_year
from beginnerkit.sequences import bubble_sort, hanoi_moves
from beginnerkit.matrix import multiply
from beginnerkit.linked_lists import DoublyLinkedList

factorial(5)                      # 120
is_leap_year(2000)                # True
bubble_sort([5, 2, 9, 1])         # [1, 2, 5, 9]
list(hanoi_moves(2))              # [(1, 'S', 'H'), (2, 'S', 'D'), (1, 'H', 'D')]
multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])   # [[19, 22], [43, 50]]

items = DoublyLinkedList()
items.push_front(2)
items.push_front(1)
items.push_back(3)
list(items)                       # [1, 2, 3]
len(items)                        # 3
```

## Command line

Installing the package adds a `beginnerkit` command with two subcommands.

```
beginnerkit list
```

`list` runs an interactive numbered menu for editing a doubly linked list. Any choice outside
1–8 exits.

```
beginnerkit matrix
```

`matrix` prompts for the size and elements of two matrices and prints their product. If the
matrices cannot be multiplied, it prints `Multiplication can not be done.` instead.

## What it does not do

Only the linked-list menu and matrix multiplication are available from the command line.
The other exercises are library functions only and have no interactive prompts. These are
the factorials, primes, conversions, interest formulas, pyramids and the rest.