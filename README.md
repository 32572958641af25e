# aiutils

A collection of small, self-contained utilities for Python 3.10 and later.
It has no dependencies outside the standard library.

## Installation

```
pip install aiutils
```

To run the test suite:

```
pip install "aiutils[test]"
pytest
```

## Modules

- `aiutils.bits`: operations on non-negative integers.
  - `clz(n, width=64)` counts leading zeros in a `width`-bit word.
  - `ctz(n)` gives the index of the lowest set bit.
  - `popcount(n)` and `parity(n)` count set bits.
  - `mssb(n)` keeps only the most significant set bit, and gives 1 for 0.
  - `log2(n)` gives floor(log2(n)), and -1 for 0. `ceil_log2(n)` gives ceil(log2(n)).
  - `reverse_bits(n, width=64)` reverses the low `width` bits.
  - `is_power_of_two(n)`.
  - `nearest_power_of_two(n)` rounds up to a power of two, and gives 0 for zero and negatives.
  - `nearest_multiple_of_power_of_two(n, power_of_two)` rounds up to a multiple of a power of two.

  `clz`, `ctz` and `ceil_log2` raise `ValueError` for zero. All of them raise `ValueError` for a negative argument, except `is_power_of_two` and `nearest_power_of_two`.
- `aiutils.pointer_hash`: `pointer_hash(p1, p2)` and `pointer_hash_combine(h1, p2)` mix unsigned 64-bit addresses into a 64-bit hash.
- `aiutils.numeric`:
  - `almost_equal(z1, z2, abs_relative_error)` compares real or complex numbers by relative error. A NaN makes it False.
  - `ceil_int(num)` rounds a float up to an integer.
- `aiutils.escape`: `c_escape(data)` returns a string and `iter_c_escape(data)` yields characters. Both escape control bytes, backslashes, DEL and non-ASCII bytes the way C does (`\n`, `\t`, `\e`, `\\`, `\x7F`, ...). A `str` is encoded as UTF-8 first.
- `aiutils.utf8`: `utf8_glyph_length(data, pos=0)` gives the byte length of the UTF-8 glyph at `data[pos]`, or 1 if the bytes there are not legal UTF-8.
- `aiutils.numbase`: `ulong_to_base(n, digits)` writes an unsigned 64-bit number using `digits[k]` for the digit k.
- `aiutils.sequences`:
  - `sorted_insert(seq, item, key=None)` inserts after equal elements and returns the index.
  - `unstable_remove_if(seq, predicate)` and `unstable_remove(seq, value)` remove elements in place without keeping order, and return how many were removed.
  - `split(text, delim)` keeps empty tokens.
  - `split_n(text, delim, n)` requires exactly `n` tokens and raises `ValueError` otherwise.
  - `for_each_until(iterable, fn)`.
  - `concat(first, second)` and `zconcat(first, second)`. `zconcat` drops the terminator of `first`.
  - `QuotedList(open, separator, close)`, whose `format(container)` lists the elements in double quotes.
- `aiutils.compare`: these orderings are plain callables returning `bool`.
  - `VectorCompare(element_less)` orders lists by length, then element by element.
  - `PairCompare(first_less, second_less)` orders pairs whose members may be lists.
- `aiutils.scope`: `at_scope_end(action)` returns an `AtScopeEnd` context manager. It runs `action` once when the `with` block is left, also on an exception, unless `now()` or `once()` already ran it. `extra()` runs it one more time. `copy()` gives a fresh object with the same action.
- `aiutils.merge`: `three_way_merge(left, base, right, payload_merger, key=None, payload_equal=operator.eq)` merges the changes that `left` and `right` made to `base`.
  - All three inputs must be sorted by key.
  - Real conflicts are handed to `payload_merger(left_item, base_item, right_item)`, with `None` for a side lacking the key. The elements it returns go into the result.
- `aiutils.multiloop`: `MultiLoop(n, b=0)` drives `n` nested loops from a single object.
  - It offers `breaks`, `start_next_loop_at`, `next_loop`, `end_of_loop` and `inner_loop`.
  - Counters are read with `ml[i]` and `ml()`.
  - `state()` and `set_state()` take and restore snapshots (`MultiLoopState`).

## Examples

```python
from aiutils.bits import nearest_power_of_two, reverse_bits, mssb
from aiutils.escape import c_escape
from aiutils.utf8 import utf8_glyph_length
from aiutils.numbase import ulong_to_base
from aiutils.sequences import split_n, QuotedList, unstable_remove_if
from aiutils.merge import three_way_merge
from aiutils.scope import at_scope_end

nearest_power_of_two(100)          # 128
reverse_bits(0b11010001, 8)        # 0b10001011
mssb(0)                            # 1
c_escape("tab\there\n")            # 'tab\\there\\n'
utf8_glyph_length("é".encode())    # 2
ulong_to_base(27, "abcdefghijklmnopqrstuvwxyz")  # 'bb'
split_n("key=value", "=", 2)       # ['key', 'value']
QuotedList().format(["a", "b"])    # '{ "a", "b" }'

values = [1, 2, 3, 4, 5, 6, 7, 8, 9]
unstable_remove_if(values, lambda v: v % 2 == 0)  # 4; values == [1, 9, 3, 7, 5]

three_way_merge([1, 2, 4], [1, 2, 3], [1, 3, 5],
                payload_merger=lambda l, b, r: [l or r])  # [1, 4, 5]

with at_scope_end(lambda: print("done")):
    ...
```

## What it does not do

`aiutils` is only a library of functions and classes.

- It has no command-line tool.
- It keeps nothing on disk.
- It offers no byte-order packing helpers.
- It offers no random streams or stream hashers.
- It offers no global or singleton instance management.