# libkern

C-style standard-library routines written in plain Python: integer parsing,
fixed-width integer arithmetic, error codes, a linear congruential
pseudo-random generator, byte-buffer helpers, NUL-terminated string helpers,
searching and sorting with three-way comparators, and string searching and
tokenising.

The routines keep the behaviour of a small kernel C library, including the
places where it differs from a hosted C library. Those differences are listed
below for each module.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `libkern.strconv`

`strtol`, `strtoll`, `strtoul` and `strtoull` take `(text, base=10)` and
return a `(value, end)` pair, where `end` is the index just past the last
character used. `atoi`, `atol` and `atoll` parse decimal text and return only
the value.

- Bases 2 to 36 are accepted. Base 0 picks 16 after a `0x`/`0X` prefix, 8
  after a leading `0`, and 10 otherwise. Base 16 skips an optional `0x`
  prefix. Any other base raises `ValueError`.
- Leading characters that are neither a sign nor a valid digit are skipped,
  whatever they are.
- In bases up to ten, every decimal digit counts as a digit. For example,
  `"9"` is accepted in base 2.
- The unsigned conversions treat `+` and `-` as characters to skip.
- Results wrap to 64 bits, and `atoi` narrows further to a 32-bit signed value.

`is_valid_digit(c, base)` and `to_base_value(c, base)` are the digit helpers
the parsers use.

### `libkern.errors`

- `Errno` is an `IntEnum` of error codes, from `ENONE` (0) to `ENOSYS` (16).
- `strerror(errnum)` returns the message for a code, or `"unknown error"`.
- `abort()` raises `KernelAbort`.

### `libkern.arith`

- `iabs` gives the absolute value at 32 bits, and `labs` and `llabs` at 64
  bits. The minimum value of each width maps to itself.
- `div` (32-bit), `ldiv` and `lldiv` (64-bit) return a `DivResult(quot, rem)`.
  The quotient is truncated toward zero and the remainder takes the sign of
  the numerator. Dividing by zero raises `ZeroDivisionError`.
- `EXIT_SUCCESS` is 0 and `EXIT_FAILURE` is -1.

### `libkern.rand`

`RandomState(seed=1)` holds a 64-bit generator state. Its `rand()` method
returns a value in `[0, RAND_MAX - 2]`, where `RAND_MAX` is 32767. Its
`srand(seed)` method reseeds from the seed reduced to 32 bits. The
module-level `rand()` and `srand(seed)` share one default state.

### `libkern.memory`

`memchr`, `memcmp`, `memcpy`, `memmove` and `memset` take bytes-like buffers.
The functions that write need a mutable buffer such as `bytearray`, and they
return it.

- `memchr` returns an index or `None`.
- `memmove(buf, dst_offset, src_offset, num)` copies within one buffer.
- Asking for more bytes than a buffer holds, or for a negative count, raises
  `ValueError`.

### `libkern.cstring`

`strlen`, `strcpy`, `strncpy`, `strcat`, `strncat`, `strcmp` and `strncmp`
work on Python `str` values read as C strings: an embedded `"\0"` ends the
string. The functions that write into a destination in C return the resulting
string instead.

`strcmp` compares strings of different lengths by length alone, and returns
the difference of the lengths.

### `libkern.search`

Both functions take a three-way comparison function.

- `bsearch(key, items, compar)` scans the items in order and returns the index
  of the first match, or `None`. The items do not need to be sorted.
- `qsort(items, compar)` sorts a mutable sequence in place with quicksort. The
  sort is not stable.

### `libkern.strsearch`

`strchr`, `strrchr`, `strcspn`, `strspn`, `strpbrk` and `strstr` return
indexes or counts. The functions that return an index give `None` where there
is no match.

- `strspn` counts every character of the first string that occurs in the
  second, not only an initial run.
- `strstr` resumes after a failed partial match at the character that failed
  to match.

`Tokenizer(text)` yields tokens through `next(sep)` or through iteration.
`strtok(text, sep)` returns all the tokens as a list. Before each token the
position moves forward by `strspn` of the remaining text, so empty tokens can
appear when separators occur later in the text.

## Example

```python
from libkern.strconv import strtol
from libkern.arith import div
from libkern.rand import RandomState
from libkern.strsearch import strtok

strtol("0x1F", 0)          # (31, 4)
div(-7, 2)                 # DivResult(quot=-3, rem=-1)
RandomState(1).rand()      # 16838
strtok("a,b,,c", ",")      # ['', 'c']
```

## What it does not do

The package has no heap allocator and no formatted printing such as
`sprintf`. It also provides no character classification functions and no
non-local jumps.