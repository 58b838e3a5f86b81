# pipexpy

`pipexpy` is a small library. It splits a command string into arguments the
way a simple shell does. It also has helpers for characters, integers,
strings and byte buffers, and these helpers follow the rules of the C
library.

## Installation

```sh
pip install .
```

## Splitting command strings

```python
from pipexpy.parsing import parse_cmd, is_blank

parse_cmd("awk '{print $1}'")      # ['awk', '{print $1}']
parse_cmd('grep "two words" file') # ['grep', 'two words', 'file']
parse_cmd(r"echo a\ b")            # ['echo', 'a b']
is_blank(" \t\n")                  # True
```

- Arguments are separated by whitespace, unless the whitespace is inside quotes.
- Single and double quotes group text, and the quotes are removed.
- Outside single quotes, a backslash makes the next character literal.
- A quote that is never closed runs to the end of the text.

## Helper modules

### `pipexpy.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` and `is_space`
  classify one character. They take either a one-character string or an
  integer code point.
- `to_upper` and `to_lower` change the case of ASCII letters only. They
  return the same type they were given.
- `is_number(text)` is true for an integer with an optional sign and optional
  whitespace around it.

### `pipexpy.numbers`

- `atoi(text)` skips leading whitespace, reads an optional sign and the
  digits that follow, and returns the value truncated to a 32-bit int.
- `atol(text)` reads the same way. It stops before the value would overflow
  a 64-bit integer.
- `itoa(n)` formats an integer in decimal.

```python
from pipexpy.numbers import atoi
atoi("  -42abc")   # -42
```

### `pipexpy.strings`

Positions come back as indexes, and `None` means not found.

- Searching: `str_chr`, `str_rchr`, `str_nstr`.
- Comparison: `str_ncmp`.
- Slicing and copying: `substr`, `str_ndup`, `strl_cpy`, `strl_cat`.
  `strl_cpy` and `strl_cat` return a pair of the resulting text and the
  length they report.
- Changing strings: `str_trim`, `split`, `str_join`, `str_mapi`,
  `str_iteri`. `split` drops empty pieces.

```python
from pipexpy.strings import split, str_chr, strl_cpy
split("a::b:", ":")    # ['a', 'b']
str_chr("hello", "l")  # 2
strl_cpy("hello", 3)   # ('he', 5)
```

### `pipexpy.memory`

These functions work on `bytes` and `bytearray` objects:

- `mem_set`, `bzero`, `mem_cpy`, `mem_move`, `mem_chr`, `mem_cmp` and `calloc`.
- A span that runs past the end of a buffer raises `IndexError`.
- `calloc` raises `MemoryError` when `count * size` would overflow a `size_t`.

## What it does not do

The package has no command-line program. It does not look up commands in
`PATH`, start processes, connect them with pipes, or open input and output
files. It only gives the parsing and helper functions listed above.

## Running the tests

```sh
pip install ".[test]"
pytest
```