# ftprintf

A small printf-style formatter. It writes formatted text to a stream and
returns the number of characters it wrote.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import io
from ftprintf.printf import ft_printf

buf = io.StringIO()
count = ft_printf("I am %i years old\n", 22, stream=buf)
assert buf.getvalue() == "I am 22 years old\n"
assert count == 18
```

`stream` is keyword-only. If it is not given, output goes to standard output.

### Conversions

| Spec | Argument                              | Output                                                    |
|------|---------------------------------------|-----------------------------------------------------------|
| `%c` | a one-character string, or an integer | the character; an integer is taken as a byte value (mod 256) |
| `%s` | a string or `None`                    | the string, or `(null)` for `None`                        |
| `%d` | an integer                            | signed decimal, wrapped to 32 bits                        |
| `%i` | an integer                            | same as `%d`                                              |
| `%u` | an integer                            | unsigned decimal, taken modulo 2³²                        |
| `%x` | an integer                            | lower-case hexadecimal, taken modulo 2³²                  |
| `%X` | an integer                            | upper-case hexadecimal, taken modulo 2³²                  |
| `%p` | an integer, `None`, or any object     | `0x` followed by lower-case hex, or `(nil)` for zero/`None` |
| `%%` | none                                  | a literal `%`                                             |

For example, `ft_printf("%X", -1)` prints `FFFFFFFF` and `ft_printf("%d", 2**31)`
prints `-2147483648`.

For `%p`, an integer is used as the address (taken modulo 2⁶⁴); any other
object stands for its identity (`id()`).

Any other character after `%` is skipped: nothing is printed for it and no
argument is consumed. A lone `%` at the end of the format prints nothing.
If the format needs more arguments than were given, `TypeError` is raised;
extra arguments are ignored. An argument of the wrong type (for instance a
string for `%d`) also raises `TypeError`.

### Lower-level writers

`ftprintf.output` holds the writers the formatter is built on. Each takes an
optional `stream` (standard output by default) and returns the number of
characters it wrote:

- `put_char(c, stream)`: a one-character string, or an integer taken as a byte value; a longer string raises `ValueError`
- `put_str(s, stream)`: prints `(null)` when `s` is `None`
- `put_nbr(n, stream)`: signed decimal, wrapped to 32 bits
- `put_nbr_u(n, stream)`: unsigned decimal, taken modulo 2³²
- `put_nbr_hex(n, letter_case, stream)`: hexadecimal without a prefix, taken modulo 2⁶⁴; `letter_case` is `LetterCase.UPPER` (`"u"`) or `LetterCase.LOWER` (`"l"`, the default); any other value raises `ValueError`
- `put_ptr(address, stream)`: `0x`-prefixed lower-case hex, or `(nil)` for zero or `None`

## What it does not do

Only the conversions listed above are supported. There are no flags, field
widths, precisions or length modifiers, and no floating-point conversions.