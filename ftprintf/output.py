"""Primitive writers that emit characters, strings and numbers to a text stream.

Every writer returns the number of characters it wrote.
"""

from __future__ import annotations

import operator
import sys
from enum import Enum
from typing import Any, TextIO

_INT_BITS = 32
_LONG_BITS = 64

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"
HEX_DIGITS_LOWER = "0123456789abcdef"
HEX_DIGITS_UPPER = "0123456789ABCDEF"


class LetterCase(str, Enum):
    """Case of the letter digits in hexadecimal output."""

    UPPER = "u"
    LOWER = "l"


def _resolve(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _to_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _to_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _emit(text: str, stream: TextIO | None) -> int:
    _resolve(stream).write(text)
    return len(text)


def _hex_digits(value: int, digits: str) -> str:
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if not value:
            break
    return "".join(reversed(out))


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write a single character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return _emit(c, stream)
    return _emit(chr(_to_unsigned(_as_int(c), 8)), stream)


def put_str(s: str | None, stream: TextIO | None = None) -> int:
    """Write a string, or ``(null)`` when it is None."""
    if s is None:
        return _emit(NULL_STRING, stream)
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _emit(s, stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit signed integer in decimal."""
    return _emit(str(_to_signed(_as_int(n), _INT_BITS)), stream)


def put_nbr_u(n: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit unsigned integer in decimal."""
    return _emit(str(_to_unsigned(_as_int(n), _INT_BITS)), stream)


def put_nbr_hex(
    n: int, letter_case: LetterCase | str = LetterCase.LOWER, stream: TextIO | None = None
) -> int:
    """Write a 64-bit unsigned integer in hexadecimal without a prefix."""
    try:
        case = LetterCase(letter_case)
    except ValueError:
        raise ValueError(f"invalid letter case: {letter_case!r}") from None
    digits = HEX_DIGITS_UPPER if case is LetterCase.UPPER else HEX_DIGITS_LOWER
    return _emit(_hex_digits(_to_unsigned(_as_int(n), _LONG_BITS), digits), stream)


def put_ptr(address: Any, stream: TextIO | None = None) -> int:
    """Write an address as ``0x``-prefixed lower-case hex, or ``(nil)`` for null.

    None and 0 are null; other integers are used as is; any other object
    stands for its identity.
    """
    if address is None:
        value = 0
    elif isinstance(address, int):
        value = address
    else:
        value = id(address)
    value = _to_unsigned(value, _LONG_BITS)
    if value == 0:
        return _emit(NULL_POINTER, stream)
    return _emit(POINTER_PREFIX + _hex_digits(value, HEX_DIGITS_LOWER), stream)