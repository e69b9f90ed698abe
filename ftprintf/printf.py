"""A small printf supporting the conversions c, s, d, i, u, p, x, X and %."""

from __future__ import annotations

from typing import Any, Callable, Iterator, TextIO

from ftprintf.output import (
    LetterCase,
    put_char,
    put_nbr,
    put_nbr_hex,
    put_nbr_u,
    put_ptr,
    put_str,
)

_UINT_MASK = 0xFFFFFFFF

_Writer = Callable[[Any, "TextIO | None"], int]

_CONVERSIONS: dict[str, _Writer] = {
    "c": put_char,
    "s": put_str,
    "d": put_nbr,
    "i": put_nbr,
    "u": put_nbr_u,
    "p": put_ptr,
    "X": lambda value, stream: put_nbr_hex(
        _uint(value), LetterCase.UPPER, stream
    ),
    "x": lambda value, stream: put_nbr_hex(
        _uint(value), LetterCase.LOWER, stream
    ),
}


def _uint(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value & _UINT_MASK


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def ft_printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Format ``fmt`` with ``args`` to ``stream`` (stdout by default).

    Returns the number of characters written. Unknown conversions and a
    trailing lone ``%`` produce no output and consume no argument.
    """
    remaining = iter(args)
    chars = iter(fmt)
    count = 0
    for ch in chars:
        if ch != "%":
            count += put_char(ch, stream)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            count += put_char("%", stream)
            continue
        writer = _CONVERSIONS.get(spec)
        if writer is None:
            continue
        count += writer(_next_arg(remaining, spec), stream)
    return count