import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprintf.output import (
    LetterCase,
    put_char,
    put_nbr,
    put_nbr_hex,
    put_nbr_u,
    put_ptr,
    put_str,
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1
ULONG_MAX = 2**64 - 1


def test_put_char_writes_one_character():
    buf = io.StringIO()
    count = put_char("a", stream=buf)
    assert (count, buf.getvalue()) == (1, "a")


def test_put_char_from_byte_value():
    buf = io.StringIO()
    count = put_char(ord("Q"), stream=buf)
    assert (count, buf.getvalue()) == (1, "Q")


def test_put_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        put_char("ab", stream=io.StringIO())


def test_put_str_none_prints_null():
    buf = io.StringIO()
    count = put_str(None, stream=buf)
    assert (count, buf.getvalue()) == (6, "(null)")


@given(st.text())
def test_put_str_round_trip(text):
    buf = io.StringIO()
    count = put_str(text, stream=buf)
    assert buf.getvalue() == text
    assert count == len(text)


def test_put_str_rejects_non_string():
    with pytest.raises(TypeError):
        put_str(5, stream=io.StringIO())


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_put_nbr_matches_decimal(n):
    buf = io.StringIO()
    count = put_nbr(n, stream=buf)
    out = buf.getvalue()
    assert int(out) == n
    assert count == len(out)


def test_put_nbr_int_min():
    buf = io.StringIO()
    count = put_nbr(INT_MIN, stream=buf)
    assert (count, buf.getvalue()) == (11, "-2147483648")


def test_put_nbr_wraps_to_32_bits():
    buf = io.StringIO()
    put_nbr(INT_MAX + 1, stream=buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("1", stream=io.StringIO())


@given(st.integers(min_value=0, max_value=UINT_MAX))
def test_put_nbr_u_matches_decimal(n):
    buf = io.StringIO()
    count = put_nbr_u(n, stream=buf)
    out = buf.getvalue()
    assert int(out) == n
    assert count == len(out)


def test_put_nbr_u_negative_wraps():
    buf = io.StringIO()
    put_nbr_u(-1, stream=buf)
    assert buf.getvalue() == str(UINT_MAX)


@given(st.integers(min_value=0, max_value=ULONG_MAX))
def test_put_nbr_hex_lower_round_trip(n):
    buf = io.StringIO()
    count = put_nbr_hex(n, LetterCase.LOWER, stream=buf)
    out = buf.getvalue()
    assert int(out, 16) == n
    assert out == out.lower()
    assert count == len(out)


@given(st.integers(min_value=0, max_value=ULONG_MAX))
def test_put_nbr_hex_upper_round_trip(n):
    buf = io.StringIO()
    count = put_nbr_hex(n, "u", stream=buf)
    out = buf.getvalue()
    assert int(out, 16) == n
    assert out == out.upper()
    assert count == len(out)


def test_put_nbr_hex_digits():
    buf = io.StringIO()
    put_nbr_hex(0x0123456789ABCDEF, "l", stream=buf)
    assert buf.getvalue() == "123456789abcdef"


def test_put_nbr_hex_invalid_case():
    with pytest.raises(ValueError):
        put_nbr_hex(10, "q", stream=io.StringIO())


@pytest.mark.parametrize("address", [0, None])
def test_put_ptr_null(address):
    buf = io.StringIO()
    count = put_ptr(address, stream=buf)
    assert (count, buf.getvalue()) == (5, "(nil)")


@given(st.integers(min_value=1, max_value=ULONG_MAX))
def test_put_ptr_round_trip(n):
    buf = io.StringIO()
    count = put_ptr(n, stream=buf)
    out = buf.getvalue()
    assert out.startswith("0x")
    assert int(out[2:], 16) == n
    assert count == len(out)


def test_put_ptr_object_uses_identity():
    obj = object()
    buf = io.StringIO()
    put_ptr(obj, stream=buf)
    assert buf.getvalue() == "0x" + format(id(obj), "x")


def test_default_stream_is_stdout(capsys):
    assert put_str("hello") == 5
    assert capsys.readouterr().out == "hello"