"""Parsing and rendering of integers in arbitrary bases, and word splitting."""

from __future__ import annotations

from itertools import takewhile

__all__ = [
    "BASE_10",
    "BASE_16",
    "ERROR_COLOR",
    "atoi",
    "strtol",
    "atoi_base",
    "atou32_base",
    "has_unique_chars",
    "count_digits",
    "ucount_digits",
    "itoa",
    "uitoa",
    "split",
]

BASE_10 = "0123456789"
BASE_16 = "0123456789ABCDEF"
ERROR_COLOR = 0xFF00FFFF

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset(BASE_10)
_U32_MASK = 0xFFFFFFFF


def _take_sign(text: str) -> tuple[int, str]:
    """Drop leading whitespace and an optional sign, returning the sign."""
    text = text.lstrip(_WHITESPACE)
    if text[:1] in ("-", "+"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def _leading_digits(text: str) -> tuple[int, int]:
    """Value of the leading ASCII decimal digits and how many there were."""
    digits = "".join(takewhile(_DIGITS.__contains__, text))
    return (int(digits) if digits else 0), len(digits)


def _check_base(base: str) -> None:
    if not has_unique_chars(base):
        raise ValueError(f"invalid base: {base!r}")


def atoi(text: str) -> int:
    """Integer value of the leading decimal number in ``text``.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    sign, body = _take_sign(text)
    value, _ = _leading_digits(body)
    return sign * value


def strtol(text: str) -> tuple[int, str | None]:
    """Parse a leading decimal number and report what follows it.

    Returns ``(value, rest)`` where ``rest`` is the text after the last
    digit, or ``None`` when no digit was found at all.
    """
    sign, body = _take_sign(text)
    value, count = _leading_digits(body)
    if not count:
        return 0, None
    return sign * value, body[count:]


def atoi_base(text: str, base: str) -> int:
    """Integer value of the leading number in ``text`` written in ``base``.

    Parsing stops at the first character not in ``base``.
    Raises ValueError if ``base`` is empty or repeats a symbol.
    """
    _check_base(base)
    sign, body = _take_sign(text)
    radix = len(base)
    result = 0
    for char in body:
        position = base.find(char)
        if position < 0:
            break
        result = result * radix + position
    return sign * result


def atou32_base(text: str, base: str) -> int:
    """Unsigned 32-bit value of ``text`` written in ``base``.

    Accepts leading whitespace and a ``+`` sign; the value wraps modulo
    2**32. Any character outside ``base`` makes the result ERROR_COLOR.
    Raises ValueError if ``base`` is empty or repeats a symbol.
    """
    _check_base(base)
    body = text.lstrip(_WHITESPACE)
    if body.startswith("+"):
        body = body[1:]
    radix = len(base)
    result = 0
    for char in body:
        position = base.find(char)
        if position < 0:
            return ERROR_COLOR
        result = (result * radix + position) & _U32_MASK
    return result


def has_unique_chars(text: str) -> bool:
    """True if ``text`` is non-empty and has no repeated character."""
    return bool(text) and len(set(text)) == len(text)


def _count(n: int, base_len: int) -> int:
    if base_len <= 0:
        raise ValueError("base length must be positive")
    if base_len == 1 and n:
        raise ValueError("a one-symbol base cannot represent a non-zero value")
    count = 1
    n //= base_len
    while n:
        count += 1
        n //= base_len
    return count


def count_digits(n: int, base_len: int) -> int:
    """Number of digits of ``|n|`` in a base with ``base_len`` symbols."""
    return _count(abs(n), base_len)


def ucount_digits(n: int, base_len: int) -> int:
    """Number of digits of the non-negative ``n`` in a base of ``base_len``."""
    if n < 0:
        raise ValueError("value must not be negative")
    return _count(n, base_len)


def _render(n: int, base: str) -> str:
    radix = len(base)
    if radix == 1 and n:
        raise ValueError("a one-symbol base cannot represent a non-zero value")
    symbols = []
    while True:
        n, remainder = divmod(n, radix)
        symbols.append(base[remainder])
        if not n:
            break
    return "".join(reversed(symbols))


def itoa(n: int, base: str) -> str:
    """Render the signed integer ``n`` in ``base``, with a leading ``-``.

    Raises ValueError if ``base`` is empty or repeats a symbol.
    """
    _check_base(base)
    digits = _render(abs(n), base)
    return "-" + digits if n < 0 else digits


def uitoa(n: int, base: str) -> str:
    """Render the non-negative integer ``n`` in ``base``.

    Raises ValueError for a negative ``n`` or an invalid ``base``.
    """
    _check_base(base)
    if n < 0:
        raise ValueError("value must not be negative")
    return _render(n, base)


def split(text: str, sep: str) -> list[str]:
    """Words of ``text`` separated by runs of the character ``sep``."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]