"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

GREETING_PREFIX: Final[str] = "Hello, "
GREETING_SUFFIX: Final[str] = "!"

#: Operands of :func:`add` model a signed 32-bit integer.
INT_BITS: Final[int] = 32
INT_MIN: Final[int] = -(2 ** (INT_BITS - 1))
INT_MAX: Final[int] = 2 ** (INT_BITS - 1) - 1

#: The factorial accumulator is an unsigned 64-bit integer.
UINT64_MASK: Final[int] = 2**64 - 1


def greet(name: str) -> str:
    """Return a greeting message for ``name``.

    Any text is accepted, including the empty string.

    Example:
        >>> greet("World")
        'Hello, World!'
        >>> greet("")
        'Hello, !'
    """
    return GREETING_PREFIX + name + GREETING_SUFFIX


def _wrap_signed(value: int, bits: int = INT_BITS) -> int:
    """Reduce ``value`` into the two's-complement range of ``bits`` bits.

    Example:
        >>> _wrap_signed(2**31)
        -2147483648
        >>> _wrap_signed(-1)
        -1
    """
    span = 1 << bits
    value &= span - 1
    if value >= span >> 1:
        value -= span
    return value


def add(a: int, b: int) -> int:
    """Add two integers and return the result.

    The sum wraps silently into the signed 32-bit range; overflow is never
    reported.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        ``a + b`` reduced into ``[INT_MIN, INT_MAX]``.

    Example:
        >>> add(-5, -3)
        -8
        >>> add(INT_MAX, 1) == INT_MIN
        True
    """
    return _wrap_signed(a + b)


def factorial(n: int) -> int:
    """Compute ``n!`` in an unsigned 64-bit accumulator.

    Precondition: ``n >= 0``. It is not checked; any ``n <= 1`` (negative
    values included) yields ``1``. Results that exceed 64 bits wrap modulo
    ``2**64``.

    Example:
        >>> factorial(10)
        3628800
        >>> factorial(-4)
        1
        >>> factorial(21) == (51090942171709440000 & UINT64_MASK)
        True
    """
    if n <= 1:
        return 1
    result = 1
    for idx in range(2, n + 1):
        result = (result * idx) & UINT64_MASK
    return result


__all__ = [
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "INT_BITS",
    "INT_MAX",
    "INT_MIN",
    "UINT64_MASK",
    "add",
    "factorial",
    "greet",
]
