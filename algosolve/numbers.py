"""Algorithms on single integers, with 32-bit limits where the problem has them."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_UINT32_MASK = 0xFFFFFFFF

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    before, last = 1, 2
    for _ in range(3, n + 1):
        before, last = last, before + last
    return last


def divide(dividend: int, divisor: int) -> int:
    """Integer division truncated toward zero, clamped to the 32-bit range."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        chunk, multiple = step, 1
        while chunk << 1 <= remaining:
            chunk <<= 1
            multiple <<= 1
        remaining -= chunk
        quotient += multiple
    return -quotient if negative else quotient


def _square_digit_sum(number: int) -> int:
    return sum(int(digit) ** 2 for digit in str(abs(number)))


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits reaches 1 (Floyd's cycle check)."""
    slow = fast = n
    while True:
        slow = _square_digit_sum(slow)
        fast = _square_digit_sum(_square_digit_sum(fast))
        if fast == 1:
            return True
        if slow == fast:
            return False


def hamming_weight(n: int) -> int:
    """Number of set bits in the 32-bit two's-complement form of ``n``."""
    return bin(n & _UINT32_MASK).count("1")


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of ``n``."""
    return int(f"{n & _UINT32_MASK:032b}"[::-1], 2)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    result = int(str(abs(x))[::-1])
    if x < 0:
        result = -result
    return result if INT_MIN <= result <= INT_MAX else 0


def int_to_roman(num: int) -> str:
    """Roman numeral for ``num``; thousands repeat ``M`` and zero gives ``""``."""
    if num < 0:
        raise ValueError("num must not be negative")
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        times, num = divmod(num, value)
        parts.append(numeral * times)
    return "".join(parts)