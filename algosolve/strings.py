"""Algorithms over strings of text and of decimal or binary digits."""

from __future__ import annotations

from collections import Counter
from itertools import groupby, takewhile, zip_longest
from typing import Iterable, Sequence

from algosolve.numbers import INT_MAX, INT_MIN

_DECIMAL_DIGITS = frozenset("0123456789")
_BINARY_DIGITS = frozenset("01")


def add_binary(a: str, b: str) -> str:
    """Sum of two binary numbers written as strings of ``0`` and ``1``."""
    if not set(a + b) <= _BINARY_DIGITS:
        raise ValueError("binary numbers may only hold the digits 0 and 1")
    bits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(carry + int(x) + int(y), 2)
        bits.append(str(bit))
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def count_and_say(n: int) -> str:
    """Term ``n`` of the count-and-say sequence; terms below 1 give the first."""
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def title_to_number(column_title: str) -> int:
    """Column number of a spreadsheet column title such as ``AB``."""
    number = 0
    for letter in column_title:
        if not "A" <= letter <= "Z":
            raise ValueError(f"column titles use the letters A to Z, not {letter!r}")
        number = number * 26 + ord(letter) - ord("A") + 1
    return number


def convert_to_title(column_number: int) -> str:
    """Spreadsheet column title of a column number; numbers below 1 give ``""``."""
    letters = []
    while column_number > 0:
        column_number, rest = divmod(column_number - 1, 26)
        letters.append(chr(ord("A") + rest))
    return "".join(reversed(letters))


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    for start in range(len(haystack) - len(needle) + 1):
        if haystack.startswith(needle, start):
            return start
    return -1


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group the strings that are anagrams of one another."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for a, b in zip(s, t):
        if a in mapping:
            if mapping[a] != b:
                return False
        elif b in used:
            return False
        else:
            mapping[a] = b
            used.add(b)
    return True


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word once surrounding whitespace is trimmed."""
    return len(s.strip().rsplit(" ", 1)[-1])


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the leftmost one wins a tie."""
    size = len(s)

    def expand(lo: int, hi: int) -> tuple[int, int]:
        while lo >= 0 and hi < size and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        return lo + 1, hi - lo - 1

    best_start = best_length = 0
    for centre in range(size):
        for lo, hi in ((centre, centre), (centre, centre + 1)):
            start, length = expand(lo, hi)
            if length > best_length:
                best_start, best_length = start, length
    return s[best_start : best_start + best_length]


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def _require_digits(number: str) -> None:
    if not number or not set(number) <= _DECIMAL_DIGITS:
        raise ValueError(f"not a string of decimal digits: {number!r}")


def multiply(num1: str, num2: str) -> str:
    """Product of two non-negative decimal numbers given as digit strings."""
    _require_digits(num1)
    _require_digits(num2)
    if num1 == "0" or num2 == "0":
        return "0"
    product = [0] * (len(num1) + len(num2))
    for i, a in reversed(list(enumerate(num1))):
        carry = 0
        for j, b in reversed(list(enumerate(num2))):
            carry, product[i + j + 1] = divmod(
                product[i + j + 1] + int(a) * int(b) + carry, 10
            )
        product[i] = carry
    return "".join(map(str, product)).lstrip("0") or "0"


def is_match(s: str, p: str) -> bool:
    """Tell whether pattern ``p`` with ``.`` and ``*`` matches the whole of ``s``."""
    width = len(p) + 1
    # matches[i][j]: the first i chars of s match the first j chars of p
    matches = [[False] * width for _ in range(len(s) + 1)]
    matches[0][0] = True
    for j in range(2, width):
        matches[0][j] = p[j - 1] == "*" and matches[0][j - 2]

    for i, char in enumerate(s, start=1):
        row, above = matches[i], matches[i - 1]
        for j, token in enumerate(p, start=1):
            if token in (".", char):
                row[j] = above[j - 1]
            elif token == "*" and j >= 2:
                repeats = p[j - 2] in (".", char) and above[j]
                row[j] = row[j - 2] or repeats
    return matches[-1][-1]


def convert_zigzag(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1 or len(s) <= num_rows:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    row, step = 0, 1
    for char in s:
        rows[row].append(char)
        if row == 0:
            step = 1
        elif row == num_rows - 1:
            step = -1
        row += step
    return "".join("".join(chars) for chars in rows)


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    cleaned = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return cleaned == cleaned[::-1]


def my_atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit range.

    Leading spaces are skipped; anything after the digits is ignored, and
    text with no digits gives 0.
    """
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = "".join(takewhile(lambda char: char in _DECIMAL_DIGITS, rest))
    value = sign * int(digits or "0")
    return max(INT_MIN, min(INT_MAX, value))


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Start indices of substrings of ``s`` made of all ``words`` joined in any order.

    The words must all have the same length.
    """
    if not words:
        raise ValueError("words must not be empty")
    width = len(words[0])
    if any(len(word) != width for word in words):
        raise ValueError("all words must have the same length")
    count = len(words)
    result: list[int] = []
    if width == 0 or width * count > len(s):
        return result

    needed = Counter(words)
    for offset in range(width):
        window: Counter[str] = Counter()
        used = 0
        start = offset
        for j in range(offset, len(s) - width + 1, width):
            word = s[j : j + width]
            if word not in needed:
                window.clear()
                used = 0
                start = j + width
                continue
            window[word] += 1
            used += 1
            while window[word] > needed[word]:
                window[s[start : start + width]] -= 1
                used -= 1
                start += width
            if used == count:
                result.append(start)
                window[s[start : start + width]] -= 1
                used -= 1
                start += width
    return result