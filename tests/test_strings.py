import re
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.numbers import INT_MAX, INT_MIN
from algosolve.strings import (
    add_binary,
    convert_to_title,
    convert_zigzag,
    count_and_say,
    find_substring,
    group_anagrams,
    is_isomorphic,
    is_match,
    is_palindrome,
    length_of_last_word,
    length_of_longest_substring,
    longest_palindrome,
    multiply,
    my_atoi,
    str_str,
    title_to_number,
)

small_text = st.text(alphabet="abc", max_size=12)


@given(st.integers(0, 2**70), st.integers(0, 2**70))
def test_add_binary_matches_integer_sum(a, b):
    assert add_binary(f"{a:b}", f"{b:b}") == f"{a + b:b}"


def test_add_binary_rejects_other_digits():
    with pytest.raises(ValueError):
        add_binary("102", "1")


def test_count_and_say_starts_with_one():
    assert count_and_say(1) == "1"
    assert count_and_say(0) == "1"


@pytest.mark.parametrize("n", range(1, 12))
def test_count_and_say_describes_previous_term(n):
    term = count_and_say(n + 1)
    decoded = "".join(digit * int(times) for times, digit in zip(term[::2], term[1::2]))
    assert decoded == count_and_say(n)


def test_column_titles_round_trip_in_order():
    titles = [convert_to_title(n) for n in range(1, 800)]
    assert titles == sorted(titles, key=lambda title: (len(title), title))
    assert len(set(titles)) == len(titles)
    assert [title_to_number(title) for title in titles] == list(range(1, 800))


@given(st.integers(1, 10**9))
def test_column_number_round_trip(number):
    assert title_to_number(convert_to_title(number)) == number


def test_title_to_number_rejects_lower_case():
    with pytest.raises(ValueError):
        title_to_number("ab")


@given(small_text, st.text(alphabet="abc", max_size=4))
def test_str_str_agrees_with_find(haystack, needle):
    assert str_str(haystack, needle) == haystack.find(needle)


@given(st.lists(small_text, max_size=10))
def test_group_anagrams_partitions_by_letters(words):
    groups = group_anagrams(words)
    assert Counter(word for group in groups for word in group) == Counter(words)
    keys = [{"".join(sorted(word)) for word in group} for group in groups]
    assert all(len(key) == 1 for key in keys)
    assert len({key.pop() for key in keys}) == len(groups)


@given(st.lists(st.tuples(st.sampled_from("abc"), st.sampled_from("xyz")), max_size=10))
def test_is_isomorphic_agrees_with_first_index_pattern(pairs):
    s = "".join(a for a, _ in pairs)
    t = "".join(b for _, b in pairs)
    same_pattern = [s.index(c) for c in s] == [t.index(c) for c in t]
    assert is_isomorphic(s, t) == same_pattern


@given(small_text)
def test_string_is_isomorphic_to_itself(s):
    assert is_isomorphic(s, s)


def test_is_isomorphic_needs_equal_lengths():
    assert not is_isomorphic("ab", "abc")


@given(
    st.lists(st.text(alphabet="abc", min_size=1, max_size=5), min_size=1, max_size=5),
    st.integers(0, 3),
    st.integers(0, 3),
)
def test_length_of_last_word(words, lead, trail):
    s = " " * lead + " ".join(words) + " " * trail
    assert length_of_last_word(s) == len(words[-1])


@given(st.text(alphabet="ab", max_size=12))
def test_longest_palindrome_is_longest(s):
    found = longest_palindrome(s)
    assert found == found[::-1]
    assert found in s
    every = [s[i:j] for i in range(len(s)) for j in range(i + 1, len(s) + 1)]
    assert all(len(sub) <= len(found) for sub in every if sub == sub[::-1])


@given(st.text(alphabet="abcd", max_size=14))
def test_length_of_longest_substring_is_maximal(s):
    length = length_of_longest_substring(s)
    windows = [s[i:j] for i in range(len(s)) for j in range(i + 1, len(s) + 1)]
    distinct = [w for w in windows if len(set(w)) == len(w)]
    assert length == max((len(w) for w in distinct), default=0)


@given(st.integers(0, 10**30), st.integers(0, 10**30))
def test_multiply_matches_integer_product(a, b):
    assert multiply(str(a), str(b)) == str(a * b)


@pytest.mark.parametrize("bad", ["", "12a", "-3"])
def test_multiply_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        multiply(bad, "2")


pattern_part = st.tuples(st.sampled_from("ab."), st.booleans()).map(
    lambda part: part[0] + ("*" if part[1] else "")
)


@given(st.text(alphabet="ab", max_size=8), st.lists(pattern_part, max_size=5))
def test_is_match_agrees_with_re(s, parts):
    p = "".join(parts)
    assert is_match(s, p) == (re.fullmatch(p, s) is not None)


def test_zigzag_worked_example():
    assert convert_zigzag("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@given(st.text(alphabet="abcdef", max_size=20), st.integers(1, 6))
def test_zigzag_rearranges_characters(s, rows):
    result = convert_zigzag(s, rows)
    assert sorted(result) == sorted(s)
    if rows == 1 or len(s) <= rows:
        assert result == s
    else:
        assert result.startswith(s[:: 2 * (rows - 1)])


def test_zigzag_rejects_zero_rows():
    with pytest.raises(ValueError):
        convert_zigzag("abc", 0)


printable = st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=20)


@given(printable)
def test_mirrored_text_is_palindrome(s):
    assert is_palindrome(s + s[::-1])


@given(printable)
def test_is_palindrome_ignores_case_and_punctuation(s):
    result = is_palindrome(s)
    assert is_palindrome(s.upper()) == result
    assert is_palindrome(s.replace(" ", ", ")) == result
    assert is_palindrome(s[::-1]) == result


def test_is_palindrome_rejects_plain_text():
    assert is_palindrome("race a car") is False


@given(st.integers(INT_MIN, INT_MAX), st.integers(0, 4))
def test_my_atoi_parses_in_range_numbers(n, spaces):
    assert my_atoi(" " * spaces + str(n) + "abc") == n


@given(st.integers(INT_MAX + 1, 10**40))
def test_my_atoi_clamps(n):
    assert my_atoi(str(n)) == INT_MAX
    assert my_atoi("+" + str(n)) == INT_MAX
    assert my_atoi("-" + str(n)) == INT_MIN


def test_my_atoi_stops_at_words():
    assert my_atoi("words and 987") == 0


@st.composite
def substring_cases(draw):
    width = draw(st.integers(1, 2))
    word = st.text(alphabet="ab", min_size=width, max_size=width)
    words = draw(st.lists(word, min_size=1, max_size=3))
    s = draw(st.text(alphabet="ab", max_size=12))
    return s, words


@given(substring_cases())
def test_find_substring_finds_every_start(case):
    s, words = case
    width = len(words[0])
    total = width * len(words)
    expected = [
        i
        for i in range(len(s) - total + 1)
        if Counter(s[k : k + width] for k in range(i, i + total, width)) == Counter(words)
    ]
    assert sorted(find_substring(s, words)) == expected


def test_find_substring_rejects_bad_words():
    with pytest.raises(ValueError):
        find_substring("abc", [])
    with pytest.raises(ValueError):
        find_substring("abc", ["a", "bc"])