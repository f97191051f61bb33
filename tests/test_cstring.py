import pytest
from hypothesis import given
from hypothesis import strategies as st

from libkern.cstring import (
    strcat,
    strcmp,
    strcpy,
    strlen,
    strncat,
    strncmp,
    strncpy,
)

texts = st.text(alphabet=st.characters(min_codepoint=1))


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == len("ab")
    assert strlen("") == 0


def test_strcpy_returns_source():
    assert strcpy("old contents", "new") == "new"
    assert strcpy("x", "ab\0cd") == "ab"


def test_strncpy_short_source_is_terminated():
    assert strncpy("xxxxxxxx", "abc", 5) == "abc"
    assert strncpy("xxxxxxxx", "abc", 3) == "abc"


def test_strncpy_long_source_keeps_destination_tail():
    dst = "xxxxxxxx"
    assert strncpy(dst, "abcdef", 3) == "abc" + dst[3:]


def test_strncpy_negative():
    with pytest.raises(ValueError):
        strncpy("a", "b", -1)


def test_strcat_appends():
    assert strcat("foo", "bar") == "foo" + "bar"
    assert strcat("foo\0junk", "bar") == "foo" + "bar"


def test_strncat_limits_source():
    assert strncat("foo", "barbaz", 3) == "foo" + "bar"
    assert strncat("foo", "ba", 10) == "foo" + "ba"
    assert strncat("foo", "bar", 0) == "foo"


def test_strncat_negative():
    with pytest.raises(ValueError):
        strncat("a", "b", -2)


def test_strcmp_equal():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc\0x", "abc\0y") == 0


def test_strcmp_length_decides_first():
    # A shorter string sorts first even when its characters are larger.
    assert strcmp("z", "aa") < 0
    assert strcmp("aa", "z") > 0
    assert strcmp("abcd", "ab") == len("abcd") - len("ab")


def test_strcmp_same_length_character_difference():
    assert strcmp("abc", "abd") == ord("c") - ord("d")


def test_strncmp_prefix_equal():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_difference_within_limit():
    assert strncmp("abcdef", "abxdef", 4) == ord("c") - ord("x")


def test_strncmp_shorter_string_hits_terminator():
    assert strncmp("ab", "abcd", 3) == -ord("c")


def test_strncmp_both_short_uses_length():
    assert strncmp("z", "aa", 10) < 0
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


@given(texts, texts)
def test_strcat_length_invariant(a, b):
    result = strcat(a, b)
    assert strlen(result) == strlen(a) + strlen(b)
    assert result.startswith(a)


@given(texts, texts, st.integers(min_value=0, max_value=20))
def test_strncat_is_prefix_of_strcat(a, b, n):
    assert strcat(a, b).startswith(strncat(a, b, n))
    assert strlen(strncat(a, b, n)) <= strlen(a) + n


@given(texts)
def test_strcmp_reflexive(s):
    assert strcmp(s, s) == 0
    assert strncmp(s, s, len(s) + 1) == 0


@given(texts, texts)
def test_strcmp_antisymmetric(a, b):
    assert strcmp(a, b) == -strcmp(b, a)


@given(texts, st.integers(min_value=0, max_value=20))
def test_strncpy_then_strncmp(src, n):
    copied = strncpy("", src, n)
    assert strncmp(copied, src, n) == 0