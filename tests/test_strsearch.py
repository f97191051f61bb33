import pytest
from hypothesis import given
from hypothesis import strategies as st

from libkern.strsearch import (
    Tokenizer,
    strchr,
    strcspn,
    strpbrk,
    strrchr,
    strspn,
    strstr,
    strtok,
)

small_text = st.text(alphabet="abcxyz ,", max_size=20)


@given(small_text, st.sampled_from("abcxyz ,"))
def test_strchr_agrees_with_find(s, ch):
    index = strchr(s, ch)
    expected = s.find(ch)
    assert index == (None if expected < 0 else expected)


@given(small_text, st.sampled_from("abcxyz ,"))
def test_strrchr_agrees_with_rfind(s, ch):
    index = strrchr(s, ch)
    expected = s.rfind(ch)
    assert index == (None if expected < 0 else expected)


def test_strchr_accepts_integer_code():
    assert strchr("hello", ord("e")) == "hello".find("e")


def test_strchr_never_finds_terminator():
    assert strchr("abc", 0) is None


def test_search_stops_at_nul():
    assert strchr("ab\0c", "c") is None
    assert strrchr("ab\0b", "b") == 1


def test_strrchr_empty_string():
    assert strrchr("", "a") is None


def test_strchr_rejects_multi_character_value():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@given(small_text, st.text(alphabet="abc,", max_size=4))
def test_strcspn_invariant(s1, s2):
    n = strcspn(s1, s2)
    assert all(ch not in s2 for ch in s1[:n])
    assert n == len(s1) or s1[n] in s2


@given(small_text, small_text, st.text(alphabet="abc ", max_size=4))
def test_strspn_is_additive(a, b, accept):
    assert strspn(a + b, accept) == strspn(a, accept) + strspn(b, accept)


@given(small_text)
def test_strspn_bounds(s):
    assert strspn(s, s) == len(s)
    assert strspn(s, "") == 0


def test_strspn_counts_past_rejected_characters():
    assert strspn("xaxa", "a") == 2


@given(small_text, st.text(alphabet="abc,", max_size=4))
def test_strpbrk_matches_strcspn(s1, s2):
    index = strpbrk(s1, s2)
    n = strcspn(s1, s2)
    assert index == (None if n == len(s1) else n)


@given(small_text, st.text(alphabet="abcxyz", min_size=1, max_size=3))
def test_strstr_result_is_a_real_occurrence(hay, needle):
    index = strstr(hay, needle)
    if index is None:
        assert needle not in hay or hay.find(needle) >= 0
    else:
        assert hay[index:index + len(needle)] == needle


@given(small_text)
def test_strstr_empty_needle_matches_start(hay):
    assert strstr(hay, "") == 0


def test_strstr_simple_match():
    assert strstr("hello world", "world") == "hello world".find("world")


def test_strstr_missing():
    assert strstr("hello", "xyz") is None


def test_strstr_resumes_at_mismatch():
    assert strstr("aab", "ab") == 1
    assert strstr("aaab", "aab") is None


def test_strtok_single_token_without_separators():
    assert strtok("abc", ",") == ["abc"]


def test_strtok_skips_leading_separators():
    assert strtok(",,,abc", ",") == ["abc"]


def test_strtok_empty_text():
    assert strtok("", ",") == []


def test_strtok_moves_by_strspn_count():
    assert strtok("a b c", " ") == ["b", "c"]


def test_tokenizer_returns_none_after_exhaustion():
    tokenizer = Tokenizer("word")
    assert tokenizer.next(" ") == "word"
    assert tokenizer.next(" ") is None
    assert tokenizer.next(" ") is None


def test_tokenizer_iteration_uses_last_separators():
    tokenizer = Tokenizer("abc;def")
    tokenizer.next(",")
    assert list(tokenizer) == []


def test_tokenizer_iterates_with_default_whitespace():
    assert list(Tokenizer("   hello")) == ["hello"]


def test_tokenizers_are_independent():
    first = Tokenizer("one")
    second = Tokenizer("two")
    assert first.next(",") == "one"
    assert second.next(",") == "two"
    assert first.next(",") is None