import pytest

from ftkit.chars import to_upper
from ftkit.cstring import atoi
from ftkit.text import (
    itoa,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_beyond_end():
    assert substr("abc", 1, 100) == "bc"


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_zero_length():
    assert substr("abc", 0, 0) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "bar") == "bar"
    assert strjoin("foo", "") == "foo"


def test_strjoin_length():
    a, b = "hello ", "world"
    assert len(strjoin(a, b)) == len(a) + len(b)


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_any_of_set():
    assert strtrim("-+-core+-", "+-") == "core"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  keep  ", "") == "  keep  "


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_no_separator():
    assert split("", " ") == []
    assert split("abc", "x") == ["abc"]
    assert split(",,,", ",") == []


def test_split_words_hold_no_separator():
    s, sep = "a,b,,c,", ","
    words = split(s, sep)
    assert all(word and sep not in word for word in words)
    assert "".join(words) == s.replace(sep, "")


def test_split_separator_as_code():
    assert split("a b", ord(" ")) == split("a b", " ")


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 7, -7, 1234, -98765, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)
    with pytest.raises(OverflowError):
        itoa(-2147483649)


def test_strmapi_uses_mapping():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "abc".upper()


def test_strmapi_passes_indexes():
    seen = []

    def record(i, c):
        seen.append((i, c))
        return c

    assert strmapi("xyz", record) == "xyz"
    assert seen == list(enumerate("xyz"))


def test_strmapi_stops_at_produced_nul():
    assert strmapi("abc", lambda i, c: "\0" if i == 1 else c) == "a"


def test_striteri_keeps_when_none():
    assert striteri("abc", lambda i, c: None) == "abc"


def test_striteri_replaces_selected():
    result = striteri("abcd", lambda i, c: to_upper(c) if i % 2 == 0 else None)
    assert result[0::2] == "ac".upper()
    assert result[1::2] == "bd"


def test_striteri_visits_every_character_in_order():
    seen = []
    striteri("hey", lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("hey"))