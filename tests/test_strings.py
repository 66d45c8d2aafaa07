import pytest

from pushswap.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s", ["", "a", "push_swap", "12 -3 45"])
def test_strlen_matches_length(s):
    assert strlen(s) == len(s)


def test_strlen_none_is_zero():
    assert strlen(None) == 0


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "b"), ("x", "x")])
def test_strchr_finds_first(s, c):
    idx = strchr(s, c)
    assert s[idx] == c
    assert c not in s[:idx]


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == strlen("abc")


def test_strchr_missing_and_none():
    assert strchr("abc", "z") is None
    assert strchr(None, "a") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "b"), ("x", "x")])
def test_strrchr_finds_last(s, c):
    idx = strrchr(s, c)
    assert s[idx] == c
    assert c not in s[idx + 1:]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "q") is None


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_ordering_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_prefix_difference_is_code():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("sa\n", "sa", 2) == 0


def test_strncmp_negative_raises():
    with pytest.raises(ValueError):
        strncmp("a", "a", -1)


def test_strnstr_empty_needle_matches_start():
    assert strnstr("anything", "", 3) == 0
    assert strnstr("anything", None, 3) == 0


def test_strnstr_found_position_holds_needle():
    haystack, needle = "foo--bar", "--"
    idx = strnstr(haystack, needle, len(haystack))
    assert haystack[idx:idx + len(needle)] == needle
    assert needle not in haystack[:idx + len(needle) - 1]


def test_strnstr_respects_length_limit():
    haystack, needle = "foo--bar", "--"
    idx = strnstr(haystack, needle, len(haystack))
    assert strnstr(haystack, needle, idx + len(needle) - 1) is None
    assert strnstr(haystack, needle, idx + len(needle)) == idx


def test_strnstr_missing():
    assert strnstr("12 34", "--", len("12 34")) is None


def test_strdup_copies():
    original = "stack"
    assert strdup(original) == original


def test_substr_round_trip():
    s = "push_swap"
    for k in range(len(s) + 1):
        assert substr(s, 0, k) + substr(s, k, len(s)) == s


def test_substr_bounds():
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 0, 100) == "abc"
    assert substr(None, 0, 1) is None


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin(None, "x") is None
    assert strjoin("x", None) is None


@pytest.mark.parametrize(
    "s,charset", [("  hi  ", " "), ("xxyhelloyx", "xy"), ("keep", ""), ("aaa", "a"), ("", " ")]
)
def test_strtrim_invariants(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


def test_strtrim_all_trimmed_and_empty_set():
    assert strtrim("aaa", "a") == ""
    assert strtrim("keep", "") == "keep"


def test_split_words():
    assert split("  a b  c ", " ") == ["a", "b", "c"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_invariants():
    s = "1 -2  3   45 "
    words = split(s, " ")
    assert all(words)
    assert all(" " not in w for w in words)
    assert " ".join(words) == " ".join(s.split())


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_strmapi():
    s = "abc"
    assert strmapi(s, lambda i, ch: ch) == s
    assert strmapi(s, lambda i, ch: ch.upper()) == s.upper()
    seen = []
    strmapi(s, lambda i, ch: seen.append(i) or ch)
    assert seen == list(range(len(s)))
    assert strmapi(None, lambda i, ch: ch) is None


def test_striteri_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper())
    assert "".join(chars) == "ABC"


def test_striteri_none_keeps_and_order():
    chars = list("xyz")
    calls = []
    striteri(chars, lambda i, ch: calls.append((i, ch)))
    assert chars == list("xyz")
    assert calls == list(enumerate("xyz"))


def test_strlcpy():
    src = "hello"
    assert strlcpy(src, 0) == ("", len(src))
    assert strlcpy(src, 100) == (src, len(src))
    copied, total = strlcpy(src, 3)
    assert copied == src[:2]
    assert total == len(src)


def test_strlcpy_negative_raises():
    with pytest.raises(ValueError):
        strlcpy("a", -1)


def test_strlcat_small_size():
    dst, src = "abc", "de"
    assert strlcat(dst, src, 2) == (dst, 2 + len(src))


def test_strlcat_full_and_truncated():
    dst, src = "abc", "defg"
    assert strlcat(dst, src, 100) == (dst + src, len(dst) + len(src))
    result, total = strlcat(dst, src, len(dst) + 3)
    assert len(result) == len(dst) + 2
    assert result.startswith(dst)
    assert src.startswith(result[len(dst):])
    assert total == len(dst) + len(src)