import pytest

from fractol.libft.strings import (
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

WORDS = ["", "a", "hello", "fractal set", "Julia_1"]


@pytest.mark.parametrize("s", WORDS)
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


@pytest.mark.parametrize("s, c", [("hello", "l"), ("abcabc", "c"), ("xyz", "x")])
def test_strchr_finds_first_occurrence(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") is None
    assert strchr(None, "a") is None


def test_strchr_accepts_character_codes():
    assert strchr("hello", ord("e")) == strchr("hello", "e")
    assert strchr("hello", ord("e") + 256) == strchr("hello", "e")


@pytest.mark.parametrize("s, c", [("hello", "l"), ("abcabc", "a"), ("xyz", "z")])
def test_strrchr_finds_last_occurrence(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_nul_is_the_terminator():
    assert strrchr("hello", "\0") == len("hello")
    assert strrchr("hello", "q") is None


def test_single_character_argument_is_enforced():
    with pytest.raises(ValueError):
        strchr("hello", "he")


@pytest.mark.parametrize("s", WORDS)
def test_strdup_round_trip(s):
    assert strdup(s) == s


@pytest.mark.parametrize("first, second", [("foo", "bar"), ("", "x"), ("x", "")])
def test_strjoin_concatenates(first, second):
    joined = strjoin(first, second)
    assert joined == first + second
    assert joined.startswith(first) and joined.endswith(second)


def test_strjoin_with_missing_parts():
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"


@pytest.mark.parametrize("size", [0, 1, 3, 5, 6, 20])
def test_strlcpy_truncates_and_reports_source_length(size):
    src = "hello"
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert src.startswith(copied)
    assert len(copied) == min(len(src), max(size - 1, 0))


def test_strlcpy_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_fits_whole():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foobar"
    assert total == len("foobar")


def test_strlcat_truncates_to_buffer():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foo") + len("bar")


def test_strlcat_destination_already_full():
    result, total = strlcat("foobar", "baz", 4)
    assert result == "foobar"
    assert total == 4 + len("baz")


@pytest.mark.parametrize("s", WORDS)
def test_strncmp_equal_strings(s):
    assert strncmp(s, s, len(s) + 3) == 0


def test_strncmp_reports_difference_of_first_mismatch():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_compares_less():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_prefix_of_set_names():
    assert strncmp("Mandelbrot", "Mandelbrot", 11) == 0
    assert strncmp("Julia_1", "Julia_2", 8) < 0


def test_strnstr_finds_needle_within_limit():
    haystack = "the fractal set"
    index = strnstr(haystack, "fractal", len(haystack))
    assert haystack[index:index + len("fractal")] == "fractal"


def test_strnstr_respects_length_limit():
    haystack = "the fractal set"
    start = haystack.index("fractal")
    assert strnstr(haystack, "fractal", start + len("fractal") - 1) is None
    assert strnstr(haystack, "fractal", start + len("fractal")) == start


def test_strnstr_empty_needle_and_absent():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


@pytest.mark.parametrize("start, length", [(0, 3), (2, 10), (4, 1), (1, 0)])
def test_substr_is_a_slice(start, length):
    s = "hello"
    assert substr(s, start, length) == s[start:start + length]


def test_substr_past_end_is_empty():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 99, 3) == ""


def test_strtrim_both_ends():
    assert strtrim("xxabxx", "x") == "ab"
    assert strtrim("  -- word --  ", " -") == "word"


def test_strtrim_edge_cases():
    assert strtrim("", "x") == ""
    assert strtrim("abc", "") == "abc"
    assert strtrim("xxxx", "x") == ""


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("a,b,,c", ",") == ["a", "b", "c"]


def test_split_without_separator_and_empty():
    assert split("hello", " ") == ["hello"]
    assert split("", " ") == []
    assert split("    ", " ") == []
    assert split("hello", "\0") == ["hello"]


@pytest.mark.parametrize("s", ["a b c", "  lead", "trail  ", "one"])
def test_split_pieces_hold_no_separator(s):
    pieces = split(s, " ")
    assert all(" " not in piece and piece for piece in pieces)
    assert "".join(pieces) == s.replace(" ", "")


def test_strmapi_applies_with_index():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("xyz", lambda i, ch: str(i)) == "012"
    assert strmapi("", lambda i, ch: ch) == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")
    seen = []

    def visit(index, ch):
        seen.append((index, ch))
        return ch.upper() if index % 2 == 0 else None

    striteri(chars, visit)
    assert seen == list(enumerate("abcd"))
    assert chars == ["A", "b", "C", "d"]