import pytest

from fractol.mlx.wordtab import find, find_outside_quotes, split_words


def test_find_locates_needle():
    assert find("say hello", "hello", 9) == len("say ")


def test_find_needle_longer_than_length():
    assert find("abcdef", "abcd", 3) == -1


def test_find_missing():
    assert find("abcdef", "xyz", 6) == -1


def test_find_stops_at_nul():
    assert find("ab\0cd", "cd", 5) == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_outside_quotes_skips_quoted_match():
    text = '"/*x*/" /* c */'
    pos = find_outside_quotes(text, "/*", len(text))
    assert pos == text.rindex("/*")
    assert find(text, "/*", len(text)) == text.index("/*")


def test_find_outside_quotes_only_quoted():
    text = 'a "//" b'
    assert find_outside_quotes(text, "//", len(text)) == -1


def test_find_outside_quotes_respects_length():
    assert find_outside_quotes("//", "//", 1) == -1


@pytest.mark.parametrize(
    "text, words",
    [
        ("  a\tbb  c ", ["a", "bb", "c"]),
        ("", []),
        (" \t ", []),
        ("single", ["single"]),
    ],
)
def test_split_words(text, words):
    assert split_words(text) == words


def test_split_words_stops_at_nul():
    assert split_words("a b\0c d") == ["a", "b"]