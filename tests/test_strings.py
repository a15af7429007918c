import pytest

from tilequest.textlib.strings import (
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strstr,
    striteri,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_pieces_never_contain_separator():
    pieces = split("a;bb;;ccc;", ";")
    assert all(";" not in p and p for p in pieces)
    assert "".join(pieces) == "a;bb;;ccc;".replace(";", "")


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_strchr_finds_first():
    text = "banana"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strchr_end_and_missing():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", "z") is None


def test_strrchr_finds_last():
    text = "banana"
    index = strrchr(text, "n")
    assert text[index] == "n"
    assert "n" not in text[index + 1:]
    assert strrchr(text, "\0") == len(text)
    assert strrchr(text, "q") is None


def test_strchr_rejects_strings():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strstr():
    big = "the map.ber file"
    index = strstr(big, ".ber")
    assert big[index:index + 4] == ".ber"
    assert strstr(big, "") == 0
    assert strstr(big, ".xpm") is None


def test_strnstr_respects_length():
    big = "lorem ipsum"
    assert strnstr(big, "ipsum", len(big)) == strstr(big, "ipsum")
    assert strnstr(big, "ipsum", len(big) - 1) is None
    assert strnstr(big, "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim("aaaa", "a") == ""


def test_strtrim_result_has_no_edge_chars():
    result = strtrim(" \t\nmid dle\n\t ", " \t\n")
    assert result == "mid dle"


def test_substr():
    text = "grid line"
    assert substr(text, 5, 4) == text[5:9]
    assert substr(text, 5, 100) == text[5:]
    assert substr(text, 100, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("so", "_long") == "so_long"
    assert strjoin("", "") == ""


def test_strlcpy_truncates():
    copied, total = strlcpy("abcdef", 4)
    assert copied == "abc"
    assert total == len("abcdef")


def test_strlcpy_fits_and_zero():
    assert strlcpy("abc", 10) == ("abc", 3)
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcat_appends_within_room():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_strlcat_no_room():
    result, total = strlcat("abcd", "xy", 3)
    assert result == "abcd"
    assert total == len("xy") + 3


def test_strlcat_full_fit():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)


def test_strncmp_sign_and_bounds():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_antisymmetric():
    for a, b in [("hello", "help"), ("x", ""), ("same", "same")]:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_striteri_in_place():
    chars = list("abc")
    assert striteri(chars, lambda i, c: c * (i + 1)) is None
    assert chars == ["a", "bb", "ccc"]