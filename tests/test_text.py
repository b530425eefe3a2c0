import pytest

from armyduel.text import capitalize_only_first, split_words, to_lower


@pytest.mark.parametrize("text", ["SELECT Knight 3", "Start", "already lower", "MiXeD 42!"])
def test_to_lower_matches_ascii_lower(text):
    assert to_lower(text) == text.lower()


def test_to_lower_leaves_non_ascii():
    assert to_lower("É") == "É"


def test_to_lower_idempotent():
    once = to_lower("SeLeCt BOSS Paladin")
    assert to_lower(once) == once


@pytest.mark.parametrize("text", ["knight", "KNIGHT", "kNiGhT", "Knight"])
def test_capitalize_only_first(text):
    assert capitalize_only_first(text) == "Knight"


def test_capitalize_only_first_empty():
    assert capitalize_only_first("") == ""


def test_capitalize_only_first_non_letter_start():
    result = capitalize_only_first("1ABC")
    assert result == "1" + "ABC".lower()


@pytest.mark.parametrize(
    "text",
    ["select knight 3", "  select   boss  paladin  ", "start", "", "    "],
)
def test_split_words_matches_space_split(text):
    assert split_words(text) == text.split()


def test_split_words_only_on_spaces():
    assert split_words("a\tb") == ["a\tb"]


def test_split_words_join_roundtrip():
    words = split_words("select   wizard 2")
    assert split_words(" ".join(words)) == words
    assert all(" " not in word for word in words)