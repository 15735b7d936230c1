import pytest

from wordbrain.dictionary import Dictionary, load_dictionary
from wordbrain.errors import DictionaryLoadError
from wordbrain.models import Letter, Word


def _make_dictionary(words: list[str]) -> Dictionary:
    dictionary = Dictionary()
    for w in words:
        dictionary.add(w)
    return dictionary


def test_exists_and_prefix():
    dictionary = _make_dictionary(["cat", "cats", "dog"])
    assert dictionary.exists("cat")
    assert dictionary.exists("cats")
    assert not dictionary.exists("ca")
    assert dictionary.is_prefix("ca")
    assert dictionary.is_prefix("cats")
    assert not dictionary.is_prefix("cx")
    assert not dictionary.exists("catsup")


def test_lookup_is_case_insensitive():
    dictionary = _make_dictionary(["Cat"])
    assert dictionary.exists("cat")
    assert dictionary.exists("CAT")
    assert "cat" in dictionary


def test_accepts_words():
    dictionary = _make_dictionary(["at"])
    word = Word([Letter(0, 0, "A"), Letter(0, 1, "T")])
    assert dictionary.exists(word)
    assert dictionary.is_prefix(Word([Letter(2, 2, "a")]))


def test_add_is_idempotent():
    dictionary = _make_dictionary(["cat", "cat", "CAT"])
    assert len(dictionary) == 1


def test_root_is_never_a_word():
    dictionary = _make_dictionary(["", "a"])
    assert not dictionary.exists("")
    assert dictionary.is_prefix("")
    assert len(dictionary) == 1


def test_every_prefix_of_a_word_is_a_prefix():
    words = ["planet", "plan", "plane", "zebra", "a"]
    dictionary = _make_dictionary(words)
    for w in words:
        assert dictionary.exists(w)
        for i in range(1, len(w) + 1):
            assert dictionary.is_prefix(w[:i])


def test_from_lines_skips_blank_lines():
    dictionary = Dictionary.from_lines(["  Apple\n", "\n", "   ", "banana", "APPLE"])
    assert len(dictionary) == 2
    assert dictionary.exists("apple")
    assert dictionary.exists("banana")


def test_empty_source_gives_empty_dictionary():
    dictionary = Dictionary.from_lines([])
    assert len(dictionary) == 0
    assert not dictionary.exists("a")
    assert not dictionary.is_prefix("a")


def test_load_dictionary(tmp_path):
    dict_file = tmp_path / "words"
    dict_file.write_text("Cat\ndog\n\n  bird  \n")
    dictionary = load_dictionary(dict_file)
    assert len(dictionary) == 3
    assert dictionary.exists("bird")


def test_load_missing_dictionary(tmp_path):
    with pytest.raises(DictionaryLoadError):
        load_dictionary(tmp_path / "missing")
