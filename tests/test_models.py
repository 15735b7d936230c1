import pytest

from wordbrain.errors import EmptySolutionError, EmptyWordError, InvalidCharacterError, InvalidCoordinatesError
from wordbrain.models import EMPTY, Letter, Solution, Word


def _word(text: str, row: int = 0) -> Word:
    return Word(Letter(row, col, ch) for col, ch in enumerate(text))


def test_letter_is_lowercased():
    letter = Letter(1, 2, "Q")
    assert letter.char == "q"
    assert str(letter) == "Q"
    assert not letter.is_empty


def test_blank_letter():
    letter = Letter(0, 0)
    assert letter.char == EMPTY
    assert letter.is_empty
    assert str(letter) == " "


@pytest.mark.parametrize("char", ["1", "-", "ab", "", "?"])
def test_letter_rejects_invalid_characters(char):
    with pytest.raises(InvalidCharacterError):
        Letter(0, 0, char)


def test_letter_rejects_multi_character_lowercase():
    # "İ" lowercases to "i" plus a combining dot
    with pytest.raises(InvalidCharacterError):
        Letter(0, 0, "İ")


def test_letter_accepts_non_ascii_letter():
    letter = Letter(0, 0, "É")
    assert letter.char == "é"
    assert Letter(1, 0, letter.char) == Letter(1, 0, "é")


@pytest.mark.parametrize("row, col",[(-1, 0), (0, -1), (9, 0), (0, 9)])
def test_letter_rejects_invalid_coordinates(row, col):
    with pytest.raises(InvalidCoordinatesError):
        Letter(row, col, "a")


def test_letter_ordering_is_char_then_row_then_col():
    assert Letter(5, 5, "a") < Letter(0, 0, "b")
    assert Letter(0, 3, "a") < Letter(1, 0, "a")
    assert Letter(2, 0, "a") < Letter(2, 1, "a")
    assert Letter(8, 8) < Letter(0, 0, "a")


def test_letter_equality_includes_position():
    assert Letter(0, 0, "a") == Letter(0, 0, "A")
    assert Letter(0, 0, "a") != Letter(0, 1, "a")
    assert len({Letter(0, 0, "a"), Letter(0, 0, "A"), Letter(1, 0, "a")}) == 2


def test_word_requires_letters():
    with pytest.raises(EmptyWordError):
        Word([])


def test_word_renders_uppercase():
    word = _word("cat")
    assert str(word) == "CAT"
    assert word.text == "cat"
    assert len(word) == 3
    assert word.last == Letter(0, 2, "t")


def test_word_extend_leaves_original_untouched():
    word = _word("ca")
    longer = word.extend(Letter(1, 1, "t"))
    assert str(word) == "CA"
    assert str(longer) == "CAT"


def test_word_prefix_sorts_first():
    assert _word("ca") < _word("cat")
    assert _word("cat") > _word("ca")
    assert _word("cat") < _word("cb")
    assert sorted([_word("cat"), _word("c"), _word("ca")]) == [_word("c"), _word("ca"), _word("cat")]


def test_word_equality_is_positional():
    assert _word("cat") == _word("cat")
    assert _word("cat") != _word("cat", row=1)


def test_solution_requires_words():
    with pytest.raises(EmptySolutionError):
        Solution([])


def test_solution_equality_ignores_positions():
    a = Solution([_word("cat"), _word("dog", row=1)])
    b = Solution([_word("cat", row=2), _word("dog", row=0)])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_solution_order_and_rendering():
    first = Solution([_word("cat"), _word("dog")])
    second = Solution([_word("dog"), _word("cat")])
    assert first < second
    assert str(first) == "Solution:  CAT  DOG"
    assert len(first) == 2


def test_solution_extend():
    solution = Solution([_word("cat")]).extend(_word("dog"))
    assert [str(w) for w in solution] == ["CAT", "DOG"]
