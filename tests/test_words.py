import pytest

from lineedit.words import (
    big_word_left_index,
    big_word_right_end_index,
    big_word_right_index,
    big_word_right_start_index,
    grapheme_left_index,
    grapheme_right_index,
    next_whitespace,
    word_left_index,
    word_right_end_index,
    word_right_index,
    word_right_start_index,
)


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 10, 8),
        ("abc def-ghi", 10, 8),
        ("abc def.ghi", 10, 4),
    ],
)
def test_word_left_index(text, pos, expected):
    assert word_left_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 10, 8),
        ("abc def-ghi", 10, 4),
        ("abc def.ghi", 10, 4),
        ("abc def   i", 10, 4),
    ],
)
def test_big_word_left_index(text, pos, expected):
    assert big_word_left_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 4),
        ("abc-def ghi", 0, 3),
        ("abc.def ghi", 0, 8),
    ],
)
def test_word_right_start_index(text, pos, expected):
    assert word_right_start_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 4),
        ("abc-def ghi", 0, 8),
        ("abc.def ghi", 0, 8),
    ],
)
def test_big_word_right_start_index(text, pos, expected):
    assert big_word_right_start_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 2),
        ("abc-def ghi", 0, 2),
        ("abc.def ghi", 0, 6),
        ("abc", 1, 2),
        ("abc", 2, 2),
        ("abc def", 2, 6),
    ],
)
def test_word_right_end_index(text, pos, expected):
    assert word_right_end_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("", 0, 0),
        ("word", 0, 3),
        ("word and another one", 0, 3),
        ("word and another one", 3, 7),
        ("word and another one", 4, 7),
        ("word\nline two", 0, 3),
        ("word\nline two", 3, 8),
        ("weirdö characters", 0, 5),
        ("weirdö characters", 5, 17),
        ("weirdö", 0, 5),
        ("weirdö", 5, 5),
        ("word😇 with emoji", 0, 3),
        ("word😇 with emoji", 3, 4),
        ("😇", 0, 0),
    ],
)
def test_move_word_right_end_cases(text, pos, expected):
    assert word_right_end_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 2),
        ("abc-def ghi", 0, 6),
        ("abc-def ghi", 5, 6),
        ("abc-def ghi", 6, 10),
        ("abc.def ghi", 0, 6),
        ("abc", 1, 2),
        ("abc", 2, 2),
        ("abc def", 2, 6),
        ("abc-def", 6, 6),
    ],
)
def test_big_word_right_end_index(text, pos, expected):
    assert big_word_right_end_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def", 0, 3),
        ("abc def ghi", 3, 7),
        ("abc", 1, 3),
    ],
)
def test_next_whitespace(text, pos, expected):
    assert next_whitespace(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("This is a test", 10, 14),
        ("abc def", 3, 7),
        ("abc", 3, 3),
        ("", 0, 0),
    ],
)
def test_word_right_index(text, pos, expected):
    assert word_right_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc-def ghi", 0, 11),
        ("abc def", 0, 7),
        ("abc", 0, 3),
    ],
)
def test_big_word_right_index(text, pos, expected):
    assert big_word_right_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc", 0, 1),
        ("a😇c", 1, 5),
        ("😇bc", 0, 4),
        ("abc", 3, 3),
        ("", 0, 0),
    ],
)
def test_grapheme_right_index(text, pos, expected):
    assert grapheme_right_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("This is a test", 14, 13),
        ("This is a test 😊", 19, 15),
        ("a😇c", 5, 1),
        ("", 0, 0),
    ],
)
def test_grapheme_left_index(text, pos, expected):
    assert grapheme_left_index(text, pos) == expected


def test_crlf_is_one_grapheme():
    assert grapheme_right_index("a\r\nb", 1) == 3
    assert grapheme_left_index("a\r\nb", 3) == 1


def test_position_out_of_range_raises():
    with pytest.raises(IndexError):
        word_left_index("abc", 4)


def test_position_inside_character_raises():
    with pytest.raises(ValueError):
        word_right_index("ö", 1)