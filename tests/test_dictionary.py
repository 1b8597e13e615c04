import pytest

from scrabblepp.dictionary import (
    DOUBLE,
    TRIPLE,
    Dictionary,
    SpecialSquare,
    SpecialSquares,
)


def make_dictionary(*words):
    dictionary = Dictionary()
    for word in words:
        dictionary.add(word)
    return dictionary


def test_add_assigns_sequential_ids():
    dictionary = Dictionary()
    ids = [dictionary.add(word) for word in ("casa", "perro", "gato")]
    assert ids == list(range(3))
    assert list(dictionary) == ["casa", "perro", "gato"]
    assert len(dictionary) == 3


def test_validate_exact_match():
    dictionary = make_dictionary("casa", "perro")
    assert dictionary.validate("casa")
    assert "perro" in dictionary
    assert not dictionary.validate("cas")
    assert not dictionary.validate("CASA")
    assert not dictionary.validate("")


def test_validate_on_empty_dictionary():
    assert Dictionary().validate("casa") is False


def test_reset_restarts_ids():
    dictionary = make_dictionary("uno", "dos")
    dictionary.reset()
    assert dictionary.is_empty()
    assert not dictionary.validate("uno")
    assert dictionary.add("tres") == 0


def test_to_dot_is_circular():
    dictionary = make_dictionary("sol", "luna", "mar")
    dot = dictionary.to_dot()
    assert dot.startswith("digraph G{ \nrankdir=LR \nnode[ shape = box] \n")
    assert '1[label = "luna" width=2.0 ]; \n' in dot
    assert "0 -> 2[dir = back]; \n" in dot
    assert dot.endswith("0 -> 2 \n}")


def test_render_writes_file(tmp_path):
    dictionary = make_dictionary("sol")
    path = dictionary.render(tmp_path)
    assert path == tmp_path / "ReporteDiccionario.dot"
    assert path.read_text(encoding="utf-8") == dictionary.to_dot()


def test_render_empty_raises(tmp_path):
    with pytest.raises(ValueError):
        Dictionary().render(tmp_path)


def test_special_squares_store_in_order():
    squares = SpecialSquares()
    squares.add(DOUBLE, 1, 2)
    squares.add(TRIPLE, 4, 4)
    assert list(squares) == [SpecialSquare("doble", 1, 2), SpecialSquare("triple", 4, 4)]
    assert len(squares) == 2


def test_score_plain_square():
    squares = SpecialSquares()
    squares.add(DOUBLE, 1, 2)
    assert squares.score(2, 1, 5) == 5
    assert SpecialSquares().score(1, 1, 7) == 7


def test_score_double_and_triple():
    squares = SpecialSquares()
    squares.add(DOUBLE, 1, 2)
    squares.add(TRIPLE, 3, 3)
    points = 4
    assert squares.score(1, 2, points) == points * 2
    assert squares.score(3, 3, points) == points * 3


def test_score_repeated_square_adds_each_match():
    squares = SpecialSquares()
    squares.add(DOUBLE, 5, 5)
    squares.add(TRIPLE, 5, 5)
    points = 2
    assert squares.score(5, 5, points) == points * 2 + points * 3


def test_unknown_kind_is_ignored():
    squares = SpecialSquares()
    squares.add("f", 1, 1)
    assert squares.score(1, 1, 3) == 3


def test_special_squares_reset():
    squares = SpecialSquares()
    squares.add(TRIPLE, 2, 2)
    squares.reset()
    assert len(squares) == 0
    assert squares.score(2, 2, 6) == 6