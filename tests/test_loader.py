import json

import pytest

from scrabblepp.board import Board
from scrabblepp.dictionary import Dictionary, SpecialSquares
from scrabblepp.loader import ConfigError, apply_config, load

SAMPLE = {
    "dimension": 15,
    "casillas": {
        "dobles": [{"x": 2, "y": 3}, {"x": 4, "y": 1}],
        "triples": [{"x": 5, "y": 5}],
    },
    "diccionario": [{"palabra": "hola"}, {"palabra": "casa"}],
}


@pytest.fixture
def structures():
    return Dictionary(), Board(), SpecialSquares()


def test_apply_config_returns_dimension(structures):
    assert apply_config(SAMPLE, *structures) == SAMPLE["dimension"]


def test_apply_config_places_special_cells(structures):
    dictionary, board, specials = structures
    apply_config(SAMPLE, dictionary, board, specials)
    assert board.cell(3, 2).kind == "doble"
    assert board.cell(1, 4).kind == "doble"
    assert board.cell(5, 5).kind == "triple"
    assert board.cell(2, 3) is None


def test_apply_config_records_specials_in_order(structures):
    dictionary, board, specials = structures
    apply_config(SAMPLE, dictionary, board, specials)
    assert [(s.kind, s.x, s.y) for s in specials] == [
        ("doble", 2, 3),
        ("doble", 4, 1),
        ("triple", 5, 5),
    ]


def test_apply_config_loads_words(structures):
    dictionary, board, specials = structures
    apply_config(SAMPLE, dictionary, board, specials)
    assert list(dictionary) == ["hola", "casa"]
    assert dictionary.validate("casa")


def test_missing_dimension_raises(structures):
    with pytest.raises(ConfigError):
        apply_config({"diccionario": []}, *structures)


def test_bad_square_raises(structures):
    data = {"dimension": 5, "casillas": {"dobles": [{"x": 1}]}}
    with pytest.raises(ConfigError):
        apply_config(data, *structures)


def test_bad_square_leaves_dictionary_empty(structures):
    dictionary, board, specials = structures
    data = {
        "dimension": 5,
        "casillas": {"triples": [{"y": 1}]},
        "diccionario": [{"palabra": "sol"}],
    }
    with pytest.raises(ConfigError):
        apply_config(data, dictionary, board, specials)
    assert dictionary.is_empty()


def test_load_reads_file(tmp_path, structures):
    dictionary, board, specials = structures
    (tmp_path / "game.json").write_text(json.dumps(SAMPLE), encoding="utf-8")
    assert load("game.json", dictionary, board, specials, tmp_path) == 15
    assert len(specials) == 3
    assert len(dictionary) == 2


def test_load_default_directory(tmp_path, monkeypatch, structures):
    dictionary, board, specials = structures
    folder = tmp_path / "carga"
    folder.mkdir()
    (folder / "c.json").write_text(json.dumps(SAMPLE), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    load("c.json", dictionary, board, specials)
    assert list(dictionary) == ["hola", "casa"]


def test_load_missing_file(tmp_path, structures):
    with pytest.raises(ConfigError):
        load("absent.json", *structures, directory=tmp_path)


def test_load_invalid_json(tmp_path, structures):
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load("bad.json", *structures, directory=tmp_path)