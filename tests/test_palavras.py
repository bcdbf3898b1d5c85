import random

import pytest

from praticas.palavras import WordBankError, add_word, draw_word, read_words, save_words


def test_save_then_read_round_trip(tmp_path):
    path = tmp_path / "palavras.txt"
    words = ["MELANCIA", "BANANA", "UVA"]
    save_words(words, path)
    assert read_words(path) == words


def test_save_writes_count_then_one_word_per_line(tmp_path):
    path = tmp_path / "palavras.txt"
    save_words(["A", "B"], path)
    assert path.read_text(encoding="utf-8") == "2\nA\nB\n"


def test_read_only_takes_declared_count(tmp_path):
    path = tmp_path / "palavras.txt"
    path.write_text("2\nA B C\n", encoding="utf-8")
    assert read_words(path) == ["A", "B"]


def test_read_without_numeric_header_is_empty(tmp_path):
    path = tmp_path / "palavras.txt"
    path.write_text("PALAVRA\n", encoding="utf-8")
    assert read_words(path) == []


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(WordBankError):
        read_words(tmp_path / "nao_existe.txt")


def test_save_into_missing_directory_raises(tmp_path):
    with pytest.raises(WordBankError):
        save_words(["A"], tmp_path / "faltando" / "palavras.txt")


def test_add_word_appends_and_persists(tmp_path):
    path = tmp_path / "palavras.txt"
    save_words(["MELANCIA"], path)
    result = add_word("PERA", path)
    assert result == ["MELANCIA", "PERA"]
    assert read_words(path) == ["MELANCIA", "PERA"]


def test_draw_word_picks_from_list():
    words = ["MELANCIA", "BANANA", "UVA"]
    rng = random.Random(7)
    for _ in range(20):
        assert draw_word(words, rng) in words


def test_draw_word_is_deterministic_for_same_seed():
    words = ["MELANCIA", "BANANA", "UVA", "PERA"]
    first = [draw_word(words, random.Random(3)) for _ in range(5)]
    second = [draw_word(words, random.Random(3)) for _ in range(5)]
    assert first == second


def test_draw_word_from_empty_raises():
    with pytest.raises(WordBankError):
        draw_word([], random.Random(1))