import random

import pytest

from praticas.adivinhacao import GuessingGame, Outcome, attempts_for, main


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


@pytest.mark.parametrize("choice, expected", [("F", 15), ("M", 10), ("D", 5), ("x", 5)])
def test_attempts_for(choice, expected):
    assert attempts_for(choice) == expected


def test_correct_guess_wins_and_ends():
    game = GuessingGame(42, 5)
    assert game.guess(42) is Outcome.CORRECT
    assert game.won
    assert game.is_over()
    assert game.points == 1000.0


def test_higher_and_lower():
    game = GuessingGame(42, 5)
    assert game.guess(90) is Outcome.TOO_HIGH
    assert game.guess(1) is Outcome.TOO_LOW
    assert not game.is_over()
    assert game.attempts_used == 2


def test_points_drop_by_half_the_distance():
    game = GuessingGame(50, 5)
    game.guess(60)
    assert game.points == 995.0


def test_points_never_increase():
    game = GuessingGame(50, 10)
    previous = game.points
    for number in [0, 99, 25, 75, 49]:
        game.guess(number)
        assert game.points < previous
        previous = game.points


def test_runs_out_of_attempts():
    game = GuessingGame(50, 2)
    game.guess(1)
    game.guess(2)
    assert game.is_over()
    assert not game.won


def test_guess_after_end_raises():
    game = GuessingGame(50, 1)
    game.guess(50)
    with pytest.raises(RuntimeError):
        game.guess(50)


def test_main_win(monkeypatch, capsys):
    monkeypatch.setattr(random, "randrange", lambda *args: 42)
    _feed(monkeypatch, ["F", "42"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Parabens, voce acertou o numero secreto!" in out
    assert "Total de Tentativas: 1" in out
    assert "Sua Pontuacao foi de: 1000.00 pontos." in out


def test_main_loss(monkeypatch, capsys):
    monkeypatch.setattr(random, "randrange", lambda *args: 42)
    _feed(monkeypatch, ["D", "1", "2", "3", "99", "98"])
    main([])
    out = capsys.readouterr().out
    assert "Voce Perdeu! Tente novamente!" in out
    assert out.count("Seu chute foi menor que o numero secreto!") == 3
    assert out.count("Seu chute foi maior que o numero secreto!") == 2