"""Number guessing game played on the terminal."""

from __future__ import annotations

import argparse
import enum
import random

INITIAL_POINTS = 1000.0


class Outcome(enum.Enum):
    CORRECT = "correct"
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"


def attempts_for(choice: str) -> int:
    """Number of attempts for a difficulty: F (easy), M (medium), anything else hard."""
    if choice == "F":
        return 15
    if choice == "M":
        return 10
    return 5


class GuessingGame:
    """State of one guessing round."""

    def __init__(self, secret: int, attempts: int) -> None:
        self.secret = secret
        self.attempts = attempts
        self.attempts_used = 0
        self.points = INITIAL_POINTS
        self.won = False

    def guess(self, number: int) -> Outcome:
        """Score a guess and tell whether it hit, was above or below the secret."""
        if self.is_over():
            raise RuntimeError("the game is already over")
        self.attempts_used += 1
        self.points -= abs(number - self.secret) / 2.0
        if number == self.secret:
            self.won = True
            return Outcome.CORRECT
        if number > self.secret:
            return Outcome.TOO_HIGH
        return Outcome.TOO_LOW

    def is_over(self) -> bool:
        return self.won or self.attempts_used >= self.attempts


def _read_int(prompt: str) -> int:
    while True:
        parts = input(prompt).split()
        if not parts:
            continue
        try:
            return int(parts[0])
        except ValueError:
            continue


def _read_char() -> str:
    while True:
        parts = input().split()
        if parts:
            return parts[0][0]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="adivinhacao", description="Jogo da Adivinhacao")
    parser.parse_args(argv)

    print("*************************************")
    print("* Bem-vindos ao Jogo da Adivinhacao *")
    print("*************************************")
    print("Escolha um Nivel de Dificuldade")
    print("Facil (F), Medio (M) ou Dificil (D)")

    game = GuessingGame(random.randrange(100), attempts_for(_read_char()))

    while not game.is_over():
        print(f"Tentativa: {game.attempts_used + 1}")
        number = _read_int("Qual seu chute? ")
        outcome = game.guess(number)
        print(f"O valor do seu chute foi: {number}")
        if outcome is Outcome.CORRECT:
            print("Parabens, voce acertou o numero secreto!")
        elif outcome is Outcome.TOO_HIGH:
            print("Seu chute foi maior que o numero secreto!")
        else:
            print("Seu chute foi menor que o numero secreto!")

    print("Fim de Jogo!")
    if not game.won:
        print("Voce Perdeu! Tente novamente!")
    else:
        print(f"Total de Tentativas: {game.attempts_used}")
        print(f"Sua Pontuacao foi de: {game.points:.2f} pontos.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())