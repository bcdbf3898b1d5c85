"""Hangman game played on the terminal."""

from __future__ import annotations

import argparse

from praticas.palavras import DEFAULT_PATH, WordBankError, add_word, draw_word, read_words

MAX_ERRORS = 5


class HangmanGame:
    """State of one hangman round."""

    def __init__(self, secret: str, max_errors: int = MAX_ERRORS) -> None:
        self.secret = secret
        self.max_errors = max_errors
        self.guessed: set[str] = set()
        self.wrong_guesses: list[str] = []

    def contains(self, letter: str) -> bool:
        """Whether ``letter`` occurs in the secret word."""
        return letter in self.secret

    def guess(self, letter: str) -> bool:
        """Record a guess and return whether it was in the word."""
        self.guessed.add(letter)
        if self.contains(letter):
            return True
        self.wrong_guesses.append(letter)
        return False

    def is_solved(self) -> bool:
        return all(letter in self.guessed for letter in self.secret)

    def is_hanged(self) -> bool:
        return len(self.wrong_guesses) >= self.max_errors

    def is_over(self) -> bool:
        return self.is_solved() or self.is_hanged()

    def masked(self) -> str:
        """The secret word with unguessed letters shown as underscores."""
        return "".join(f"{letter if letter in self.guessed else '_'} " for letter in self.secret)

    def wrong_guesses_line(self) -> str:
        return "Chutes errados: " + "".join(f"{letter} " for letter in self.wrong_guesses)


def header() -> str:
    return "*********************\n*** Jogo da Forca ***\n*********************\n"


def _read_token(prompt: str = "") -> str:
    """Read the next whitespace-separated token typed by the player."""
    while True:
        parts = input(prompt).split()
        if parts:
            return parts[0]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="forca", description="Jogo da Forca")
    parser.add_argument("arquivo", nargs="?", default=DEFAULT_PATH, help="banco de palavras")
    args = parser.parse_args(argv)

    print(header())
    try:
        secret = draw_word(read_words(args.arquivo))
    except WordBankError as exc:
        print(exc)
        return 0

    game = HangmanGame(secret)
    while not game.is_over():
        print(game.wrong_guesses_line())
        print(game.masked())
        print("Seu chute: ")
        letter = _read_token()[0]
        if game.guess(letter):
            print("Voce Acertou! Seu chute esta na palavra!")
        else:
            print("Voce Errou! Seu chute nao esta na palavra!")
        print()

    print("Fim de Jogo!")
    print(f"A palavra secreta era: {game.secret}")

    if not game.is_solved():
        print("Voce Perdeu! Tente Novamente!")
        return 0

    print("Parabens! Voce acertou a palavra secreta!")
    answer = _read_token("Voce deseja adicionar uma nova palavra ao banco de palavras? (S/N)")[0]
    if answer == "S":
        print("Digite a nova palavra, usando letras maiusculas.")
        new_word = _read_token()
        try:
            add_word(new_word, args.arquivo)
        except WordBankError as exc:
            print(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())