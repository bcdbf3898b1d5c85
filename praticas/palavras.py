"""Word bank stored as a plain text file: a count followed by the words."""

from __future__ import annotations

import random
from collections.abc import Iterable
from pathlib import Path

DEFAULT_PATH = "palavras.txt"


class WordBankError(Exception):
    """Raised when the word bank cannot be read, written or drawn from."""


def read_words(path: str | Path = DEFAULT_PATH) -> list[str]:
    """Return the words listed in the bank file at ``path``.

    The file starts with the number of words; only that many
    whitespace-separated words are read after it.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise WordBankError("Nao foi possivel acessar o banco de palavras!") from exc

    tokens = text.split()
    if not tokens:
        return []
    try:
        count = int(tokens[0])
    except ValueError:
        return []
    if count <= 0:
        return []
    return tokens[1 : 1 + count]


def save_words(words: Iterable[str], path: str | Path = DEFAULT_PATH) -> None:
    """Write ``words`` to the bank file at ``path``, replacing its contents."""
    words = list(words)
    lines = [str(len(words)), *words]
    try:
        Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    except OSError as exc:
        raise WordBankError("Nao foi possivel modificar a lista de palavras!") from exc


def draw_word(words: Iterable[str], rng: random.Random | None = None) -> str:
    """Pick one word at random from ``words``."""
    words = list(words)
    if not words:
        raise WordBankError("O banco de palavras esta vazio!")
    chooser = rng if rng is not None else random.Random()
    return chooser.choice(words)


def add_word(word: str, path: str | Path = DEFAULT_PATH) -> list[str]:
    """Append ``word`` to the bank at ``path`` and return the new word list."""
    words = read_words(path)
    words.append(word)
    save_words(words, path)
    return words