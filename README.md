# praticas

Three small console programs, plus the pieces they are built from:

- **Jogo da Forca** (`praticas.forca`): hangman, with the secret word drawn
  from a word bank file (`praticas.palavras`).
- **Jogo da Adivinhação** (`praticas.adivinhacao`): guess a secret number
  between 0 and 99.
- **Banco** (`praticas.banco`): a toy model of bank accounts, account holders
  and CPF numbers.

All messages the programs print are in Portuguese.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

### Hangman

```
praticas-forca [arquivo]
```

The secret word is drawn from the word bank file `arquivo`, by default
`palavras.txt` in the current directory. The file holds a word count first,
then the words, separated by whitespace (one per line is usual):

```
3
BANANA
MELANCIA
MORANGO
```

Only as many words as the count says are read. If the file cannot be opened
the program prints `Nao foi possivel acessar o banco de palavras!` and stops;
if it holds no words it prints `O banco de palavras esta vazio!`.

Each turn shows the wrong letters so far and the word with unguessed letters
as `_`; you type a letter (only the first character of what you type counts).
Five wrong letters and you are hanged. If you find the word, the game asks
whether you want to add a new word to the bank (`S` for yes); the word is
appended and the file is rewritten with the new count.

### Number guessing

```
praticas-adivinhacao
```

Pick a difficulty: `F` (easy, 15 attempts), `M` (medium, 10 attempts), or
anything else for hard (5 attempts). After each guess you are told whether it
was too high or too low. You start with 1000 points and lose half the distance
between your guess and the secret number on every attempt; when you win, the
number of attempts and your score (two decimals) are shown.

### Bank demo

```
praticas-banco
```

Opens two accounts, makes a deposit and a withdrawal on each, prints both
accounts and the number of accounts open, then closes them.

Each program can also be started with `python -m praticas.forca`,
`python -m praticas.adivinhacao` or `python -m praticas.banco`.

## Using the library

### Word bank and hangman

```python
import random

from praticas.palavras import read_words, save_words, draw_word, add_word
from praticas.forca import HangmanGame, header

words = read_words("palavras.txt")
game = HangmanGame(draw_word(words, random.Random()), 5)
print(game.contains("A"))       # is the letter in the word?
print(game.guess("A"))          # records the guess; True if it was in the word
print(game.masked())            # e.g. "_ A _ A _ A "
print(game.wrong_guesses_line())
print(game.is_solved(), game.is_hanged(), game.is_over())
```

`HangmanGame(secret)` defaults to five wrong guesses. `header()` returns the
game's banner text.

`save_words(words, path)` rewrites the bank with the count and the words, and
`add_word(word, path)` appends one word and returns the new list. The path
defaults to `palavras.txt` in each function. `read_words`, `save_words` and
`add_word` raise `WordBankError` when the bank cannot be read or written, and
`draw_word` raises it when given no words.

### Number guessing

```python
from praticas.adivinhacao import GuessingGame, Outcome, attempts_for

game = GuessingGame(42, attempts_for("M"))
outcome = game.guess(50)   # Outcome.TOO_HIGH, Outcome.TOO_LOW or Outcome.CORRECT
print(game.attempts_used, game.points, game.won, game.is_over())
```

Guessing after the game is over raises `RuntimeError`.

### Bank accounts

```python
from praticas.banco import Conta, Cpf, Titular

titular = Titular(Cpf("000.000.000-00"), "Fulano")
with Conta("000001", titular) as conta:
    conta.depositar(100)
    conta.sacar(30)
    print(conta)                   # holder, CPF, account number and "Saldo: R$ 70"
    print(Conta.numero_de_contas())
```

`Conta.numero_de_contas()` counts the accounts that have been opened and not
yet closed; an account is closed with `close()` or on leaving a `with` block,
and closing it again has no effect. `numero` and `saldo` are read-only.

Negative amounts raise `InvalidAmountError`, withdrawing more than the balance
raises `InsufficientFundsError`, and a holder name shorter than five
characters raises `NameTooShortError`; all three are `ValueError`s.

## What it does not do

The bank model keeps balances in memory only: there is no storage of
accounts, no transfers between accounts and no check that a CPF number is
valid. The bank command only runs the fixed demonstration described above.