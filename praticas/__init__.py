"""Console games (hangman, number guessing), a word bank and a toy bank account model."""

__version__ = "0.1.0"
__all__ = ["palavras", "forca", "adivinhacao", "banco"]