"""Answer selection from a newline-delimited word list."""

import random
from typing import List


class ResourceError(Exception):
    """The word list is missing, unreadable or has no usable word."""


def load_words(path: str, word_length: int = 5) -> List[str]:
    """Load words of word_length characters from file (UTF-8), one per line."""
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(f"Cannot read word list {path}: {e}") from e

    words = []
    for line in lines:
        w = line.strip().replace("\ufeff", "")
        if w and len(w) == word_length:
            words.append(w)
    print(f"[INFO] Loaded {len(words)} valid words from {path}")
    return words


def choose_random_word(words: List[str], rng=random) -> str:
    """Pick one word uniformly at random."""
    if not words:
        raise ResourceError("Error selecting word: word list is empty.")
    return rng.choice(words)


def random_word(path: str, word_length: int = 5, rng=random) -> str:
    return choose_random_word(load_words(path, word_length), rng)
