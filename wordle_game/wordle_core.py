"""
wordle_core.py
---------------------------------------------------
Core logic for console Wordle.
Includes:
 - Per-letter guess scoring (simple + strict duplicates)
 - Outcome classification
 - Session state machine (tries, history, terminal state)
---------------------------------------------------
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Verdict(Enum):
    """Per-letter verdict. Value is the compact token used in debug traces."""
    CORRECT = "O"
    PRESENT = "?"
    ABSENT = "_"

    @property
    def glyph(self) -> str:
        return GLYPHS[self]


GLYPHS = {
    Verdict.CORRECT: "🟩",
    Verdict.PRESENT: "🟨",
    Verdict.ABSENT: "⬛",
}


class Outcome(Enum):
    WIN = "win"
    INCORRECT = "incorrect"


class SessionState(Enum):
    PROMPTING = "prompting"
    WON = "won"
    OUT_OF_TRIES = "out_of_tries"
    ABORTED = "aborted"


def score_guess(guess: str, answer: str, strict_duplicates: bool = False) -> List[Verdict]:
    """
    Compute the verdicts of guess against answer, one per guessed letter.
      CORRECT = same letter, same position
      PRESENT = letter occurs elsewhere in the answer
      ABSENT  = letter not in the answer

    By default a letter is marked PRESENT whenever the answer contains it,
    so a letter guessed twice but present once is marked twice. With
    strict_duplicates each answer letter can only justify one verdict.
    """
    if len(guess) != len(answer):
        raise ValueError("Guess length must match the answer length.")
    if guess == answer:
        return [Verdict.CORRECT] * len(answer)
    if strict_duplicates:
        return _score_strict(guess, answer)

    res = []
    for g, a in zip(guess, answer):
        if g == a:
            res.append(Verdict.CORRECT)
        elif g in answer:
            res.append(Verdict.PRESENT)
        else:
            res.append(Verdict.ABSENT)
    return res


def _score_strict(guess: str, answer: str) -> List[Verdict]:
    res, remain = [Verdict.ABSENT] * len(answer), {}

    # First pass: mark hits, record remaining letters
    for i in range(len(answer)):
        if guess[i] == answer[i]:
            res[i] = Verdict.CORRECT
        else:
            remain[answer[i]] = remain.get(answer[i], 0) + 1

    # Second pass: mark presents
    for i in range(len(answer)):
        if res[i] is Verdict.CORRECT:
            continue
        if remain.get(guess[i], 0) > 0:
            res[i] = Verdict.PRESENT
            remain[guess[i]] -= 1

    return res


def classify(verdicts: List[Verdict]) -> Outcome:
    """WIN iff every verdict is CORRECT."""
    if verdicts and all(v is Verdict.CORRECT for v in verdicts):
        return Outcome.WIN
    return Outcome.INCORRECT


def tokens(verdicts: List[Verdict]) -> str:
    return "".join(v.value for v in verdicts)


# ---------------- Game Config & Results ---------------- #

@dataclass
class GameConfig:
    """Game configuration: max tries, word length, duplicate scoring mode."""
    max_tries: int = 6
    word_length: int = 5
    strict_duplicates: bool = False

@dataclass
class RoundResult:
    """Single round result container."""
    guess: str
    verdicts: List[Verdict]
    remaining: int
    won: bool
    over: bool


# ---------------- Session ---------------- #

class WordleSession:
    """
    One play-through against a fixed answer.
    Invariants:
      - A rejected guess never changes remaining or history.
      - history only grows, one RoundResult per accepted guess.
      - Once WON or OUT_OF_TRIES, no further guess is accepted.
    """
    def __init__(self, answer: str, cfg: GameConfig = None, debug: bool = False):
        self.cfg = cfg or GameConfig()
        if self.cfg.max_tries < 1:
            raise ValueError("max_tries must be at least 1.")
        if len(answer) != self.cfg.word_length:
            raise ValueError(f"Answer must be {self.cfg.word_length} letters, got {answer!r}.")
        self.answer = answer
        self.remaining = self.cfg.max_tries
        self.history: List[RoundResult] = []
        self.state = SessionState.PROMPTING
        self.debug = debug
        if debug:
            print(f"[DEBUG] word is {answer}")

    @property
    def over(self) -> bool:
        return self.state is not SessionState.PROMPTING

    def guess_word(self, word: str) -> RoundResult:
        """Handle a player's guess and return result."""
        if self.over:
            raise ValueError("Game already over.")
        if len(word) != self.cfg.word_length:
            raise ValueError(f"Your guess must be {self.cfg.word_length} letters! {word!r} is invalid.")

        verdicts = score_guess(word, self.answer, self.cfg.strict_duplicates)
        self.remaining -= 1
        won = classify(verdicts) is Outcome.WIN
        if won:
            self.state = SessionState.WON
        elif self.remaining <= 0:
            self.state = SessionState.OUT_OF_TRIES
        rr = RoundResult(word, verdicts, self.remaining, won, self.over)
        self.history.append(rr)

        if self.debug:
            print(f"[DEBUG] Round {len(self.history)}: {word.upper()} -> {tokens(verdicts)} "
                  f"(remaining={rr.remaining}, won={rr.won}, over={rr.over})")

        return rr

    def abort(self):
        """Mark the session finished without a result (input ended)."""
        if not self.over:
            self.state = SessionState.ABORTED
