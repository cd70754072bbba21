from typing import Callable, List

from wordle_game.wordle_core import RoundResult, SessionState, Verdict, WordleSession

COLORS = {
    Verdict.CORRECT: '\033[92m',
    Verdict.PRESENT: '\033[93m',
    Verdict.ABSENT: '\033[90m',
}


def render_emoji(rr: RoundResult) -> str:
    """One glyph per letter: 🟩 correct, 🟨 present, ⬛ absent."""
    return ''.join(v.glyph for v in rr.verdicts)


def render_color(rr: RoundResult) -> str:
    """
    Colorize the result of a guess:
    Green = correct position,
    Yellow = present but wrong position,
    Gray = not in word.
    """
    return ''.join(f"{COLORS[v]}{ch.upper()}\033[0m" for ch, v in zip(rr.guess, rr.verdicts))


def render_history(history: List[RoundResult], render=render_emoji) -> List[str]:
    return [render(rr) for rr in history]


def run_session(session: WordleSession,
                read_line: Callable[[], str] = None,
                write: Callable[[str], None] = print,
                render: Callable[[RoundResult], str] = render_emoji) -> SessionState:
    """
    Drive one session on the console until it ends.
    Returns the terminal state; the caller decides what to do with it.
    """
    read_line = read_line or input
    length = session.cfg.word_length
    while not session.over:
        write(f"Tries remaining: {session.remaining} • Please guess a {length}-letter word: ")
        try:
            line = read_line()
        except EOFError:
            write("Input closed, ending the game.")
            session.abort()
            break
        guess = line.rstrip('\r\n')

        try:
            rr = session.guess_word(guess)
        except ValueError as e:
            # Wrong length: re-prompt, no try consumed
            write(str(e))
            continue

        for row in render_history(session.history, render):
            write(row)

        if rr.won:
            write("You win!")

    if session.state is SessionState.OUT_OF_TRIES:
        write("Out of guesses!")
    return session.state
