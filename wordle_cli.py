import argparse
import os
import random
import sys

from wordle_game.console import render_color, render_emoji, run_session
from wordle_game.word_source import ResourceError, random_word
from wordle_game.wordle_core import GameConfig, SessionState, WordleSession

DEFAULT_WORDS = os.path.join(os.path.dirname(os.path.abspath(__file__)), "wordlists", "words.txt")

EXIT_CODES = {
    SessionState.WON: 0,
    SessionState.OUT_OF_TRIES: 0,
    SessionState.ABORTED: 1,
}
EXIT_RESOURCE_ERROR = 2


def build_parser():
    ap = argparse.ArgumentParser(description="Guess the 5-letter word in six tries.")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="newline-delimited word list")
    ap.add_argument("--tries", type=int, default=6, help="number of guesses allowed")
    ap.add_argument("--strict", action="store_true",
                    help="count duplicate letters like classic Wordle")
    ap.add_argument("--color", action="store_true", help="colored letters instead of emoji")
    ap.add_argument("--seed", type=int, default=None, help="seed the word choice")
    ap.add_argument("--debug", action="store_true", help="print the answer and round details")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.tries < 1:
        ap.error("--tries must be at least 1")
    cfg = GameConfig(max_tries=args.tries, strict_duplicates=args.strict)

    # Load the word list and pick the answer
    try:
        answer = random_word(args.words, cfg.word_length, random.Random(args.seed))
    except ResourceError as e:
        print(f"[ERROR] {e}")
        return EXIT_RESOURCE_ERROR

    session = WordleSession(answer, cfg, debug=args.debug)
    print(f"🔢 You have {cfg.max_tries} chances to guess a {cfg.word_length}-letter word!")
    state = run_session(session, render=render_color if args.color else render_emoji)
    return EXIT_CODES[state]


if __name__ == '__main__':
    sys.exit(main())
