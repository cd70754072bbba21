import builtins

import wordle_cli
from wordle_game.word_source import load_words


def feed(monkeypatch, *lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr(builtins, "input", fake_input)


def single_word_list(tmp_path, word="rogue"):
    path = tmp_path / "words.txt"
    path.write_text(word + "\n", encoding="utf-8")
    return str(path)


def test_win_exits_zero(tmp_path, monkeypatch, capsys):
    feed(monkeypatch, "rogue")
    assert wordle_cli.main(["--words", single_word_list(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "You win!" in out
    assert "[DEBUG]" not in out


def test_loss_also_exits_zero(tmp_path, monkeypatch, capsys):
    feed(monkeypatch, *["zzzzz"] * 6)
    assert wordle_cli.main(["--words", single_word_list(tmp_path)]) == 0
    assert "Out of guesses!" in capsys.readouterr().out


def test_closed_input_exits_one(tmp_path, monkeypatch):
    feed(monkeypatch)
    assert wordle_cli.main(["--words", single_word_list(tmp_path)]) == 1


def test_missing_word_list_exits_two(tmp_path, capsys):
    code = wordle_cli.main(["--words", str(tmp_path / "missing.txt")])
    assert code == wordle_cli.EXIT_RESOURCE_ERROR
    assert "[ERROR]" in capsys.readouterr().out


def test_debug_prints_answer(tmp_path, monkeypatch, capsys):
    feed(monkeypatch, "rogue")
    wordle_cli.main(["--words", single_word_list(tmp_path), "--debug"])
    assert "[DEBUG] word is rogue" in capsys.readouterr().out


def test_options_reach_the_game(tmp_path, monkeypatch, capsys):
    feed(monkeypatch, "zzzzz", "zzzzz")
    code = wordle_cli.main(["--words", single_word_list(tmp_path), "--tries", "2", "--color"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Tries remaining: 2" in out
    assert "\033[90mZ\033[0m" in out
    assert "Out of guesses!" in out


def test_bundled_word_list_loads():
    words = load_words(wordle_cli.DEFAULT_WORDS)
    assert words
    assert all(len(w) == 5 for w in words)
