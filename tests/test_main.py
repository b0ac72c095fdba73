import io
import sys

from main import main


def test_main_exits_on_eof(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdout", out)
    assert main(["--seed", "1"]) == 1
    assert "Exiting game." in out.getvalue()


def test_main_plays_seeded_game(monkeypatch):
    import random
    from game.ruleset import Ruleset
    from game.secret_code import generate_solution

    solution = generate_solution(Ruleset.for_variant(True, False, True), random.Random(9))
    lines = ["0", "1", "0", "1", " ".join(map(str, solution))]
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n".join(lines) + "\n"))
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdout", out)
    assert main(["--seed", "9"]) == 0
    assert "You win! Score: 1" in out.getvalue()
