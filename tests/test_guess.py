import pytest
from game.errors import LengthError, ParseError, RangeError
from game.guess import Guess, parse_tokens, validate_guess
from game.ruleset import Ruleset

REGULAR = Ruleset.for_variant(True, False, True)


@pytest.mark.parametrize("line,expected", [
    ("1 2 3 4", ["1", "2", "3", "4"]),
    ("1,2,3,4", ["1", "2", "3", "4"]),
    ("  1, 2 ,3   4 ", ["1", "2", "3", "4"]),
    ("", []),
])
def test_parse_tokens(line, expected):
    assert parse_tokens(line) == expected


def test_valid_guess():
    assert validate_guess(["1", "2", "3", "6"], REGULAR) == [1, 2, 3, 6]


def test_parse_error_names_token():
    with pytest.raises(ParseError) as exc:
        validate_guess(["1", "abc", "3", "4"], REGULAR)
    assert exc.value.token == "abc"


def test_length_error():
    with pytest.raises(LengthError) as exc:
        validate_guess(["1", "2", "3"], REGULAR)
    assert exc.value.actual == 3


def test_zero_rejected_without_blanks():
    with pytest.raises(RangeError) as exc:
        validate_guess(["0", "1", "2", "3"], REGULAR)
    assert exc.value.symbol == 0


def test_zero_accepted_with_blanks():
    rules = Ruleset.for_variant(True, True, True)
    assert validate_guess(["0", "0", "2", "3"], rules) == [0, 0, 2, 3]


def test_above_color_count_rejected():
    with pytest.raises(RangeError):
        validate_guess(["1", "2", "3", "7"], REGULAR)


def test_parse_checked_before_length():
    with pytest.raises(ParseError):
        validate_guess(["x"], REGULAR)


def test_length_checked_before_range():
    with pytest.raises(LengthError):
        validate_guess(["9"], REGULAR)


def test_guess_may_repeat_colors_when_solution_cannot():
    # Guesses are exploratory: the no-duplicates rule only binds the solution.
    rules = Ruleset.for_variant(True, False, False)
    assert validate_guess(["1", "1", "1", "1"], rules) == [1, 1, 1, 1]


def test_guess_lenient_and_strict():
    g = Guess("1 2 x 4", rules=REGULAR)
    assert g.is_valid is False
    assert isinstance(g.error, ParseError)
    with pytest.raises(ParseError):
        g.validate(strict=True)

    ok = Guess("1,2,3,4", rules=REGULAR)
    assert ok.is_valid and ok.get_guess() == [1, 2, 3, 4]
    assert str(ok) == "[1, 2, 3, 4]"


def test_hints_name_expected_bounds():
    with pytest.raises(RangeError) as exc:
        validate_guess(["1", "2", "3", "9"], REGULAR)
    assert exc.value.hint() == "Please enter 4 integers between 1 and 6."
    with pytest.raises(ParseError) as exc:
        validate_guess(["a"], REGULAR)
    assert "from 1 to 6" in exc.value.hint()


@pytest.mark.parametrize("tokens,bad", [
    ([1.9, 2, 3, 4], "1.9"),
    ([1, 2, True, 4], "True"),
    ([1, 2, 3, None], "None"),
])
def test_non_integer_symbols_rejected(tokens, bad):
    with pytest.raises(ParseError) as exc:
        validate_guess(tokens, REGULAR)
    assert exc.value.token == bad


def test_integer_symbols_accepted():
    assert validate_guess([1, 2, 3, 4], REGULAR) == [1, 2, 3, 4]
    assert validate_guess(["1", 2, "3", 4], REGULAR) == [1, 2, 3, 4]
