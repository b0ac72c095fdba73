import re

from .errors import GuessValidationError, LengthError, ParseError, RangeError
from .ruleset import DEFAULT_RULES

_SEPARATORS = re.compile(r"[\s,]+")


def parse_tokens(line: str) -> list[str]:
    """
    Split a raw guess line into tokens.

    Commas count as whitespace, so '1,2, 3 4' gives ['1', '2', '3', '4'].
    """
    return [t for t in _SEPARATORS.split(line.strip()) if t]


def validate_guess(tokens, rules=None) -> list[int]:
    """
    Turn raw tokens into a guess sequence.

    Checks run in order: integer parsing, length, symbol range. Repeated
    symbols are accepted even when the solution may not repeat them.

    Args:
        tokens (list[str] | list[int]): The tokens entered by the player.
        rules (Ruleset, optional): Defaults to DEFAULT_RULES.
    Returns:
        list[int]: The validated sequence.
    Raises:
        ParseError, LengthError, RangeError
    """
    rules = rules or DEFAULT_RULES

    sequence = []
    for token in tokens:
        # int() would truncate floats and accept bools
        if isinstance(token, bool) or not isinstance(token, (int, str)):
            raise ParseError(str(token), rules)
        try:
            sequence.append(int(token))
        except (TypeError, ValueError):
            raise ParseError(str(token), rules) from None

    if len(sequence) != rules.code_length:
        raise LengthError(len(sequence), rules.code_length, rules)

    for symbol in sequence:
        if symbol not in rules.symbols:
            raise RangeError(
                symbol, rules.lowest_symbol, rules.highest_symbol, rules
            )

    return sequence


class Guess:
    """
        Represents a single player guess in the Mastermind game.
    Attributes:
        tokens (list[str]): The raw tokens of the guess.
        sequence (list[int]): The guessed symbols, empty until valid.
        rules (Ruleset): The ruleset for validation.
        clue (Clue | None): Feedback once the guess has been scored.
        error (GuessValidationError | None): Why the guess was rejected.
        is_valid (bool): Whether the guess is valid according to the rules."""

    def __init__(self, raw, rules=None):
        """
        Initialize a Guess instance.
        Args:
            raw (str | list): A raw input line or a list of tokens/symbols.
            rules (Ruleset, optional): Defaults to DEFAULT_RULES.
        """

        # --- Input normalization ---
        if isinstance(raw, str):
            self.tokens = parse_tokens(raw)
        elif raw is None:
            self.tokens = []
        else:
            self.tokens = list(raw)

        # --- Attribute setup ---
        self.rules = rules or DEFAULT_RULES
        self.sequence = []
        self.clue = None
        self.error = None
        self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True) -> bool:
        """
        Check the guess against the rules (integers, length, range).

        Args:
            strict (bool): If True, raise the validation error.
        Returns:
            bool: True if valid, False otherwise.
        """
        try:
            self.sequence = validate_guess(self.tokens, self.rules)
        except GuessValidationError as e:
            self.error = e
            self.sequence = []
            if strict:
                raise
            return False

        self.error = None
        return True

    def apply_clue(self, clue):
        """Store the clue computed by the Board/Code."""
        self.clue = clue

    def get_guess(self):
        return self.sequence

    def as_string(self):
        """
        Return the guess formatted like a list, e.g. '[1, 2, 3, 4]'.
        """
        return str(self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
