class MastermindError(Exception):
    """Base class for all game errors."""


class ConfigurationError(MastermindError, ValueError):
    """The chosen variant cannot produce a valid solution."""


class GameOverError(MastermindError):
    """A guess was submitted to a board whose game has already ended."""


class GameNotStartedError(MastermindError):
    """A guess was submitted before a secret code was set."""


class GuessValidationError(MastermindError, ValueError):
    """
    Base class for guesses the player has to re-enter.

    Attributes:
        rules (Ruleset): The ruleset the guess was checked against.
    """

    def __init__(self, msg: str, rules=None):
        super().__init__(msg)
        self.rules = rules

    def hint(self) -> str:
        """Corrective message naming the expected format."""
        if self.rules is None:
            return str(self)
        return (
            f"Please enter {self.rules.code_length} integers between "
            f"{self.rules.lowest_symbol} and {self.rules.highest_symbol}."
        )


class ParseError(GuessValidationError):
    """A token of the guess is not an integer."""

    def __init__(self, token: str, rules=None):
        super().__init__(f"'{token}' is not an integer.", rules)
        self.token = token

    def hint(self) -> str:
        if self.rules is None:
            return str(self)
        return (
            f"Please enter only integers from {self.rules.lowest_symbol} to "
            f"{self.rules.highest_symbol} separated by spaces."
        )


class LengthError(GuessValidationError):
    """The guess has the wrong number of symbols."""

    def __init__(self, actual: int, expected: int, rules=None):
        super().__init__(
            f"Code length must be {expected}, but got {actual}.", rules
        )
        self.actual = actual
        self.expected = expected


class RangeError(GuessValidationError):
    """A symbol of the guess is outside the permitted range."""

    def __init__(self, symbol: int, low: int, high: int, rules=None):
        super().__init__(
            f"Invalid symbol {symbol}. Allowed: {low} to {high}.", rules
        )
        self.symbol = symbol
