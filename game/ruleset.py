# Configuration: code length, number of colors, blanks and duplicates.
from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError

BLANK = 0  # Reserved symbol for an empty hole
MAX_GUESSES = 12  # Number of guesses per game

REGULAR_RULES = {
    "name": "regular",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "num_colors": 6,  # Red, yellow, green, blue, black, white
    "max_attempts": MAX_GUESSES,
}

ADVANCED_RULES = {
    "name": "advanced",
    "code_length": 5,
    "num_colors": 8,  # Regular colors plus orange and purple
    "max_attempts": MAX_GUESSES,
}


@dataclass(frozen=True)
class Ruleset:
    """
    Parameters of one game instance.

    Attributes:
        name (str): Identifier of the variant.
        code_length (int): Number of symbols in the code.
        num_colors (int): Colors are the symbols 1..num_colors.
        allow_blanks (bool): Whether the blank symbol 0 may be used.
        allow_duplicates (bool): Whether the solution may repeat a symbol.
        max_attempts (int): Guess budget of a session.
    """

    name: str
    code_length: int
    num_colors: int
    allow_blanks: bool = False
    allow_duplicates: bool = True
    max_attempts: int = MAX_GUESSES

    def __post_init__(self):
        for field_name in ("code_length", "num_colors", "max_attempts"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(
                    f"{field_name} must be a positive integer, got {value!r}."
                )

        if not self.allow_duplicates and self.distinct_symbols < self.code_length:
            raise ConfigurationError(
                "not enough distinct symbols to fill the sequence without "
                f"repetition or blanks ({self.distinct_symbols} symbols for "
                f"{self.code_length} positions)."
            )

    @classmethod
    def from_rules(cls, rules: dict, *, allow_blanks=False, allow_duplicates=True):
        """
        Build a Ruleset from a preset dictionary such as REGULAR_RULES.

        Args:
            rules (dict): Preset with name, code_length, num_colors and
            optionally max_attempts.
            allow_blanks (bool): Permit the blank symbol.
            allow_duplicates (bool): Permit repeated symbols in the solution.
        Returns:
            Ruleset: The validated configuration.
        """
        return cls(
            name=rules["name"],
            code_length=rules["code_length"],
            num_colors=rules["num_colors"],
            allow_blanks=allow_blanks,
            allow_duplicates=allow_duplicates,
            max_attempts=rules.get("max_attempts", MAX_GUESSES),
        )

    @classmethod
    def for_variant(cls, is_regular: bool, allow_blanks: bool, allow_duplicates: bool):
        """Pick the Regular or Advanced preset and apply the player's options."""
        rules = REGULAR_RULES if is_regular else ADVANCED_RULES
        return cls.from_rules(
            rules, allow_blanks=allow_blanks, allow_duplicates=allow_duplicates
        )

    @property
    def lowest_symbol(self) -> int:
        return BLANK if self.allow_blanks else 1

    @property
    def highest_symbol(self) -> int:
        return self.num_colors

    @property
    def symbols(self) -> range:
        """All symbols a code or guess may contain."""
        return range(self.lowest_symbol, self.highest_symbol + 1)

    @property
    def distinct_symbols(self) -> int:
        return len(self.symbols)

    def describe(self) -> str:
        """Short human readable summary, e.g. 'regular: 4 of 1-6, duplicates'."""
        options = []
        if self.allow_blanks:
            options.append("blanks")
        if self.allow_duplicates:
            options.append("duplicates")
        summary = (
            f"{self.name}: {self.code_length} of "
            f"{self.lowest_symbol}-{self.highest_symbol}"
        )
        return summary + (", " + ", ".join(options) if options else "")


DEFAULT_RULES = Ruleset.from_rules(REGULAR_RULES)
