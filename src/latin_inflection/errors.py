"""Errors raised while validating words and building declension tables."""


class InflectionError(ValueError):
    """Base class for errors raised by this package."""


class BadOverrideKey(InflectionError):
    """A `sets`/`adds` block names something that is not a case."""

    def __init__(self, key: str) -> None:
        super().__init__(f"bad key '{key}' for a case")
        self.key = key


class InvalidFlagsError(InflectionError):
    """The flags of a word do not have the expected shape."""


class UnsupportedKindError(InflectionError):
    """The paradigm kind is not valid for the declension of the word."""


class InvalidWordError(InflectionError):
    """The word record is missing data required by its category."""
