"""Data importers for the Latin word store."""

from latin_inflection.importers.words import import_words

__all__ = [
    "import_words",
]
