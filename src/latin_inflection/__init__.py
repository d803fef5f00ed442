"""Declension tables for Latin nouns and adjectives."""

from latin_inflection.answers import blank_answer, expected_answer, same_answer
from latin_inflection.enums import Case, CaseOrder, Category, Declension, Gender, Kind, Number
from latin_inflection.errors import (
    BadOverrideKey,
    InflectionError,
    InvalidFlagsError,
    InvalidWordError,
    UnsupportedKindError,
)
from latin_inflection.inflection import (
    adjective_tables,
    build_table,
    inflection_lines,
    noun_table,
    render,
)
from latin_inflection.word import Word, WordFlags, parse_flags, word_from_mapping

__version__ = "0.1.0"

__all__ = [
    "BadOverrideKey",
    "Case",
    "CaseOrder",
    "Category",
    "Declension",
    "Gender",
    "InflectionError",
    "InvalidFlagsError",
    "InvalidWordError",
    "Kind",
    "Number",
    "UnsupportedKindError",
    "Word",
    "WordFlags",
    "adjective_tables",
    "blank_answer",
    "build_table",
    "expected_answer",
    "inflection_lines",
    "noun_table",
    "parse_flags",
    "render",
    "same_answer",
    "word_from_mapping",
]
