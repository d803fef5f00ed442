"""Database modules for the Latin word store."""

from latin_inflection.db.connection import dispose_engine, get_connection, get_engine
from latin_inflection.db.forms import DatabaseFormsCatalog, count_forms, seed_forms
from latin_inflection.db.schema import forms, init_db, metadata, word_relations, words
from latin_inflection.db.store import (
    add_relation,
    find_by,
    insert_word,
    select_enunciated,
    select_related_words,
    word_from_row,
    word_to_row,
)

__all__ = [
    "DatabaseFormsCatalog",
    "add_relation",
    "count_forms",
    "dispose_engine",
    "find_by",
    "forms",
    "get_connection",
    "get_engine",
    "init_db",
    "insert_word",
    "metadata",
    "seed_forms",
    "select_enunciated",
    "select_related_words",
    "word_from_row",
    "word_relations",
    "word_to_row",
    "words",
]
