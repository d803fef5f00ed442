"""Word store: reading and writing rows of the 'words' table."""

from typing import Any

from sqlalchemy import Connection, Row, select

from latin_inflection.db.schema import word_relations, words
from latin_inflection.enums import RelationKind
from latin_inflection.word import Word, word_from_mapping


def word_to_row(word: Word) -> dict[str, Any]:
    """Return the column values for storing `word`."""
    return {
        "enunciated": word.enunciated,
        "particle": word.particle,
        "category": word.category.value,
        "declension": None if word.declension is None else int(word.declension),
        "kind": None if word.kind is None else word.kind.value,
        "gender": word.gender.value,
        "regular": word.regular,
        "locative": word.locative,
        "flags": word.flags.to_dict(),
        "translation": dict(word.translation),
    }


def word_from_row(row: Row[Any]) -> Word:
    """Build a Word from a 'words' row.

    Raises:
        InflectionError: the stored flags or kind are not valid anymore.
    """
    return word_from_mapping(row._mapping)


def insert_word(conn: Connection, word: Word) -> int:
    """Insert `word` and return its new ID."""
    result = conn.execute(words.insert().values(**word_to_row(word)))
    word_id = result.inserted_primary_key[0]  # type: ignore[index]
    word.id = word_id
    return word_id


def find_by(conn: Connection, enunciated: str) -> Word | None:
    """Return the word with the exact given enunciated, if any."""
    row = conn.execute(select(words).where(words.c.enunciated == enunciated)).fetchone()
    if row is None:
        return None
    return word_from_row(row)


def select_enunciated(conn: Connection, filter_text: str | None = None) -> list[str]:
    """Return stored enunciates, sorted, optionally containing `filter_text`."""
    query = select(words.c.enunciated).order_by(words.c.enunciated)
    if filter_text:
        query = query.where(words.c.enunciated.contains(filter_text, autoescape=True))
    return list(conn.execute(query).scalars())


def add_relation(conn: Connection, source: Word, destination: Word, kind: RelationKind) -> None:
    """Record that `destination` is the `kind` form of `source`."""
    conn.execute(
        word_relations.insert()
        .prefix_with("OR IGNORE")
        .values(source_id=source.id, destination_id=destination.id, kind=kind.value)
    )


def select_related_words(conn: Connection, word: Word) -> dict[RelationKind, list[Word]]:
    """Return the words related to `word`, grouped by relation kind.

    Every relation kind is present in the result, possibly with an empty list.
    """
    related: dict[RelationKind, list[Word]] = {kind: [] for kind in RelationKind}

    query = (
        select(words, word_relations.c.kind.label("relation"))
        .join(word_relations, words.c.id == word_relations.c.destination_id)
        .where(word_relations.c.source_id == word.id)
        .order_by(word_relations.c.id)
    )
    for row in conn.execute(query):
        related[RelationKind(row.relation)].append(word_from_row(row))

    return related
