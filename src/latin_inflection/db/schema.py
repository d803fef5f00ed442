"""Database schema definition using SQLAlchemy Core."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

# Dictionary entries
words = Table(
    "words",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("enunciated", Text, nullable=False, unique=True),  # e.g. "rosa, rosae"
    Column("particle", Text, nullable=False),  # stem, e.g. "ros"
    Column("category", String(20), nullable=False),
    Column("declension", Integer),  # 1-6, NULL for non-declinable categories
    Column("kind", String(20)),  # paradigm kind, e.g. "er/ir"
    Column("gender", String(30), nullable=False, default="none"),
    Column("regular", Boolean, nullable=False, default=True),
    Column("locative", Boolean, nullable=False, default=False),
    Column("flags", JSON, nullable=False, default=dict),  # switches plus sets/adds blocks
    Column("translation", JSON, nullable=False, default=dict),  # {"en": "..."}
)

# Forms catalog: one row per term of a (kind, gender) paradigm
forms = Table(
    "forms",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("declension", Integer, nullable=False),
    Column("kind", String(20), nullable=False),
    Column("gender", String(30), nullable=False),
    Column("case", String(20), nullable=False),
    Column("number", String(10), nullable=False),
    Column("value", Text, nullable=False),  # suffix, or the full form for irregular kinds
)

# Comparative/superlative/adverb forms, alternatives and gendered counterparts
word_relations = Table(
    "word_relations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("source_id", Integer, ForeignKey("words.id"), nullable=False),
    Column("destination_id", Integer, ForeignKey("words.id"), nullable=False),
    Column("kind", String(20), nullable=False),
    UniqueConstraint("source_id", "destination_id", "kind", name="uq_word_relations"),
)

Index("idx_forms_kind_gender", forms.c.kind, forms.c.gender)
Index("idx_words_category", words.c.category)
Index("idx_word_relations_source", word_relations.c.source_id)


def init_db(engine: Engine) -> None:
    """Initialize the database schema.

    Creates all tables and indexes if they don't exist.
    Safe to call multiple times (uses checkfirst=True by default).
    """
    metadata.create_all(engine)
