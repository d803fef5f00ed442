"""The 'forms' table as a forms catalog."""

from sqlalchemy import Connection, func, select

from latin_inflection.db.schema import forms
from latin_inflection.enums import Case, Gender, Kind, Number
from latin_inflection.paradigms import FormEntry, catalog_rows


def seed_forms(conn: Connection) -> int:
    """Replace the contents of the 'forms' table with the built-in catalog.

    Idempotent: existing rows are deleted first.

    Returns:
        Number of rows inserted
    """
    conn.execute(forms.delete())
    rows = list(catalog_rows())
    conn.execute(forms.insert(), rows)
    return len(rows)


def count_forms(conn: Connection) -> int:
    return conn.execute(select(func.count()).select_from(forms)).scalar() or 0


class DatabaseFormsCatalog:
    """Forms catalog reading the 'forms' table, in insertion order.

    Lookups are cached per instance, so an instance should not outlive the
    connection it was created with.
    """

    def __init__(self, conn: Connection):
        self._conn = conn
        self._cache: dict[tuple[Kind, Gender], list[FormEntry]] = {}

    def lookup(self, kind: Kind, gender: Gender) -> list[FormEntry]:
        key = (kind, gender)
        if key not in self._cache:
            query = (
                select(forms.c.case, forms.c.number, forms.c.value)
                .where(forms.c.kind == kind.value)
                .where(forms.c.gender == gender.value)
                .order_by(forms.c.id)
            )
            self._cache[key] = [
                FormEntry(Case(row.case), Number(row.number), row.value)
                for row in self._conn.execute(query)
            ]
        return list(self._cache[key])
