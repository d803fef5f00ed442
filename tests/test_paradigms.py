"""Tests for the built-in forms catalog."""

import pytest

from latin_inflection.enums import KINDS_BY_DECLENSION, Case, Declension, Gender, Kind, Number
from latin_inflection.paradigms import (
    DEFAULT_CATALOG,
    PARADIGMS,
    FormEntry,
    StaticFormsCatalog,
    catalog_rows,
    declension_of,
    expand_paradigm,
)


def cell(kind: Kind, gender: Gender, case: Case, number: Number) -> list[str]:
    return [
        e.term
        for e in DEFAULT_CATALOG.lookup(kind, gender)
        if e.case == case and e.number == number
    ]


class TestDeclensionOf:
    """Tests for mapping kinds to declensions."""

    @pytest.mark.parametrize(
        ("kind", "declension"),
        [
            (Kind.A, Declension.FIRST),
            (Kind.ER_IR, Declension.SECOND),
            (Kind.UNUS_NAUTA, Declension.SECOND),
            (Kind.PURE_ISTEM, Declension.THIRD),
            (Kind.TRES, Declension.THIRD),
            (Kind.DOMUS_DOMUS, Declension.FOURTH),
            (Kind.ES, Declension.FIFTH),
            (Kind.MILLE, Declension.OTHER),
        ],
    )
    def test_declension_of(self, kind: Kind, declension: Declension) -> None:
        assert declension_of(kind) == declension

    def test_every_kind_has_one_declension(self) -> None:
        for kind in Kind:
            owners = [d for d, kinds in KINDS_BY_DECLENSION.items() if kind in kinds]
            assert len(owners) == 1, kind


class TestCatalog:
    """Tests for the content of the catalog."""

    def test_every_declinable_kind_has_a_paradigm(self) -> None:
        kinds = {kind for kind, _ in PARADIGMS}
        assert kinds == set(Kind) - {Kind.INDECLINABLE}

    def test_no_locative_rows_for_missing_cells(self) -> None:
        assert cell(Kind.FUS, Gender.MASCULINE, Case.LOCATIVE, Number.SINGULAR) == []
        assert cell(Kind.A, Gender.FEMININE, Case.LOCATIVE, Number.SINGULAR) == ["ae"]

    def test_alternates_keep_order(self) -> None:
        assert cell(Kind.SUS_SUIS, Gender.MASCULINE, Case.DATIVE, Number.PLURAL) == [
            "suibus",
            "sūbus",
            "subus",
        ]
        assert cell(Kind.TWO, Gender.MASCULINE, Case.ACCUSATIVE, Number.SINGULAR) == ["em", "īs"]

    def test_empty_term_is_a_row(self) -> None:
        assert cell(Kind.ER_IR, Gender.MASCULINE, Case.NOMINATIVE, Number.SINGULAR) == [""]

    def test_singular_less_paradigms(self) -> None:
        assert cell(Kind.DUO, Gender.FEMININE, Case.NOMINATIVE, Number.SINGULAR) == []
        assert cell(Kind.DUO, Gender.FEMININE, Case.NOMINATIVE, Number.PLURAL) == ["duae"]

    def test_plural_less_paradigms(self) -> None:
        assert cell(Kind.IUPPITER_IOVIS, Gender.MASCULINE, Case.GENITIVE, Number.PLURAL) == []

    def test_missing_gender(self) -> None:
        assert DEFAULT_CATALOG.lookup(Kind.UM, Gender.MASCULINE) == []
        assert DEFAULT_CATALOG.lookup(Kind.VIS_VIS, Gender.NEUTER) == []


class TestExpandParadigm:
    """Tests for turning a paradigm into catalog rows."""

    def test_catalog_order(self) -> None:
        entries = list(expand_paradigm(PARADIGMS[(Kind.A, Gender.FEMININE)]))
        assert entries[:3] == [
            FormEntry(Case.NOMINATIVE, Number.SINGULAR, "a"),
            FormEntry(Case.NOMINATIVE, Number.PLURAL, "ae"),
            FormEntry(Case.VOCATIVE, Number.SINGULAR, "a"),
        ]
        assert entries[-1] == FormEntry(Case.LOCATIVE, Number.PLURAL, "īs")
        assert len(entries) == 14


class TestStaticFormsCatalog:
    """Tests for the in-memory catalog."""

    def test_lookup_returns_copies(self) -> None:
        entries = DEFAULT_CATALOG.lookup(Kind.A, Gender.FEMININE)
        entries.clear()
        assert DEFAULT_CATALOG.lookup(Kind.A, Gender.FEMININE)

    def test_custom_paradigms(self) -> None:
        key = (Kind.A, Gender.FEMININE)
        catalog = StaticFormsCatalog({key: PARADIGMS[key]})
        assert catalog.keys() == [key]
        assert catalog.lookup(Kind.US, Gender.MASCULINE) == []

    def test_default_keys(self) -> None:
        assert set(DEFAULT_CATALOG.keys()) == set(PARADIGMS)


class TestCatalogRows:
    """Tests for rows loaded into the 'forms' table."""

    def test_rows(self) -> None:
        rows = list(catalog_rows())
        assert rows[0] == {
            "declension": 1,
            "kind": "a",
            "gender": "feminine",
            "case": "nominative",
            "number": "singular",
            "value": "a",
        }
        expected = sum(len(DEFAULT_CATALOG.lookup(kind, gender)) for kind, gender in PARADIGMS)
        assert len(rows) == expected

    def test_rows_declension_matches_kind(self) -> None:
        for row in catalog_rows():
            assert row["declension"] == declension_of(Kind(row["kind"]))
