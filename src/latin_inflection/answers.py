"""Checking answers given for a declension table."""

from latin_inflection.enums import Case, CaseOrder
from latin_inflection.inflection import DeclensionTable, render
from latin_inflection.word import Word


def same_answer(given: str, expected: str) -> bool:
    """Return True if `given` matches `expected`, ignoring whitespace."""
    if given == expected:
        return True
    return "".join(given.split()) == "".join(expected.split())


def _title(word: Word, label: str | None) -> str:
    added = f" ({label}) " if label else " "
    return f"== {word.enunciated}{added}==\n\n"


def blank_answer(
    word: Word, case_order: CaseOrder = CaseOrder.EUROPEAN, label: str | None = None
) -> str:
    """Return the template to be filled in with the forms of `word`.

    The locative is only asked for words that have one.
    """
    lines = [
        f"{case.label}: \n"
        for case in case_order.cases
        if word.locative or case != Case.LOCATIVE
    ]
    return _title(word, label) + "".join(lines)


def expected_answer(
    word: Word,
    table: DeclensionTable,
    case_order: CaseOrder = CaseOrder.EUROPEAN,
    label: str | None = None,
) -> str:
    """Return `blank_answer` filled in with the rendered rows of `table`."""
    lines = [
        f"{case.label}: {render(word, table[case])}\n"
        for case in case_order.cases
        if word.locative or case != Case.LOCATIVE
    ]
    return _title(word, label) + "".join(lines)
