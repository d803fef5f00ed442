"""Comparative, superlative and adverbial enunciates of adjectives.

Stored relations always win over the generated forms, since irregular
degrees ('bonus' -> 'melior, melius') cannot be derived from the stem.
"""

from collections.abc import Sequence

from latin_inflection.enums import Declension
from latin_inflection.word import Word


def join_related(related: Sequence[Word]) -> str:
    """Join the enunciates of the given words."""
    return "; ".join(word.enunciated for word in related)


def comparative(word: Word, related: Sequence[Word] = ()) -> str:
    if related:
        return join_related(related)
    if word.flags.compsup_prefix:
        return f"magis {word.singular_nominative}"

    part = word.real_particle
    return f"{part}ior, {part}ius"


def superlative(word: Word, related: Sequence[Word] = ()) -> str:
    if related:
        return join_related(related)
    if word.flags.compsup_prefix:
        return f"maximē {word.singular_nominative}"

    part = word.particle
    if word.flags.irregularsup:
        return f"{part}limus, {part}lima, {part}limum"
    if word.flags.contracted_root:
        return f"{part}rimus, {part}rima, {part}rimum"
    return f"{part}issimus, {part}issima, {part}issimum"


def adverb(word: Word, related: Sequence[Word] = ()) -> str | None:
    """Return the adverb of `word`, or None when it cannot be derived."""
    if related:
        return join_related(related)

    part = word.real_particle
    if word.declension in (Declension.FIRST, Declension.SECOND):
        return f"{part}ē"
    if word.declension == Declension.THIRD:
        return f"{part}iter"
    return None
