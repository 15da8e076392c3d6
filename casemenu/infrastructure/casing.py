"""Casing primitives used by the concrete commands.

All functions here are pure and independent of the host locale, so the
result of a command only depends on the text it is given.

A word starts at a letter and runs on through letters, digits and
combining marks. An apostrophe followed by a letter stays inside the
word ("o'neil"); any other character ends it.
"""

import unicodedata
from typing import Callable, Iterator, Tuple

from casemenu.domain.models.common import CasingFunction

_APOSTROPHES = "'’"


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def _continues_word(ch: str) -> bool:
    # Mn/Mc/Me marks belong to the letter before them (decomposed text)
    return unicodedata.category(ch)[0] in ("L", "M") or ch.isdigit()


def _split_words(text: str) -> Iterator[Tuple[str, bool]]:
    """Yields (chunk, is_word) pairs that concatenate back to ``text``."""
    i, length = 0, len(text)
    while i < length:
        start = i
        if not _is_letter(text[i]):
            while i < length and not _is_letter(text[i]):
                i += 1
            yield text[start:i], False
            continue

        i += 1
        while i < length:
            if _continues_word(text[i]):
                i += 1
            elif text[i] in _APOSTROPHES and i + 1 < length and _is_letter(text[i + 1]):
                i += 2
            else:
                break
        yield text[start:i], True


def _capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _convert_words(text: str, convert: Callable[[str], str]) -> str:
    return "".join(convert(chunk) if is_word else chunk for chunk, is_word in _split_words(text))


def upper_case(text: str) -> str:
    """Returns the fully upper-cased form of ``text``."""
    return text.upper()


def title_case(text: str) -> str:
    """Capitalizes the first letter of every word and lower-cases the rest.

    Whitespace and punctuation are kept exactly as they are.

    >>> title_case("great expectations")
    'Great Expectations'
    >>> title_case("GREAT EXPECTATIONS")
    'Great Expectations'
    >>> title_case("b2b sales")
    'B2b Sales'
    """
    return _convert_words(text, _capitalize_word)


def title_case_preserving_acronyms(text: str) -> str:
    """Like :func:`title_case`, but words written entirely in upper case are left alone.

    >>> title_case_preserving_acronyms("the NASA budget")
    'The NASA Budget'
    """
    def _convert(word: str) -> str:
        if word.isupper():
            return word
        return _capitalize_word(word)

    return _convert_words(text, _convert)


def get_title_case_function(preserve_acronyms: bool = False) -> CasingFunction:
    """Selects the title-casing rule to inject into title-case commands."""
    return title_case_preserving_acronyms if preserve_acronyms else title_case
