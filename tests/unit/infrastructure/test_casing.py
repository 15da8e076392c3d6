import unicodedata

import pytest

from casemenu.core.command_menu import CommandMenu
from casemenu.core.commands import TitleCaseCommand
from casemenu.domain.models.document import Document
from casemenu.infrastructure.casing import (
    get_title_case_function,
    title_case,
    title_case_preserving_acronyms,
    upper_case,
)


@pytest.mark.parametrize("text, expected", [
    ("great expectations", "Great Expectations"),
    ("GREAT EXPECTATIONS", "Great Expectations"),
    ("gREAT eXPECTATIONS", "Great Expectations"),
    ("  two   spaces\tand tab ", "  Two   Spaces\tAnd Tab "),
    ("o'neil's house", "O'neil's House"),
    ("well-known fact", "Well-Known Fact"),
    ("3rd street", "3Rd Street"),
    ("b2b sales", "B2b Sales"),
    ("MP3 PLAYER", "Mp3 Player"),
    ("école élémentaire", "École Élémentaire"),
    ("", ""),
])
def test_title_case(text, expected):
    assert title_case(text) == expected


def test_title_case_is_idempotent():
    once = title_case("great expectations")
    assert title_case(once) == once


def test_upper_case():
    assert upper_case("great expectations") == "GREAT EXPECTATIONS"
    assert upper_case("GREAT EXPECTATIONS") == "GREAT EXPECTATIONS"


def test_title_case_preserving_acronyms():
    assert title_case_preserving_acronyms("the NASA budget") == "The NASA Budget"
    assert title_case_preserving_acronyms("GREAT EXPECTATIONS") == "GREAT EXPECTATIONS"
    assert title_case_preserving_acronyms("mIxEd case") == "Mixed Case"


def test_get_title_case_function():
    assert get_title_case_function() is title_case
    assert get_title_case_function(preserve_acronyms=True) is title_case_preserving_acronyms


def _nfd(text):
    return unicodedata.normalize("NFD", text)


def test_title_case_keeps_combining_marks_inside_words():
    assert title_case(_nfd("école élémentaire")) == _nfd("École Élémentaire")
    assert title_case(_nfd("ÉCOLE ÉLÉMENTAIRE")) == _nfd("École Élémentaire")


def test_title_case_command_on_decomposed_text():
    document = Document(_nfd("école élémentaire"))
    menu = CommandMenu()
    menu.register("Title-case", TitleCaseCommand(document))

    menu.run("Title-case")

    assert unicodedata.normalize("NFC", document.text) == "École Élémentaire"


def test_preserving_acronyms_with_digits_and_marks():
    assert title_case_preserving_acronyms("buy an MP3 player") == "Buy An MP3 Player"
    assert title_case_preserving_acronyms(_nfd("ÉCOLE élémentaire")) == _nfd("ÉCOLE Élémentaire")
