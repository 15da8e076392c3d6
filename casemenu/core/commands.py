"""Concrete commands that transform a Document's text in place."""

import logging

from casemenu.domain.interfaces.command import Command
from casemenu.domain.models.common import CasingFunction
from casemenu.domain.models.document import Document
from casemenu.infrastructure.casing import title_case as default_title_case
from casemenu.infrastructure.casing import upper_case as default_upper_case

logger = logging.getLogger(__name__)


class TextTransformCommand(Command):
    """Replaces the bound document's text with ``transform(text)`` on every execution."""

    def __init__(self, document: Document, transform: CasingFunction):
        self._document = document
        self._transform = transform

    @property
    def document(self) -> Document:
        """The receiver this command was bound to at construction."""
        return self._document

    def execute(self) -> None:
        before = self._document.text
        self._document.text = self._transform(before)
        logger.debug(f"{type(self).__name__}: {before!r} -> {self._document.text!r}")


class TitleCaseCommand(TextTransformCommand):
    """Title-cases the document's text."""

    def __init__(self, document: Document, title_case: CasingFunction = default_title_case):
        super().__init__(document, title_case)


class UpperCaseCommand(TextTransformCommand):
    """Upper-cases the document's text."""

    def __init__(self, document: Document, upper_case: CasingFunction = default_upper_case):
        super().__init__(document, upper_case)
