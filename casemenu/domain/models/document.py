"""The receiver: a document holding a single mutable text value."""

from .common import DocumentText


class Document:
    """Mutable text container that commands operate on.

    The text is always a ``str``; assigning anything else raises ``TypeError``.
    """

    def __init__(self, text: str):
        self.text = text

    @property
    def text(self) -> DocumentText:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Document text must be a str, got {type(value).__name__}")
        self._text = DocumentText(value)

    def __repr__(self) -> str:
        return f"Document(text={self._text!r})"
