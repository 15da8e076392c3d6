"""Defines common Value Objects used across the package."""

from typing import Callable, NewType

# Using NewType for semantic clarity, although they are strings at runtime.
CommandName = NewType("CommandName", str)    # Human readable menu label, e.g. 'Uppercase'
DocumentText = NewType("DocumentText", str)  # Current text held by a Document

# A pure str -> str transformation (casing primitive)
CasingFunction = Callable[[str], str]
