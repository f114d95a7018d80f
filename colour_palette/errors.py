# colour_palette/errors.py
"""
Palette exceptions.

Precondition violations (bad ranges, empty reductions) raise the builtin
ValueError/TypeError directly; the classes here cover the recoverable
palette-container conditions.
"""


class PaletteError(Exception):
    """Base class for palette container errors."""


class DuplicateColourError(PaletteError, ValueError):
    """A unique palette was asked to hold two equal colours."""

    def __init__(self, colour: object, index: int) -> None:
        self.colour = colour
        self.index = index
        super().__init__(f"{colour!r} already present at index {index}")


class FixedLengthError(PaletteError, TypeError):
    """A length-changing operation was attempted on a fixed-length palette."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"cannot {operation}: palette is fixed-length")


__all__ = ["PaletteError", "DuplicateColourError", "FixedLengthError"]
