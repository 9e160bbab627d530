"""
Core exception types for exactdec.core.

These are dependency-free and may be imported by all core modules.
Arithmetic itself is total (division by zero yields zero); these cover
precondition violations at the edges of the library.
"""

__all__ = [
    "DecimalDomainError",
    "DecimalParseError",
]


class DecimalDomainError(Exception):
    """Raised when inputs violate basic preconditions (non-finite floats, bad operand types, ...)."""
    pass


class DecimalParseError(DecimalDomainError):
    """Raised by the strict text constructor when a literal does not match the decimal grammar.

    Attributes
    ----------
    text : str
        The rejected input, for context.
    """

    def __init__(self, text):
        super().__init__(f"invalid decimal literal: {text!r}")
        self.text = text
