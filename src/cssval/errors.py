"""Custom exception hierarchy for cssval."""


class CssValError(Exception):
    """Base exception for all cssval errors."""


class ParseError(CssValError):
    """Raised when a context document or a component value cannot be parsed."""


class MissingContextError(CssValError):
    """Raised when a logical axis is normalized without writing-mode context."""


class InvalidAxisError(CssValError):
    """Raised when an axis keyword is not one of x, y, block or inline."""


class DiagnosticError(CssValError):
    """Raised when a warning code is escalated to an error by the policy."""
