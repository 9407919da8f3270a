"""Exceptions for fnglob."""


class PatternTypeError(TypeError):
    """Raised when a path or pattern is not a ``str``.

    Malformed glob syntax never raises; unmatched braces and brackets are
    matched literally instead.
    """
