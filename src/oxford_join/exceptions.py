"""
Error types raised by oxford_join.

The domain is pure computation, so the taxonomy is small:
    - LengthMismatchError: a join wrote a different number of bytes than
      it planned for (an item's text changed between reads)
    - FormatterExhaustedError: a lazy wrapper was rendered a second time
    - SerializationError / ConfigError: bad input documents

Wrong input shapes raise the builtin TypeError.
"""


class OxfordJoinError(Exception):
    """Base class for all oxford_join errors."""
    pass


class LengthMismatchError(OxfordJoinError):
    """
    Raised when the bytes written by a join do not match its planned capacity.

    This means an item returned different text on its second read
    (an unstable __str__), or there is a bug in the writer. Either way
    the partially built buffer is discarded.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Joined length changed: planned {expected} bytes, wrote {actual}. "
            "Does an item return different text each time it is read?"
        )


class FormatterExhaustedError(OxfordJoinError, RuntimeError):
    """Raised when a single-use lazy join wrapper is rendered twice."""
    pass


class SerializationError(OxfordJoinError, ValueError):
    """Raised when serialized conjunction or config data is malformed."""
    pass


class ConfigError(OxfordJoinError):
    """Raised when a configuration document cannot be loaded."""
    pass
