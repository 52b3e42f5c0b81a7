"""
Lazy join wrappers.

When joined text is only going to be interpolated into a bigger message
(an f-string, a log line, a file), building the joined string first is
wasted work. These wrappers write the pieces straight into a sink
instead:

    JoinFmt        plain "glue between every pair" join of an iterable
    OxfordJoinFmt  Oxford-comma join of a sequence

Rendering happens on write_to(sink), str() or format(). Either way the
wrapper is single-use: it moves from READY to CONSUMED before the first
piece is written, and any further render raises FormatterExhaustedError.

NOTE:
    Not safe for concurrent rendering; the READY/CONSUMED flag is not
    synchronized.
"""

import io
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Protocol

from .conjunction import Conjunction
from .exceptions import FormatterExhaustedError
from .join import ConjunctionLike


class Sink(Protocol):
    """Anything with a write(str) method (io.StringIO, sys.stdout, ...)."""

    def write(self, text: str) -> Any:
        ...


class FormatterState(Enum):
    """Lifecycle of a lazy wrapper."""
    READY = "ready"
    CONSUMED = "consumed"


class _SingleUseFormatter(ABC):
    """Shared READY -> CONSUMED bookkeeping and the str()/format() hooks."""

    def __init__(self):
        self.state = FormatterState.READY

    def _consume(self) -> None:
        if self.state is FormatterState.CONSUMED:
            raise FormatterExhaustedError(
                f"{type(self).__name__} has already been rendered; "
                "build a new wrapper to render again"
            )
        self.state = FormatterState.CONSUMED

    @abstractmethod
    def _render(self, sink: Sink) -> None:
        """Write the joined pieces into sink."""

    def write_to(self, sink: Sink) -> None:
        """Render into sink. Can only be called once."""
        self._consume()
        self._render(sink)

    def __str__(self) -> str:
        out = io.StringIO()
        self.write_to(out)
        return out.getvalue()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class JoinFmt(_SingleUseFormatter):
    """
    Symmetric, non-Oxford join of a single-use source.

    Works like str.join: the glue goes between every pair of values.
    Values are rendered with format(), so they need not be strings.

    Example:
        >>> f"numbers: {JoinFmt(iter(['one', 'two', 'three']), ', ')}"
        'numbers: one, two, three'
    """

    def __init__(self, iterable: Iterable, glue: str = ""):
        super().__init__()
        self._source = iter(iterable)
        self.glue = glue

    def _render(self, sink: Sink) -> None:
        source, self._source = self._source, None

        if not self.glue:
            for value in source:
                sink.write(format(value))
            return

        first = True
        for value in source:
            if not first:
                sink.write(self.glue)
            first = False
            sink.write(format(value))


class OxfordJoinFmt(_SingleUseFormatter):
    """
    Oxford-comma join that writes into a sink.

    Unlike join(), values need not be strings (format() is used), but a
    random-access sequence is required so the last value can be found
    up front.

    Example:
        >>> str(OxfordJoinFmt(["Apples", "Oranges", "Bananas"], Conjunction.AND_OR))
        'Apples, Oranges, and/or Bananas'
    """

    def __init__(self, sequence: Sequence, conjunction: ConjunctionLike = Conjunction.AND):
        super().__init__()
        if isinstance(sequence, (str, bytes, bytearray)) or not isinstance(sequence, Sequence):
            raise TypeError(
                f"OxfordJoinFmt needs a sequence of values, got {type(sequence).__name__}"
            )
        self._sequence = sequence
        self.conjunction = Conjunction.parse(conjunction)

    @classmethod
    def and_(cls, sequence: Sequence) -> "OxfordJoinFmt":
        return cls(sequence, Conjunction.AND)

    @classmethod
    def and_or(cls, sequence: Sequence) -> "OxfordJoinFmt":
        return cls(sequence, Conjunction.AND_OR)

    @classmethod
    def nor(cls, sequence: Sequence) -> "OxfordJoinFmt":
        return cls(sequence, Conjunction.NOR)

    @classmethod
    def or_(cls, sequence: Sequence) -> "OxfordJoinFmt":
        return cls(sequence, Conjunction.OR)

    def _render(self, sink: Sink) -> None:
        sequence, self._sequence = self._sequence, ()
        count = len(sequence)
        if count == 0:
            return
        if count == 1:
            sink.write(format(sequence[0]))
            return
        if count == 2:
            sink.write(format(sequence[0]))
            sink.write(self.conjunction.padded_for_two())
            sink.write(format(sequence[1]))
            return

        last = count - 1
        sink.write(format(sequence[0]))
        for i in range(1, last):
            sink.write(", ")
            sink.write(format(sequence[i]))
        sink.write(self.conjunction.padded_for_many())
        sink.write(format(sequence[last]))


def lazy_join(iterable: Iterable, glue: str = "") -> JoinFmt:
    """Wrap iterable for a plain, deferred join with glue."""
    return JoinFmt(iterable, glue)


def lazy_oxford_join(sequence: Sequence, conjunction: ConjunctionLike = Conjunction.AND) -> OxfordJoinFmt:
    """Wrap sequence for a deferred Oxford-comma join."""
    return OxfordJoinFmt(sequence, conjunction)


__all__ = [
    "FormatterState",
    "JoinFmt",
    "OxfordJoinFmt",
    "Sink",
    "lazy_join",
    "lazy_oxford_join",
]
