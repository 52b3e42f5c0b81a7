"""
Join engine: Oxford-comma joins built in one exact-size buffer.

The output length is computed up front:

    N >= 3:  sum(item lengths) + 2 * (N - 1) + len(conjunction) + 1
    N == 2:  len(a) + len(b) + 2 + len(conjunction)
    N <= 1:  nothing to build

Every one of the N - 1 junctions costs ", " (2 bytes); the last junction
additionally carries the conjunction and its trailing space.

A buffer of exactly that size is then filled in a single forward pass:

    first, ", " mid, ", " mid, ..., ", <CONJUNCTION> ", last

Sequences are split by index into first / middle / last. Mappings and
sets have no random access, so they are walked with a one-item
lookahead: the last item is only known to be last once the iterator
runs dry.

Lengths are UTF-8 byte lengths. The buffer cannot grow; a write past
the end, or a pass that finishes short, raises LengthMismatchError.
"""

import os
from collections.abc import Iterable, Iterator, Mapping, Sequence, Set
from typing import Any, Callable, Union

from .conjunction import Conjunction, ConjunctionKind, encode_text
from .exceptions import LengthMismatchError


COMMA_SPACE = b", "

ConjunctionLike = Union[Conjunction, ConjunctionKind, str]


def as_text(item: Any) -> str:
    """
    Project an item to text.

    str is used as-is, path-like objects go through os.fspath(),
    everything else through str().
    """
    if isinstance(item, str):
        return item
    if isinstance(item, os.PathLike):
        return os.fspath(item)
    return str(item)


def _encoded(item: Any) -> bytes:
    return encode_text(as_text(item))


def _byte_len(item: Any) -> int:
    return len(_encoded(item))


class _FixedBuffer:
    """
    A byte buffer of fixed capacity, filled front to back.

    Writes go through a memoryview, which refuses to resize the
    underlying bytearray.
    """

    __slots__ = ("_data", "_view", "_pos")

    def __init__(self, capacity: int):
        self._data = bytearray(capacity)
        self._view = memoryview(self._data)
        self._pos = 0

    def write(self, chunk: bytes) -> None:
        end = self._pos + len(chunk)
        if end > len(self._data):
            self._view.release()
            raise LengthMismatchError(len(self._data), end)
        self._view[self._pos:end] = chunk
        self._pos = end

    def finish(self) -> str:
        self._view.release()
        if self._pos != len(self._data):
            raise LengthMismatchError(len(self._data), self._pos)
        return self._data.decode("utf-8", "surrogatepass")


def _capacity(total_item_bytes: int, count: int, conjunction: Conjunction) -> int:
    """Exact output size for count >= 3 items."""
    return total_item_bytes + 2 * (count - 1) + conjunction.byte_length + 1


def _join_two(a: str, b: str, conjunction: Conjunction) -> str:
    """Build "A <CONJUNCTION> B"."""
    a_bytes = encode_text(a)
    b_bytes = encode_text(b)
    buf = _FixedBuffer(len(a_bytes) + len(b_bytes) + 2 + conjunction.byte_length)
    buf.write(a_bytes)
    buf.write(conjunction.encoded_for_two())
    buf.write(b_bytes)
    return buf.finish()


def _join_sequence(items: Sequence, conjunction: Conjunction) -> str:
    """Join a random-access sequence."""
    count = len(items)
    if count == 0:
        return ""
    if count == 1:
        return as_text(items[0])
    if count == 2:
        return _join_two(as_text(items[0]), as_text(items[1]), conjunction)

    last = count - 1
    buf = _FixedBuffer(_capacity(sum(_byte_len(x) for x in items), count, conjunction))

    buf.write(_encoded(items[0]))
    for i in range(1, last):
        buf.write(COMMA_SPACE)
        buf.write(_encoded(items[i]))
    buf.write(conjunction.encoded_for_many())
    buf.write(_encoded(items[last]))

    return buf.finish()


def _join_ordered(count: int, values: Callable[[], Iterator], conjunction: Conjunction) -> str:
    """
    Join a collection that can only be iterated.

    Args:
        count: Number of items (known from the collection, not counted)
        values: Returns a fresh iterator over the items, in join order.
            Called once for capacity planning and once for writing.
        conjunction: The glue
    """
    if count == 0:
        return ""
    if count == 1:
        return as_text(next(values()))
    if count == 2:
        iterator = values()
        a = as_text(next(iterator))
        b = as_text(next(iterator))
        return _join_two(a, b, conjunction)

    buf = _FixedBuffer(_capacity(sum(_byte_len(x) for x in values()), count, conjunction))

    iterator = values()
    buf.write(_encoded(next(iterator)))

    # Hold one item back; it only gets a plain separator once we know
    # something follows it.
    held = next(iterator)
    for value in iterator:
        buf.write(COMMA_SPACE)
        buf.write(_encoded(held))
        held = value

    buf.write(conjunction.encoded_for_many())
    buf.write(_encoded(held))

    return buf.finish()


def _join_mapping(items: Mapping, conjunction: Conjunction) -> str:
    """Join mapping values in ascending key order."""
    keys = sorted(items)
    return _join_ordered(len(keys), lambda: (items[k] for k in keys), conjunction)


def _join_set(items: Set, conjunction: Conjunction) -> str:
    """Join set members in sorted order."""
    ordered = sorted(items)
    return _join_ordered(len(ordered), lambda: iter(ordered), conjunction)


def _check_joinable(items: Any) -> None:
    if isinstance(items, (str, bytes, bytearray)):
        raise TypeError(
            f"Expected a collection of strings, got a single {type(items).__name__}; "
            "wrap it in a list to join one item"
        )
    if not isinstance(items, Iterable):
        raise TypeError(f"{type(items).__name__} object is not iterable")


def join(items: Iterable, conjunction: ConjunctionLike = Conjunction.AND) -> str:
    """
    Join items with Oxford commas inserted as necessary.

    Args:
        items: A sequence, a mapping (values are joined in key order),
            a set (joined in sorted order), or any other finite iterable
        conjunction: A Conjunction, or anything Conjunction.parse accepts

    Returns:
        "" for no items, the sole item's text for one item, otherwise
        "A <CONJUNCTION> B" or "A, B, ..., <CONJUNCTION> Z"

    Raises:
        TypeError: If items is a bare string or not iterable
        LengthMismatchError: If an item's text changed between reads

    Example:
        >>> join(["Apples", "Oranges", "Bananas"], Conjunction.OR)
        'Apples, Oranges, or Bananas'
    """
    _check_joinable(items)
    conjunction = Conjunction.parse(conjunction)

    if isinstance(items, Mapping):
        return _join_mapping(items, conjunction)
    if isinstance(items, Set):
        return _join_set(items, conjunction)
    if isinstance(items, Sequence):
        return _join_sequence(items, conjunction)
    return _join_sequence(tuple(items), conjunction)


def predict_length(items: Iterable, conjunction: ConjunctionLike = Conjunction.AND) -> int:
    """
    Return the UTF-8 byte length join(items, conjunction) will produce.

    Nothing is built; items only need to be measured. Iterators are
    consumed, so pass a collection if you also mean to join it.
    """
    _check_joinable(items)
    conjunction = Conjunction.parse(conjunction)

    if isinstance(items, Mapping):
        values = [items[k] for k in sorted(items)]
    elif isinstance(items, Set):
        values = sorted(items)
    elif isinstance(items, Sequence):
        values = items
    else:
        values = tuple(items)

    count = len(values)
    total = sum(_byte_len(x) for x in values)
    if count <= 1:
        return total
    if count == 2:
        return total + 2 + conjunction.byte_length
    return _capacity(total, count, conjunction)


def join_ampersand(items: Iterable) -> str:
    """Equivalent to join(items, Conjunction.AMPERSAND)."""
    return join(items, Conjunction.AMPERSAND)


def join_and(items: Iterable) -> str:
    """Equivalent to join(items, Conjunction.AND)."""
    return join(items, Conjunction.AND)


def join_and_or(items: Iterable) -> str:
    """Equivalent to join(items, Conjunction.AND_OR)."""
    return join(items, Conjunction.AND_OR)


def join_nor(items: Iterable) -> str:
    """Equivalent to join(items, Conjunction.NOR)."""
    return join(items, Conjunction.NOR)


def join_or(items: Iterable) -> str:
    """Equivalent to join(items, Conjunction.OR)."""
    return join(items, Conjunction.OR)


def join_plus(items: Iterable) -> str:
    """Equivalent to join(items, Conjunction.PLUS)."""
    return join(items, Conjunction.PLUS)


__all__ = [
    "as_text",
    "join",
    "join_ampersand",
    "join_and",
    "join_and_or",
    "join_nor",
    "join_or",
    "join_plus",
    "predict_length",
]
