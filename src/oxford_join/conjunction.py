"""
Conjunction: the glue placed before the last item of a joined list.

A Conjunction is a closed set of values:
    - six fixed words/symbols (&, and, and/or, nor, or, +)
    - OTHER, wrapping arbitrary caller text (trimmed)

Each value knows its bare text, its UTF-8 byte length, and two padded
renderings used by the writer:

    padded_for_two()   " and "    (exactly two items)
    padded_for_many()  ", and "   (three or more items)

For the fixed kinds all of these are computed once at import time so a
join copies each junction as one contiguous run.

IMPORTANT:
    The conjunction should just be the word/symbol. Surrounding
    whitespace and punctuation are added during the join.
"""

import warnings
from dataclasses import InitVar, dataclass
from enum import Enum
from typing import ClassVar, Dict, Union


class ConjunctionKind(Enum):
    """
    The kinds of conjunction.

    Values are the stable names used in configuration and serialized data,
    not the rendered text (see Conjunction.text for that).
    """

    AMPERSAND = "ampersand"
    AND = "and"
    AND_OR = "and_or"
    NOR = "nor"
    OR = "or"
    OTHER = "other"
    PLUS = "plus"


def encode_text(text: str) -> bytes:
    """
    UTF-8 encode text for the join buffer.

    Lone surrogates (e.g. from os.fsdecode of undecodable filenames)
    are legal in str, so they pass through and decode back unchanged.
    """
    return text.encode("utf-8", "surrogatepass")


_CANONICAL_TEXT: Dict[ConjunctionKind, str] = {
    ConjunctionKind.AMPERSAND: "&",
    ConjunctionKind.AND: "and",
    ConjunctionKind.AND_OR: "and/or",
    ConjunctionKind.NOR: "nor",
    ConjunctionKind.OR: "or",
    ConjunctionKind.PLUS: "+",
}

_BYTE_LENGTHS: Dict[ConjunctionKind, int] = {
    kind: len(encode_text(text)) for kind, text in _CANONICAL_TEXT.items()
}

_PADDED_TWO: Dict[ConjunctionKind, str] = {
    kind: f" {text} " for kind, text in _CANONICAL_TEXT.items()
}

_PADDED_MANY: Dict[ConjunctionKind, str] = {
    kind: f", {text} " for kind, text in _CANONICAL_TEXT.items()
}

_PADDED_TWO_BYTES: Dict[ConjunctionKind, bytes] = {
    kind: encode_text(text) for kind, text in _PADDED_TWO.items()
}

_PADDED_MANY_BYTES: Dict[ConjunctionKind, bytes] = {
    kind: encode_text(text) for kind, text in _PADDED_MANY.items()
}

_KIND_BY_TEXT: Dict[str, ConjunctionKind] = {
    text: kind for kind, text in _CANONICAL_TEXT.items()
}


@dataclass(frozen=True)
class Conjunction:
    """
    The glue used to bind the last entry of a joined set.

    Use the class constants for the fixed kinds:

        Conjunction.AND, Conjunction.OR, Conjunction.AND_OR,
        Conjunction.NOR, Conjunction.AMPERSAND, Conjunction.PLUS

    and Conjunction.from_text("plus") for anything else.

    Properties:
        kind: ConjunctionKind (defaults to AND)
        custom: Trimmed caller text; only meaningful for OTHER
        stacklevel: Init-only; frame the empty-text warning is attributed to

    IMPORTANT:
        An empty OTHER is accepted. It makes no grammatical sense, so a
        UserWarning is issued, but the join still produces well-defined
        output. Checking is_empty() is the caller's job.
    """

    kind: ConjunctionKind = ConjunctionKind.AND
    custom: str = ""
    stacklevel: InitVar[int] = 3

    AMPERSAND: ClassVar["Conjunction"]
    AND: ClassVar["Conjunction"]
    AND_OR: ClassVar["Conjunction"]
    NOR: ClassVar["Conjunction"]
    OR: ClassVar["Conjunction"]
    PLUS: ClassVar["Conjunction"]

    def __post_init__(self, stacklevel: int):
        if not isinstance(self.kind, ConjunctionKind):
            raise TypeError(f"Expected a ConjunctionKind, got {type(self.kind).__name__}")
        if not isinstance(self.custom, str):
            raise TypeError(f"Conjunction text must be a str, got {type(self.custom).__name__}")

        if self.kind is ConjunctionKind.OTHER:
            object.__setattr__(self, "custom", self.custom.strip())
            if not self.custom:
                warnings.warn("Empty custom conjunction; joins will read oddly", UserWarning, stacklevel=stacklevel)
        elif self.custom:
            raise ValueError(f"{self.kind.name} is a fixed conjunction and takes no custom text")

    @classmethod
    def from_text(cls, text: str) -> "Conjunction":
        """Build a custom (OTHER) conjunction, trimming surrounding whitespace."""
        return cls(ConjunctionKind.OTHER, text, 4)

    @classmethod
    def parse(cls, value: Union["Conjunction", ConjunctionKind, str]) -> "Conjunction":
        """
        Resolve a loosely specified conjunction.

        Accepts, in order of preference:
            - a Conjunction (returned unchanged)
            - a fixed ConjunctionKind
            - a kind name, case-insensitive ("and_or", "AND-OR", "ampersand")
            - a fixed canonical text ("&", "and/or", "+")
            - anything else becomes a custom conjunction via from_text()

        Raises:
            TypeError: If value is none of the above
            ValueError: If value is ConjunctionKind.OTHER (it needs text)
        """
        if isinstance(value, Conjunction):
            return value
        if isinstance(value, ConjunctionKind):
            if value is ConjunctionKind.OTHER:
                raise ValueError("ConjunctionKind.OTHER needs text; use Conjunction.from_text()")
            return cls(value)
        if not isinstance(value, str):
            raise TypeError(f"Cannot build a Conjunction from {type(value).__name__}")

        stripped = value.strip()
        name = stripped.lower().replace("-", "_").replace(" ", "_")
        try:
            kind = ConjunctionKind(name)
        except ValueError:
            kind = _KIND_BY_TEXT.get(stripped.lower())

        if kind is not None and kind is not ConjunctionKind.OTHER:
            return cls(kind)
        return cls(ConjunctionKind.OTHER, stripped, 4)

    @property
    def text(self) -> str:
        """The bare conjunction, e.g. "and" or "&"."""
        if self.kind is ConjunctionKind.OTHER:
            return self.custom
        return _CANONICAL_TEXT[self.kind]

    @property
    def byte_length(self) -> int:
        """UTF-8 length of text."""
        if self.kind is ConjunctionKind.OTHER:
            return len(encode_text(self.custom))
        return _BYTE_LENGTHS[self.kind]

    def is_empty(self) -> bool:
        """Only a custom conjunction can be empty."""
        return self.kind is ConjunctionKind.OTHER and not self.custom

    def padded_for_two(self) -> str:
        """Glue for a two-item join: " and "."""
        if self.kind is ConjunctionKind.OTHER:
            return " " + self.custom + " "
        return _PADDED_TWO[self.kind]

    def padded_for_many(self) -> str:
        """Glue for the last junction of a 3+ item join: ", and "."""
        if self.kind is ConjunctionKind.OTHER:
            return ", " + self.custom + " "
        return _PADDED_MANY[self.kind]

    def encoded_for_two(self) -> bytes:
        """padded_for_two() as UTF-8 bytes."""
        if self.kind is ConjunctionKind.OTHER:
            return encode_text(self.padded_for_two())
        return _PADDED_TWO_BYTES[self.kind]

    def encoded_for_many(self) -> bytes:
        """padded_for_many() as UTF-8 bytes."""
        if self.kind is ConjunctionKind.OTHER:
            return encode_text(self.padded_for_many())
        return _PADDED_MANY_BYTES[self.kind]

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.byte_length


Conjunction.AMPERSAND = Conjunction(ConjunctionKind.AMPERSAND)
Conjunction.AND = Conjunction(ConjunctionKind.AND)
Conjunction.AND_OR = Conjunction(ConjunctionKind.AND_OR)
Conjunction.NOR = Conjunction(ConjunctionKind.NOR)
Conjunction.OR = Conjunction(ConjunctionKind.OR)
Conjunction.PLUS = Conjunction(ConjunctionKind.PLUS)


# Every fixed kind, in declaration order (handy for sweeps).
FIXED_CONJUNCTIONS = (
    Conjunction.AMPERSAND,
    Conjunction.AND,
    Conjunction.AND_OR,
    Conjunction.NOR,
    Conjunction.OR,
    Conjunction.PLUS,
)


__all__ = ["Conjunction", "ConjunctionKind", "FIXED_CONJUNCTIONS", "encode_text"]
