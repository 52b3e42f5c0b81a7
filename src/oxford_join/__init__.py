"""
Oxford Join Package

Join an ordered collection of strings with serial ("Oxford") commas
inserted as needed, using the conjunction of your choice:

    0 items  -> ""
    1 item   -> "first"
    2 items  -> "first <CONJUNCTION> last"
    3+ items -> "first, second, ..., <CONJUNCTION> last"

Two ways to get there:
    - join() and friends build the whole string in one exact-size buffer
    - JoinFmt / OxfordJoinFmt render straight into a writable sink

Example:
    >>> from oxford_join import Conjunction, join
    >>> join(["Apples", "Oranges", "Bananas"], Conjunction.AND_OR)
    'Apples, Oranges, and/or Bananas'
"""

from .config import JoinConfig, config_from_json, config_from_yaml, load_config
from .conjunction import Conjunction, ConjunctionKind
from .exceptions import (
    ConfigError,
    FormatterExhaustedError,
    LengthMismatchError,
    OxfordJoinError,
    SerializationError,
)
from .formatting import FormatterState, JoinFmt, OxfordJoinFmt, lazy_join, lazy_oxford_join
from .join import (
    join,
    join_ampersand,
    join_and,
    join_and_or,
    join_nor,
    join_or,
    join_plus,
    predict_length,
)

__version__ = "0.1.0"

__all__ = [
    "Conjunction",
    "ConjunctionKind",
    "ConfigError",
    "FormatterExhaustedError",
    "FormatterState",
    "JoinConfig",
    "JoinFmt",
    "LengthMismatchError",
    "OxfordJoinError",
    "OxfordJoinFmt",
    "SerializationError",
    "config_from_json",
    "config_from_yaml",
    "join",
    "join_ampersand",
    "join_and",
    "join_and_or",
    "join_nor",
    "join_or",
    "join_plus",
    "lazy_join",
    "lazy_oxford_join",
    "load_config",
    "predict_length",
]
