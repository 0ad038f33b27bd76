"""
Lazy, composable sequence combinators.

Build pipelines over possibly infinite sources; nothing is pulled until a
cursor is advanced, and only as much as the consumer asks for.

Architecture:
- Seq / Cursor      - the sequence contract (core)
- source.*          - from_, repeat, generate, range
- transform.*       - map, flat_map, filter, tap, drop, take, join
- multi.*           - zip, combine, permute (n-ary)
- testing           - lockstep comparison for test suites
"""

# Core types
from ._types import Effect, Mapper, Number, Predicate, Source
from .core import Cursor, Seq

# Producers
from .source import Delegate, Generate, Range, Repeat, from_, generate, range, repeat

# Unary transforms
from .transform import Drop, Filter, FlatMap, Map, Take, Tap, join

# N-ary combinators
from .multi import Combine, Permute, Zip, combine, permute, zip

# Testing helpers
from . import testing
from .testing import ComparePolicy, assert_sequence_equal, compare

# Errors
from ._errors import ArityError, EmptySequenceError, SequenceMismatchError

__all__ = (
    # Types
    "Cursor",
    "Effect",
    "Mapper",
    "Number",
    "Predicate",
    "Seq",
    "Source",
    # Producers
    "from_",
    "generate",
    "range",
    "repeat",
    "Delegate",
    "Generate",
    "Range",
    "Repeat",
    # Unary transforms
    "join",
    "Drop",
    "Filter",
    "FlatMap",
    "Map",
    "Take",
    "Tap",
    # N-ary combinators
    "combine",
    "permute",
    "zip",
    "Combine",
    "Permute",
    "Zip",
    # Testing
    "testing",
    "ComparePolicy",
    "assert_sequence_equal",
    "compare",
    # Errors
    "ArityError",
    "EmptySequenceError",
    "SequenceMismatchError",
)
