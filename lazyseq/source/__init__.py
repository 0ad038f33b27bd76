from .constant import Generate, Repeat, generate, repeat
from .delegate import Delegate, from_
from .progression import Range, range

__all__ = (
    # Constructors
    "from_",
    "generate",
    "range",
    "repeat",
    # Nodes
    "Delegate",
    "Generate",
    "Range",
    "Repeat",
)
