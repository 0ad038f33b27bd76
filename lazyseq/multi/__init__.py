from .combine import Combine, combine
from .permute import Permute, permute
from .zip import Zip, zip

__all__ = (
    # Constructors
    "combine",
    "permute",
    "zip",
    # Nodes
    "Combine",
    "Permute",
    "Zip",
)
