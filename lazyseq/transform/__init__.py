from .effects import Tap
from .filter import Filter
from .flat_map import FlatMap
from .join import join
from .map import Map
from .slice import Drop, Take

__all__ = (
    "Drop",
    "Filter",
    "FlatMap",
    "Map",
    "Take",
    "Tap",
    "join",
)
