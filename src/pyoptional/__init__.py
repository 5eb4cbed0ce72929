from ._core import Config, get_config
from ._optional import NoSuchElementError, NullValueError, Optional
from .traits import Checkable, Pipeable

__all__ = [
    "Checkable",
    "Config",
    "NoSuchElementError",
    "NullValueError",
    "Optional",
    "Pipeable",
    "get_config",
]
