from .fold import fold
from .traverse import sequence, traverse

__all__ = (
    "fold",
    "sequence",
    "traverse",
)
