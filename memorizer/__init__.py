from .memorizer import Memorizer, memorizer
from .copy_policy import COPY_MODES
from .stats import MemorizerStats

__all__ = ["Memorizer", "memorizer", "COPY_MODES", "MemorizerStats"]
