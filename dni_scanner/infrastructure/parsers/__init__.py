from .back_parser import BackSideParser
from .context import ExtractionContext, run_strategies
from .front_parser import FrontSideParser
from .normalizer import normalize, normalize_back, normalize_front

__all__ = [
    "BackSideParser",
    "ExtractionContext",
    "FrontSideParser",
    "normalize",
    "normalize_back",
    "normalize_front",
    "run_strategies",
]
