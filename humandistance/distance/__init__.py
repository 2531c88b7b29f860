from .calculator import CalculatorOptions
from .engine import (
    DEFAULT_MIN_SCORE,
    DistanceEngine,
    Operation,
    best_match,
    best_match_concurrent,
    calculate,
    edit_distance,
    rank_candidates,
    weighted_distance,
)
from .result import (
    ADAPTIVE_THRESHOLDS,
    DEFAULT_KEYBOARD_PENALTY_STRENGTH,
    DEFAULT_TYPO_THRESHOLD,
    DistanceResult,
    adaptive_threshold,
)
from humandistance.keyboards import CustomLayoutBuilder, KeyboardLayout, Layout, get_layout

__all__ = [
    "ADAPTIVE_THRESHOLDS",
    "CalculatorOptions",
    "CustomLayoutBuilder",
    "DEFAULT_KEYBOARD_PENALTY_STRENGTH",
    "DEFAULT_MIN_SCORE",
    "DEFAULT_TYPO_THRESHOLD",
    "DistanceEngine",
    "DistanceResult",
    "KeyboardLayout",
    "Layout",
    "Operation",
    "adaptive_threshold",
    "best_match",
    "best_match_concurrent",
    "calculate",
    "edit_distance",
    "get_layout",
    "rank_candidates",
    "weighted_distance",
]
