from __future__ import annotations

from dataclasses import dataclass

DEFAULT_KEYBOARD_PENALTY_STRENGTH = 0.5
DEFAULT_TYPO_THRESHOLD = 0.8

# (max_length upper bound, threshold); lengths past the last bound use DEFAULT_TYPO_THRESHOLD.
ADAPTIVE_THRESHOLDS = (
    (3, 0.60),
    (4, 0.70),
    (5, 0.75),
)


def adaptive_threshold(max_length: int) -> float:
    """Typo acceptance threshold for strings of ``max_length`` characters.

    A single edit is a large share of a short word, so short strings get a
    more lenient cutoff.
    """
    for upper_bound, threshold in ADAPTIVE_THRESHOLDS:
        if max_length <= upper_bound:
            return threshold
    return DEFAULT_TYPO_THRESHOLD


@dataclass(frozen=True)
class DistanceResult:
    """Outcome of comparing two strings.

    ``edit_distance`` is the unit-cost Damerau-Levenshtein distance and always
    equals the sum of the four operation counts. ``keyboard_distance_sum``
    adds one normalized keyboard distance in [0, 1] per substitution.
    """

    edit_distance: int = 0
    insertions: int = 0
    deletions: int = 0
    substitutions: int = 0
    transpositions: int = 0
    keyboard_distance_sum: float = 0.0
    max_length: int = 0

    def __post_init__(self) -> None:
        operations = self.insertions + self.deletions + self.substitutions + self.transpositions
        if operations != self.edit_distance:
            raise ValueError(
                f"operation counts sum to {operations}, expected edit_distance={self.edit_distance}"
            )
        if self.max_length < self.edit_distance:
            raise ValueError(
                f"max_length={self.max_length} is shorter than edit_distance={self.edit_distance}"
            )

    @property
    def average_keyboard_distance(self) -> float:
        if self.substitutions == 0:
            return 0.0
        return self.keyboard_distance_sum / self.substitutions

    def typo_score(self, keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH) -> float:
        """Similarity in [0, 1]; 1.0 means the strings are identical.

        Edit similarity is ``1 - edit_distance / max_length``. When the edit
        script contains substitutions it is scaled down by the average
        keyboard distance times ``keyboard_penalty_strength`` (0 ignores the
        keyboard, 1 applies the full penalty). Strengths outside [0, 1] are
        accepted but can push the score out of range.
        """
        if self.max_length == 0:
            return 1.0

        edit_similarity = max(0.0, 1.0 - self.edit_distance / self.max_length)
        if self.substitutions == 0:
            return edit_similarity

        keyboard_factor = 1.0 - self.average_keyboard_distance * keyboard_penalty_strength
        return edit_similarity * keyboard_factor

    def is_likely_typo(
        self,
        keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
        threshold: float | None = None,
    ) -> bool:
        if threshold is None:
            threshold = adaptive_threshold(self.max_length)
        return self.typo_score(keyboard_penalty_strength) >= threshold
