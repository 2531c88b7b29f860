import pytest

from humandistance.distance.engine import calculate
from humandistance.distance.result import DEFAULT_TYPO_THRESHOLD, DistanceResult, adaptive_threshold


@pytest.mark.parametrize(
    "max_length, expected",
    [(0, 0.60), (1, 0.60), (3, 0.60), (4, 0.70), (5, 0.75), (6, 0.80), (42, 0.80)],
)
def test_adaptive_threshold_table(max_length: int, expected: float) -> None:
    assert adaptive_threshold(max_length) == expected


def test_result_rejects_inconsistent_counts() -> None:
    with pytest.raises(ValueError):
        DistanceResult(edit_distance=2, insertions=1, max_length=3)


def test_result_rejects_max_length_shorter_than_distance() -> None:
    with pytest.raises(ValueError):
        DistanceResult(edit_distance=1, insertions=1, max_length=0)


def test_empty_result_is_a_perfect_score() -> None:
    result = DistanceResult()
    assert result.typo_score() == 1.0
    assert result.is_likely_typo()


def test_case_only_difference_scores_one() -> None:
    assert calculate("TEST", "test").typo_score() == 1.0
    assert calculate("PASSWORD", "password").is_likely_typo()


def test_adjacent_key_typo_scores_higher_than_distant() -> None:
    adjacent = calculate("passwprd", "password")
    distant = calculate("passward", "password")

    assert adjacent.typo_score() > 0.8
    assert distant.typo_score() < adjacent.typo_score()


def test_unrelated_strings_score_low() -> None:
    assert calculate("qwertyui", "password").typo_score() < 0.3
    assert calculate("hello", "world").typo_score() < 0.3
    assert calculate("aaaa", "zzzz").typo_score() >= 0.0


def test_penalty_strength_zero_ignores_keyboard() -> None:
    result = calculate("a", "z")
    assert result.typo_score(0.0) == 1.0 - result.edit_distance / 1


def test_penalty_strength_one_applies_full_penalty() -> None:
    result = calculate("a", "p")
    expected = (1.0 - result.edit_distance / 1) * (1.0 - result.average_keyboard_distance)
    assert result.typo_score(1.0) == expected


def test_higher_penalty_strength_lowers_score() -> None:
    result = calculate("password", "passward")

    assert result.typo_score(1.0) < result.typo_score(0.5) < result.typo_score(0.2)
    assert result.is_likely_typo(keyboard_penalty_strength=0.0)
    assert not result.is_likely_typo(keyboard_penalty_strength=1.0)


def test_insertions_and_transpositions_skip_keyboard_factor() -> None:
    assert calculate("test", "tset").typo_score() == pytest.approx(0.75)
    assert calculate("hello", "helo").typo_score() == pytest.approx(0.8)


@pytest.mark.parametrize(
    "original, typo",
    [
        ("git", "gti"),
        ("npm", "nmp"),
        ("the", "teh"),
        ("test", "tset"),
        ("push", "psuh"),
        ("pull", "plul"),
        ("hello", "helo"),
        ("build", "biuld"),
        ("status", "stauts"),
        ("reciept", "receipt"),
        ("form", "from"),
        ("slip", "slop"),
    ],
)
def test_adaptive_threshold_accepts_short_typos(original: str, typo: str) -> None:
    assert calculate(original, typo).is_likely_typo()


@pytest.mark.parametrize(
    "first, second",
    [("go", "to"), ("is", "as"), ("on", "in"), ("hello", "world"), ("slip", "slap"), ("form", "farm")],
)
def test_adaptive_threshold_rejects_different_words(first: str, second: str) -> None:
    assert not calculate(first, second).is_likely_typo()


def test_adaptive_and_fixed_thresholds_disagree_on_short_words() -> None:
    result = calculate("git", "gti")

    assert result.typo_score() == pytest.approx(2 / 3)
    assert result.is_likely_typo()
    assert not result.is_likely_typo(threshold=DEFAULT_TYPO_THRESHOLD)
    assert result.is_likely_typo(threshold=0.6)


def test_long_words_use_base_threshold() -> None:
    result = calculate("abcdef", "xbcdef")

    assert result.typo_score() < 0.80
    assert not result.is_likely_typo()
