import pytest

from humandistance.distance import calculator
from humandistance.distance.calculator import CalculatorOptions
from humandistance.keyboards.layouts import KeyboardLayout


@pytest.mark.parametrize(
    "source, target, expected",
    [
        ("", "", 0.0),
        ("a", "", 1.0),
        ("", "a", 1.0),
        ("abc", "abc", 0.0),
        ("abc", "ab", 1.0),
        ("ab", "abc", 1.0),
        ("abc", "acb", 1.0),
        ("Hello", "hello", 0.0),
    ],
)
@pytest.mark.parametrize("layout", list(KeyboardLayout))
def test_weighted_calculate_structural_edits(layout: KeyboardLayout, source: str, target: str, expected: float) -> None:
    assert calculator.calculate(source, target, CalculatorOptions(layout=layout)) == expected


def test_adjacent_keys_are_cheap() -> None:
    options = CalculatorOptions()

    assert calculator.calculate("a", "s", options) < 0.5
    assert calculator.calculate("a", "s", options) < calculator.calculate("a", "p", options)


@pytest.mark.parametrize(
    "layout, source, target",
    [
        (KeyboardLayout.QWERTY, "ab", "ba"),
        (KeyboardLayout.QWERTY, "qp", "pq"),
        (KeyboardLayout.AZERTY, "az", "za"),
        (KeyboardLayout.AZERTY, "qm", "mq"),
        (KeyboardLayout.QWERTZ, "ab", "ba"),
        (KeyboardLayout.QWERTZ, "qp", "pq"),
    ],
)
def test_transposition_costs_one(layout: KeyboardLayout, source: str, target: str) -> None:
    assert calculator.calculate(source, target, CalculatorOptions(layout=layout)) == 1.0


def test_unknown_character_costs_one() -> None:
    assert calculator.calculate("a", "α", CalculatorOptions()) == 1.0


def test_keyboard_distance_can_be_disabled() -> None:
    options = CalculatorOptions(use_keyboard_distance=False)

    assert calculator.calculate("a", "p", options) == 1.0
    assert calculator.calculate("kitten", "sitting", options) == 3.0


def test_missing_options_raise() -> None:
    with pytest.raises(ValueError):
        calculator.calculate("a", "b", None)


def test_unknown_layout_in_options_raises() -> None:
    with pytest.raises(ValueError):
        calculator.calculate("a", "b", CalculatorOptions(layout="dvorak"))
