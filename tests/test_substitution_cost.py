import math

import pytest

from humandistance.keyboards.cost import substitution_cost
from humandistance.keyboards.layouts import CustomLayoutBuilder, azerty, get_layout, qwerty, qwertz


def test_equal_characters_cost_nothing() -> None:
    assert substitution_cost("a", "a", qwerty()) == 0.0
    assert substitution_cost("A", "a", qwerty()) == 0.0
    assert substitution_cost("α", "α", qwerty()) == 0.0


def test_unknown_characters_cost_the_maximum() -> None:
    assert substitution_cost("a", "α", qwerty()) == 1.0
    assert substitution_cost("€", "a", azerty()) == 1.0


def test_known_distances() -> None:
    assert substitution_cost("a", "z", qwerty()) == pytest.approx(math.sqrt(1.25) / math.sqrt(157.25))
    assert substitution_cost("a", "z", azerty()) == pytest.approx(1 / 12)
    assert substitution_cost("a", "z", qwertz()) == pytest.approx(0.40451017022132874, rel=1e-6)


@pytest.mark.parametrize(
    "layout, adjacent, distant",
    [
        ("qwerty", ("a", "s"), ("a", "p")),
        ("qwerty", ("q", "w"), ("q", "m")),
        ("azerty", ("a", "z"), ("a", "p")),
        ("azerty", ("q", "s"), ("q", "m")),
        ("qwertz", ("a", "s"), ("a", "p")),
        ("qwertz", ("q", "w"), ("q", "m")),
    ],
)
def test_adjacent_keys_cost_less_than_distant_keys(layout: str, adjacent, distant) -> None:
    resolved = get_layout(layout)
    assert substitution_cost(*adjacent, resolved) < substitution_cost(*distant, resolved)


def test_cost_is_symmetric_and_bounded() -> None:
    layout = qwerty()
    keys = list(layout.positions)
    for a in keys:
        for b in keys:
            cost = substitution_cost(a, b, layout)
            assert 0.0 <= cost <= 1.0
            assert cost == substitution_cost(b, a, layout)


def test_degenerate_layout_never_divides_by_zero() -> None:
    stacked = CustomLayoutBuilder().add_row("a", y=0).add_row("b", y=0).build()

    assert stacked.max_distance == 0.0
    assert substitution_cost("a", "b", stacked) == 1.0
