from __future__ import annotations

from dataclasses import dataclass

from humandistance.distance.engine import DistanceEngine, LayoutSelector, distance_engine
from humandistance.keyboards.layouts import KeyboardLayout


@dataclass(frozen=True)
class CalculatorOptions:
    use_keyboard_distance: bool = True
    layout: LayoutSelector = KeyboardLayout.QWERTY


def calculate(
    source: str,
    target: str,
    options: CalculatorOptions | None,
    *,
    engine: DistanceEngine | None = None,
) -> float:
    """Real-valued distance where substitutions are priced by key proximity.

    With ``use_keyboard_distance`` disabled this is the plain edit distance as
    a float. ``options`` is required; pass ``CalculatorOptions()`` for the
    QWERTY defaults.
    """
    if options is None:
        raise ValueError("options must be a CalculatorOptions instance, got None")

    engine = engine or distance_engine
    if not options.use_keyboard_distance:
        return float(engine.edit_distance(source, target))
    return engine.weighted_distance(source, target, options.layout)
