from __future__ import annotations

from humandistance.keyboards.layouts import Layout

MAX_SUBSTITUTION_COST = 1.0


def substitution_cost(a: str, b: str, layout: Layout) -> float:
    """Normalized cost in [0, 1] of typing ``b`` where ``a`` was intended.

    Equal characters (ignoring case) cost nothing. Characters missing from
    the layout, or a layout without a usable ``max_distance``, cost the
    maximum.
    """
    if a.lower() == b.lower():
        return 0.0

    pos_a = layout.position(a)
    pos_b = layout.position(b)
    if pos_a is None or pos_b is None:
        return MAX_SUBSTITUTION_COST
    if layout.max_distance <= 0.0:
        return MAX_SUBSTITUTION_COST

    return min(MAX_SUBSTITUTION_COST, pos_a.distance_to(pos_b) / layout.max_distance)
