from .cost import MAX_SUBSTITUTION_COST, substitution_cost
from .layouts import (
    AZERTY_ROWS,
    QWERTY_ROWS,
    QWERTZ_ROWS,
    CustomLayoutBuilder,
    KeyboardLayout,
    KeyPosition,
    Layout,
    RowSpec,
    azerty,
    get_layout,
    qwerty,
    qwertz,
)

__all__ = [
    "AZERTY_ROWS",
    "QWERTY_ROWS",
    "QWERTZ_ROWS",
    "CustomLayoutBuilder",
    "KeyboardLayout",
    "KeyPosition",
    "Layout",
    "MAX_SUBSTITUTION_COST",
    "RowSpec",
    "azerty",
    "get_layout",
    "qwerty",
    "qwertz",
    "substitution_cost",
]
