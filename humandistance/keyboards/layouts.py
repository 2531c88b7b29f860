from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPosition:
    x: float
    y: float

    def distance_to(self, other: KeyPosition) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class RowSpec:
    characters: str
    y: float
    x_offset: float = 0.0


@dataclass(frozen=True, eq=False)
class Layout:
    """Immutable character -> key position table for one physical keyboard.

    ``max_distance`` is the largest Euclidean distance between any two mapped
    keys and is used as the divisor when normalizing substitution costs. A
    layout needs at least two distinct positions for that divisor to be
    meaningful; with fewer, ``max_distance`` is 0 and every substitution is
    priced at the maximum cost.
    """

    positions: Mapping[str, KeyPosition]
    name: str = "custom"
    max_distance: float = field(init=False)

    def __post_init__(self) -> None:
        folded = {char.lower(): pos for char, pos in self.positions.items()}
        object.__setattr__(self, "positions", MappingProxyType(folded))
        object.__setattr__(self, "max_distance", _max_pairwise_distance(folded.values()))
        if self.max_distance == 0.0:
            logger.warning(
                "layout %s has fewer than two distinct key positions; substitutions will cost 1.0",
                self.name,
            )
        logger.debug("built layout=%s keys=%s max_distance=%.4f", self.name, len(folded), self.max_distance)

    @classmethod
    def from_rows(cls, rows: Iterable[RowSpec], *, name: str = "custom") -> Layout:
        positions: dict[str, KeyPosition] = {}
        for row in rows:
            for column, char in enumerate(row.characters):
                positions[char.lower()] = KeyPosition(column + row.x_offset, row.y)
        return cls(positions=positions, name=name)

    def position(self, char: str) -> KeyPosition | None:
        return self.positions.get(char.lower())

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and char.lower() in self.positions

    def __len__(self) -> int:
        return len(self.positions)


def _max_pairwise_distance(positions: Iterable[KeyPosition]) -> float:
    keys = list(positions)
    best = 0.0
    for idx, first in enumerate(keys):
        for second in keys[idx + 1 :]:
            dist = first.distance_to(second)
            if dist > best:
                best = dist
    return best


class KeyboardLayout(str, Enum):
    QWERTY = "qwerty"
    AZERTY = "azerty"
    QWERTZ = "qwertz"


QWERTY_ROWS = (
    RowSpec("`1234567890-=", 0),
    RowSpec("qwertyuiop[]\\", 1, 0.5),
    RowSpec("asdfghjkl;'", 2, 0.75),
    RowSpec("zxcvbnm,./", 3, 1.25),
)

# French AZERTY.
AZERTY_ROWS = (
    RowSpec("²1234567890°+", 0),
    RowSpec("azertyuiop^$", 1, 0.5),
    RowSpec("qsdfghjklm*", 2, 0.75),
    RowSpec("wxcvbn,;:!", 3, 1.25),
)

# German QWERTZ.
QWERTZ_ROWS = (
    RowSpec("^1234567890ß´", 0),
    RowSpec("qwertzuiopü+", 1, 0.5),
    RowSpec("asdfghjklöä#", 2, 0.75),
    RowSpec("yxcvbnm,.-", 3, 1.25),
)


@lru_cache(maxsize=None)
def qwerty() -> Layout:
    return Layout.from_rows(QWERTY_ROWS, name=KeyboardLayout.QWERTY.value)


@lru_cache(maxsize=None)
def azerty() -> Layout:
    return Layout.from_rows(AZERTY_ROWS, name=KeyboardLayout.AZERTY.value)


@lru_cache(maxsize=None)
def qwertz() -> Layout:
    return Layout.from_rows(QWERTZ_ROWS, name=KeyboardLayout.QWERTZ.value)


_BUILTIN_FACTORIES = {
    KeyboardLayout.QWERTY: qwerty,
    KeyboardLayout.AZERTY: azerty,
    KeyboardLayout.QWERTZ: qwertz,
}


def get_layout(layout: Layout | KeyboardLayout | str) -> Layout:
    """Resolve a layout selector to a concrete, shared :class:`Layout`.

    Accepts a ready ``Layout`` (returned as is), a ``KeyboardLayout`` member
    or its string value (case-insensitive). Anything else raises
    ``ValueError``.
    """
    if isinstance(layout, Layout):
        return layout
    if isinstance(layout, str):
        try:
            layout = KeyboardLayout(layout.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown keyboard layout: {layout!r}") from None
    if not isinstance(layout, KeyboardLayout):
        raise ValueError(f"Unknown keyboard layout: {layout!r}")
    return _BUILTIN_FACTORIES[layout]()


class CustomLayoutBuilder:
    """Chainable accumulator of keyboard rows.

    >>> layout = (
    ...     CustomLayoutBuilder()
    ...     .add_row("qwertyuiop", y=0, x_offset=0.3)
    ...     .add_row("asdfghjkl", y=1, x_offset=0.5)
    ...     .build()
    ... )
    """

    def __init__(self, name: str = "custom") -> None:
        self.name = name
        self._positions: dict[str, KeyPosition] = {}

    def add_row(self, characters: str, y: float, x_offset: float = 0.0) -> CustomLayoutBuilder:
        for column, char in enumerate(characters):
            self._positions[char.lower()] = KeyPosition(column + x_offset, y)
        return self

    def build(self) -> Layout:
        return Layout(positions=dict(self._positions), name=self.name)
