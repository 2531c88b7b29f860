from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum, auto
from typing import Callable, Iterable, Union

from humandistance.distance.result import DEFAULT_KEYBOARD_PENALTY_STRENGTH, DistanceResult
from humandistance.keyboards.cost import substitution_cost
from humandistance.keyboards.layouts import KeyboardLayout, Layout, get_layout

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 0.5

LayoutSelector = Union[Layout, KeyboardLayout, str]
Cost = Union[int, float]
SubstitutionCostFn = Callable[[str, str], Cost]


class Operation(Enum):
    """Edit operation recorded per DP cell for backtracking."""

    NONE = auto()
    INSERT = auto()
    DELETE = auto()
    SUBSTITUTE = auto()
    MATCH = auto()
    TRANSPOSE = auto()


def _unit_cost(_a: str, _b: str) -> int:
    return 1


class DistanceEngine:
    def fold(self, text: str) -> list[str]:
        return [char.lower() for char in text]

    def build_matrix(
        self,
        source: str,
        target: str,
        substitution_cost_fn: SubstitutionCostFn = _unit_cost,
    ) -> tuple[list[list[Cost]], list[list[Operation]]]:
        """Fill the optimal-string-alignment cost grid and its operation tags.

        Insertions, deletions and transpositions cost 1; a substitution costs
        ``substitution_cost_fn(source_char, target_char)`` and a case-folded
        match costs 0. A transposition only competes with deletion and
        insertion. Ties resolve transposition, then substitution/match, then
        deletion, then insertion.
        """
        src = self.fold(source)
        tgt = self.fold(target)
        rows = len(src) + 1
        cols = len(tgt) + 1

        cost: list[list[Cost]] = [[0] * cols for _ in range(rows)]
        ops = [[Operation.NONE] * cols for _ in range(rows)]

        for i in range(1, rows):
            cost[i][0] = i
            ops[i][0] = Operation.DELETE
        for j in range(1, cols):
            cost[0][j] = j
            ops[0][j] = Operation.INSERT

        for i in range(1, rows):
            for j in range(1, cols):
                deletion = cost[i - 1][j] + 1
                insertion = cost[i][j - 1] + 1

                if (
                    i > 1
                    and j > 1
                    and src[i - 1] == tgt[j - 2]
                    and src[i - 2] == tgt[j - 1]
                    and src[i - 1] != tgt[j - 1]
                ):
                    # Swapped keys are a timing slip, so keyboard proximity never discounts them.
                    preferred = cost[i - 2][j - 2] + 1
                    preferred_op = Operation.TRANSPOSE
                elif src[i - 1] == tgt[j - 1]:
                    preferred = cost[i - 1][j - 1]
                    preferred_op = Operation.MATCH
                else:
                    preferred = cost[i - 1][j - 1] + substitution_cost_fn(source[i - 1], target[j - 1])
                    preferred_op = Operation.SUBSTITUTE

                if preferred <= deletion and preferred <= insertion:
                    cost[i][j] = preferred
                    ops[i][j] = preferred_op
                elif deletion <= insertion:
                    cost[i][j] = deletion
                    ops[i][j] = Operation.DELETE
                else:
                    cost[i][j] = insertion
                    ops[i][j] = Operation.INSERT

        return cost, ops

    def edit_distance(self, source: str, target: str) -> int:
        if not source or not target:
            return max(len(source), len(target))
        cost, _ops = self.build_matrix(source, target)
        return int(cost[-1][-1])

    def weighted_distance(
        self,
        source: str,
        target: str,
        layout: LayoutSelector = KeyboardLayout.QWERTY,
    ) -> float:
        resolved = get_layout(layout)
        if not source or not target:
            return float(max(len(source), len(target)))

        cost, _ops = self.build_matrix(
            source,
            target,
            lambda a, b: substitution_cost(a, b, resolved),
        )
        return float(cost[-1][-1])

    def calculate(
        self,
        source: str,
        target: str,
        layout: LayoutSelector = KeyboardLayout.QWERTY,
    ) -> DistanceResult:
        resolved = get_layout(layout)
        max_length = max(len(source), len(target))

        if not source and not target:
            return DistanceResult()
        if not source:
            return DistanceResult(edit_distance=len(target), insertions=len(target), max_length=max_length)
        if not target:
            return DistanceResult(edit_distance=len(source), deletions=len(source), max_length=max_length)

        cost, ops = self.build_matrix(source, target)

        insertions = deletions = substitutions = transpositions = 0
        keyboard_distance_sum = 0.0
        i, j = len(source), len(target)
        while i > 0 or j > 0:
            op = ops[i][j]
            if op is Operation.MATCH:
                i -= 1
                j -= 1
            elif op is Operation.SUBSTITUTE:
                keyboard_distance_sum += substitution_cost(source[i - 1], target[j - 1], resolved)
                substitutions += 1
                i -= 1
                j -= 1
            elif op is Operation.INSERT:
                insertions += 1
                j -= 1
            elif op is Operation.DELETE:
                deletions += 1
                i -= 1
            elif op is Operation.TRANSPOSE:
                transpositions += 1
                i -= 2
                j -= 2
            else:
                raise RuntimeError(f"untagged cell ({i}, {j}) while backtracking")

        return DistanceResult(
            edit_distance=int(cost[-1][-1]),
            insertions=insertions,
            deletions=deletions,
            substitutions=substitutions,
            transpositions=transpositions,
            keyboard_distance_sum=keyboard_distance_sum,
            max_length=max_length,
        )

    def score(
        self,
        query: str,
        candidate: str,
        layout: Layout,
        keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
    ) -> float:
        return self.calculate(query, candidate, layout).typo_score(keyboard_penalty_strength)

    def select_best(
        self,
        scored: Iterable[tuple[str, float]],
        min_score: float = DEFAULT_MIN_SCORE,
    ) -> tuple[str | None, float]:
        """Fold ``(candidate, score)`` pairs in order into the winner.

        The running best starts at ``min_score``. The first candidate reaching
        it is accepted; after that only a strictly higher score replaces the
        current best, so ties keep the earliest candidate.
        """
        best: str | None = None
        best_score = min_score
        for candidate, score in scored:
            if score > best_score or (best is None and score >= min_score):
                best = candidate
                best_score = score
        return best, best_score

    def best_match(
        self,
        query: str,
        candidates: Iterable[str],
        layout: LayoutSelector = KeyboardLayout.QWERTY,
        min_score: float = DEFAULT_MIN_SCORE,
        keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
    ) -> str | None:
        resolved = get_layout(layout)
        scored = (
            (candidate, self.score(query, candidate, resolved, keyboard_penalty_strength))
            for candidate in candidates
        )
        best, best_score = self.select_best(scored, min_score)
        logger.debug("best_match query=%r layout=%s best=%r score=%.4f", query, resolved.name, best, best_score)
        return best

    def best_match_concurrent(
        self,
        query: str,
        candidates: Iterable[str],
        layout: LayoutSelector = KeyboardLayout.QWERTY,
        min_score: float = DEFAULT_MIN_SCORE,
        keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
        max_workers: int | None = None,
    ) -> str | None:
        resolved = get_layout(layout)
        pending = list(candidates)
        if not pending:
            return None

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            scores = list(
                executor.map(
                    lambda candidate: self.score(query, candidate, resolved, keyboard_penalty_strength),
                    pending,
                )
            )

        best, best_score = self.select_best(zip(pending, scores), min_score)
        logger.debug(
            "best_match_concurrent query=%r candidates=%s best=%r score=%.4f",
            query,
            len(pending),
            best,
            best_score,
        )
        return best

    def rank_candidates(
        self,
        query: str,
        candidates: Iterable[str],
        layout: LayoutSelector = KeyboardLayout.QWERTY,
        min_score: float = DEFAULT_MIN_SCORE,
        keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
        limit: int | None = None,
    ) -> list[tuple[str, float]]:
        resolved = get_layout(layout)
        ranked = [
            (candidate, score)
            for candidate in candidates
            if (score := self.score(query, candidate, resolved, keyboard_penalty_strength)) >= min_score
        ]
        ranked.sort(key=lambda item: -item[1])
        if limit is not None:
            ranked = ranked[:limit]
        return ranked


distance_engine = DistanceEngine()


def edit_distance(source: str, target: str) -> int:
    return distance_engine.edit_distance(source, target)


def weighted_distance(source: str, target: str, layout: LayoutSelector = KeyboardLayout.QWERTY) -> float:
    return distance_engine.weighted_distance(source, target, layout)


def calculate(source: str, target: str, layout: LayoutSelector = KeyboardLayout.QWERTY) -> DistanceResult:
    return distance_engine.calculate(source, target, layout)


def best_match(
    query: str,
    candidates: Iterable[str],
    layout: LayoutSelector = KeyboardLayout.QWERTY,
    min_score: float = DEFAULT_MIN_SCORE,
    keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
) -> str | None:
    return distance_engine.best_match(
        query,
        candidates,
        layout=layout,
        min_score=min_score,
        keyboard_penalty_strength=keyboard_penalty_strength,
    )


def best_match_concurrent(
    query: str,
    candidates: Iterable[str],
    layout: LayoutSelector = KeyboardLayout.QWERTY,
    min_score: float = DEFAULT_MIN_SCORE,
    keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
    max_workers: int | None = None,
) -> str | None:
    return distance_engine.best_match_concurrent(
        query,
        candidates,
        layout=layout,
        min_score=min_score,
        keyboard_penalty_strength=keyboard_penalty_strength,
        max_workers=max_workers,
    )


def rank_candidates(
    query: str,
    candidates: Iterable[str],
    layout: LayoutSelector = KeyboardLayout.QWERTY,
    min_score: float = DEFAULT_MIN_SCORE,
    keyboard_penalty_strength: float = DEFAULT_KEYBOARD_PENALTY_STRENGTH,
    limit: int | None = None,
) -> list[tuple[str, float]]:
    return distance_engine.rank_candidates(
        query,
        candidates,
        layout=layout,
        min_score=min_score,
        keyboard_penalty_strength=keyboard_penalty_strength,
        limit=limit,
    )
