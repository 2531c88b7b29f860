import logging
from typing import Annotated

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field, StringConstraints

from humandistance.common.config import settings
from humandistance.distance.engine import DistanceEngine
from humandistance.keyboards.layouts import KeyboardLayout, Layout, get_layout

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="HumanDistance API")


class DistanceResponse(BaseModel):
    source: str
    target: str
    layout: str
    edit_distance: int
    insertions: int
    deletions: int
    substitutions: int
    transpositions: int
    keyboard_distance_sum: float
    average_keyboard_distance: float
    max_length: int
    typo_score: float
    is_likely_typo: bool


MAX_INPUT_LENGTH = 256

BoundedStr = Annotated[str, StringConstraints(max_length=MAX_INPUT_LENGTH)]


class BestMatchRequest(BaseModel):
    input: BoundedStr
    candidates: list[BoundedStr]
    layout: str = Field(default_factory=lambda: settings.default_layout)
    min_score: float = Field(default_factory=lambda: settings.min_score, ge=0.0, le=1.0)
    keyboard_penalty_strength: float = Field(
        default_factory=lambda: settings.keyboard_penalty_strength, ge=0.0, le=1.0
    )


class RankedCandidate(BaseModel):
    candidate: str
    score: float


class BestMatchResponse(BaseModel):
    match: str | None
    score: float | None
    alternatives: list[RankedCandidate]


class LayoutInfo(BaseModel):
    name: str
    keys: int
    max_distance: float


class SuggestionService:
    MAX_ALTERNATIVES = 5

    def __init__(self, *, engine: DistanceEngine | None = None, max_candidates: int | None = None) -> None:
        self.engine = engine or DistanceEngine()
        self.max_candidates = settings.max_candidates if max_candidates is None else max_candidates

    def resolve_layout(self, name: str) -> Layout:
        try:
            return get_layout(name)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    def distance(self, source: str, target: str, layout: str, keyboard_penalty_strength: float) -> DistanceResponse:
        resolved = self.resolve_layout(layout)
        result = self.engine.calculate(source, target, resolved)
        return DistanceResponse(
            source=source,
            target=target,
            layout=resolved.name,
            edit_distance=result.edit_distance,
            insertions=result.insertions,
            deletions=result.deletions,
            substitutions=result.substitutions,
            transpositions=result.transpositions,
            keyboard_distance_sum=result.keyboard_distance_sum,
            average_keyboard_distance=result.average_keyboard_distance,
            max_length=result.max_length,
            typo_score=result.typo_score(keyboard_penalty_strength),
            is_likely_typo=result.is_likely_typo(keyboard_penalty_strength),
        )

    def best_match(self, request: BestMatchRequest) -> BestMatchResponse:
        if len(request.candidates) > self.max_candidates:
            raise HTTPException(
                status_code=400,
                detail=f"too many candidates: {len(request.candidates)} > {self.max_candidates}",
            )

        resolved = self.resolve_layout(request.layout)
        ranked = self.engine.rank_candidates(
            request.input,
            request.candidates,
            layout=resolved,
            min_score=request.min_score,
            keyboard_penalty_strength=request.keyboard_penalty_strength,
        )
        best, best_score = self.engine.select_best(ranked, request.min_score)
        logger.info(
            "best-match input=%r candidates=%s layout=%s match=%r",
            request.input,
            len(request.candidates),
            resolved.name,
            best,
        )
        return BestMatchResponse(
            match=best,
            score=best_score if best is not None else None,
            alternatives=[
                RankedCandidate(candidate=candidate, score=score)
                for candidate, score in ranked[: self.MAX_ALTERNATIVES]
            ],
        )


suggestion_service = SuggestionService()


@app.get("/distance", response_model=DistanceResponse)
def distance(
    source: str = Query(..., max_length=MAX_INPUT_LENGTH),
    target: str = Query(..., max_length=MAX_INPUT_LENGTH),
    layout: str = Query(settings.default_layout),
    keyboard_penalty_strength: float = Query(settings.keyboard_penalty_strength, ge=0.0, le=1.0),
) -> DistanceResponse:
    return suggestion_service.distance(source, target, layout, keyboard_penalty_strength)


@app.post("/best-match", response_model=BestMatchResponse)
def best_match(request: BestMatchRequest) -> BestMatchResponse:
    return suggestion_service.best_match(request)


@app.get("/layouts", response_model=list[LayoutInfo])
def layouts() -> list[LayoutInfo]:
    return [
        LayoutInfo(name=resolved.name, keys=len(resolved), max_distance=resolved.max_distance)
        for resolved in (get_layout(member) for member in KeyboardLayout)
    ]
