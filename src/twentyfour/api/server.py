"""
FastAPI server for twentyfour.

Provides a REST endpoint to solve a hand of four digits.
"""

import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from twentyfour import __version__
from twentyfour.expression.types import TARGET
from twentyfour.parsing import Hand, InputError, parse_input
from twentyfour.search.solver import Solver

# Create FastAPI app
app = FastAPI(
    title="twentyfour API",
    description="Find every distinct way to combine four digits into 24",
    version=__version__,
)

# Enable CORS for frontend (configurable via environment variable)
CORS_ORIGINS = os.environ.get("TWENTYFOUR_CORS_ORIGINS", "http://localhost:3000").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

solver = Solver()


# Request/Response Models
class SolveRequest(BaseModel):
    numbers: list[float] | None = None
    text: str | None = None


class SolutionInfo(BaseModel):
    index: int
    formula: str
    value: float


class SolveResponse(BaseModel):
    numbers: list[int]
    count: int
    solutions: list[SolutionInfo]


def _hand_from_request(request: SolveRequest) -> Hand:
    if request.numbers is not None:
        return Hand.from_numbers(request.numbers)
    if request.text is not None:
        return parse_input(request.text)
    raise InputError("either 'numbers' or 'text' is required")


@app.get("/")
async def root():
    """Health check and service info."""
    return {
        "name": "twentyfour API",
        "version": __version__,
        "target": TARGET,
        "status": "running",
    }


@app.post("/api/solve", response_model=SolveResponse)
def solve_hand(request: SolveRequest):
    """Solve a hand given as a number list or as raw text."""
    try:
        hand = _hand_from_request(request)
    except InputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = solver.solve(hand.numbers)
    return SolveResponse(**result.to_dict())
