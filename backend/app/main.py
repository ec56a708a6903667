import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from solver import SolverInputError, all_specs, explain, format_error

logger = logging.getLogger(__name__)

app = FastAPI(title="LinSolver API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SolveRequest(BaseModel):
    kind: str
    coefficients: list[float]


class StepInfo(BaseModel):
    step_number: int
    description: str
    expression: str
    explanation: str


class SolveResponse(BaseModel):
    kind: str
    coefficients: dict[str, float]
    outcome: str
    values: dict[str, float]
    final_answer: str
    steps: list[StepInfo]
    verification_steps: list[StepInfo]
    summary: dict


class KindInfo(BaseModel):
    kind: str
    arity: int
    variables: list[str]
    labels: list[str]
    form: str


@app.get("/api/kinds", response_model=list[KindInfo])
def kinds():
    return [
        {
            "kind": spec.kind.value,
            "arity": spec.arity,
            "variables": list(spec.variables),
            "labels": list(spec.labels),
            "form": spec.form,
        }
        for spec in all_specs()
    ]


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: SolveRequest):
    try:
        result = explain(req.kind, req.coefficients)
    except SolverInputError as e:
        raise HTTPException(status_code=400, detail=format_error(e))
    except Exception as e:
        logger.exception("Unexpected solver failure for %s", req.kind)
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return result
