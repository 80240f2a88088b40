from dataclasses import dataclass
from typing import Any, Callable, Literal

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.errors import format_failure


class SuccessEnvelope(BaseModel):
    success: Literal[True] = True
    results: Any


class ErrorEnvelope(BaseModel):
    success: Literal[False] = False
    error: str


@dataclass(frozen=True)
class Ok:
    results: Any


@dataclass(frozen=True)
class Err:
    failure: Any


def run_sync(sync: Callable[[], Any]) -> Ok | Err:
    """Call ``sync`` once and capture how it settled."""
    try:
        return Ok(sync())
    except Exception as e:
        return Err(e)


def to_response(outcome: Ok | Err) -> JSONResponse:
    if isinstance(outcome, Ok):
        envelope = SuccessEnvelope(results=outcome.results)
        return JSONResponse(status_code=200, content=jsonable_encoder(envelope))
    envelope = ErrorEnvelope(error=format_failure(outcome.failure))
    return JSONResponse(status_code=500, content=jsonable_encoder(envelope))
