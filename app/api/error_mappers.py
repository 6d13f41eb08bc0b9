from collections.abc import Callable, Sequence
from functools import partial
from typing import Any, TypeVar

from fastapi import HTTPException, status

from app.domain.errors import ConstraintViolationError, NotNullViolation, UniqueViolation


T = TypeVar("T")

# A mapper receives the next stage and returns its result, translating at most one error kind
ErrorMapper = Callable[[Callable[[], Any]], Any]


def map_unique_violation(next_stage: Callable[[], T]) -> T:
    """Turns a storage uniqueness violation into a 400 Bad Request."""
    try:
        return next_stage()
    except ConstraintViolationError as e:
        match e.violation:
            case UniqueViolation(message=message):
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message) from e
            case _:
                raise


def map_not_null_violation(next_stage: Callable[[], T]) -> T:
    """Turns a storage NOT NULL violation into a 400 Bad Request."""
    try:
        return next_stage()
    except ConstraintViolationError as e:
        match e.violation:
            case NotNullViolation(message=message):
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message) from e
            case _:
                raise


def run_with_error_mappers(stage: Callable[[], T], mappers: Sequence[ErrorMapper]) -> T:
    """Runs a stage wrapped by the given mappers, the first mapper outermost.

    Errors no mapper recognises propagate unchanged to the application's
    default error handling.
    """
    for mapper in reversed(mappers):
        stage = partial(mapper, stage)
    return stage()


WRITE_ERROR_MAPPERS: tuple[ErrorMapper, ...] = (map_unique_violation, map_not_null_violation)
