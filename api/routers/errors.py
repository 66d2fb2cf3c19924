from fastapi import HTTPException

from betting.exceptions import (
    CourseDataError,
    IncompleteScoresError,
    InsufficientPlayersError,
    ScoringError,
)


def to_http(error: ScoringError) -> HTTPException:
    """Map an engine error onto the HTTP status the client should see."""
    if isinstance(error, IncompleteScoresError):
        return HTTPException(409, {"message": str(error), "missing": error.missing})
    if isinstance(error, (InsufficientPlayersError, CourseDataError)):
        return HTTPException(422, str(error))
    return HTTPException(400, str(error))
