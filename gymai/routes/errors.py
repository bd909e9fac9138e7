"""
Translation of AI failure results into HTTP errors.
"""
from fastapi import HTTPException

from gymai.core.errors import AIErrorKind
from gymai.models.schemas import AIFailure

STATUS_BY_KIND = {
    AIErrorKind.CONFIGURATION: 503,
    AIErrorKind.INVALID_REQUEST: 400,
    AIErrorKind.EMPTY_RESPONSE: 502,
    AIErrorKind.INVALID_RESPONSE: 502,
    AIErrorKind.SERVICE: 502,
}


def raise_for_failure(result) -> None:
    """Raise an HTTPException when a service returned an AIFailure."""
    if isinstance(result, AIFailure):
        raise HTTPException(
            status_code=STATUS_BY_KIND[result.kind],
            detail={"error": result.error, "kind": result.kind.value},
        )
