"""
BirdRef Backend — Request Body Array Validation
=================================================

What:  Route-level check that a JSON body field holds an array of names.
How:   `require_array_field("birdNames")` returns a FastAPI dependency. The
       dependency parses the body, checks the field, and hands the list to
       the route handler. Anything else short-circuits with ValidationError,
       which the global handler renders as HTTP 400.
Who:   GET /birds/ (birdNames) and DELETE /birds/ (names).

Accepted:  {"birdNames": []}, {"birdNames": ["AmericanRobin", ...]}
Rejected:  missing field, {"birdNames": "AmericanRobin"}, arrays holding
           anything but strings ([1], [null], [["x"]]), non-object body,
           empty or unparseable body
"""

import logging
from typing import Awaitable, Callable, List

from starlette.requests import Request

from birdref.exceptions import ValidationError

logger = logging.getLogger(__name__)

INVALID_ARRAY_MESSAGE = "Invalid or missing Bird - please refer to documentation"


def require_array_field(
    field: str,
    message: str = INVALID_ARRAY_MESSAGE,
) -> Callable[[Request], Awaitable[List[str]]]:
    """
    Build a dependency that returns `body[field]` if it is a list of strings.

    An empty list passes through unchanged.
    """

    async def validate_array_field(request: Request) -> List[str]:
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        value = payload.get(field) if isinstance(payload, dict) else None
        if not isinstance(value, list) or not all(isinstance(name, str) for name in value):
            logger.warning("Invalid or missing '%s' array in %s %s", field, request.method, request.url.path)
            raise ValidationError(message=message, field=field)
        return value

    return validate_array_field
