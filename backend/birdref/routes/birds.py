"""
BirdRef Backend — Bird Route Handlers
=======================================

What:  The five bird endpoints, mounted at /birds by routes/open.py.
How:   Each handler pulls its input (path parameter, validated body model, or
       validated name array), delegates to BirdService with the injected
       store, and returns the response model. Errors raised by the service
       are rendered by the global exception handlers in main.py.

Route Inventory:
    GET    /birds/all                  every bird            200 | 404 | 500
    GET    /birds/                     birds by names        200 | 400
    PUT    /birds/{formattedComName}   replace one bird      200 | 404 | 400
    POST   /birds/                     insert one bird       200 | 400
    DELETE /birds/                     delete birds by names 200 | 404 | 400

GET / and DELETE / read their name arrays from the JSON body.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from birdref.middleware.body_validation import require_array_field
from birdref.schemas.bird import Bird, BirdUpdate, DeleteResponse, ErrorResponse
from birdref.services.bird_service import bird_service
from birdref.services.sql_store import get_bird_store
from birdref.services.store_base import BirdStore

router = APIRouter(prefix="/birds", tags=["Birds"])


# ---------------- GET ----------------

@router.get(
    "/all",
    response_model=List[Bird],
    responses={
        404: {"description": "No birds were found in the database", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get all birds",
)
async def list_birds(store: BirdStore = Depends(get_bird_store)) -> List[Bird]:
    return await bird_service.list_birds(store)


@router.get(
    "/",
    response_model=List[Bird],
    responses={
        400: {"description": "Missing or invalid birdNames, or query error", "model": ErrorResponse},
    },
    summary="Get birds by names",
    description=(
        "Body: {\"birdNames\": [formattedComName, ...]}. Names that are not in the "
        "database are left out of the result; the response may be an empty array."
    ),
)
async def get_birds_by_names(
    bird_names: List[str] = Depends(require_array_field("birdNames")),
    store: BirdStore = Depends(get_bird_store),
) -> List[Bird]:
    return await bird_service.get_birds_by_names(store, bird_names)


# ---------------- PUT ----------------

@router.put(
    "/{formatted_com_name}",
    response_model=Bird,
    responses={
        400: {"description": "Invalid body or query error", "model": ErrorResponse},
        404: {"description": "No bird found with the provided name", "model": ErrorResponse},
    },
    summary="Update a bird",
    description="Replaces every field of the bird. Fields missing from the body are set to null.",
)
async def update_bird(
    changes: BirdUpdate,
    formatted_com_name: str = Path(description="The formatted common name of the bird"),
    store: BirdStore = Depends(get_bird_store),
) -> Bird:
    return await bird_service.update_bird(store, formatted_com_name, changes)


# ---------------- POST ----------------

@router.post(
    "/",
    response_model=Bird,
    responses={
        400: {"description": "Invalid body, duplicate key, or query error", "model": ErrorResponse},
    },
    summary="Add a bird",
)
async def create_bird(
    bird: Bird,
    store: BirdStore = Depends(get_bird_store),
) -> Bird:
    return await bird_service.create_bird(store, bird)


# ---------------- DELETE ----------------

@router.delete(
    "/",
    response_model=DeleteResponse,
    responses={
        400: {"description": "Missing or invalid names, or query error", "model": ErrorResponse},
        404: {"description": "No birds found with the provided names", "model": ErrorResponse},
    },
    summary="Delete birds by name",
    description=(
        "Body: {\"names\": [formattedComName, ...]}. The response echoes the requested "
        "names, including any that did not exist."
    ),
)
async def delete_birds(
    names: List[str] = Depends(require_array_field("names")),
    store: BirdStore = Depends(get_bird_store),
) -> DeleteResponse:
    return await bird_service.delete_birds(store, names)
