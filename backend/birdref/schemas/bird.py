"""
BirdRef Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the JSON contract of the bird API.
How:   FastAPI validates request bodies against these models, serializes
       responses from them, and generates the OpenAPI document.

Naming:
    JSON keys are camelCase (formattedComName), Python attributes and table
    columns are snake_case (formatted_com_name). The alias generator maps one
    to the other; `populate_by_name` lets database rows (snake_case mappings)
    validate directly into the same models.

Shape composition:
    Bird = BirdNames + BirdPhotos + sound/description fields
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Bird Shapes
# ══════════════════════════════════════════════════════════════════════════


class BirdNames(CamelModel):
    """The naming fields of a bird; `formatted_com_name` is the primary key."""
    formatted_com_name: str = Field(description="The common name of the bird without whitespace")
    com_name: str = Field(description="The common name of the bird")
    sci_name: Optional[str] = Field(default=None, description="The scientific name of the bird")


class BirdPhotos(CamelModel):
    """Photo URLs/paths of a bird, all optional."""
    preview_photo: Optional[str] = Field(default=None, description="The preview photo of the bird")
    male_breeding_photo: Optional[str] = Field(
        default=None, description="The photo of the male bird in breeding plumage"
    )
    male_nonbreeding_photo: Optional[str] = Field(
        default=None, description="The photo of the male bird in non-breeding plumage"
    )
    female_photo: Optional[str] = Field(default=None, description="The photo of the female bird")


class Bird(BirdNames, BirdPhotos):
    """
    What:  A full bird record.
    Who:   Request body of POST /birds/, response item of every read/write route.
    """
    sound: Optional[str] = Field(default=None, description="The most prominent call/song of the bird")
    short_desc: Optional[str] = Field(default=None, description="The short description of the bird")
    long_desc: Optional[str] = Field(default=None, description="The long description of the bird")
    how_to_find: Optional[str] = Field(default=None, description="How to find this bird")
    habitat: Optional[str] = Field(default=None, description="Where this bird is found")
    learn_more_link: Optional[str] = Field(default=None, description="Link to learn more about this bird")


class BirdUpdate(CamelModel):
    """
    What:  Request body of PUT /birds/{formattedComName}.

    Every replaceable column is overwritten on each call. A field left out of
    the body is written as NULL; the key comes from the path, never the body.
    """
    com_name: Optional[str] = None
    sci_name: Optional[str] = None
    preview_photo: Optional[str] = None
    male_breeding_photo: Optional[str] = None
    male_nonbreeding_photo: Optional[str] = None
    female_photo: Optional[str] = None
    sound: Optional[str] = None
    short_desc: Optional[str] = None
    long_desc: Optional[str] = None
    how_to_find: Optional[str] = None
    habitat: Optional[str] = None
    learn_more_link: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Wrappers
# ══════════════════════════════════════════════════════════════════════════


class DeleteResponse(CamelModel):
    """Returned by DELETE /birds/; `bird_names` echoes the requested names."""
    message: str = Field(description="How many birds were deleted")
    bird_names: List[str] = Field(description="The names sent in the request")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
