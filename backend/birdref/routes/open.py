"""
BirdRef Backend — Open Route Group
====================================

What:  Aggregates the routers that need no authentication.
How:   Each resource router is included under its own path segment; the app
       mounts this group under settings.api_prefix.
"""

from fastapi import APIRouter

from birdref.routes import birds

open_router = APIRouter()

open_router.include_router(birds.router)
# Include additional open routers here
