# Middleware package init
"""
BirdRef Backend — Middleware Package
=====================================

What:  Cross-cutting request handling.

App-wide middleware chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access line written by Logging carries it.

Route-level validation:
    body_validation.require_array_field() is attached to individual routes
    as a FastAPI dependency rather than to the whole app.
"""
