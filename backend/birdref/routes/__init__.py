# Routes package init
"""
BirdRef Backend — API Routes Package
======================================

Route Inventory:
    - birds.py:   GET /birds/all, GET/POST/DELETE /birds/, PUT /birds/{key}
    - open.py:    open (unauthenticated) route group containing birds
    - health.py:  GET /health

Routes stay thin: they extract input, call BirdService, and return the
response model. Status codes for failures come from the exception handlers.
"""
